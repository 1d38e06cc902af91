"""Evaluate the classifier against labelled news items.

Output shape:
  {
    'samples': int,
    'accuracy': float,
    'macro_f1': float,              # over categories present in gold or predictions
    'per_class': {cat: {'precision','recall','f1','support'}},
    'confusion_matrix': {gold: {pred: count}},
    'predicted_distribution': {cat: count},
  }
"""
from __future__ import annotations

import time
from typing import Any, Dict, Iterable, List, Sequence, Tuple

import numpy as np
from sklearn.metrics import accuracy_score, confusion_matrix, precision_recall_fscore_support

from .classify import NewsClassifier
from .taxonomy import CATEGORIES, is_category


def split_labelled(records: Iterable[Dict[str, Any]]) -> Tuple[List[Dict[str, Any]], List[str]]:
    """Keep records with a known `label`; returns (items, labels).

    Records with only a `text` field are treated as a title-only item.
    """
    items: List[Dict[str, Any]] = []
    labels: List[str] = []
    for rec in records:
        lab = rec.get('label')
        if not is_category(lab):
            continue
        if not (rec.get('title') or rec.get('summary')) and rec.get('text'):
            rec = {'title': rec['text']}
        items.append(rec)
        labels.append(lab)
    return items, labels


def evaluate(classifier: NewsClassifier, items: Sequence[Any], labels: Sequence[str]) -> Dict[str, Any]:
    if len(items) != len(labels):
        raise ValueError(f"items ({len(items)}) and labels ({len(labels)}) differ in length")
    start = time.time()
    preds = [classifier.classify_item(it) for it in items]
    elapsed = time.time() - start
    if not preds:
        return {'samples': 0, 'accuracy': None, 'macro_f1': None, 'per_class': {}, 'confusion_matrix': {},
                'predicted_distribution': {}}

    cats = list(CATEGORIES)
    prec, rec, f1, support = precision_recall_fscore_support(labels, preds, labels=cats, zero_division=0)
    cm = confusion_matrix(labels, preds, labels=cats)
    # macro over categories that show up at all, so unused labels don't drag it to zero
    seen = np.array([c in set(labels) or c in set(preds) for c in cats])
    per_class = {
        c: {'precision': round(float(prec[i]), 3), 'recall': round(float(rec[i]), 3),
            'f1': round(float(f1[i]), 3), 'support': int(support[i])}
        for i, c in enumerate(cats) if seen[i]
    }
    return {
        'samples': len(preds),
        'accuracy': round(float(accuracy_score(labels, preds)), 3),
        'macro_f1': round(float(np.mean(f1[seen])), 3),
        'per_class': per_class,
        'confusion_matrix': {g: {p: int(cm[i, j]) for j, p in enumerate(cats)} for i, g in enumerate(cats) if seen[i]},
        'predicted_distribution': {c: int(n) for c, n in zip(cats, cm.sum(axis=0)) if n},
        'avg_ms_per_sample': round(elapsed / len(preds) * 1000, 3),
    }


__all__ = ['evaluate', 'split_labelled']
