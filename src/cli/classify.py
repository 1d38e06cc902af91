from __future__ import annotations
"""Classify news items from a JSONL file.

Each input record needs `title` and/or `summary` (or a plain `text`).
Output records are the input plus `category`; with --explain a
`sentences` list shows per-sentence categories and scores.

Prints a one-line JSON summary: processed count, output path and the
dominant category across all items.
"""
import argparse, json, sys
from collections import Counter
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.config import ClassifierConfig, load_config
from core.iojsonl import read_jsonl, write_jsonl
from newsdesk.classify import NewsClassifier, item_text
from newsdesk.taxonomy import CATEGORIES, OTHERS


def resolve_config(args) -> ClassifierConfig:
    cfg = load_config(args.config) if args.config else ClassifierConfig()
    return cfg.merged({'store_path': args.store, 'lexicon_path': getattr(args, 'lexicon', None)})


def record_text(rec: dict) -> str:
    if rec.get('text') and not (rec.get('title') or rec.get('summary')):
        return str(rec['text'])
    return item_text(rec)


def build_parser():
    p = argparse.ArgumentParser(description='Classify news items into topic categories.')
    p.add_argument('--in', dest='inp', required=True, help='Input JSONL with title/summary fields')
    p.add_argument('--out', dest='out', required=True, help='Output JSONL with category added')
    p.add_argument('--store', help='Learned boost store file (JSON)')
    p.add_argument('--lexicon', help='Optional JSON lexicon override')
    p.add_argument('--config', help='Optional JSON config file (ClassifierConfig fields)')
    p.add_argument('--explain', action='store_true', help='Include per-sentence breakdown')
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    clf = NewsClassifier.from_config(resolve_config(args))
    counts: Counter = Counter()

    def _records():
        for rec in read_jsonl(args.inp):
            text = record_text(rec)
            out_rec = dict(rec)
            out_rec['category'] = clf.classify_text(text)
            counts[out_rec['category']] += 1
            if args.explain:
                out_rec['sentences'] = [
                    {'sentence': r.sentence, 'category': r.category, 'score': round(r.score, 3),
                     'isWar': r.is_war, 'negated': r.negated}
                    for r in clf.explain(text)
                ]
            yield out_rec

    n = write_jsonl(_records(), args.out)
    # same tie rule as NewsClassifier.dominant_category, without classifying twice
    dominant = max(CATEGORIES, key=lambda c: (counts[c], -CATEGORIES.index(c))) if counts else OTHERS
    print(json.dumps({'processed': n, 'out': args.out, 'dominant': dominant, 'counts': dict(counts)}))
    return 0


if __name__ == '__main__':  # pragma: no cover
    raise SystemExit(main())
