from __future__ import annotations
"""Evaluate the classifier on a labelled JSONL dataset.

Usage:
  python -m cli.evaluate --data labelled.jsonl
  python -m cli.evaluate --data labelled.jsonl --store boosts.json --out metrics.json

Outputs JSON metrics (accuracy, macro F1, per-class precision/recall/F1,
confusion matrix).
"""
import argparse, json, sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.iojsonl import read_jsonl
from newsdesk.classify import NewsClassifier
from newsdesk.evaluation import evaluate, split_labelled
from cli.classify import resolve_config


def build_parser():
    p = argparse.ArgumentParser(description='Evaluate the topic classifier on labelled data.')
    p.add_argument('--data', required=True, help='Labelled JSONL (title/summary, label)')
    p.add_argument('--store', help='Learned boost store file to score with')
    p.add_argument('--lexicon', help='Optional JSON lexicon override')
    p.add_argument('--config', help='Optional JSON config file (ClassifierConfig fields)')
    p.add_argument('--out', help='Write metrics JSON to file (else stdout)')
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    items, labels = split_labelled(read_jsonl(args.data))
    if not items:
        print('No valid labelled examples', file=sys.stderr)
        return 1
    clf = NewsClassifier.from_config(resolve_config(args))
    out_json = json.dumps(evaluate(clf, items, labels), indent=2)
    if args.out:
        Path(args.out).write_text(out_json, encoding='utf-8')
    else:
        print(out_json)
    return 0


if __name__ == '__main__':  # pragma: no cover
    raise SystemExit(main())
