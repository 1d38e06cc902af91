from __future__ import annotations
"""Apply human corrections to the learned boost store.

Input JSONL records carry `label` plus `title`/`summary` (or `text`).
Records with an unknown label are skipped and counted. The store is
flushed after every accepted record.

Usage:
  python -m cli.train --in corrections.jsonl --store boosts.json
"""
import argparse, json, sys
from collections import Counter
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.config import ClassifierConfig, load_config
from core.iojsonl import read_jsonl
from newsdesk.classify import NewsClassifier
from cli.classify import record_text


def build_parser():
    p = argparse.ArgumentParser(description='Train learned boosts from labelled corrections.')
    p.add_argument('--in', dest='inp', required=True, help='Labelled JSONL (title/summary or text, label)')
    p.add_argument('--store', help='Learned boost store file (JSON); overrides config store_path')
    p.add_argument('--config', help='Optional JSON config file (ClassifierConfig fields)')
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    cfg = load_config(args.config) if args.config else ClassifierConfig()
    cfg = cfg.merged({'store_path': args.store})
    if not cfg.store_path:
        print('No store path given (--store or config store_path)', file=sys.stderr)
        return 2
    clf = NewsClassifier.from_config(cfg)
    trained: Counter = Counter()
    skipped = 0
    for rec in read_jsonl(args.inp):
        if clf.train(record_text(rec), rec.get('label')):
            trained[rec['label']] += 1
        else:
            skipped += 1
    print(json.dumps({'trained': sum(trained.values()), 'skipped': skipped, 'byLabel': dict(trained),
                      'tokens': len(clf.store), 'store': cfg.store_path}))
    return 0


if __name__ == '__main__':  # pragma: no cover
    raise SystemExit(main())
