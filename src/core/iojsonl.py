from __future__ import annotations
import json
from typing import Iterable, Mapping, Iterator, Dict, Any

def write_jsonl(records_iterable: Iterable[Mapping], out_path: str) -> int:
    """Write mapping records to a UTF-8 JSONL file; returns the record count."""
    n = 0
    with open(out_path, "w", encoding="utf-8") as f:
        for rec in records_iterable:
            f.write(json.dumps(rec, ensure_ascii=False) + "\n")
            n += 1
    return n

def read_jsonl(path: str) -> Iterator[Dict[str, Any]]:
    """Yield JSON objects from a JSONL file lazily.

    Blank lines, undecodable lines and non-object values are skipped.
    """
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            try:
                rec = json.loads(line)
            except json.JSONDecodeError:
                continue
            if isinstance(rec, dict):
                yield rec
