"""Online-learned per-token category boosts.

Every correction (`train(text, label)`) adds `reinforce` to the label and
subtracts `suppress` from every other category, for each token
occurrence in the text. At scoring time the accumulated values are added
to the sentence scores, scaled by a weight.

Disk layout (single JSON file):
  {"version": 1, "lexiconHash": "<16 hex>", "tokenBoosts": {"<token>": {"<category>": float, ...}, ...}}

`lexiconHash` is written once a lexicon is bound (see bind_lexicon) so a
store trained against one vocabulary warns when loaded against another.
Files with a different `version` are treated as unreadable.

Concurrency: writers (train, reload, flush) are serialized by a lock. A
train call builds a new mapping and publishes it with a single reference
swap, so readers that grabbed `view()` before the swap keep a consistent
snapshot and never observe a half-applied update. Published rows are
never mutated.
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Mapping, MutableMapping, Optional, Tuple
import copy
import json
import os
import tempfile
import threading
import warnings

from .taxonomy import CATEGORIES, is_category
from .text import tokenize

STORE_FORMAT_VERSION = 1

Boosts = Mapping[str, Mapping[str, float]]


def _parse_store(data) -> Tuple[Dict[str, Dict[str, float]], Optional[str]]:
    if not isinstance(data, dict):
        raise ValueError("store root must be an object")
    version = data.get("version", STORE_FORMAT_VERSION)
    if version != STORE_FORMAT_VERSION:
        raise ValueError(f"unsupported store version {version!r}")
    lexicon_hash = data.get("lexiconHash")
    if lexicon_hash is not None and not isinstance(lexicon_hash, str):
        raise ValueError("lexiconHash must be a string")
    raw = data.get("tokenBoosts", {})
    if not isinstance(raw, dict):
        raise ValueError("tokenBoosts must be an object")
    out: Dict[str, Dict[str, float]] = {}
    for tok, row in raw.items():
        if not isinstance(row, dict):
            raise ValueError(f"boost row for {tok!r} must be an object")
        clean = {}
        for cat, val in row.items():
            if isinstance(val, bool) or not isinstance(val, (int, float)):
                raise ValueError(f"boost {tok!r}/{cat!r} is not a number")
            clean[cat] = float(val)
        out[tok] = clean
    return out, lexicon_hash


class LearnedBoostStore:
    def __init__(self, path: str | Path | None = None, reinforce: float = 1.0, suppress: float = 0.2):
        self.path = Path(path) if path else None
        self.reinforce = reinforce
        self.suppress = suppress
        self.lexicon_hash: Optional[str] = None
        self._lock = threading.Lock()
        self._boosts: Dict[str, Dict[str, float]] = {}
        if self.path is not None:
            self._boosts, self.lexicon_hash = self._read()

    @classmethod
    def from_config(cls, config) -> "LearnedBoostStore":
        return cls(config.store_path, reinforce=config.reinforce, suppress=config.suppress)

    # --- persistence ---

    def _read(self) -> Tuple[Dict[str, Dict[str, float]], Optional[str]]:
        """Load the backing file; missing -> empty, malformed -> empty plus a warning."""
        if self.path is None or not self.path.exists():
            return {}, None
        try:
            return _parse_store(json.loads(self.path.read_text(encoding="utf-8")))
        except (OSError, ValueError, RecursionError) as e:
            # RecursionError: pathologically nested JSON
            msg = str(e) or type(e).__name__
            warnings.warn(f"Ignoring unreadable learned boost store {self.path}: {msg}", RuntimeWarning, stacklevel=3)
            return {}, None

    def reload(self) -> None:
        with self._lock:
            self._boosts, self.lexicon_hash = self._read()

    def bind_lexicon(self, lexicon_hash: str) -> None:
        """Record the vocabulary this store is trained against.

        Warns when the loaded file was trained against a different lexicon;
        the boosts are kept. Later flushes write the new hash.
        """
        with self._lock:
            if self.lexicon_hash and self.lexicon_hash != lexicon_hash:
                warnings.warn(
                    f"Learned boost store {self.path} was trained against lexicon {self.lexicon_hash}, "
                    f"now used with {lexicon_hash}",
                    RuntimeWarning,
                    stacklevel=3,
                )
            self.lexicon_hash = lexicon_hash

    def _flush_locked(self) -> bool:
        if self.path is None:
            return True
        payload = {"version": STORE_FORMAT_VERSION, "tokenBoosts": self._boosts}
        if self.lexicon_hash:
            payload["lexiconHash"] = self.lexicon_hash
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=self.path.name + ".", suffix=".tmp", dir=str(self.path.parent))
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False)
            os.replace(tmp_name, self.path)
            return True
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            warnings.warn(f"Failed to persist learned boost store {self.path}: {e}", RuntimeWarning, stacklevel=3)
            return False

    def flush(self) -> bool:
        """Write the current state to disk. Best effort: warns and returns False on failure."""
        with self._lock:
            return self._flush_locked()

    # --- mutation ---

    def train(self, text: Optional[str], label: str) -> bool:
        """Reinforce `label` for every token occurrence in `text`.

        Unknown labels and empty text are ignored (returns False).
        """
        if not text or not is_category(label):
            return False
        toks = tokenize(text)
        if not toks:
            return False
        with self._lock:
            updated = dict(self._boosts)
            for tok in toks:
                row = dict(updated.get(tok, {}))
                row[label] = row.get(label, 0.0) + self.reinforce
                # mild pressure on competing labels
                for c in CATEGORIES:
                    if c != label:
                        row[c] = row.get(c, 0.0) - self.suppress
                updated[tok] = row
            self._boosts = updated
            self._flush_locked()
        return True

    # --- reading ---

    def view(self) -> Boosts:
        """Current published mapping. Treat as read-only."""
        return self._boosts

    def boosts_for(self, token: str) -> Optional[Mapping[str, float]]:
        return self._boosts.get(token)

    def snapshot(self) -> Dict[str, Dict[str, float]]:
        return copy.deepcopy(self._boosts)

    def __len__(self) -> int:
        return len(self._boosts)

    def __contains__(self, token) -> bool:
        return token in self._boosts


def apply_boosts(scores: MutableMapping[str, float], text: str, table: Boosts, weight: float = 0.5) -> None:
    """Add `boost * weight` to `scores` for every token of `text` found in `table`."""
    if not table:
        return
    for tok in tokenize(text):
        row = table.get(tok)
        if not row:
            continue
        for cat, val in row.items():
            if cat not in scores:
                continue
            scores[cat] += val * weight


__all__ = ["LearnedBoostStore", "apply_boosts", "STORE_FORMAT_VERSION"]
