from __future__ import annotations
import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

@dataclass(frozen=True)
class ClassifierConfig:
    store_path: str | None = None  # learned boost file; None keeps boosts in memory only
    lexicon_path: str | None = None  # optional JSON lexicon override
    boost_weight: float = 0.5  # multiplier applied to learned boosts at scoring time
    reinforce: float = 1.0  # added to the corrected label per token occurrence
    suppress: float = 0.2  # subtracted from every other category per token occurrence
    peace_bonus: float = 1.5  # added to peace when peace-dominant and war < 1
    negation_damping: float = 0.9  # multiplier for all scores in a negated sentence

    def merged(self, overrides: Mapping[str, Any]) -> "ClassifierConfig":
        """Copy with non-None overrides applied; unknown keys are ignored."""
        valid = {f.name for f in fields(self)}
        return replace(self, **{k: v for k, v in overrides.items() if k in valid and v is not None})


def load_config(path: str | Path) -> ClassifierConfig:
    """Read a JSON config file; keys map onto ClassifierConfig fields."""
    try:
        data = json.loads(Path(path).read_text(encoding='utf-8'))
    except Exception as e:
        raise SystemExit(f"Failed to load config {path}: {e}")
    if not isinstance(data, dict):
        raise SystemExit(f"Failed to load config {path}: expected a JSON object")
    return ClassifierConfig().merged(data)
