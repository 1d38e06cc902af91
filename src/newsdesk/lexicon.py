"""Lexicon and rule vocabulary for the news topic classifier.

Keeps every phrase list and regex the classifier relies on in one
immutable object so the rules can be versioned and, when needed,
overridden from a JSON file supplied by the operator.

Design goals:
  * Frozen in-memory representation, never mutated at runtime.
  * Stable content hash so a learned boost file can record which
    vocabulary it was trained against.
  * Safe defaults embedded in code, optional override via load_lexicon(path).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Mapping, Tuple
import hashlib
import json
import re

from .taxonomy import CATEGORIES

_FLAGS = re.IGNORECASE


@dataclass(frozen=True)
class Lexicon:
    signals: Mapping[str, Tuple[str, ...]]
    war_nouns: FrozenSet[str]
    war_verbs: FrozenSet[str]
    negation_terms: FrozenSet[str]
    false_positive_patterns: Tuple[re.Pattern, ...]
    peace_pattern: re.Pattern
    war_word_pattern: re.Pattern
    strong_phrase_pattern: re.Pattern
    negation_pattern: re.Pattern = field(init=False, repr=False, compare=False)
    version: str = "0.1"

    def __post_init__(self):
        unknown = set(self.signals) - set(CATEGORIES)
        if unknown:
            raise ValueError(f"Unknown categories in lexicon signals: {sorted(unknown)}")
        terms = "|".join(re.escape(t) for t in sorted(self.negation_terms))
        # a never-matching pattern when the set is empty
        object.__setattr__(self, "negation_pattern", re.compile(rf"\b({terms})\b" if terms else r"(?!x)x", _FLAGS))

    def hash(self) -> str:
        """Deterministic content hash (sha256 over sorted terms and pattern sources)."""
        parts: Iterable[Iterable[str]] = [
            [f"{cat}:{phrase}" for cat in sorted(self.signals) for phrase in self.signals[cat]],
            sorted(self.war_nouns),
            sorted(self.war_verbs),
            sorted(self.negation_terms),
            [p.pattern for p in self.false_positive_patterns],
            [self.peace_pattern.pattern, self.war_word_pattern.pattern, self.strong_phrase_pattern.pattern],
            [self.version],
        ]
        h = hashlib.sha256()
        for group in parts:
            for token in group:
                h.update(token.encode("utf-8"))
            h.update(b"|")
        return h.hexdigest()[:16]


DEFAULT_SIGNALS: Dict[str, Tuple[str, ...]] = {
    "war": (
        "war", "conflict", "offensive", "counteroffensive", "front line", "frontline", "barrage",
        "missile", "rocket", "shelling", "airstrike", "air strike", "drone strike", "bomb", "bombardment",
        "artillery", "mortar", "howitzer", "tank", "armored vehicle", "infantry", "brigade", "battalion",
        "troop", "troops", "soldier", "casualty", "casualties", "crossfire", "sniper", "incursion",
        "raid", "invasion", "clash", "skirmish", "hostilities", "mobilization", "conscription",
    ),
    "politics": (
        "election", "parliament", "senate", "cabinet", "minister", "policy", "vote", "campaign", "coalition",
        "bill", "mp", "mla", "president", "pm", "governor", "assembly", "party", "lawmaker",
    ),
    "economy": (
        "inflation", "gdp", "market", "stocks", "unemployment", "trade", "imports", "exports", "budget", "deficit",
        "currency", "interest rate", "economy", "economic", "bond", "equity", "forex", "commodity", "manufacturing", "fiscal",
    ),
    "society": (
        "protest", "education", "healthcare", "crime", "community", "social", "welfare", "migration", "school",
        "university", "hospital", "poverty", "turf war", "gang", "police", "arrest", "court", "lawsuit",
    ),
    "culture": (
        "festival", "music", "film", "art", "literature", "heritage", "museum", "theatre", "sport", "celebration",
        "cultural", "concert", "exhibition", "award", "cinema", "celebrity",
    ),
    "climate": (
        "climate", "flood", "heatwave", "drought", "cyclone", "hurricane", "storm", "wildfire", "rainfall", "monsoon",
        "earthquake", "tsunami", "weather", "landslide", "blizzard", "typhoon",
    ),
    "peace": (
        "ceasefire", "truce", "peace talk", "peace talks", "agreement", "accord", "deal", "negotiation", "mediation",
    ),
    "demise": (
        "dies", "death", "passed away", "obituary", "killed", "dead", "fatal", "mourns", "condolence", "perished",
    ),
}

# Military nouns and violent verbs; a sentence needs one of each (or a
# strong phrase) before the war score is trusted.
DEFAULT_WAR_NOUNS = frozenset({
    "missile", "rocket", "shell", "airstrike", "drone", "bomb", "artillery", "mortar", "howitzer", "tank",
    "infantry", "brigade", "battalion", "troop", "soldier", "casualty", "sniper", "incursion", "raid",
    "invasion", "skirmish", "frontline", "front", "munition", "armour", "armored", "barrage",
})
DEFAULT_WAR_VERBS = frozenset({
    "strike", "strikes", "struck", "bomb", "bombed", "shell", "shelled", "shelling", "hit", "hits", "attacked", "attack",
    "invade", "invaded", "invades", "raid", "raided", "clash", "clashes", "clashed", "engage", "engaged", "engages",
})
DEFAULT_NEGATION_TERMS = frozenset({"no", "not", "without", "deny", "denies", "denied", "fake", "hoax"})

# Figurative, brand and team uses of "war".
DEFAULT_FALSE_POSITIVES: Tuple[str, ...] = (
    r"\b(price|trade|rates?|discount|chip|talent|ratings|console|browser|format|patent|streaming)\s+war(s)?\b",
    r"\bwar\s+of\s+words\b",
    r"\b(word|twitter|hashtag|comment|online)\s+war\b",
    r"\bstar[-\s]?wars?\b",
    r"\bwarriors?\b",
    r"\belection\s+war\b",
)
DEFAULT_PEACE_PATTERN = r"\b(cease[-\s]?fire|truce|peace\s+talks?|armistice|accord|agreement|mediation)\b"
DEFAULT_WAR_WORD_PATTERN = r"\b(war|front\s?line|hostilities|conflict|offensive|counteroffensive)\b"
DEFAULT_STRONG_PHRASE_PATTERN = (
    r"\b(air\s?strike|drone\s?strike|shelling|artillery|missile\s+attack|rocket\s+attack"
    r"|ground\s+incursion|crossfire|bombardment)\b"
)


def build_lexicon(
    signals: Mapping[str, Iterable[str]] = DEFAULT_SIGNALS,
    war_nouns: Iterable[str] = DEFAULT_WAR_NOUNS,
    war_verbs: Iterable[str] = DEFAULT_WAR_VERBS,
    negation_terms: Iterable[str] = DEFAULT_NEGATION_TERMS,
    false_positive_patterns: Iterable[str] = DEFAULT_FALSE_POSITIVES,
    peace_pattern: str = DEFAULT_PEACE_PATTERN,
    war_word_pattern: str = DEFAULT_WAR_WORD_PATTERN,
    strong_phrase_pattern: str = DEFAULT_STRONG_PHRASE_PATTERN,
    version: str = "0.1",
) -> Lexicon:
    """Assemble a Lexicon from plain strings, lowercasing terms and compiling patterns."""
    return Lexicon(
        signals={cat: tuple(p.lower() for p in phrases) for cat, phrases in signals.items()},
        war_nouns=frozenset(t.lower() for t in war_nouns),
        war_verbs=frozenset(t.lower() for t in war_verbs),
        negation_terms=frozenset(t.lower() for t in negation_terms),
        false_positive_patterns=tuple(re.compile(p, _FLAGS) for p in false_positive_patterns),
        peace_pattern=re.compile(peace_pattern, _FLAGS),
        war_word_pattern=re.compile(war_word_pattern, _FLAGS),
        strong_phrase_pattern=re.compile(strong_phrase_pattern, _FLAGS),
        version=version,
    )


DEFAULT_LEXICON = build_lexicon()


def load_lexicon(path: str | Path) -> Lexicon:
    """Load a lexicon from a JSON file.

    Keys mirror build_lexicon() arguments. Missing keys keep the built-in
    defaults; `signals` entries replace the default list for the
    categories they name only. Raises ValueError on unknown categories or
    invalid regexes.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Lexicon file {path} must contain a JSON object")
    signals = dict(DEFAULT_SIGNALS)
    signals.update({k: tuple(v) for k, v in (data.get("signals") or {}).items()})
    try:
        return build_lexicon(
            signals=signals,
            war_nouns=data.get("war_nouns", DEFAULT_WAR_NOUNS),
            war_verbs=data.get("war_verbs", DEFAULT_WAR_VERBS),
            negation_terms=data.get("negation_terms", DEFAULT_NEGATION_TERMS),
            false_positive_patterns=data.get("false_positive_patterns", DEFAULT_FALSE_POSITIVES),
            peace_pattern=data.get("peace_pattern", DEFAULT_PEACE_PATTERN),
            war_word_pattern=data.get("war_word_pattern", DEFAULT_WAR_WORD_PATTERN),
            strong_phrase_pattern=data.get("strong_phrase_pattern", DEFAULT_STRONG_PHRASE_PATTERN),
            version=str(data.get("version", "custom")),
        )
    except re.error as e:
        raise ValueError(f"Invalid pattern in lexicon file {path}: {e}") from e


__all__ = ["Lexicon", "DEFAULT_LEXICON", "build_lexicon", "load_lexicon"]
