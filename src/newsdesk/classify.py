"""Rule-based news topic classification with learned corrections.

Pipeline per sentence:
  base lexicon scores -> war gate -> peace bonus -> negation damping
  -> learned boosts -> arg-max (category order breaks ties)

A document takes the category of its single strongest sentence. When two
sentences tie, a `war` sentence wins, so ambiguous conflict content gets
flagged rather than missed.

Usage:
    from newsdesk import NewsClassifier, LearnedBoostStore
    clf = NewsClassifier(LearnedBoostStore("boosts.json"))
    clf.classify_item({"title": "...", "summary": "..."})
    clf.train_item(item, "economy")
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from core.config import ClassifierConfig

from .learned import Boosts, LearnedBoostStore, apply_boosts
from .lexicon import DEFAULT_LEXICON, Lexicon, load_lexicon
from .rules import is_negated, is_peace_dominant, is_war_sentence
from .taxonomy import CATEGORIES, OTHERS, WAR, PEACE, empty_scores
from .text import normalize, split_sentences


@dataclass
class SentenceResult:
    sentence: str
    category: str
    score: float
    scores: Dict[str, float] = field(default_factory=dict)
    is_war: bool = False
    negated: bool = False


def base_scores(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> Dict[str, float]:
    """One point per lexicon phrase present in the text (presence, not frequency)."""
    t = normalize(text)
    scores = empty_scores()
    for cat, phrases in lexicon.signals.items():
        for phrase in phrases:
            if phrase in t:
                scores[cat] += 1
    return scores


def _pick(scores: Dict[str, float]) -> str:
    best, best_val = OTHERS, float("-inf")
    # no evidence at all; a winner that is negative after learned boosts still counts
    if all(v == 0 for v in scores.values()):
        return OTHERS
    for cat in CATEGORIES:
        if scores[cat] > best_val:
            best, best_val = cat, scores[cat]
    return best


def classify_sentence(
    sentence: str,
    lexicon: Lexicon = DEFAULT_LEXICON,
    boosts: Optional[Boosts] = None,
    config: ClassifierConfig = ClassifierConfig(),
) -> SentenceResult:
    scores = base_scores(sentence, lexicon)

    war = is_war_sentence(sentence, lexicon)
    if not war:
        scores[WAR] = 0.0

    if is_peace_dominant(sentence, lexicon) and scores[WAR] < 1:
        scores[PEACE] += config.peace_bonus

    negated = is_negated(sentence, lexicon)
    if negated:
        for c in CATEGORIES:
            scores[c] *= config.negation_damping

    if boosts:
        apply_boosts(scores, sentence, boosts, config.boost_weight)

    category = _pick(scores)
    return SentenceResult(sentence, category, scores[category], scores, is_war=war, negated=negated)


def item_text(item: Any) -> str:
    """'{title}. {summary}' for a mapping or an object; missing fields are ''."""
    if isinstance(item, Mapping):
        title, summary = item.get("title"), item.get("summary")
    else:
        title, summary = getattr(item, "title", None), getattr(item, "summary", None)
    return f"{title or ''}. {summary or ''}"


class NewsClassifier:
    """Classifier bound to one learned boost store and one lexicon."""

    def __init__(
        self,
        store: Optional[LearnedBoostStore] = None,
        lexicon: Optional[Lexicon] = None,
        config: Optional[ClassifierConfig] = None,
    ):
        """Missing store / lexicon are built from `config` (store_path, lexicon_path)."""
        self.config = config or ClassifierConfig()
        self.store = store if store is not None else LearnedBoostStore.from_config(self.config)
        if lexicon is None:
            lexicon = load_lexicon(self.config.lexicon_path) if self.config.lexicon_path else DEFAULT_LEXICON
        self.lexicon = lexicon
        self.store.bind_lexicon(lexicon.hash())

    @classmethod
    def from_config(cls, config: ClassifierConfig) -> "NewsClassifier":
        return cls(config=config)

    def explain(self, text) -> List[SentenceResult]:
        """Per-sentence results, showing why a text got its category."""
        boosts = self.store.view()
        return [classify_sentence(s, self.lexicon, boosts, self.config) for s in split_sentences(text)]

    def classify_text(self, text) -> str:
        best_cat, best_val = OTHERS, float("-inf")
        for res in self.explain(text):
            if res.score > best_val or (res.score == best_val and res.category == WAR):
                best_cat, best_val = res.category, res.score
        return best_cat

    def classify_item(self, item) -> str:
        return self.classify_text(item_text(item))

    def dominant_category(self, items: Iterable) -> str:
        """Most frequent category across items; ties go to the earlier category."""
        counts = Counter(self.classify_item(it) for it in items or [])
        best, best_n = OTHERS, 0
        for cat in CATEGORIES:
            if counts[cat] > best_n:
                best, best_n = cat, counts[cat]
        return best

    def train(self, text, label: str) -> bool:
        return self.store.train(text, label)

    def train_item(self, item, label: str) -> bool:
        return self.train(item_text(item), label)


# Convenience wrappers; each call builds a classifier over the given store.

def classify_text(text, store: Optional[LearnedBoostStore] = None) -> str:
    return NewsClassifier(store).classify_text(text)


def classify_item(item, store: Optional[LearnedBoostStore] = None) -> str:
    return NewsClassifier(store).classify_item(item)


def dominant_category(items: Iterable, store: Optional[LearnedBoostStore] = None) -> str:
    return NewsClassifier(store).dominant_category(items)


def explain(text, store: Optional[LearnedBoostStore] = None) -> List[SentenceResult]:
    return NewsClassifier(store).explain(text)


__all__ = [
    "SentenceResult", "NewsClassifier", "base_scores", "classify_sentence", "item_text",
    "classify_text", "classify_item", "dominant_category", "explain",
]
