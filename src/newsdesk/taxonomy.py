"""News topic taxonomy: the closed set of categories an item can receive.

Order matters. Arg-max selection walks categories in this order, so on a
score tie the earlier category wins; `war` is first on purpose.
`others` is the fallback when no category has positive evidence.
"""
from __future__ import annotations

from enum import Enum
from typing import Tuple

TAXONOMY_VERSION = "news.v1"


class Category(Enum):
    war = "war"
    politics = "politics"
    economy = "economy"
    society = "society"
    culture = "culture"
    climate = "climate"
    peace = "peace"
    demise = "demise"
    others = "others"


CATEGORIES: Tuple[str, ...] = tuple(c.value for c in Category)
WAR = Category.war.value
PEACE = Category.peace.value
OTHERS = Category.others.value


def is_category(label) -> bool:
    """True if `label` is one of the known category strings."""
    return isinstance(label, str) and label in CATEGORIES


def empty_scores() -> dict[str, float]:
    """Fresh score vector with every category at zero."""
    return {c: 0.0 for c in CATEGORIES}


__all__ = ["TAXONOMY_VERSION", "Category", "CATEGORIES", "WAR", "PEACE", "OTHERS", "is_category", "empty_scores"]
