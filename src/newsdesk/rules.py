"""War / peace disambiguation rules.

The war lexicon is broad and fires on idiomatic uses ("price war", "war of
words"), so a sentence only keeps its war score when it carries real
armed-conflict cues. The guards below run as a fixed sequence:

  1. figurative / brand / team patterns      -> not war
  2. peace-dominant language without cues    -> not war
  3. bare war word, no cues, not negated     -> not war
  4. otherwise: strong cue, or war word plus a military noun or verb

Negation is detected sentence wide, not around the matched cue.
"""
from __future__ import annotations

from dataclasses import dataclass

from .lexicon import Lexicon, DEFAULT_LEXICON
from .text import normalize, tokenize


@dataclass
class WarCues:
    false_positive: bool = False
    has_peace: bool = False
    has_war_word: bool = False
    has_war_noun: bool = False
    has_war_verb: bool = False
    strong_phrase: bool = False
    negated: bool = False

    @property
    def strong(self) -> bool:
        return (self.has_war_noun and self.has_war_verb) or self.strong_phrase


def is_negated(sentence: str, lexicon: Lexicon = DEFAULT_LEXICON) -> bool:
    return bool(lexicon.negation_pattern.search(normalize(sentence)))


def is_peace_dominant(sentence: str, lexicon: Lexicon = DEFAULT_LEXICON) -> bool:
    return bool(lexicon.peace_pattern.search(normalize(sentence)))


def war_cues(sentence: str, lexicon: Lexicon = DEFAULT_LEXICON) -> WarCues:
    """Collect the intermediate flags used by is_war_sentence.

    Stops after the false-positive check when one matches, leaving the
    remaining flags False.
    """
    s = normalize(sentence)
    cues = WarCues()
    if any(rx.search(s) for rx in lexicon.false_positive_patterns):
        cues.false_positive = True
        return cues
    cues.has_peace = bool(lexicon.peace_pattern.search(s))
    cues.has_war_word = bool(lexicon.war_word_pattern.search(s))
    for tok in tokenize(s):
        if tok in lexicon.war_nouns:
            cues.has_war_noun = True
        if tok in lexicon.war_verbs:
            cues.has_war_verb = True
    cues.strong_phrase = bool(lexicon.strong_phrase_pattern.search(s))
    cues.negated = is_negated(s, lexicon)
    return cues


def is_war_sentence(sentence: str, lexicon: Lexicon = DEFAULT_LEXICON) -> bool:
    """True iff the sentence is about armed conflict rather than a figurative war."""
    cues = war_cues(sentence, lexicon)
    if cues.false_positive:
        return False
    if cues.has_peace and not cues.strong:
        return False
    if not cues.strong and cues.has_war_word and not cues.negated:
        return False
    return cues.strong or (cues.has_war_word and (cues.has_war_noun or cues.has_war_verb))


__all__ = ["WarCues", "war_cues", "is_war_sentence", "is_negated", "is_peace_dominant"]
