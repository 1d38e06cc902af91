from .taxonomy import (
    TAXONOMY_VERSION,
    Category,
    CATEGORIES,
    OTHERS,
    is_category,
)
from .lexicon import Lexicon, DEFAULT_LEXICON, load_lexicon
from .text import normalize, tokenize, split_sentences
from .rules import is_war_sentence, is_negated, is_peace_dominant, war_cues
from .learned import LearnedBoostStore
from .classify import (
    NewsClassifier,
    SentenceResult,
    base_scores,
    classify_sentence,
    classify_text,
    classify_item,
    dominant_category,
    explain,
    item_text,
)

__all__ = [
    'TAXONOMY_VERSION','Category','CATEGORIES','OTHERS','is_category',
    'Lexicon','DEFAULT_LEXICON','load_lexicon',
    'normalize','tokenize','split_sentences',
    'is_war_sentence','is_negated','is_peace_dominant','war_cues',
    'LearnedBoostStore',
    'NewsClassifier','SentenceResult','base_scores','classify_sentence',
    'classify_text','classify_item','dominant_category','explain','item_text',
]
