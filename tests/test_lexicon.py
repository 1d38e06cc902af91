import json

import pytest

from newsdesk.lexicon import DEFAULT_LEXICON, build_lexicon, load_lexicon
from newsdesk.taxonomy import CATEGORIES, Category, is_category
from newsdesk.classify import NewsClassifier


def test_taxonomy_order_and_validation():
    assert CATEGORIES == tuple(c.value for c in Category)
    assert is_category('war')
    assert not is_category('War')
    assert not is_category(None)


def test_default_lexicon_covers_all_but_others():
    assert set(DEFAULT_LEXICON.signals) == set(CATEGORIES) - {'others'}
    assert 'no' in DEFAULT_LEXICON.negation_terms


def test_hash_is_stable_and_content_sensitive():
    assert DEFAULT_LEXICON.hash() == build_lexicon().hash()
    other = build_lexicon(war_nouns=set(DEFAULT_LEXICON.war_nouns) | {'frigate'})
    assert other.hash() != DEFAULT_LEXICON.hash()


def test_unknown_category_rejected():
    with pytest.raises(ValueError):
        build_lexicon(signals={'sports': ('goal',)})


def test_load_lexicon_overrides_named_categories_only(tmp_path):
    p = tmp_path / 'lex.json'
    p.write_text(json.dumps({'signals': {'culture': ['Cricket']}, 'version': '2'}), encoding='utf-8')
    lex = load_lexicon(p)
    assert lex.signals['culture'] == ('cricket',)
    assert lex.signals['economy'] == DEFAULT_LEXICON.signals['economy']
    assert lex.version == '2'
    assert NewsClassifier(lexicon=lex).classify_text('Cricket fever grips the nation') == 'culture'


def test_load_lexicon_bad_pattern(tmp_path):
    p = tmp_path / 'lex.json'
    p.write_text(json.dumps({'peace_pattern': '(unclosed'}), encoding='utf-8')
    with pytest.raises(ValueError):
        load_lexicon(p)


def test_classifier_loads_lexicon_path_from_config(tmp_path):
    from core.config import ClassifierConfig

    p = tmp_path / 'lex.json'
    p.write_text(json.dumps({'signals': {'culture': ['cricket']}}), encoding='utf-8')
    clf = NewsClassifier(config=ClassifierConfig(lexicon_path=str(p)))
    assert clf.lexicon.signals['culture'] == ('cricket',)
    assert clf.classify_text('Cricket fever grips the nation') == 'culture'
