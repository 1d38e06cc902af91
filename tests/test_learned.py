import json
import threading
import warnings

import pytest

from newsdesk.learned import LearnedBoostStore, apply_boosts
from newsdesk.taxonomy import CATEGORIES, empty_scores


def test_missing_file_starts_empty(store, store_path):
    assert not store_path.exists()
    assert len(store) == 0


def test_train_reinforces_and_suppresses(store):
    assert store.train('Inflation inflation', 'economy')
    row = store.boosts_for('inflation')
    assert row['economy'] == pytest.approx(2.0)
    for c in CATEGORIES:
        if c != 'economy':
            assert row[c] == pytest.approx(-0.4)


def test_train_invalid_label_or_empty_text_is_noop(store, store_path):
    assert not store.train('some text', 'nonsense')
    assert not store.train('', 'economy')
    assert not store.train(None, 'economy')
    assert not store.train('!!!', 'economy')
    assert len(store) == 0
    assert not store_path.exists()


def test_train_flushes_and_reloads(store, store_path):
    store.train('drought warning', 'climate')
    data = json.loads(store_path.read_text(encoding='utf-8'))
    assert data['version'] == 1
    assert data['tokenBoosts']['drought']['climate'] == pytest.approx(1.0)
    again = LearnedBoostStore(store_path)
    assert again.snapshot() == store.snapshot()


def test_reload_picks_up_external_changes(store, store_path):
    store_path.write_text(json.dumps({'tokenBoosts': {'x': {'war': 3}}}), encoding='utf-8')
    store.reload()
    assert store.boosts_for('x') == {'war': 3.0}


@pytest.mark.parametrize('content', [
    'not json at all',
    '[]',
    '{"tokenBoosts": []}',
    '{"tokenBoosts": {"tok": 5}}',
    '{"tokenBoosts": {"tok": {"war": "high"}}}',
    '{"version": 2, "tokenBoosts": {}}',
    pytest.param('{"tokenBoosts": ' + '[' * 200000 + ']' * 200000 + '}', id='deeply-nested'),
])
def test_malformed_file_falls_back_to_empty(store_path, content):
    store_path.write_text(content, encoding='utf-8')
    with pytest.warns(RuntimeWarning):
        s = LearnedBoostStore(store_path)
    assert len(s) == 0


def test_flush_failure_warns_but_keeps_memory_state(store, store_path):
    store_path.mkdir()  # a directory in place of the file makes the replace fail
    with pytest.warns(RuntimeWarning):
        assert store.train('market rally', 'economy')
    assert 'market' in store


def test_in_memory_store_flush_is_noop():
    s = LearnedBoostStore()
    assert s.train('hello', 'culture')
    assert s.flush()


def test_view_is_not_mutated_by_later_training(store):
    store.train('border', 'war')
    view = store.view()
    before = dict(view['border'])
    store.train('border', 'peace')
    assert view['border'] == before
    assert store.boosts_for('border')['peace'] == pytest.approx(0.8)


def test_apply_boosts_weighted():
    scores = empty_scores()
    apply_boosts(scores, 'rally rally', {'rally': {'economy': 1.0, 'bogus': 5.0}}, weight=0.5)
    assert scores['economy'] == pytest.approx(1.0)
    assert 'bogus' not in scores


def test_concurrent_training_loses_no_updates(store):
    def worker():
        for _ in range(25):
            store.train('stocks', 'economy')

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert store.boosts_for('stocks')['economy'] == pytest.approx(100.0)


def test_reload_does_not_drop_concurrent_train(store, monkeypatch):
    store.train('alpha', 'economy')
    original_read = store._read
    trainer = {}

    def read_then_race():
        result = original_read()
        # a writer arriving mid-reload must wait for the swap, not be overwritten by it
        trainer['t'] = threading.Thread(target=store.train, args=('beta', 'politics'))
        trainer['t'].start()
        trainer['t'].join(timeout=0.2)
        return result

    monkeypatch.setattr(store, '_read', read_then_race)
    store.reload()
    trainer['t'].join()
    assert 'alpha' in store
    assert 'beta' in store


def test_lexicon_hash_written_and_checked(store_path):
    from newsdesk.classify import NewsClassifier
    from newsdesk.lexicon import DEFAULT_LEXICON, build_lexicon

    clf = NewsClassifier(LearnedBoostStore(store_path))
    clf.train('harvest', 'economy')
    data = json.loads(store_path.read_text(encoding='utf-8'))
    assert data['lexiconHash'] == DEFAULT_LEXICON.hash()

    with warnings.catch_warnings():
        warnings.simplefilter('error')
        NewsClassifier(LearnedBoostStore(store_path))

    other = build_lexicon(war_nouns=set(DEFAULT_LEXICON.war_nouns) | {'frigate'})
    with pytest.warns(RuntimeWarning, match='trained against lexicon'):
        again = NewsClassifier(LearnedBoostStore(store_path), lexicon=other)
    assert 'harvest' in again.store
    assert again.store.lexicon_hash == other.hash()


def test_classify_consistent_while_training(store):
    from newsdesk.classify import NewsClassifier

    clf = NewsClassifier(store)
    text = 'The committee met on Tuesday.'
    errors = []
    seen = set()

    def trainer():
        for _ in range(30):
            clf.train(text, 'politics')

    def reader():
        try:
            for _ in range(60):
                seen.add(clf.classify_text(text))
                clf.explain(text)
        except Exception as e:  # surfaced through the assertion below
            errors.append(e)

    threads = [threading.Thread(target=trainer)] + [threading.Thread(target=reader) for _ in range(3)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert not errors
    assert seen <= {'others', 'politics'}
    assert clf.classify_text(text) == 'politics'
    assert store.boosts_for('committee')['politics'] == pytest.approx(30.0)
