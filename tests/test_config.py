import json

import pytest

from core.config import ClassifierConfig, load_config
from newsdesk.classify import NewsClassifier, classify_sentence


def test_load_config_filters_unknown_fields(tmp_path):
    p = tmp_path / 'cfg.json'
    p.write_text(json.dumps({'boost_weight': 1.0, 'store_path': 'b.json', 'bogus': 1}), encoding='utf-8')
    cfg = load_config(p)
    assert cfg.boost_weight == 1.0
    assert cfg.store_path == 'b.json'
    assert cfg.suppress == 0.2


def test_load_config_bad_file_exits(tmp_path):
    p = tmp_path / 'cfg.json'
    p.write_text('{nope', encoding='utf-8')
    with pytest.raises(SystemExit):
        load_config(p)


def test_merged_ignores_none():
    cfg = ClassifierConfig(store_path='a.json').merged({'store_path': None, 'peace_bonus': 3.0})
    assert cfg.store_path == 'a.json'
    assert cfg.peace_bonus == 3.0


def test_config_drives_scoring():
    res = classify_sentence('Ceasefire holds', config=ClassifierConfig(peace_bonus=3.0))
    assert res.scores['peace'] == pytest.approx(4.0)


def test_from_config_wires_store(tmp_path):
    cfg = ClassifierConfig(store_path=str(tmp_path / 'b.json'), reinforce=2.0, suppress=0.5)
    clf = NewsClassifier.from_config(cfg)
    clf.train('harvest', 'economy')
    row = clf.store.boosts_for('harvest')
    assert row['economy'] == pytest.approx(2.0)
    assert row['war'] == pytest.approx(-0.5)
