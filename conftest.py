# Ensure src/ is on sys.path for tests
import sys
from pathlib import Path
import pytest
root = Path(__file__).parent
src = root / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "boosts.json"


@pytest.fixture
def store(store_path):
    """Fresh file-backed learned boost store per test."""
    from newsdesk.learned import LearnedBoostStore
    return LearnedBoostStore(store_path)


@pytest.fixture
def classifier(store):
    from newsdesk.classify import NewsClassifier
    return NewsClassifier(store)
