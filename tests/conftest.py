# tests/conftest.py
import pytest

from weighted_autocomplete.core import Term
from weighted_autocomplete.utils.logger_utils import Log


@pytest.fixture(autouse=True)
def _log_to_tmp(tmp_path, monkeypatch):
    # keep log files out of the working tree
    monkeypatch.setattr(Log, "path", str(tmp_path / "logs" / "test.log"))
    monkeypatch.setattr(Log, "echo", False)


@pytest.fixture
def small_corpus():
    return [Term("cat", 5), Term("car", 10), Term("cats", 1), Term("dog", 7)]
