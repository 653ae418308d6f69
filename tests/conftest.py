"""Shared fixtures for the phrase parser tests."""

from typing import Callable, Optional

import pytest

from tibparser.dictionary import DictionaryClient, WordlistDictionary
from tibparser.models import Match


DOCS = [
    {"id": "1", "name_tibt": ["ཆོས"], "name_latin": ["chos/"]},
    {"id": "2", "name_tibt": ["སྐུ"], "name_latin": ["sku/"]},
    {"id": "4", "name_tibt": ["ངོ་བོ"], "name_latin": ["ngo bo/"]},
    {"id": "5", "name_tibt": ["ཉིད"], "name_latin": ["nyid/"]},
    {"id": "6", "name_tibt": ["བླ་མ"], "name_latin": ["bla ma/"]},
]

COMPOUND_DOC = {"id": "3", "name_tibt": ["ཆོས་སྐུ"], "name_latin": ["chos sku/"]}


class RecordingDictionary(DictionaryClient):
    """Wordlist-backed dictionary that remembers every lookup."""

    def __init__(self, docs=()):
        self._wordlist = WordlistDictionary(docs)
        self.calls: list[tuple[str, str]] = []

    def lookup(self, candidate, script, trace=None):
        self.calls.append((candidate, script))
        return self._wordlist.lookup(candidate, script, trace)


class CallbackDictionary(DictionaryClient):
    """Dictionary answering every lookup through a callback."""

    def __init__(self, callback: Callable[[str, str], Optional[Match]]):
        self.callback = callback
        self.calls: list[tuple[str, str]] = []

    def lookup(self, candidate, script, trace=None):
        self.calls.append((candidate, script))
        return self.callback(candidate, script)


@pytest.fixture
def docs():
    """Dictionary documents without the chos sku compound."""
    return list(DOCS)


@pytest.fixture
def dictionary(docs):
    return RecordingDictionary(docs)


@pytest.fixture
def compound_dictionary(docs):
    return RecordingDictionary([COMPOUND_DOC] + docs)


@pytest.fixture
def empty_dictionary():
    return RecordingDictionary()


@pytest.fixture
def callback_dictionary():
    """Factory for dictionaries driven by a callback."""
    return CallbackDictionary


@pytest.fixture
def wordlist_csv(tmp_path):
    """CSV wordlist with the shared documents."""
    lines = ["id,name_tibt,name_latin"]
    for doc in DOCS:
        lines.append(f"{doc['id']},{doc['name_tibt'][0]},{doc['name_latin'][0]}")
    path = tmp_path / "wordlist.csv"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
