"""Shared fixtures for Keyla tests."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime, timedelta, timezone
import itertools

from loguru import logger
import pytest

from keyla.core.models import Dictionary
from keyla.dictionary.loader import DictionaryLoader


class StaticLoader(DictionaryLoader):
    """Serves fixed word lists keyed by dictionary name."""

    def __init__(self, words_by_name: dict[str, list]) -> None:
        self.words_by_name = words_by_name
        self.calls: list[str] = []

    def load_words(self, dictionary: Dictionary) -> list:
        self.calls.append(dictionary.name)
        return list(self.words_by_name.get(dictionary.name, []))


def _dictionary(name: str, language: str = "english") -> Dictionary:
    return Dictionary(name=name, language=language, file_path=f"/dictionaries/{language}/{name}.txt")


@pytest.fixture
def english() -> Dictionary:
    return _dictionary("common")


@pytest.fixture
def programming() -> Dictionary:
    return _dictionary("programming")


@pytest.fixture
def loader() -> StaticLoader:
    return StaticLoader(
        {
            "common": ["the", "of", "and", "to", "in"],
            "programming": ["def", "class", "lambda"],
            "single": ["alone"],
        }
    )


@pytest.fixture
def clock():
    """Strictly increasing UTC timestamps, one second apart."""
    ticks = itertools.count()
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return lambda: start + timedelta(seconds=next(ticks))


@pytest.fixture(autouse=True)
def _reset_logger() -> Iterator[None]:
    yield
    logger.remove()
    logger.add(lambda _: None)


@pytest.fixture
def make_dictionary():
    """Factory for in-memory dictionaries: ``make_dictionary(name, language="english")``."""
    return _dictionary


@pytest.fixture
def make_loader():
    """Factory for loaders serving fixed word lists keyed by dictionary name."""
    return StaticLoader
