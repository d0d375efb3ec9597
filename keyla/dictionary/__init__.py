"""Dictionary lookup and word loading."""

from keyla.dictionary.loader import DictionaryLoader, FileDictionaryLoader
from keyla.dictionary.repository import (
    CachedDictionaryRepository,
    DictionaryRepository,
    FileDictionaryRepository,
    InMemoryDictionaryRepository,
)

__all__ = [
    "CachedDictionaryRepository",
    "DictionaryLoader",
    "DictionaryRepository",
    "FileDictionaryLoader",
    "FileDictionaryRepository",
    "InMemoryDictionaryRepository",
]
