"""Loading of dictionary word lists."""

from abc import ABC, abstractmethod
import threading

from loguru import logger

from keyla.core.models import Dictionary
from keyla.utils import expand_file_path


class DictionaryLoader(ABC):
    """Loads the ordered word sequence of a dictionary."""

    @abstractmethod
    def load_words(self, dictionary: Dictionary) -> list[str]:
        """Return the words of ``dictionary`` in file order."""


class FileDictionaryLoader(DictionaryLoader):
    """Loads one word per line from the dictionary's file, caching by file path.

    A path is never re-read once it loaded successfully; create a new loader to
    pick up changes on disk. Unreadable files are logged and produce an empty
    word list instead of an error, and that empty result is not cached.
    """

    def __init__(self) -> None:
        self._cache: dict[str, list[str]] = {}
        self._lock = threading.Lock()

    def load_words(self, dictionary: Dictionary) -> list[str]:
        with self._lock:
            cached = self._cache.get(dictionary.file_path)
        if cached is not None:
            return list(cached)

        words = self._read_file(dictionary)
        if words is None:
            return []

        with self._lock:
            words = self._cache.setdefault(dictionary.file_path, words)
        logger.debug(f"Loaded {len(words)} words from dictionary '{dictionary.name}'")
        return list(words)

    def is_cached(self, dictionary: Dictionary) -> bool:
        with self._lock:
            return dictionary.file_path in self._cache

    @staticmethod
    def _read_file(dictionary: Dictionary) -> list[str] | None:
        filepath = expand_file_path(dictionary.file_path) or dictionary.file_path
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                return [line.rstrip("\r\n") for line in f if line.strip()]
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"✗ Error loading dictionary {dictionary.name}: {e}")
            return None
