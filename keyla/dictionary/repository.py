"""Dictionary repositories: where dictionaries are found, not what they contain."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from keyla.core.models import Dictionary
from keyla.utils import expand_file_path

_FORBIDDEN_PATH_CHARS = ("/", "\\", "\0")

def _is_plain_segment(value: str) -> bool:
    """True for a single path component that cannot leave its parent directory."""
    if not value or value in (".", ".."):
        return False
    return not any(c in value for c in _FORBIDDEN_PATH_CHARS)


class DictionaryRepository(ABC):
    """Lookup of available dictionaries.

    Only ``get_all_dictionaries`` is required; the filtered lookups default to
    scanning its result.
    """

    @abstractmethod
    def get_all_dictionaries(self) -> list[Dictionary]:
        """Return every available dictionary."""

    def get_dictionaries_by_language(self, language: str) -> list[Dictionary]:
        return [d for d in self.get_all_dictionaries() if d.language == language]

    def get_dictionary_by_language_and_name(self, language: str, name: str) -> Dictionary | None:
        for dictionary in self.get_dictionaries_by_language(language):
            if dictionary.name == name:
                return dictionary
        return None

    def get_dictionary_by_name(self, name: str) -> Dictionary | None:
        """Return the first dictionary called ``name`` in any language."""
        for dictionary in self.get_all_dictionaries():
            if dictionary.name == name:
                return dictionary
        return None

    def get_languages(self) -> list[str]:
        return sorted({d.language for d in self.get_all_dictionaries()})


class FileDictionaryRepository(DictionaryRepository):
    """Dictionaries stored as ``<base_dir>/<language>/<name><file_extension>``."""

    def __init__(
        self,
        base_dir: str | Path,
        file_extension: str = ".txt",
        auto_create: bool = False,
    ) -> None:
        self.base_dir = Path(expand_file_path(str(base_dir)) or base_dir)
        self.file_extension = file_extension
        if auto_create and not self.base_dir.exists():
            logger.info(f"Creating dictionaries directory: {self.base_dir}")
            self.base_dir.mkdir(parents=True, exist_ok=True)

    def get_all_dictionaries(self) -> list[Dictionary]:
        if not self.base_dir.is_dir():
            logger.warning(f"Dictionaries directory not found: {self.base_dir}")
            return []
        dictionaries = []
        for language_dir in sorted(p for p in self.base_dir.iterdir() if p.is_dir()):
            dictionaries.extend(self._folder_dictionaries(language_dir.name, language_dir))
        return dictionaries

    def get_dictionaries_by_language(self, language: str) -> list[Dictionary]:
        if not _is_plain_segment(language):
            logger.warning(f"✗ Rejected dictionary language: {language!r}")
            return []
        language_dir = self.base_dir / language
        if not language_dir.is_dir():
            return []
        return self._folder_dictionaries(language, language_dir)

    def get_dictionary_by_language_and_name(self, language: str, name: str) -> Dictionary | None:
        if not (_is_plain_segment(language) and _is_plain_segment(name)):
            logger.warning(f"✗ Rejected dictionary lookup: {language!r}/{name!r}")
            return None
        path = (self.base_dir / language / f"{name}{self.file_extension}").resolve()
        if not path.is_relative_to(self.base_dir.resolve()) or not path.is_file():
            return None
        return Dictionary(name=name, language=language, file_path=str(path))

    def _folder_dictionaries(self, language: str, language_dir: Path) -> list[Dictionary]:
        return [
            Dictionary(
                name=path.name[: -len(self.file_extension)],
                language=language,
                file_path=str(path.resolve()),
            )
            for path in sorted(language_dir.iterdir())
            if path.is_file() and path.name.endswith(self.file_extension)
        ]


class InMemoryDictionaryRepository(DictionaryRepository):
    """A fixed list of dictionaries."""

    def __init__(self, dictionaries: Iterable[Dictionary] = ()) -> None:
        self._dictionaries = list(dictionaries)

    def get_all_dictionaries(self) -> list[Dictionary]:
        return list(self._dictionaries)


class CachedDictionaryRepository(DictionaryRepository):
    """Snapshot of another repository taken at construction time.

    Later changes in the wrapped repository are not seen; build a new instance
    to refresh.
    """

    def __init__(self, repository: DictionaryRepository) -> None:
        self._dictionaries = repository.get_all_dictionaries()
        self._by_key = {(d.language, d.name): d for d in self._dictionaries}

    def get_all_dictionaries(self) -> list[Dictionary]:
        return list(self._dictionaries)

    def get_dictionary_by_language_and_name(self, language: str, name: str) -> Dictionary | None:
        return self._by_key.get((language, name))
