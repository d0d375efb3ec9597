"""Error taxonomy for Keyla.

Every error raised by the composer and the lifecycle manager derives from
``KeylaError`` and carries a stable ``code`` so that an outer request-handling
layer can map it onto its own responses without parsing messages.
"""

from collections.abc import Iterable


class KeylaError(Exception):
    """Base class for all Keyla errors."""

    code = "KEYLA_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(KeylaError):
    """Raised when a composer or merger is configured incorrectly."""

    code = "CONFIGURATION_ERROR"


class ValidationError(KeylaError):
    """Raised when a request names something that does not exist or is out of range."""

    code = "VALIDATION_ERROR"


class InvalidModifier(ValidationError):
    """Raised for an unknown modifier name."""

    code = "INVALID_MODIFIER"

    def __init__(self, modifier: str, available: Iterable[str]) -> None:
        self.modifier = modifier
        self.available = sorted(available)
        super().__init__(
            f"Invalid modifier: '{modifier}'. Available modifiers: {', '.join(self.available)}"
        )


class InvalidMerger(ValidationError):
    """Raised for an unknown merger name."""

    code = "INVALID_MERGER"

    def __init__(self, merger: str, available: Iterable[str]) -> None:
        self.merger = merger
        self.available = sorted(available)
        super().__init__(
            f"Invalid merger: '{merger}'. Available mergers: {', '.join(self.available)}"
        )


class InvalidMergerParameters(ValidationError, ConfigurationError):
    """Raised when a merger is constructed with missing or out-of-range parameters."""

    code = "INVALID_MERGER_PARAMETERS"


class NotFoundError(KeylaError):
    """Raised when a profile, dictionary or test is absent or not visible."""

    code = "NOT_FOUND"


class ProfileNotFound(NotFoundError):
    code = "PROFILE_NOT_FOUND"

    def __init__(self, profile_id: str) -> None:
        self.profile_id = profile_id
        super().__init__(f"Profile with id '{profile_id}' not found")


class DictionaryNotFound(NotFoundError):
    code = "DICTIONARY_NOT_FOUND"

    def __init__(self, language: str, dictionary_name: str) -> None:
        self.language = language
        self.dictionary_name = dictionary_name
        super().__init__(f"Dictionary '{dictionary_name}' not found for language '{language}'")


class TestNotFound(NotFoundError):
    code = "TEST_NOT_FOUND"
    __test__ = False  # keep pytest from collecting this class

    def __init__(self, test_id: str) -> None:
        self.test_id = test_id
        super().__init__(f"Test with id '{test_id}' not found")


class ConflictError(KeylaError):
    """Raised when a state transition is no longer legal."""

    code = "CONFLICT"


class TestAlreadyCompleted(ConflictError):
    code = "TEST_ALREADY_COMPLETED"
    __test__ = False

    def __init__(self, test_id: str) -> None:
        self.test_id = test_id
        super().__init__(f"Test with id '{test_id}' is already completed")


class ExhaustionError(KeylaError):
    """Raised when a probabilistic merge runs out of elements before reaching its size."""

    code = "EXHAUSTED"
