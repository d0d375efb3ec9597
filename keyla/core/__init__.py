"""Core domain types for Keyla."""

from .config import AppConfig, load_config
from .errors import (
    ConfigurationError,
    ConflictError,
    DictionaryNotFound,
    ExhaustionError,
    InvalidMerger,
    InvalidMergerParameters,
    InvalidModifier,
    KeylaError,
    NotFoundError,
    ProfileNotFound,
    TestAlreadyCompleted,
    TestNotFound,
    ValidationError,
)
from .models import (
    Dictionary,
    PersistedTypingTest,
    Profile,
    SourceWithMerger,
    TestRequest,
    TestResults,
    TypingTest,
)

__all__ = [
    "AppConfig",
    "load_config",
    "ConfigurationError",
    "ConflictError",
    "DictionaryNotFound",
    "ExhaustionError",
    "InvalidMerger",
    "InvalidMergerParameters",
    "InvalidModifier",
    "KeylaError",
    "NotFoundError",
    "ProfileNotFound",
    "TestAlreadyCompleted",
    "TestNotFound",
    "ValidationError",
    "Dictionary",
    "PersistedTypingTest",
    "Profile",
    "SourceWithMerger",
    "TestRequest",
    "TestResults",
    "TypingTest",
]
