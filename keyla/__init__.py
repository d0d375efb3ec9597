"""Keyla - Typing test composer.

Compose practice typing tests from word dictionaries and track their
lifecycle per profile.
"""

from keyla.composition import TestComposer, create_merger, resolve_modifiers
from keyla.core import AppConfig, Dictionary, KeylaError, TestRequest, TestResults, load_config
from keyla.service import TypingTestLifecycleManager
from keyla.utils.logging import setup_logger

__version__ = "0.3.0"
__all__ = [
    "AppConfig",
    "Dictionary",
    "KeylaError",
    "TestComposer",
    "TestRequest",
    "TestResults",
    "TypingTestLifecycleManager",
    "create_merger",
    "load_config",
    "resolve_modifiers",
    "setup_logger",
]
