"""Typing test lifecycle service."""

from .lifecycle import TypingTestLifecycleManager

__all__ = ["TypingTestLifecycleManager"]
