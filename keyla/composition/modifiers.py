"""Modifiers: named transformations applied to the whole word sequence of a test.

String modifiers drop ``None`` entries and stringify anything that is not a
string, then transform each word on its own, so they preserve length for
sequences of strings. A chain of modifiers is applied in the order given.

Request-level names may carry one argument after a colon, e.g. ``addPrefix:>>``
or ``limit:5``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
import re
from typing import Any

from keyla.core.errors import InvalidModifier

_WHITESPACE = re.compile(r"\s+")
ARGUMENT_SEPARATOR = ":"


@dataclass(frozen=True)
class NamedModifier:
    """A named transformation of a word sequence."""

    name: str
    func: Callable[[Sequence[Any]], list[Any]]

    def __call__(self, words: Sequence[Any]) -> list[Any]:
        return self.func(words)


def _of_string(name: str, transform: Callable[[str], str]) -> NamedModifier:
    def _apply(words: Sequence[Any]) -> list[str]:
        return [
            transform(word if isinstance(word, str) else str(word))
            for word in words
            if word is not None
        ]

    return NamedModifier(name, _apply)


def only_of_type(kind: type = str) -> NamedModifier:
    """Keep only the elements that are instances of ``kind``.

    Used as the pass-through modifier when a test is built without modifiers.
    """
    return NamedModifier("identity", lambda words: [w for w in words if isinstance(w, kind)])


def uppercase() -> NamedModifier:
    return _of_string("uppercase", str.upper)


def lowercase() -> NamedModifier:
    return _of_string("lowercase", str.lower)


def reverse() -> NamedModifier:
    """Reverse the characters of each word."""
    return _of_string("reverse", lambda word: word[::-1])


def capitalize() -> NamedModifier:
    """Upper-case the first letter of each word, leaving the rest untouched."""
    return _of_string("capitalize", lambda word: word[:1].upper() + word[1:])


def trim() -> NamedModifier:
    return _of_string("trim", str.strip)


def no_spaces() -> NamedModifier:
    """Remove all whitespace inside each word."""
    return _of_string("removeSpaces", lambda word: _WHITESPACE.sub("", word))


def add_prefix(prefix: str) -> NamedModifier:
    return _of_string("addPrefix", lambda word: prefix + word)


def add_suffix(suffix: str) -> NamedModifier:
    return _of_string("addSuffix", lambda word: word + suffix)


def limit(max_length: int) -> NamedModifier:
    """Truncate each word to ``max_length`` characters."""
    if max_length < 0:
        raise ValueError(f"max_length must be >= 0, got {max_length}")
    return _of_string("limit", lambda word: word[:max_length])


def _parse_limit(argument: str) -> NamedModifier:
    return limit(int(argument))


_SIMPLE_MODIFIERS: dict[str, Callable[[], NamedModifier]] = {
    "uppercase": uppercase,
    "lowercase": lowercase,
    "reverse": reverse,
    "capitalize": capitalize,
    "trim": trim,
    "removeSpaces": no_spaces,
    "noSpaces": no_spaces,
}

_PARAMETRIZED_MODIFIERS: dict[str, Callable[[str], NamedModifier]] = {
    "addPrefix": add_prefix,
    "addSuffix": add_suffix,
    "limit": _parse_limit,
}


_ARGUMENT_PLACEHOLDERS = {"addPrefix": "<text>", "addSuffix": "<text>", "limit": "<n>"}


def available_modifiers() -> set[str]:
    """Return every modifier accepted in a request, e.g. ``uppercase`` or ``limit:<n>``."""
    return set(_SIMPLE_MODIFIERS) | {
        f"{name}{ARGUMENT_SEPARATOR}{_ARGUMENT_PLACEHOLDERS[name]}" for name in _PARAMETRIZED_MODIFIERS
    }


def _split(name: str) -> tuple[str, str | None]:
    base, sep, argument = name.partition(ARGUMENT_SEPARATOR)
    return base, argument if sep else None


def is_valid_modifier(name: str) -> bool:
    base, argument = _split(name)
    if base in _SIMPLE_MODIFIERS:
        return argument is None
    if base not in _PARAMETRIZED_MODIFIERS or argument is None:
        return False
    if base == "limit":
        return argument.isdecimal()
    return True


def validate_modifier_names(names: Iterable[str]) -> None:
    """Reject the first unknown modifier name.

    Raises:
        InvalidModifier: carrying the full set of valid names
    """
    for name in names:
        if not is_valid_modifier(name):
            raise InvalidModifier(name, available_modifiers())


def resolve_modifier(name: str) -> NamedModifier:
    """Return the modifier for a request-level name such as ``uppercase`` or ``addSuffix:!``."""
    if not is_valid_modifier(name):
        raise InvalidModifier(name, available_modifiers())
    base, argument = _split(name)
    if argument is None:
        return _SIMPLE_MODIFIERS[base]()
    return _PARAMETRIZED_MODIFIERS[base](argument)


def resolve_modifiers(names: Iterable[str]) -> list[NamedModifier]:
    """Resolve a whole chain, validating every name before resolving any."""
    names = list(names)
    validate_modifier_names(names)
    return [resolve_modifier(name) for name in names]
