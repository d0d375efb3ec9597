"""Merge operators: named strategies combining two word sequences into one.

Every operator is a ``MergeOperator`` whose ``merge(s1, s2)`` returns a new
list and never mutates its inputs. Operators are element-type agnostic.
Randomised operators draw from an injectable ``random.Random`` so that tests
can force deterministic permutations.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from itertools import zip_longest
import random
from typing import Any

from keyla.core.errors import ExhaustionError, InvalidMerger, InvalidMergerParameters

MergeFunction = Callable[[Sequence[Any], Sequence[Any]], list[Any]]


@dataclass(frozen=True)
class MergeOperator:
    """A named merge strategy."""

    name: str
    func: MergeFunction

    def merge(self, s1: Sequence[Any], s2: Sequence[Any]) -> list[Any]:
        return self.func(s1, s2)

    def __call__(self, s1: Sequence[Any], s2: Sequence[Any]) -> list[Any]:
        return self.func(s1, s2)


def alternate() -> MergeOperator:
    """Interleave by index, then append the tail of the longer sequence.

    e.g. ``["a", "b", "c"], ["x", "y"] -> ["a", "x", "b", "y", "c"]``
    """

    def _merge(s1: Sequence[Any], s2: Sequence[Any]) -> list[Any]:
        shortest = min(len(s1), len(s2))
        result: list[Any] = []
        for i in range(shortest):
            result.append(s1[i])
            result.append(s2[i])
        result.extend(s1[shortest:] if len(s1) > len(s2) else s2[shortest:])
        return result

    return MergeOperator("alternate", _merge)


def concatenate() -> MergeOperator:
    """``s1`` followed by ``s2``."""
    return MergeOperator("concatenate", lambda s1, s2: [*s1, *s2])


def random_mix(rng: random.Random | None = None) -> MergeOperator:
    """Shuffle of ``s1 + s2``."""
    rng = rng or random.Random()

    def _merge(s1: Sequence[Any], s2: Sequence[Any]) -> list[Any]:
        result = [*s1, *s2]
        rng.shuffle(result)
        return result

    return MergeOperator("randomMix", _merge)


def insert_random(rng: random.Random | None = None) -> MergeOperator:
    """Insert every element of ``s2`` at a random position of ``s1``.

    The relative order of ``s1``'s elements is preserved.
    """
    rng = rng or random.Random()

    def _merge(s1: Sequence[Any], s2: Sequence[Any]) -> list[Any]:
        result = list(s1)
        for element in s2:
            result.insert(rng.randint(0, len(result)), element)
        return result

    return MergeOperator("random", _merge)


def probabilistic(size: int, probability: float, rng: random.Random | None = None) -> MergeOperator:
    """Draw exactly ``size`` elements, each from ``s1`` with probability ``probability``.

    Both inputs are shuffled locally before drawing. When the preferred pool is
    empty the other one is used.

    Raises:
        InvalidMergerParameters: at construction, if ``probability`` is outside
            [0, 1] or ``size`` is not positive
        ExhaustionError: at merge time, if both pools run out before ``size``
            elements were drawn
    """
    if isinstance(probability, bool) or not 0.0 <= probability <= 1.0:
        raise InvalidMergerParameters(
            f"Probability must be between 0.0 and 1.0, got {probability}"
        )
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise InvalidMergerParameters(f"Size must be a positive integer, got {size}")
    rng = rng or random.Random()

    def _merge(s1: Sequence[Any], s2: Sequence[Any]) -> list[Any]:
        if not s1 and not s2:
            raise ExhaustionError(
                "Not enough elements in either sequence to satisfy size requirement"
            )
        # Reversed so that pop() takes from the front of the shuffled order.
        pool1 = list(s1)
        pool2 = list(s2)
        rng.shuffle(pool1)
        rng.shuffle(pool2)
        pool1.reverse()
        pool2.reverse()

        result: list[Any] = []
        for _ in range(size):
            if rng.random() < probability and pool1:
                result.append(pool1.pop())
            elif pool2:
                result.append(pool2.pop())
            elif pool1:
                result.append(pool1.pop())
            else:
                raise ExhaustionError(
                    f"Not enough elements in either sequence to satisfy size requirement "
                    f"({len(result)} of {size} drawn)"
                )
        return result

    return MergeOperator("probabilistic", _merge)


def interleave_chunks(chunk_size: int) -> MergeOperator:
    """Alternate chunks of ``chunk_size`` elements, padding the shorter side with empty chunks.

    e.g. with ``chunk_size=2``: ``[1, 2, 3], [a, b, c, d] -> [1, 2, a, b, 3, c, d]``
    """
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size <= 0:
        raise InvalidMergerParameters(f"Chunk size must be a positive integer, got {chunk_size}")

    def _chunks(seq: Sequence[Any]) -> list[Sequence[Any]]:
        return [seq[i : i + chunk_size] for i in range(0, len(seq), chunk_size)]

    def _merge(s1: Sequence[Any], s2: Sequence[Any]) -> list[Any]:
        result: list[Any] = []
        for c1, c2 in zip_longest(_chunks(s1), _chunks(s2), fillvalue=()):
            result.extend(c1)
            result.extend(c2)
        return result

    return MergeOperator("interleaveChunks", _merge)


@dataclass(frozen=True)
class _MergerEntry:
    params: tuple[str, ...]
    factory: Callable[..., MergeOperator]
    description: str


# Closed registry of request-level merger names
_MERGERS: dict[str, _MergerEntry] = {
    "alternate": _MergerEntry(
        (), lambda rng: alternate(), "Alternate words from both sources"
    ),
    "concatenate": _MergerEntry(
        (), lambda rng: concatenate(), "Words of the previous sources, then this source"
    ),
    "randomMix": _MergerEntry(
        (), lambda rng: random_mix(rng), "Shuffle the words of both sides together"
    ),
    "random": _MergerEntry(
        (), lambda rng: insert_random(rng), "Insert this source's words at random positions"
    ),
    "probabilistic": _MergerEntry(
        ("size", "probability"),
        lambda rng, size, probability: probabilistic(size, probability, rng),
        "Draw 'size' words, from the previous sources with 'probability'",
    ),
    "interleaveChunks": _MergerEntry(
        ("chunk_size",),
        lambda rng, chunk_size: interleave_chunks(chunk_size),
        "Alternate chunks of 'chunk_size' words",
    ),
}


def available_mergers() -> dict[str, str]:
    """Return merger names mapped to a short description."""
    return {name: entry.description for name, entry in _MERGERS.items()}


def is_valid_merger(name: str) -> bool:
    return name in _MERGERS


def merger_parameters(name: str) -> tuple[str, ...]:
    """Return the parameter names a merger requires."""
    entry = _MERGERS.get(name)
    if entry is None:
        raise InvalidMerger(name, _MERGERS.keys())
    return entry.params


def _coerce_int(name: str, value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, float):
        raise InvalidMergerParameters(f"Parameter '{name}' must be an integer, got {value}")
    return value


def create_merger(
    name: str,
    params: Mapping[str, Any] | None = None,
    rng: random.Random | None = None,
) -> MergeOperator:
    """Build a merger from its registry name and parameters.

    Raises:
        InvalidMerger: if ``name`` is not a known merger
        InvalidMergerParameters: if parameters are missing, unexpected or out of range
    """
    entry = _MERGERS.get(name)
    if entry is None:
        raise InvalidMerger(name, _MERGERS.keys())

    params = dict(params or {})
    missing = [p for p in entry.params if p not in params]
    if missing:
        raise InvalidMergerParameters(
            f"Merger '{name}' requires parameters: {', '.join(missing)}"
        )
    unexpected = sorted(set(params) - set(entry.params))
    if unexpected:
        raise InvalidMergerParameters(
            f"Merger '{name}' does not accept parameters: {', '.join(unexpected)}"
        )

    for key in ("size", "chunk_size"):
        if key in params:
            params[key] = _coerce_int(key, params[key])
    return entry.factory(rng, **params)
