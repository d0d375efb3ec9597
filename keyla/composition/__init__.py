"""Typing-test composition: merge operators, modifiers and the composer."""

from .composer import (
    ComposerConfig,
    ComposerSource,
    TestComposer,
    build_typing_test,
    compose_in_pool,
)
from .merging import (
    MergeOperator,
    alternate,
    available_mergers,
    concatenate,
    create_merger,
    insert_random,
    interleave_chunks,
    probabilistic,
    random_mix,
)
from .modifiers import (
    NamedModifier,
    available_modifiers,
    resolve_modifier,
    resolve_modifiers,
    validate_modifier_names,
)

__all__ = [
    "ComposerConfig",
    "ComposerSource",
    "TestComposer",
    "build_typing_test",
    "compose_in_pool",
    "MergeOperator",
    "alternate",
    "available_mergers",
    "concatenate",
    "create_merger",
    "insert_random",
    "interleave_chunks",
    "probabilistic",
    "random_mix",
    "NamedModifier",
    "available_modifiers",
    "resolve_modifier",
    "resolve_modifiers",
    "validate_modifier_names",
]
