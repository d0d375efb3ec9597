"""Test composition: sources, mergers, modifiers and a word count folded into one TypingTest."""

from __future__ import annotations

from concurrent.futures import Executor, Future
from dataclasses import dataclass, replace
import random
from typing import Any

from loguru import logger

from keyla.composition.merging import MergeOperator
from keyla.composition.modifiers import NamedModifier, only_of_type
from keyla.core.errors import ConfigurationError
from keyla.core.models import Dictionary, TypingTest
from keyla.dictionary.loader import DictionaryLoader


@dataclass(frozen=True)
class ComposerSource:
    """A source dictionary and the merger folding it into the sources before it."""

    dictionary: Dictionary
    merger: MergeOperator | None = None


@dataclass(frozen=True)
class ComposerConfig:
    """Everything needed to compose a typing test.

    The first source never has a merger. ``word_count`` of ``None`` keeps every
    composed word.
    """

    loader: DictionaryLoader | None = None
    sources: tuple[ComposerSource, ...] = ()
    modifiers: tuple[NamedModifier, ...] = ()
    word_count: int | None = None


def _shuffled(words: list[Any], rng: random.Random) -> list[Any]:
    result = list(words)
    rng.shuffle(result)
    return result


def build_typing_test(config: ComposerConfig, rng: random.Random | None = None) -> TypingTest:
    """Compose a typing test from ``config``.

    1. Each source's words are loaded and shuffled afresh.
    2. Sources are folded left to right through their mergers; a later source
       without a merger is skipped.
    3. Modifiers run in order (``identity`` for strings when none are set).
    4. The result is truncated to ``word_count``. A smaller pool yields fewer
       words, never padding or an error.

    Raises:
        ConfigurationError: if no loader or no source is configured
    """
    if config.loader is None:
        raise ConfigurationError("Loader must be defined")
    if not config.sources:
        raise ConfigurationError("At least one source must be defined")
    rng = rng or random.Random()

    first, *rest = config.sources
    words = _shuffled(config.loader.load_words(first.dictionary), rng)
    for source in rest:
        if source.merger is None:
            logger.debug(f"Skipping source '{source.dictionary.name}': no merger assigned")
            continue
        source_words = _shuffled(config.loader.load_words(source.dictionary), rng)
        words = source.merger.merge(words, source_words)
        logger.debug(
            f"Merged '{source.dictionary.name}' with {source.merger.name}: {len(words)} words"
        )

    modifiers = config.modifiers or (only_of_type(str),)
    for modifier in modifiers:
        words = modifier(words)

    if config.word_count is not None:
        words = words[: config.word_count]

    return TypingTest(
        sources=frozenset(source.dictionary for source in config.sources),
        modifiers=[modifier.name for modifier in config.modifiers],
        words=words,
    )


class TestComposer:
    """Immutable builder over ``ComposerConfig``; every step returns a new composer.

    Example::

        test = (
            TestComposer()
            .use_loader(FileDictionaryLoader())
            .use_source(english)
            .merge_with(alternate(), italian)
            .use_modifier(uppercase())
            .limit_words(50)
            .build()
        )
    """

    __test__ = False

    def __init__(self, config: ComposerConfig | None = None) -> None:
        self.config = config or ComposerConfig()

    def _with(self, **changes: Any) -> TestComposer:
        return TestComposer(replace(self.config, **changes))

    def use_loader(self, loader: DictionaryLoader) -> TestComposer:
        return self._with(loader=loader)

    def use_source(self, source: Dictionary) -> TestComposer:
        """Set the first source. Only one first source may be set."""
        if self.config.sources:
            raise ConfigurationError("Source already exists, cannot add a new one")
        return self._with(sources=(ComposerSource(source),))

    def merge_with(self, merger: MergeOperator, source: Dictionary) -> TestComposer:
        """Append ``source``, folded into the previous sources with ``merger``."""
        if not self.config.sources:
            raise ConfigurationError("First source must be defined before merging")
        return self._with(sources=(*self.config.sources, ComposerSource(source, merger)))

    def add_source(self, source: Dictionary, merger: MergeOperator | None = None) -> TestComposer:
        """Append ``source`` with an optional merger; the first source gets none."""
        if not self.config.sources:
            return self.use_source(source)
        return self._with(sources=(*self.config.sources, ComposerSource(source, merger)))

    def use_modifier(self, modifier: NamedModifier) -> TestComposer:
        return self._with(modifiers=(*self.config.modifiers, modifier))

    def limit_words(self, word_count: int) -> TestComposer:
        if word_count < 0:
            raise ConfigurationError(f"Word count must be >= 0, got {word_count}")
        return self._with(word_count=word_count)

    def build(self, rng: random.Random | None = None) -> TypingTest:
        return build_typing_test(self.config, rng)


def compose_in_pool(
    executor: Executor, composer: TestComposer, rng: random.Random | None = None
) -> Future[TypingTest]:
    """Run ``composer.build`` on ``executor`` so the caller's thread is not blocked."""
    return executor.submit(build_typing_test, composer.config, rng)
