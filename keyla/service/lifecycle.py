"""Typing test lifecycle: request, completion and visibility rules.

A test is created non-completed and completed at most once::

    request_test ──► NonCompleted ──submit_test_results──► Completed

Each profile has at most one non-completed test: requesting a new test purges
the profile's pending ones first. Purge-then-create is serialized per profile
inside one manager; separate managers (or processes) sharing a backend are not
coordinated and may briefly leave two pending tests for a profile.
"""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import Executor, Future
from datetime import datetime, timezone
import random
import threading
import weakref

from loguru import logger

from keyla.composition.composer import TestComposer
from keyla.composition.merging import MergeOperator, available_mergers, create_merger
from keyla.composition.modifiers import available_modifiers, resolve_modifiers
from keyla.core.errors import (
    DictionaryNotFound,
    KeylaError,
    ProfileNotFound,
    TestAlreadyCompleted,
    TestNotFound,
)
from keyla.core.models import (
    Dictionary,
    PersistedTypingTest,
    Profile,
    TestRequest,
    TestResults,
)
from keyla.dictionary.loader import DictionaryLoader, FileDictionaryLoader
from keyla.dictionary.repository import DictionaryRepository
from keyla.storage.profiles import ProfileRepository
from keyla.storage.typing_tests import TypingTestRepository


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TypingTestLifecycleManager:
    """Creates, completes and looks up typing tests for profiles.

    Args:
        profile_repository: Used for existence checks only
        dictionary_repository: Resolves request source names to dictionaries
        typing_test_repository: Storage of the tests
        loader: Word loader shared by every composed test (a caching
            ``FileDictionaryLoader`` by default)
        rng: Randomness for shuffles and random mergers
        clock: Source of ``created_at``/``completed_at`` timestamps
    """

    def __init__(
        self,
        profile_repository: ProfileRepository,
        dictionary_repository: DictionaryRepository,
        typing_test_repository: TypingTestRepository,
        loader: DictionaryLoader | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.profile_repository = profile_repository
        self.dictionary_repository = dictionary_repository
        self.typing_test_repository = typing_test_repository
        self.loader = loader or FileDictionaryLoader()
        self.rng = rng or random.Random()
        self.clock = clock or _utc_now
        # Entries vanish once no request holds the lock
        self._profile_locks: weakref.WeakValueDictionary[str, threading.Lock] = (
            weakref.WeakValueDictionary()
        )
        self._profile_locks_guard = threading.Lock()

    def _profile_lock(self, profile_id: str) -> threading.Lock:
        with self._profile_locks_guard:
            return self._profile_locks.setdefault(profile_id, threading.Lock())

    @staticmethod
    def _reject(error: KeylaError) -> KeylaError:
        logger.warning(f"✗ {error.message}")
        return error

    # Requests

    def request_test(self, request: TestRequest) -> PersistedTypingTest:
        """Compose and store a new non-completed test, replacing the profile's pending ones.

        Every modifier and merger name is validated before any other work, then
        the profile and the source dictionaries are resolved.

        Raises:
            InvalidModifier, InvalidMerger, InvalidMergerParameters: bad names or parameters
            ProfileNotFound: unknown profile
            DictionaryNotFound: a source is not available in the request's language
            ExhaustionError: a probabilistic merger ran out of words
        """
        try:
            modifiers = resolve_modifiers(request.modifiers)
            mergers = self._resolve_mergers(request)
        except KeylaError as e:
            self._reject(e)
            raise

        self._get_profile(request.profile_id)
        dictionaries = [
            self._get_dictionary(request.language, source.name) for source in request.sources
        ]

        composer = TestComposer().use_loader(self.loader).limit_words(request.word_count)
        for dictionary, merger in zip(dictionaries, mergers):
            composer = composer.add_source(dictionary, merger)
        for modifier in modifiers:
            composer = composer.use_modifier(modifier)

        lock = self._profile_lock(request.profile_id)
        with lock:
            purged = self.typing_test_repository.delete_non_completed_by_profile_id(
                request.profile_id
            )
            if purged:
                logger.info(
                    f"Deleted {purged} non-completed test(s) for profile {request.profile_id}"
                )

            try:
                test_data = composer.build(self.rng)
            except KeylaError as e:
                self._reject(e)
                raise

            persisted = self.typing_test_repository.create(
                PersistedTypingTest(
                    profile_id=request.profile_id,
                    test_data=test_data,
                    created_at=self.clock(),
                    language=request.language,
                    word_count=len(test_data.words),
                    time_limit=request.time_limit,
                )
            )

        logger.info(
            f"Created test {persisted.id} for profile {request.profile_id} "
            f"({persisted.word_count}/{request.word_count} words)"
        )
        return persisted

    def request_test_in_pool(self, executor: Executor, request: TestRequest) -> Future:
        """Run ``request_test`` on ``executor``; the future re-raises its errors."""
        return executor.submit(self.request_test, request)

    def _resolve_mergers(self, request: TestRequest) -> list[MergeOperator | None]:
        mergers: list[MergeOperator | None] = []
        for index, source in enumerate(request.sources):
            merger = None
            if source.merger is not None:
                merger = create_merger(source.merger, source.merger_params, self.rng)
            if index == 0 and merger is not None:
                logger.debug(f"Ignoring merger '{source.merger}' on first source '{source.name}'")
                merger = None
            mergers.append(merger)
        return mergers

    def _get_profile(self, profile_id: str) -> Profile:
        profile = self.profile_repository.get(profile_id)
        if profile is None:
            raise self._reject(ProfileNotFound(profile_id))
        return profile

    def _get_dictionary(self, language: str, name: str) -> Dictionary:
        dictionary = self.dictionary_repository.get_dictionary_by_language_and_name(language, name)
        if dictionary is None:
            raise self._reject(DictionaryNotFound(language, name))
        return dictionary

    # Completion

    def submit_test_results(self, test_id: str, results: TestResults) -> PersistedTypingTest:
        """Complete a test with ``results``. A test can be completed only once.

        Raises:
            TestNotFound: unknown test id
            TestAlreadyCompleted: the test was already completed; the stored
                record is left untouched
        """
        existing = self.typing_test_repository.get(test_id)
        if existing is None:
            raise self._reject(TestNotFound(test_id))
        if existing.is_completed:
            raise self._reject(TestAlreadyCompleted(test_id))

        updated = self.typing_test_repository.complete_if_pending(
            existing.with_results(results, self.clock())
        )
        if updated is None:
            # Lost a race with another submission, or the test was purged meanwhile
            if self.typing_test_repository.get(test_id) is None:
                raise self._reject(TestNotFound(test_id))
            raise self._reject(TestAlreadyCompleted(test_id))

        logger.info(f"Completed test {test_id} with accuracy {results.accuracy}")
        return updated

    # Queries

    def get_test_by_id(self, test_id: str) -> PersistedTypingTest:
        """Return a completed test. Non-completed tests are reported as not found."""
        test = self.typing_test_repository.get_completed_by_id(test_id)
        if test is None:
            raise self._reject(TestNotFound(test_id))
        return test

    def get_last_test(self, profile_id: str) -> PersistedTypingTest:
        """Return the profile's most recent non-completed test."""
        self._get_profile(profile_id)
        test = self.typing_test_repository.get_last_non_completed_by_profile_id(profile_id)
        if test is None:
            raise self._reject(TestNotFound(f"non-completed test for profile {profile_id}"))
        return test

    def get_tests_by_profile_id(self, profile_id: str) -> list[PersistedTypingTest]:
        return self.typing_test_repository.get_by_profile_id(profile_id)

    def get_tests_by_language(self, language: str) -> list[PersistedTypingTest]:
        return self.typing_test_repository.get_by_language(language)

    def get_all_dictionaries(self) -> list[Dictionary]:
        return self.dictionary_repository.get_all_dictionaries()

    def get_dictionaries_by_language(self, language: str) -> list[Dictionary]:
        return self.dictionary_repository.get_dictionaries_by_language(language)

    def get_languages(self) -> list[str]:
        return self.dictionary_repository.get_languages()

    @staticmethod
    def available_modifiers() -> list[str]:
        return sorted(available_modifiers())

    @staticmethod
    def available_mergers() -> dict[str, str]:
        return available_mergers()
