"""Data models shared by the composer, the storage layer and the lifecycle manager."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt


class Dictionary(BaseModel):
    """A named, language-tagged pointer to a word-list file."""

    model_config = ConfigDict(frozen=True)

    name: str
    language: str
    file_path: str


class TypingTest(BaseModel):
    """A generated typing test.

    ``sources`` and ``modifiers`` are provenance metadata only: nothing
    guarantees that ``words`` can be re-derived from them. ``modifiers`` keeps
    the order in which the modifiers were applied. ``words`` usually holds
    strings, but mergers and the ``identity`` modifier work on any element type.
    """

    model_config = ConfigDict(frozen=True)

    sources: frozenset[Dictionary] = Field(default_factory=frozenset)
    modifiers: list[str] = Field(default_factory=list)
    words: list[Any] = Field(default_factory=list)


class TestResults(BaseModel):
    """Results submitted by a client when a test is finished."""

    __test__ = False

    accuracy: float = Field(ge=0, le=100)
    raw_accuracy: float = Field(ge=0, le=100)
    test_time: int = Field(ge=0, description="Milliseconds spent on the test")
    error_count: int = Field(ge=0)
    error_word_indices: list[NonNegativeInt] = Field(default_factory=list)


class PersistedTypingTest(BaseModel):
    """A typing test owned by a profile, as stored by a ``TypingTestRepository``.

    The record is created non-completed (``completed_at is None``) and is
    completed at most once; after that all result fields are fixed.
    """

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    profile_id: str
    test_data: TypingTest
    created_at: datetime
    language: str
    word_count: int = Field(ge=0)
    time_limit: int | None = Field(None, ge=0, description="Milliseconds, client-side only")
    completed_at: datetime | None = None
    accuracy: float | None = None
    raw_accuracy: float | None = None
    test_time: int | None = None
    error_count: int | None = None
    error_word_indices: list[int] | None = None

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None

    @property
    def words(self) -> list[Any]:
        return self.test_data.words

    def with_id(self, test_id: str) -> PersistedTypingTest:
        return self.model_copy(update={"id": test_id})

    def with_results(self, results: TestResults, completed_at: datetime) -> PersistedTypingTest:
        """Return a completed copy of this test carrying ``results``."""
        return self.model_copy(
            update={
                "completed_at": completed_at,
                "accuracy": results.accuracy,
                "raw_accuracy": results.raw_accuracy,
                "test_time": results.test_time,
                "error_count": results.error_count,
                "error_word_indices": list(results.error_word_indices),
            }
        )


class SourceWithMerger(BaseModel):
    """One dictionary of a test request, with the merger that folds it into the previous ones.

    The merger of the first source is ignored. A later source without a merger
    is skipped when the test is composed.
    """

    name: str = Field(min_length=1)
    merger: str | None = None
    merger_params: dict[str, float | int] = Field(default_factory=dict)


class TestRequest(BaseModel):
    """Parameters of a new typing test for a profile."""

    __test__ = False

    profile_id: str
    language: str
    sources: list[SourceWithMerger] = Field(min_length=1)
    word_count: int = Field(ge=1)
    modifiers: list[str] = Field(default_factory=list)
    time_limit: int | None = Field(None, ge=0)


class Profile(BaseModel):
    """A user profile. Only its existence matters to the lifecycle manager."""

    id: str | None = None
    name: str
    email: str
    settings: set[str] = Field(default_factory=set)
