"""Profile storage contract and its in-memory implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod
import threading
import uuid

from keyla.core.models import Profile


class ProfileRepository(ABC):
    """Storage of user profiles. The lifecycle manager only calls ``get``."""

    @abstractmethod
    def get(self, profile_id: str) -> Profile | None:
        """Return the profile, or ``None`` if it does not exist."""

    @abstractmethod
    def create(self, profile: Profile) -> Profile:
        """Store a new profile and return it with its assigned id."""

    @abstractmethod
    def update(self, profile: Profile) -> Profile | None:
        """Replace an existing profile; ``None`` if its id is unknown."""

    @abstractmethod
    def delete(self, profile_id: str) -> bool:
        """Delete a profile; ``True`` if it existed."""

    @abstractmethod
    def delete_all(self) -> bool:
        """Delete every profile; ``True`` if any existed."""

    @abstractmethod
    def list(self) -> list[Profile]:
        """Return every stored profile."""


class InMemoryProfileRepository(ProfileRepository):
    def __init__(self) -> None:
        self._profiles: dict[str, Profile] = {}
        self._lock = threading.Lock()

    def get(self, profile_id: str) -> Profile | None:
        with self._lock:
            profile = self._profiles.get(profile_id)
            return profile.model_copy(deep=True) if profile is not None else None

    def create(self, profile: Profile) -> Profile:
        with self._lock:
            profile_id = str(uuid.uuid4())
            while profile_id in self._profiles:
                profile_id = str(uuid.uuid4())
            stored = profile.model_copy(update={"id": profile_id}, deep=True)
            self._profiles[profile_id] = stored
            return stored.model_copy(deep=True)

    def update(self, profile: Profile) -> Profile | None:
        with self._lock:
            if profile.id is None or profile.id not in self._profiles:
                return None
            self._profiles[profile.id] = profile.model_copy(deep=True)
            return profile

    def delete(self, profile_id: str) -> bool:
        with self._lock:
            return self._profiles.pop(profile_id, None) is not None

    def delete_all(self) -> bool:
        with self._lock:
            had_profiles = bool(self._profiles)
            self._profiles.clear()
            return had_profiles

    def list(self) -> list[Profile]:
        with self._lock:
            return [p.model_copy(deep=True) for p in self._profiles.values()]
