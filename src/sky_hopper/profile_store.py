"""
profile_store.py: Named player profiles, their best scores and the leaderboard view.
"""

import json
from typing import List, Optional, Tuple

from .constants import PROFILE_NAME_MAX_LEN, PROFILE_STORE_KEY
from .data_models import PlayerProfile
from .errors import DuplicateNameError, PersistenceError, ValidationError
from .kv_store import KeyValueStore
from .logger import get_logger

log = get_logger(__name__)


def sanitize_name(raw: str) -> str:
    return raw.replace("\n", " ").replace("\r", " ").strip()


def _parse_profiles(raw: str) -> List[PlayerProfile]:
    """Raises ValueError if the payload is not a list of {name, highScore}."""
    items = json.loads(raw)
    if not isinstance(items, list):
        raise ValueError("profile payload is not a list")
    profiles = []
    for item in items:
        if not isinstance(item, dict):
            raise ValueError(f"profile record is not an object: {item!r}")
        name = item.get("name")
        score = item.get("highScore")
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"bad profile name: {name!r}")
        if isinstance(score, bool) or not isinstance(score, int):
            raise ValueError(f"bad high score for {name!r}: {score!r}")
        profiles.append(PlayerProfile(name=name, high_score=score))
    return profiles


class ProfileStore:
    """
    Keeps every profile in memory (creation order) and writes the whole list
    back under a single key after each change. Storage failures never reach
    the caller: a bad load starts empty and a bad save keeps the change unsaved.
    """

    def __init__(self, kv: Optional[KeyValueStore], key: str = PROFILE_STORE_KEY):
        self.kv = kv
        self.key = key
        self._profiles: List[PlayerProfile] = self._load()

    def _load(self) -> List[PlayerProfile]:
        if self.kv is None:
            return []
        try:
            raw = self.kv.get(self.key)
        except PersistenceError as e:
            log.warning("Could not read profiles, starting empty: %s", e)
            return []
        if raw is None:
            return []
        try:
            profiles = _parse_profiles(raw)
        except ValueError as e:
            log.warning("Discarding malformed profile data: %s", e)
            return []
        log.info("Loaded %d profile(s)", len(profiles))
        return profiles

    def _save(self) -> bool:
        if self.kv is None:
            return False
        payload = json.dumps([p.to_record() for p in self._profiles])
        try:
            self.kv.set(self.key, payload)
        except PersistenceError as e:
            log.error("Profiles not saved: %s", e)
            return False
        return True

    def list(self) -> List[PlayerProfile]:
        return [PlayerProfile(p.name, p.high_score) for p in self._profiles]

    def get(self, name: str) -> Optional[PlayerProfile]:
        for p in self._profiles:
            if p.name == name:
                return PlayerProfile(p.name, p.high_score)
        return None

    def create(self, name: str) -> PlayerProfile:
        """Adds a profile with a zero high score. Names are case-sensitive."""
        clean = sanitize_name(name)
        if not clean:
            raise ValidationError("Profile name cannot be empty.")
        if len(clean) > PROFILE_NAME_MAX_LEN:
            raise ValidationError(f"Profile name must be at most {PROFILE_NAME_MAX_LEN} characters.")
        if any(p.name == clean for p in self._profiles):
            raise DuplicateNameError(clean)
        profile = PlayerProfile(name=clean)
        self._profiles.append(profile)
        self._save()
        log.info("Created profile %r", clean)
        return PlayerProfile(profile.name, profile.high_score)

    def record_score(self, name: str, score: int) -> PlayerProfile:
        """Updates the stored best to max(existing, score)."""
        for p in self._profiles:
            if p.name == name:
                break
        else:
            raise ValidationError(f"No profile named {name!r}.")
        if score > p.high_score:
            log.info("New best for %r: %d (was %d)", name, score, p.high_score)
            p.high_score = score
            self._save()
        return PlayerProfile(p.name, p.high_score)

    def leaderboard(self, limit: Optional[int] = None) -> List[Tuple[str, int]]:
        """All profiles by descending best score; ties keep creation order."""
        ranked = sorted(self._profiles, key=lambda p: -p.high_score)
        rows = [(p.name, p.high_score) for p in ranked]
        return rows if limit is None else rows[:limit]
