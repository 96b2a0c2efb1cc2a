"""
Learner Memory for DebugMe
==========================
File-based persistence for one learner's progression and career profiles.

Layout (per user):
- memory.json        current UserProgress, profile list and selected index
- memory_log.jsonl   append-only log of completions, badges and profile changes

Everything read back from disk goes through the same validation as live
updates, so a stored file can never smuggle in xp above the level threshold
or a duplicate completion.
"""

import json
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..config import settings
from ..engine.profiles import ProfileStore
from ..engine.progression import CompletionOutcome, ProgressionEngine
from ..errors import DebugMeError, InvalidArgument
from ..models import UserProgress


class LearnerMemory:
    """
    Persistent state for a single learner.
    Stored as JSON in {MEMORY_DIR}/{user_id}/memory.json
    """

    def __init__(self, user_id, base_dir: Optional[str] = None):
        self.user_id = user_id
        self.memory_dir = Path(base_dir or settings.MEMORY_DIR) / str(user_id)
        self.memory_dir.mkdir(parents=True, exist_ok=True)
        self.memory_file = self.memory_dir / "memory.json"
        self.log_file = self.memory_dir / "memory_log.jsonl"
        self._data = self._load()

        try:
            progress = UserProgress.model_validate(self._data["progress"])
            self.profiles = ProfileStore.from_snapshot(self._data["career_profiles"])
        except (ValidationError, DebugMeError) as exc:
            raise InvalidArgument(f"Stored state for learner {user_id} is invalid: {exc}") from exc
        self.progression = ProgressionEngine(progress)

    def _load(self) -> dict:
        if self.memory_file.exists():
            try:
                with open(self.memory_file, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except json.JSONDecodeError as exc:
                raise InvalidArgument(f"Stored state for learner {self.user_id} is not JSON") from exc
            if not isinstance(data, dict) or "progress" not in data or "career_profiles" not in data:
                raise InvalidArgument(f"Stored state for learner {self.user_id} is malformed")
            return data
        return self._default_structure()

    def _default_structure(self) -> dict:
        return {
            "user_id": self.user_id,
            "created_at": datetime.utcnow().isoformat(),
            "updated_at": datetime.utcnow().isoformat(),
            "progress": UserProgress().model_dump(),
            "career_profiles": {"profiles": [], "selected": None},
        }

    def save(self):
        self._data["progress"] = self.progression.progress.model_dump()
        self._data["career_profiles"] = self.profiles.snapshot()
        self._data["updated_at"] = datetime.utcnow().isoformat()
        # readers only ever see the old file or the complete new one
        tmp_file = self.memory_file.with_name(self.memory_file.name + ".tmp")
        try:
            with open(tmp_file, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_file, self.memory_file)
        except Exception:
            tmp_file.unlink(missing_ok=True)
            raise

    def log_event(self, event_type: str, content: str):
        """Append an event to the memory log (immutable audit trail)."""
        entry = {
            "timestamp": datetime.utcnow().isoformat(),
            "type": event_type,
            "content": content,
        }
        with open(self.log_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry, ensure_ascii=False) + "\n")

    # ── Progression ────────────────────────────────────────────────────────

    def record_completion(self, kind: str, item_id: str, outcome: Optional[CompletionOutcome]):
        """Log what a lesson/challenge run changed and persist it."""
        if outcome is None or not outcome.newly_completed:
            return
        p = outcome.progress
        self.log_event(f"{kind}_completed", item_id)
        if outcome.leveled_up:
            print(f"[progress] learner {self.user_id} reached level {p.level}")
            self.log_event("level_up", f"level {p.level} (+{outcome.levels_gained})")
        for badge_id in outcome.badges:
            self.log_event("badge_earned", badge_id)
        self.save()

    def record_badge(self, badge_id: str):
        if badge_id in self.progression.progress.badges:
            return
        self.progression.earn_badge(badge_id)
        self.log_event("badge_earned", badge_id)
        self.save()

    # ── Career profiles ────────────────────────────────────────────────────

    def add_career_profile(self, profile, select: bool = True) -> int:
        index = self.profiles.add_profile(profile)
        self.log_event("profile_added", f"{index}: {profile.name}")
        if select:
            self.profiles.select_profile(index)
            self.log_event("profile_selected", str(index))
        self.save()
        return index

    def select_career_profile(self, index: Optional[int]):
        profile = self.profiles.select_profile(index)
        self.log_event("profile_selected", str(index))
        self.save()
        return profile

    # ── Getters ────────────────────────────────────────────────────────────

    @property
    def progress(self) -> UserProgress:
        return self.progression.progress

    @property
    def data(self) -> dict:
        return self._data


def get_learner_memory(user_id) -> LearnerMemory:
    return LearnerMemory(user_id)
