"""
Progression Engine
==================
Turns completion events into XP, levels and badge eligibility for one learner.

Rules:
  - XP carries over between levels; every level-up multiplies the next
    threshold by 1.5 (floored). One award can cross several levels.
  - Completing the same lesson or challenge twice never awards XP twice.
  - Milestone badges fire when a completion set reaches an exact size, and
    only on the event that made it grow to that size.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..errors import InvalidArgument
from ..models.progress import BASE_XP_TO_NEXT_LEVEL, UserProgress

LEVEL_GROWTH = 1.5

FIRST_FIVE_BADGE = "first-five"
CHALLENGE_MASTER_BADGE = "challenge-master"

# set size -> badge id
LESSON_MILESTONES: Dict[int, str] = {5: FIRST_FIVE_BADGE}
CHALLENGE_MILESTONES: Dict[int, str] = {3: CHALLENGE_MASTER_BADGE}

CHARACTER_TITLES = [
    (5, "Code Apprentice"),
    (10, "Code Wizard"),
    (15, "Code Master"),
]


@dataclass
class CompletionOutcome:
    progress: UserProgress
    newly_completed: bool
    leveled_up: bool = False
    levels_gained: int = 0
    badges: List[str] = field(default_factory=list)   # badges now eligible


class ProgressionEngine:
    """Owns one UserProgress and is the only thing that mutates it."""

    def __init__(self, progress: Optional[UserProgress] = None):
        self.progress = progress if progress is not None else UserProgress()

    # ── Transitions ────────────────────────────────────────────────────────

    def add_xp(self, amount: int) -> UserProgress:
        _require_non_negative(amount, "XP amount")
        p = self.progress
        p.xp += amount
        while p.xp >= p.xp_to_next_level:
            p.xp -= p.xp_to_next_level
            p.level += 1
            p.xp_to_next_level = math.floor(p.xp_to_next_level * LEVEL_GROWTH)
        return p

    def complete_lesson(self, lesson_id: str, xp_reward: int) -> CompletionOutcome:
        return self._complete(
            self.progress.completed_lessons, lesson_id, xp_reward, LESSON_MILESTONES
        )

    def complete_challenge(self, challenge_id: str, xp_reward: int) -> CompletionOutcome:
        return self._complete(
            self.progress.completed_challenges, challenge_id, xp_reward, CHALLENGE_MILESTONES
        )

    def earn_badge(self, badge_id: str) -> UserProgress:
        _require_id(badge_id, "badge")
        if badge_id not in self.progress.badges:
            self.progress.badges.append(badge_id)
        return self.progress

    def _complete(self, completed: List[str], item_id: str, xp_reward: int,
                  milestones: Dict[int, str]) -> CompletionOutcome:
        _require_id(item_id, "completion")
        _require_non_negative(xp_reward, "XP reward")

        if item_id in completed:
            return CompletionOutcome(progress=self.progress, newly_completed=False)

        completed.append(item_id)
        level_before = self.progress.level
        self.add_xp(xp_reward)
        gained = self.progress.level - level_before

        badge = milestones.get(len(completed))
        return CompletionOutcome(
            progress=self.progress,
            newly_completed=True,
            leveled_up=gained > 0,
            levels_gained=gained,
            badges=[badge] if badge else [],
        )

    # ── Read models ────────────────────────────────────────────────────────

    def is_unlocked(self, required_level: int) -> bool:
        return self.progress.level >= required_level

    @property
    def total_xp(self) -> int:
        """XP earned since level 1, replaying the threshold sequence."""
        total = self.progress.xp
        threshold = BASE_XP_TO_NEXT_LEVEL
        for _ in range(self.progress.level - 1):
            total += threshold
            threshold = math.floor(threshold * LEVEL_GROWTH)
        return total

    @property
    def level_progress(self) -> float:
        return self.progress.xp / self.progress.xp_to_next_level * 100

    @property
    def xp_remaining(self) -> int:
        return self.progress.xp_to_next_level - self.progress.xp

    @property
    def character_title(self) -> str:
        return character_title(self.progress.level)


def character_title(level: int) -> str:
    for ceiling, title in CHARACTER_TITLES:
        if level < ceiling:
            return title
    return "Code Grandmaster"


def _require_non_negative(value, what: str):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{what} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidArgument(f"{what} must be non-negative, got {value}")


def _require_id(value, what: str):
    if not isinstance(value, str) or not value:
        raise InvalidArgument(f"{what} id must be a non-empty string")
