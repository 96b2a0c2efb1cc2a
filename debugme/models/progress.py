from pydantic import BaseModel, Field, model_validator
from typing import List

BASE_XP_TO_NEXT_LEVEL = 100


class UserProgress(BaseModel):
    level: int = Field(1, ge=1)
    xp: int = Field(0, ge=0)                                   # XP inside the current level
    xp_to_next_level: int = Field(BASE_XP_TO_NEXT_LEVEL, gt=0)
    streak: int = Field(0, ge=0)                               # days
    completed_lessons: List[str] = Field(default_factory=list)      # ordered, unique
    completed_challenges: List[str] = Field(default_factory=list)   # ordered, unique
    badges: List[str] = Field(default_factory=list)                 # ordered, unique
    character_type: str = "wizard"

    @model_validator(mode="after")
    def _check_invariants(self):
        if self.xp >= self.xp_to_next_level:
            raise ValueError(
                f"xp ({self.xp}) must stay below xp_to_next_level ({self.xp_to_next_level})"
            )
        for field_name in ("completed_lessons", "completed_challenges", "badges"):
            ids = getattr(self, field_name)
            if len(set(ids)) != len(ids):
                raise ValueError(f"{field_name} contains duplicate ids")
        return self
