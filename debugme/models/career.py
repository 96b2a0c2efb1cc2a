from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, List


class CompetencyCategory(str, Enum):
    TECHNICAL = "Technical"
    BEHAVIORAL = "Behavioral"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Competency(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    category: CompetencyCategory
    description: str = ""


class CareerDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    required_competencies: Dict[str, float] = Field(default_factory=dict)  # name -> weight
    learning_path: List[str] = Field(default_factory=list)

    @field_validator("required_competencies")
    @classmethod
    def _weights_in_range(cls, value: Dict[str, float]) -> Dict[str, float]:
        for name, weight in value.items():
            if not 0 < weight <= 1:
                raise ValueError(f"weight for {name!r} must be in (0, 1], got {weight}")
        return value


class Profile(BaseModel):
    name: str
    competencies: Dict[str, int] = Field(default_factory=dict)  # name -> level 1-5


class CompatibilityResult(BaseModel):
    career: CareerDefinition
    score: float


class TaskRisk(BaseModel):
    model_config = ConfigDict(frozen=True)

    task: str
    risk_level: RiskLevel
    automation_likelihood: str


class AutomationRisk(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: RiskLevel
    percentage: int = Field(..., ge=0, le=100)
    task_breakdown: List[TaskRisk] = Field(default_factory=list)
    adaptation_strategies: List[str] = Field(default_factory=list)
    complementary_skills: List[str] = Field(default_factory=list)
