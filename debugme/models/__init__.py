from .progress import UserProgress
from .career import (
    AutomationRisk,
    CareerDefinition,
    CompatibilityResult,
    Competency,
    CompetencyCategory,
    Profile,
    RiskLevel,
    TaskRisk,
)
from .content import Badge, Challenge, Lesson, QuizQuestion, ChallengeTestCase

__all__ = [
    "UserProgress",
    "AutomationRisk", "CareerDefinition", "CompatibilityResult", "Competency",
    "CompetencyCategory", "Profile", "RiskLevel", "TaskRisk",
    "Badge", "Challenge", "Lesson", "QuizQuestion", "ChallengeTestCase",
]
