from .progression import CompletionOutcome, ProgressionEngine, character_title
from .profiles import ProfileStore, create_draft_profile, require_known_competencies, validate_profile
from .recommendation import (
    LearningRecommendation,
    RecommendationEngine,
    SkillGap,
    automation_risk_for,
    recommend_careers,
    recommend_learning_paths,
    score_career,
    skill_gaps,
)
from .sessions import ChallengeSession, LessonSession, run_stub_tests

__all__ = [
    "CompletionOutcome", "ProgressionEngine", "character_title",
    "ProfileStore", "create_draft_profile", "require_known_competencies", "validate_profile",
    "LearningRecommendation", "RecommendationEngine", "SkillGap",
    "automation_risk_for", "recommend_careers", "recommend_learning_paths",
    "score_career", "skill_gaps",
    "ChallengeSession", "LessonSession", "run_stub_tests",
]
