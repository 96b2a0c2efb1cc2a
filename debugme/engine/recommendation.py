"""
Recommendation Engine
=====================
Pure functions from a competency profile to career fit and learning advice.
Nothing here mutates state, so every call is safe to run concurrently.

Compatibility score for a career:

    sum((level / 5) * weight) / sum(weight) * 100

A competency the profile never rated counts as level 0.
"""

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence

from ..errors import InvalidArgument, NotFound
from ..models import AutomationRisk, CareerDefinition, CompatibilityResult, Profile
from .profiles import MAX_RATING

DEFAULT_LIMIT = 3
GAP_THRESHOLD = 3   # ratings below this are improvement areas


@dataclass
class LearningRecommendation:
    competency: str
    level: int
    paths: List[str]


@dataclass
class SkillGap:
    competency: str
    weight: float
    current: int
    target: int
    gap: int

    @property
    def weighted_gap(self) -> float:
        return self.gap * self.weight


def score_career(career: CareerDefinition, competencies: Mapping[str, int]) -> float:
    sum_weights = sum(career.required_competencies.values())
    if sum_weights == 0:
        return 0.0
    contribution = 0.0
    for name, weight in career.required_competencies.items():
        level = competencies.get(name, 0)
        contribution += (level / MAX_RATING) * weight
    return (contribution / sum_weights) * 100


def recommend_careers(
    profile: Optional[Profile],
    careers: Sequence[CareerDefinition],
    limit: int = DEFAULT_LIMIT,
) -> List[CompatibilityResult]:
    """Best matches first; equal scores keep catalog order."""
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
        raise InvalidArgument(f"limit must be a non-negative integer, got {limit!r}")
    if profile is None:
        return []
    results = [
        CompatibilityResult(career=career, score=score_career(career, profile.competencies))
        for career in careers
    ]
    # sorted() is stable, so ties stay in catalog order
    results = sorted(results, key=lambda r: r.score, reverse=True)
    return results[:limit]


def recommend_learning_paths(
    profile: Optional[Profile],
    paths_by_competency: Mapping[str, Sequence[str]],
    competency_order: Sequence[str] = (),
) -> List[LearningRecommendation]:
    """Suggestions for every rated competency below 3 that has catalog paths.

    Walks ``competency_order`` first, then any profile entries it does not
    name, in profile order.
    """
    if profile is None:
        return []
    order = list(competency_order)
    known = set(order)
    order += [name for name in profile.competencies if name not in known]

    recommendations = []
    for name in order:
        level = profile.competencies.get(name)
        if level is None or level >= GAP_THRESHOLD:
            continue
        paths = list(paths_by_competency.get(name) or [])
        if paths:
            recommendations.append(LearningRecommendation(competency=name, level=level, paths=paths))
    return recommendations


def automation_risk_for(career_name: str, risks: Mapping[str, AutomationRisk]) -> AutomationRisk:
    try:
        return risks[career_name]
    except KeyError:
        raise NotFound(f"No automation risk data for career: {career_name}") from None


def skill_gaps(profile: Optional[Profile], career: CareerDefinition) -> List[SkillGap]:
    """Distance to the top rating for each competency the career needs.

    Largest weighted gap first; equal gaps keep the career's declaration order.
    """
    competencies: Dict[str, int] = profile.competencies if profile else {}
    gaps = []
    for name, weight in career.required_competencies.items():
        current = competencies.get(name, 0)
        gaps.append(SkillGap(
            competency=name,
            weight=weight,
            current=current,
            target=MAX_RATING,
            gap=MAX_RATING - current,
        ))
    return sorted(gaps, key=lambda g: g.weighted_gap, reverse=True)


class RecommendationEngine:
    """Binds the pure functions above to one catalog."""

    def __init__(self, catalog):
        self.catalog = catalog

    def score_career(self, career: CareerDefinition, competencies: Mapping[str, int]) -> float:
        return score_career(career, competencies)

    def recommend_careers(self, profile: Optional[Profile], limit: int = DEFAULT_LIMIT) -> List[CompatibilityResult]:
        return recommend_careers(profile, self.catalog.careers, limit)

    def all_scores(self, profile: Optional[Profile]) -> List[CompatibilityResult]:
        return recommend_careers(profile, self.catalog.careers, len(self.catalog.careers))

    def recommend_learning_paths(self, profile: Optional[Profile]) -> List[LearningRecommendation]:
        return recommend_learning_paths(
            profile, self.catalog.learning_paths, self.catalog.competency_names
        )

    def automation_risk_for(self, career_name: str) -> AutomationRisk:
        return automation_risk_for(career_name, self.catalog.automation_risks)

    def skill_gaps(self, profile: Optional[Profile], career_name: str) -> List[SkillGap]:
        return skill_gaps(profile, self.catalog.career(career_name))
