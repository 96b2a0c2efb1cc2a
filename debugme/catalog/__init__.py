"""
Reference Catalog
=================
Competencies, careers, learning paths, automation risks, lessons,
challenges and badges. Built once from the tables in this package,
validated at load and never mutated afterwards.
"""

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from pydantic import ValidationError

from ..errors import CatalogError, NotFound
from ..models import (
    AutomationRisk,
    Badge,
    CareerDefinition,
    Challenge,
    Competency,
    Lesson,
)
from .careers import CAREERS, COMPETENCIES, COMPETENCY_LEARNING_PATHS
from .content import BADGES, CHALLENGES, LESSONS
from .risks import AUTOMATION_RISKS


class Catalog:
    """Immutable, cross-checked view over all reference data."""

    def __init__(
        self,
        competencies: Iterable[Competency],
        careers: Iterable[CareerDefinition],
        learning_paths: Optional[Mapping[str, Sequence[str]]] = None,
        automation_risks: Optional[Mapping[str, AutomationRisk]] = None,
        lessons: Iterable[Lesson] = (),
        challenges: Iterable[Challenge] = (),
        badges: Iterable[Badge] = (),
    ):
        self.competencies = tuple(competencies)
        self.careers = tuple(careers)
        self.learning_paths = MappingProxyType(
            {name: tuple(paths) for name, paths in (learning_paths or {}).items()}
        )
        self.automation_risks = MappingProxyType(dict(automation_risks or {}))
        self.lessons = tuple(lessons)
        self.challenges = tuple(challenges)
        self.badges = tuple(badges)
        self._validate()

    # ── Validation ─────────────────────────────────────────────────────────

    def _validate(self):
        _require_unique("competency", [c.name for c in self.competencies])
        _require_unique("career", [c.name for c in self.careers])
        _require_unique("lesson", [l.id for l in self.lessons])
        _require_unique("challenge", [c.id for c in self.challenges])
        _require_unique("badge", [b.id for b in self.badges])

        known = set(self.competency_names)
        for career in self.careers:
            unknown = set(career.required_competencies) - known
            if unknown:
                raise CatalogError(f"Career {career.name!r} requires unknown competencies: {sorted(unknown)}")

        unknown = set(self.learning_paths) - known
        if unknown:
            raise CatalogError(f"Learning paths for unknown competencies: {sorted(unknown)}")

        career_names = {c.name for c in self.careers}
        for career_name, risk in self.automation_risks.items():
            if career_name not in career_names:
                raise CatalogError(f"Automation risk for unknown career {career_name!r}")
            _require_unique(f"{career_name} complementary skill", risk.complementary_skills)
            unknown = set(risk.complementary_skills) - known
            if unknown:
                raise CatalogError(
                    f"Automation risk for {career_name!r} lists unknown skills: {sorted(unknown)}"
                )

    # ── Lookups ────────────────────────────────────────────────────────────

    @property
    def competency_names(self) -> List[str]:
        return [c.name for c in self.competencies]

    def career(self, name: str) -> CareerDefinition:
        for career in self.careers:
            if career.name == name:
                return career
        raise NotFound(f"Unknown career: {name}")

    def lesson(self, lesson_id: str) -> Lesson:
        for lesson in self.lessons:
            if lesson.id == lesson_id:
                return lesson
        raise NotFound(f"Unknown lesson: {lesson_id}")

    def challenge(self, challenge_id: str) -> Challenge:
        for challenge in self.challenges:
            if challenge.id == challenge_id:
                return challenge
        raise NotFound(f"Unknown challenge: {challenge_id}")

    def badge(self, badge_id: str) -> Badge:
        for badge in self.badges:
            if badge.id == badge_id:
                return badge
        raise NotFound(f"Unknown badge: {badge_id}")


def _require_unique(kind: str, keys: Sequence[str]):
    seen = set()
    for key in keys:
        if key in seen:
            raise CatalogError(f"Duplicate {kind}: {key!r}")
        seen.add(key)


def load_catalog(
    competencies: Sequence[dict] = COMPETENCIES,
    careers: Sequence[dict] = CAREERS,
    learning_paths: Dict[str, List[str]] = COMPETENCY_LEARNING_PATHS,
    automation_risks: Dict[str, dict] = AUTOMATION_RISKS,
    lessons: Sequence[dict] = LESSONS,
    challenges: Sequence[dict] = CHALLENGES,
    badges: Sequence[dict] = BADGES,
) -> Catalog:
    """Build a Catalog from raw tables. Defaults to the bundled data."""
    try:
        return Catalog(
            competencies=[Competency.model_validate(c) for c in competencies],
            careers=[CareerDefinition.model_validate(c) for c in careers],
            learning_paths=learning_paths,
            automation_risks={
                name: AutomationRisk.model_validate(risk) for name, risk in automation_risks.items()
            },
            lessons=[Lesson.model_validate(l) for l in lessons],
            challenges=[Challenge.model_validate(c) for c in challenges],
            badges=[Badge.model_validate(b) for b in badges],
        )
    except ValidationError as exc:
        raise CatalogError(f"Invalid catalog data: {exc}") from exc


_catalog: Catalog | None = None


def get_catalog() -> Catalog:
    """Process-wide catalog, loaded on first use."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog()
    return _catalog


__all__ = ["Catalog", "load_catalog", "get_catalog"]
