from dataclasses import asdict

from fastapi import APIRouter, Query
from typing import Optional

from ...catalog import get_catalog
from ...config import settings
from ...engine.recommendation import RecommendationEngine
from ...errors import DebugMeError
from ...memory.learner_memory import get_learner_memory
from ..errors import to_http

router = APIRouter()


def _engine() -> RecommendationEngine:
    return RecommendationEngine(get_catalog())


@router.get("")
async def list_careers():
    """Career catalog with weights and learning paths."""
    return {"careers": [c.model_dump() for c in get_catalog().careers]}


@router.get("/risk/{career_name}")
async def automation_risk(career_name: str):
    try:
        risk = _engine().automation_risk_for(career_name)
    except DebugMeError as exc:
        raise to_http(exc)
    return {"career": career_name, **risk.model_dump(mode="json")}


@router.get("/{user_id}/recommendations")
async def recommend_careers(user_id: int, limit: Optional[int] = Query(None, ge=0)):
    """Best career matches for the learner's selected profile."""
    try:
        mem = get_learner_memory(user_id)
        profile = mem.profiles.selected
        results = _engine().recommend_careers(
            profile, settings.RECOMMENDATION_LIMIT if limit is None else limit
        )
    except DebugMeError as exc:
        raise to_http(exc)

    return {
        "profile": profile.name if profile else None,
        "recommendations": [
            {
                "career": r.career.name,
                "score": round(r.score, 1),
                "learning_path": r.career.learning_path,
            }
            for r in results
        ],
        **({} if profile else {"message": "No profile selected"}),
    }


@router.get("/{user_id}/learning-paths")
async def learning_paths(user_id: int):
    """Learning suggestions for every competency rated below 3."""
    try:
        mem = get_learner_memory(user_id)
        profile = mem.profiles.selected
        recommendations = _engine().recommend_learning_paths(profile)
    except DebugMeError as exc:
        raise to_http(exc)
    return {
        "profile": profile.name if profile else None,
        "recommendations": [asdict(r) for r in recommendations],
    }


@router.get("/{user_id}/gaps/{career_name}")
async def career_gaps(user_id: int, career_name: str):
    """What stands between the selected profile and a target career."""
    try:
        mem = get_learner_memory(user_id)
        profile = mem.profiles.selected
        engine = _engine()
        gaps = engine.skill_gaps(profile, career_name)
        career = get_catalog().career(career_name)
    except DebugMeError as exc:
        raise to_http(exc)
    return {
        "career": career_name,
        "score": round(engine.score_career(career, profile.competencies if profile else {}), 1),
        "gaps": [{**asdict(g), "weighted_gap": round(g.weighted_gap, 3)} for g in gaps],
        "learning_path": career.learning_path,
    }
