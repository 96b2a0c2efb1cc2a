from fastapi import APIRouter
from pydantic import BaseModel
from typing import Dict, Optional

from ...catalog import get_catalog
from ...engine.profiles import create_draft_profile, require_known_competencies
from ...errors import DebugMeError
from ...memory.learner_memory import LearnerMemory, get_learner_memory
from ...models import Profile
from ..errors import to_http

router = APIRouter()


class ProfileInput(BaseModel):
    name: str
    competencies: Dict[str, int]
    select: bool = True


class SelectRequest(BaseModel):
    index: Optional[int] = None


def profiles_view(mem: LearnerMemory) -> dict:
    store = mem.profiles
    return {
        "profiles": [p.model_dump() for p in store.profiles],
        "selected_index": store.selected_index,
        "selected": store.selected.model_dump() if store.selected else None,
    }


@router.get("/draft")
async def get_draft_profile():
    """Every catalog competency pre-rated at 1."""
    return {"name": "", "competencies": create_draft_profile(get_catalog().competencies)}


@router.get("/{user_id}")
async def list_profiles(user_id: int):
    try:
        mem = get_learner_memory(user_id)
    except DebugMeError as exc:
        raise to_http(exc)
    return profiles_view(mem)


@router.post("/{user_id}")
async def create_profile(user_id: int, body: ProfileInput):
    """Store a new competency profile; selects it unless select=false."""
    try:
        require_known_competencies(body.competencies, get_catalog().competency_names)
        mem = get_learner_memory(user_id)
        index = mem.add_career_profile(
            Profile(name=body.name, competencies=body.competencies), select=body.select
        )
    except DebugMeError as exc:
        raise to_http(exc)
    return {"index": index, **profiles_view(mem)}


@router.post("/{user_id}/select")
async def select_profile(user_id: int, body: SelectRequest):
    """Select a profile by index, or clear the selection with index=null."""
    try:
        mem = get_learner_memory(user_id)
        mem.select_career_profile(body.index)
    except DebugMeError as exc:
        raise to_http(exc)
    return profiles_view(mem)
