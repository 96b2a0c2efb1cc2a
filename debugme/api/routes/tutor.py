from fastapi import APIRouter
from pydantic import BaseModel
from typing import List, Literal, Optional

from ...agents.tutor_agent import TutorSnapshot, build_system_prompt, send_message
from ...catalog import get_catalog
from ...errors import DebugMeError
from ...memory.learner_memory import LearnerMemory, get_learner_memory
from ..errors import to_http

router = APIRouter()


class ChatTurn(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    message: str
    user_id: Optional[int] = 1
    conversation_history: List[ChatTurn] = []


def _snapshot(mem: LearnerMemory) -> TutorSnapshot:
    selected = mem.profiles.selected
    return TutorSnapshot(
        completed_lessons=tuple(mem.progress.completed_lessons),
        profile=selected.model_copy(deep=True) if selected else None,
    )


@router.post("/chat")
def tutor_chat(request: ChatRequest):
    """Ask BuggyChat. Reads a snapshot of the learner; never changes it."""
    history = [turn.model_dump() for turn in request.conversation_history]
    user_id = 1 if request.user_id is None else request.user_id
    try:
        snapshot = _snapshot(get_learner_memory(user_id))
        reply = send_message(request.message, history, snapshot, get_catalog())
    except DebugMeError as exc:
        raise to_http(exc)

    return {
        "response": reply,
        "history": history + [
            {"role": "user", "content": request.message},
            {"role": "assistant", "content": reply},
        ],
    }


@router.get("/context/{user_id}")
async def get_tutor_context(user_id: int):
    """The system prompt the tutor would see right now."""
    try:
        snapshot = _snapshot(get_learner_memory(user_id))
    except DebugMeError as exc:
        raise to_http(exc)
    return {"context": build_system_prompt(snapshot, get_catalog())}
