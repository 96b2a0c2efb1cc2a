from fastapi import APIRouter
from pydantic import BaseModel
from typing import List

from ...catalog import get_catalog
from ...engine.sessions import ChallengeSession, LessonSession
from ...errors import DebugMeError, PreconditionViolation
from ...memory.learner_memory import LearnerMemory, get_learner_memory
from ..errors import to_http

router = APIRouter()

# Handlers are async and never await between loading and saving a learner,
# so writes for one learner are applied one at a time on the event loop.


class QuizSubmission(BaseModel):
    answers: List[int]


class CodeSubmission(BaseModel):
    code: str


def progress_view(mem: LearnerMemory) -> dict:
    engine = mem.progression
    return {
        **engine.progress.model_dump(),
        "total_xp": engine.total_xp,
        "level_progress": round(engine.level_progress, 1),
        "xp_remaining": engine.xp_remaining,
        "character_title": engine.character_title,
    }


def _outcome_view(outcome) -> dict:
    if outcome is None:
        return {"newly_completed": False, "leveled_up": False, "badges": []}
    return {
        "newly_completed": outcome.newly_completed,
        "leveled_up": outcome.leveled_up,
        "levels_gained": outcome.levels_gained,
        "badges": outcome.badges,
    }


@router.get("/{user_id}")
async def get_progress(user_id: int):
    """Level, XP, completions and badges for a learner."""
    try:
        mem = get_learner_memory(user_id)
    except DebugMeError as exc:
        raise to_http(exc)
    return progress_view(mem)


@router.post("/{user_id}/lessons/{lesson_id}/quiz")
async def submit_lesson_quiz(user_id: int, lesson_id: str, submission: QuizSubmission):
    """Grade a full quiz run. A perfect run completes the lesson (once)."""
    try:
        lesson = get_catalog().lesson(lesson_id)
        mem = get_learner_memory(user_id)
        if not mem.progression.is_unlocked(lesson.required_level):
            raise PreconditionViolation(f"Lesson {lesson_id} unlocks at level {lesson.required_level}")
        session = LessonSession(lesson, mem.progression)
        was_completed = session.already_completed
        result = session.run(submission.answers)
        mem.record_completion("lesson", lesson_id, result.outcome)
    except DebugMeError as exc:
        raise to_http(exc)

    return {
        "lesson_id": lesson_id,
        "passed": result.passed,
        "already_completed": was_completed,
        **_outcome_view(result.outcome),
        "progress": progress_view(mem),
    }


@router.post("/{user_id}/challenges/{challenge_id}/submit")
async def submit_challenge(user_id: int, challenge_id: str, submission: CodeSubmission):
    """Run the placeholder grader. Passing completes the challenge (once)."""
    try:
        challenge = get_catalog().challenge(challenge_id)
        mem = get_learner_memory(user_id)
        if not mem.progression.is_unlocked(challenge.required_level):
            raise PreconditionViolation(
                f"Challenge {challenge_id} unlocks at level {challenge.required_level}"
            )
        session = ChallengeSession(challenge, mem.progression)
        was_completed = session.already_completed
        session.start()
        result = session.submit(submission.code)
        mem.record_completion("challenge", challenge_id, result.outcome)
    except DebugMeError as exc:
        raise to_http(exc)

    return {
        "challenge_id": challenge_id,
        "all_passed": result.all_passed,
        "tests": [{"passed": r.passed, "message": r.message} for r in result.results],
        "already_completed": was_completed,
        **_outcome_view(result.outcome),
        "progress": progress_view(mem),
    }


@router.post("/{user_id}/badges/{badge_id}")
async def earn_badge(user_id: int, badge_id: str):
    """Unlock a catalog badge. Earning it again changes nothing."""
    try:
        get_catalog().badge(badge_id)
        mem = get_learner_memory(user_id)
        mem.record_badge(badge_id)
    except DebugMeError as exc:
        raise to_http(exc)
    return progress_view(mem)
