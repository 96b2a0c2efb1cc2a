from fastapi import APIRouter

from ...catalog import get_catalog

router = APIRouter()


@router.get("/competencies")
async def list_competencies():
    return {"competencies": [c.model_dump(mode="json") for c in get_catalog().competencies]}


@router.get("/lessons")
async def list_lessons():
    lessons = []
    for lesson in get_catalog().lessons:
        data = lesson.model_dump()
        # keep the answer key on the server
        data["quiz"] = [{"question": q.question, "options": q.options} for q in lesson.quiz]
        lessons.append(data)
    return {"lessons": lessons}


@router.get("/challenges")
async def list_challenges():
    return {
        "challenges": [c.model_dump(exclude={"solution"}) for c in get_catalog().challenges]
    }


@router.get("/badges")
async def list_badges():
    return {"badges": [b.model_dump() for b in get_catalog().badges]}
