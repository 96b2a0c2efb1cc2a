"""
Tutor Agent  (BuggyChat)
========================
Programming tutor and career advisor on top of the chat model.

The agent only ever sees a snapshot taken when a message is sent: the ids of
completed lessons and the selected career profile. Replies are plain text.
A failed call, or one whose conversation was cancelled meanwhile, leaves
the learner's state exactly as it was.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import openai

from ..ai_client import chat
from ..catalog import Catalog
from ..engine.recommendation import GAP_THRESHOLD, RecommendationEngine
from ..errors import TutorUnavailable
from ..models import Lesson, Profile

TUTOR_SYSTEM = """You are BuggyChat, a friendly and helpful AI tutor for DebugMe. You have TWO main roles:

=== ROLE 1: PROGRAMMING TUTOR ===
1. Answer questions about the programming lessons the user has already completed. Use the lesson content provided below as your reference.
2. Teach new programming concepts and topics that the user asks about, even if they haven't covered them in lessons yet.
3. Provide clear, beginner-friendly explanations with code examples when appropriate.
4. Be encouraging and supportive, helping users understand programming concepts step by step.

=== ROLE 2: CAREER GUIDANCE ADVISOR ===
Help with career paths, upskilling, reskilling, job interviews and automation risk.
- Career recommendations: compatibility = sum((level / 5) * weight) / sum(weights) * 100. Recommend the highest scores and explain the fit.
- Upskilling: skills below level 3 need work; suggest the matching learning paths.
- Reskilling: name the gaps between the profile and the target career and which to close first.
- Interviews: technical questions for the role, behavioral questions with the STAR method.
- Automation risk: high-level overview first (level, percentage); give the task breakdown, adaptation strategies and complementary skills when asked for detail.

When a profile exists, personalise. When it doesn't, still answer and mention that creating a profile gives personalised advice.
Keep explanations clear and well-structured, and use markdown."""


@dataclass(frozen=True)
class TutorSnapshot:
    """What the tutor may read about a learner at call time."""
    completed_lessons: tuple = ()
    profile: Optional[Profile] = None


def build_lesson_context(completed_ids: Sequence[str], lessons: Sequence[Lesson]) -> str:
    done = [lesson for lesson in lessons if lesson.id in set(completed_ids)]
    if not done:
        return "The user has not completed any lessons yet."

    lines = ["The user has completed the following lessons:", ""]
    for lesson in done:
        lines.append(f"Lesson: {lesson.title}")
        lines.append(f"Topic: {lesson.topic}")
        lines.append(f"Difficulty: {lesson.difficulty}")
        lines.append(f"Description: {lesson.description}")
        lines.append(f"Explanation: {lesson.explanation}")
        lines.append(f"Example:\n{lesson.example}")
        lines.append("")
    return "\n".join(lines)


def build_career_context(profile: Optional[Profile], catalog: Catalog) -> str:
    if profile is None:
        return ""
    engine = RecommendationEngine(catalog)

    lines = [
        "=== CAREER PROFILE CONTEXT ===",
        f'The user has a career profile named "{profile.name}" with the following '
        "competency levels (1-5 scale):",
        "",
    ]
    for comp in catalog.competencies:
        level = profile.competencies.get(comp.name, 0)
        lines.append(f"- {comp.name} ({comp.category.value}): Level {level}/5 - {comp.description}")

    lines.append("\nCareer Compatibility Scores (based on profile competencies):")
    for result in engine.all_scores(profile):
        lines.append(f"- {result.career.name}: {result.score:.1f}% match")

    weak = engine.recommend_learning_paths(profile)
    weak_names = {rec.competency for rec in weak}
    # ratings below the threshold that have no catalog path still deserve a mention
    extra = [
        (name, level) for name, level in profile.competencies.items()
        if level < GAP_THRESHOLD and name not in weak_names
    ]
    if weak or extra:
        lines.append(f"\nSkills needing improvement (below level {GAP_THRESHOLD}):")
        for rec in weak:
            lines.append(f"- {rec.competency}: Current level {rec.level}/5")
        for name, level in extra:
            lines.append(f"- {name}: Current level {level}/5")

    return "\n".join(lines)


def build_catalog_reference(catalog: Catalog) -> str:
    lines = ["=== AVAILABLE DATA ===", "", "Competencies (used for career matching):"]
    for comp in catalog.competencies:
        lines.append(f"- {comp.name} ({comp.category.value}): {comp.description}")

    lines.append("\nAvailable Careers:")
    for career in catalog.careers:
        comps = ", ".join(
            f"{name} ({weight * 100:.0f}%)" for name, weight in career.required_competencies.items()
        )
        lines.append(
            f"- {career.name}: Requires {comps}. Learning path: {'; '.join(career.learning_path)}"
        )

    lines.append("\nAutomation Risk Data:")
    for career_name, risk in catalog.automation_risks.items():
        lines.append(f"- {career_name}: {risk.level.value} risk ({risk.percentage}% automation risk)")
        lines.append("  Task breakdown:")
        for task in risk.task_breakdown:
            lines.append(
                f"    - {task.task}: {task.risk_level.value} risk ({task.automation_likelihood})"
            )
        lines.append(f"  Adaptation strategies: {'; '.join(risk.adaptation_strategies)}")
        lines.append(f"  Complementary skills: {', '.join(risk.complementary_skills)}")

    lines.append("\nCompetency Learning Paths:")
    for name, paths in catalog.learning_paths.items():
        lines.append(f"- {name}: {'; '.join(paths)}")
    return "\n".join(lines)


def build_system_prompt(snapshot: TutorSnapshot, catalog: Catalog) -> str:
    parts = [
        TUTOR_SYSTEM,
        build_lesson_context(snapshot.completed_lessons, catalog.lessons),
    ]
    career_context = build_career_context(snapshot.profile, catalog)
    if career_context:
        parts.append(career_context)
    parts.append(build_catalog_reference(catalog))
    return "\n\n".join(parts)


def send_message(
    message: str,
    conversation_history: List[dict],
    snapshot: TutorSnapshot,
    catalog: Catalog,
) -> str:
    """Ask the tutor. Raises TutorUnavailable with a user-facing message."""
    messages = [
        {"role": m["role"], "content": m["content"]}
        for m in conversation_history
        if m.get("role") in ("user", "assistant") and isinstance(m.get("content"), str)
    ]
    messages.append({"role": "user", "content": message})

    try:
        return chat(messages=messages, system=build_system_prompt(snapshot, catalog))
    except openai.AuthenticationError as exc:
        raise TutorUnavailable("OpenAI API key is missing or invalid. Please check your .env file.") from exc
    except openai.RateLimitError as exc:
        raise TutorUnavailable("Rate limit exceeded. Please try again in a moment.") from exc
    except openai.APIConnectionError as exc:
        raise TutorUnavailable("Network error. Please check your internet connection.") from exc
    except openai.OpenAIError as exc:
        print(f"[tutor] model call failed: {exc}")
        raise TutorUnavailable("Failed to get response from AI. Please try again.") from exc


@dataclass
class TutorConversation:
    """Chat history for one open chat window.

    ``cancel()`` and ``clear()`` invalidate any reply still in flight: a reply
    is only appended if no cancel/clear happened since its request was sent.
    """
    catalog: Catalog
    history: List[dict] = field(default_factory=list)
    generation: int = 0

    def send(self, message: str, snapshot: TutorSnapshot) -> Optional[str]:
        started = self.generation
        history = list(self.history)
        reply = send_message(message, history, snapshot, self.catalog)
        if started != self.generation:
            print("[tutor] reply discarded: conversation was cancelled")
            return None
        self.history = history + [
            {"role": "user", "content": message},
            {"role": "assistant", "content": reply},
        ]
        return reply

    def cancel(self):
        self.generation += 1

    def clear(self):
        self.generation += 1
        self.history = []
