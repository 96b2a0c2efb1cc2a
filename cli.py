#!/usr/bin/env python3
"""
DebugMe CLI
===========
Interactive terminal interface for DebugMe.
Take lessons, solve challenges, manage career profiles and chat with
BuggyChat without running the web server.

Usage:
    python cli.py
"""

import os
import sys
from pathlib import Path

# Ensure we can import debugme
sys.path.insert(0, str(Path(__file__).parent))

# Load .env
from dotenv import load_dotenv
load_dotenv()

from debugme.config import settings
from debugme.catalog import get_catalog
from debugme.engine import ChallengeSession, LessonSession, RecommendationEngine, create_draft_profile
from debugme.agents import TutorConversation, TutorSnapshot
from debugme.errors import DebugMeError
from debugme.memory import get_learner_memory
from debugme.models import Profile


# ── UI helpers ──────────────────────────────────────────────────────────────

def clr():
    os.system("clear" if os.name != "nt" else "cls")

def header():
    print("\n" + "="*60)
    print("        DebugMe  — Learn to code, find your career")
    print("="*60)

def section(title: str):
    print(f"\n{'─'*55}")
    print(f"  {title}")
    print("─"*55)

def ask(prompt: str, default: str = "") -> str:
    if default:
        val = input(f"{prompt} [{default}]: ").strip()
        return val or default
    return input(f"{prompt}: ").strip()

def ask_int(prompt: str, default: str = ""):
    try:
        return int(ask(prompt, default))
    except ValueError:
        return None


def show_progress(mem):
    engine = mem.progression
    p = engine.progress
    bar = "#" * int(engine.level_progress / 5)
    print(f"\n  {engine.character_title} — Level {p.level}")
    print(f"  XP {p.xp}/{p.xp_to_next_level}  [{bar:<20}]  {engine.xp_remaining} to next level")
    print(f"  Lessons: {len(p.completed_lessons)} | Challenges: {len(p.completed_challenges)} | Badges: {len(p.badges)}")


def show_outcome(outcome):
    if outcome is None or not outcome.newly_completed:
        return
    catalog = get_catalog()
    if outcome.leveled_up:
        print(f"\n  LEVEL UP! You are now level {outcome.progress.level}.")
    for badge_id in outcome.badges:
        print(f"  Badge earned: {catalog.badge(badge_id).name}")


# ── Flows ───────────────────────────────────────────────────────────────────

def flow_lesson(mem):
    section("LESSONS")
    catalog = get_catalog()
    engine = mem.progression

    for i, lesson in enumerate(catalog.lessons, 1):
        if lesson.id in engine.progress.completed_lessons:
            mark = "✓"
        elif engine.is_unlocked(lesson.required_level):
            mark = " "
        else:
            mark = "🔒"
        print(f"  {i}. [{mark}] {lesson.title} ({lesson.difficulty}, +{lesson.xp_reward} XP, level {lesson.required_level})")

    idx = ask_int("Which lesson? (number)")
    if idx is None or not 1 <= idx <= len(catalog.lessons):
        return
    lesson = catalog.lessons[idx - 1]
    if not engine.is_unlocked(lesson.required_level):
        print(f"\nLocked: reach level {lesson.required_level} first.")
        return

    session = LessonSession(lesson, engine)
    print(f"\n{'='*55}")
    print(f"  {lesson.title}")
    print(f"{'='*55}")
    print(lesson.explanation)
    print(f"\nExample:\n{lesson.example}\n")
    ask("Press Enter to take the quiz", "ok")

    session.start_quiz()
    while True:
        question = lesson.quiz[session.question_index]
        print(f"\n  {question.question}")
        for n, option in enumerate(question.options, 1):
            print(f"    {n}. {option}")
        choice = ask_int("Answer")
        if choice is None:
            continue
        try:
            result = session.answer(choice - 1)
        except DebugMeError as e:
            print(f"  {e}")
            continue
        print("  Correct!" if result.correct else "  Not quite.")
        if result.passed is None:
            continue

        if result.passed:
            print(f"\n  Lesson complete!" + ("" if result.outcome.newly_completed else " (already completed, no XP)"))
            mem.record_completion("lesson", lesson.id, result.outcome)
            show_outcome(result.outcome)
            break
        if ask("Quiz failed. Retake? [y/n]", "y").lower() != "y":
            break
        session.retake()


def flow_challenge(mem):
    section("CHALLENGES")
    catalog = get_catalog()
    engine = mem.progression

    for i, challenge in enumerate(catalog.challenges, 1):
        if challenge.id in engine.progress.completed_challenges:
            mark = "✓"
        elif engine.is_unlocked(challenge.required_level):
            mark = " "
        else:
            mark = "🔒"
        print(f"  {i}. [{mark}] {challenge.title} ({challenge.difficulty}, +{challenge.xp_reward} XP, level {challenge.required_level})")

    idx = ask_int("Which challenge? (number)")
    if idx is None or not 1 <= idx <= len(catalog.challenges):
        return
    challenge = catalog.challenges[idx - 1]
    if not engine.is_unlocked(challenge.required_level):
        print(f"\nLocked: reach level {challenge.required_level} first.")
        return

    session = ChallengeSession(challenge, engine)
    print(f"\n{'='*55}")
    print(f"  {challenge.title}")
    print(f"{'='*55}")
    print(challenge.problem)
    print(f"\nStarter code:\n{challenge.starter_code}\n")
    session.start()

    while True:
        print("Type your code. Finish with a line containing only 'END'. Commands: 'hints' | 'back'")
        first = input()
        if first.strip().lower() == "back":
            break
        if first.strip().lower() == "hints":
            for hint in session.show_hints():
                print(f"  Hint: {hint}")
            continue
        lines = [first]
        while True:
            line = input()
            if line.strip() == "END":
                break
            lines.append(line)

        result = session.submit("\n".join(lines))
        for test in result.results:
            print(f"  {'✓' if test.passed else '✗'} {test.message}")
        if result.all_passed:
            mem.record_completion("challenge", challenge.id, result.outcome)
            print("\n  Challenge solved!")
            show_outcome(result.outcome)
            break
        if ask("Try again? [y/n]", "y").lower() != "y":
            break
        session.retry()


def flow_profiles(mem):
    section("CAREER PROFILES")
    catalog = get_catalog()
    store = mem.profiles

    for i, profile in enumerate(store.profiles):
        selected = "*" if i == store.selected_index else " "
        print(f"  {selected} {i}. {profile.name}")
    print("\n  n  New profile | s  Select profile | c  Clear selection | Enter  back")
    choice = ask("Choice").lower()

    try:
        if choice == "n":
            name = ask("Profile name")
            ratings = create_draft_profile(catalog.competencies)
            print("Rate each competency from 1 to 5:")
            for comp in catalog.competencies:
                level = ask_int(f"  {comp.name} ({comp.category.value})", "1")
                ratings[comp.name] = level if level is not None else 1
            index = mem.add_career_profile(Profile(name=name, competencies=ratings))
            print(f"\nSaved and selected profile #{index}.")
        elif choice == "s":
            index = ask_int("Profile number")
            if index is not None:
                print(f"\nSelected: {mem.select_career_profile(index).name}")
        elif choice == "c":
            mem.select_career_profile(None)
            print("\nSelection cleared.")
    except DebugMeError as e:
        print(f"\nError: {e}")


def flow_careers(mem):
    section("CAREER MATCHES")
    profile = mem.profiles.selected
    if profile is None:
        print("No profile selected. Create one from the profiles menu first.")
        return
    engine = RecommendationEngine(get_catalog())

    print(f"\n  Profile: {profile.name}")
    print(f"\n  TOP MATCHES:")
    for result in engine.recommend_careers(profile, settings.RECOMMENDATION_LIMIT):
        risk = engine.automation_risk_for(result.career.name)
        print(f"  • {result.career.name} — {result.score:.1f}% match | automation risk: {risk.level.value} ({risk.percentage}%)")
        for step in result.career.learning_path:
            print(f"      - {step}")

    recommendations = engine.recommend_learning_paths(profile)
    if recommendations:
        print(f"\n  AREAS TO IMPROVE:")
        for rec in recommendations:
            print(f"  [{rec.level}/5] {rec.competency}")
            for path in rec.paths:
                print(f"        {path}")


def flow_chat(mem):
    section("BUGGYCHAT")
    print("Ask about your lessons or your career.")
    print("Commands: 'clear' — new conversation | 'back' or 'q' — return to menu\n")

    conversation = TutorConversation(get_catalog())
    while True:
        try:
            user_input = ask("You").strip()
        except (KeyboardInterrupt, EOFError):
            conversation.cancel()
            print("\n\nReturning to menu...")
            break
        if not user_input:
            continue
        if user_input.lower() in ("quit", "exit", "q", "back"):
            conversation.cancel()
            break
        if user_input.lower() == "clear":
            conversation.clear()
            print("\nConversation cleared.\n")
            continue

        selected = mem.profiles.selected
        snapshot = TutorSnapshot(
            completed_lessons=tuple(mem.progress.completed_lessons),
            profile=selected.model_copy(deep=True) if selected else None,
        )
        try:
            reply = conversation.send(user_input, snapshot)
        except DebugMeError as e:
            print(f"\nBuggyChat: {e}\n")
            continue
        if reply is not None:
            print(f"\nBuggyChat: {reply}\n")


# ── Main ─────────────────────────────────────────────────────────────────────

def main():
    clr()
    header()

    if not settings.OPENAI_API_KEY:
        print("\n⚠  OPENAI_API_KEY not set — BuggyChat is disabled.")

    user_id = ask("\nLearner id", "1")
    try:
        mem = get_learner_memory(user_id)
    except DebugMeError as e:
        print(f"\nERROR: {e}")
        sys.exit(1)

    print(f"\nWelcome to DebugMe!")
    show_progress(mem)

    while True:
        section("MAIN MENU")
        print("  1  Take a lesson")
        print("  2  Solve a challenge")
        print("  3  Career profiles")
        print("  4  Career matches & learning paths")
        print("  5  Chat with BuggyChat")
        print("  6  View my progress")
        print("  0  Exit")

        choice = ask("\nChoice")

        if choice == "1":
            flow_lesson(mem)

        elif choice == "2":
            flow_challenge(mem)

        elif choice == "3":
            flow_profiles(mem)

        elif choice == "4":
            flow_careers(mem)

        elif choice == "5":
            flow_chat(mem)

        elif choice == "6":
            section("YOUR PROGRESS")
            show_progress(mem)
            if mem.progress.badges:
                catalog = get_catalog()
                print("\n  Badges:")
                for badge_id in mem.progress.badges:
                    badge = catalog.badge(badge_id)
                    print(f"  ★ {badge.name} — {badge.description}")

        elif choice == "0":
            print("\nGoodbye! Keep coding! \n")
            break


if __name__ == "__main__":
    main()
