import pytest

from debugme.engine.progression import (
    CHALLENGE_MASTER_BADGE,
    FIRST_FIVE_BADGE,
    ProgressionEngine,
    character_title,
)
from debugme.errors import InvalidArgument
from debugme.models import UserProgress


class TestAddXp:
    def test_new_learner_defaults(self, engine):
        p = engine.progress
        assert (p.level, p.xp, p.xp_to_next_level, p.streak) == (1, 0, 100, 0)
        assert p.completed_lessons == [] and p.completed_challenges == [] and p.badges == []

    def test_zero_is_a_no_op(self, engine):
        before = engine.progress.model_dump()
        engine.add_xp(0)
        assert engine.progress.model_dump() == before

    def test_below_threshold_stays_on_level(self, engine):
        engine.add_xp(99)
        assert engine.progress.level == 1
        assert engine.progress.xp == 99

    def test_exact_threshold_levels_up(self, engine):
        engine.add_xp(100)
        assert engine.progress.level == 2
        assert engine.progress.xp == 0
        assert engine.progress.xp_to_next_level == 150

    def test_multi_level_jump(self, engine):
        # 100 (level 1) + 150 (level 2) consumed in one award
        engine.add_xp(250)
        assert engine.progress.level == 3
        assert engine.progress.xp == 0
        assert engine.progress.xp_to_next_level == 225

    def test_threshold_is_floored(self, engine):
        engine.add_xp(100 + 150 + 225)
        assert engine.progress.level == 4
        assert engine.progress.xp_to_next_level == 337   # floor(225 * 1.5)

    def test_leftover_carries_over(self, engine):
        engine.add_xp(130)
        assert engine.progress.level == 2
        assert engine.progress.xp == 30

    def test_level_never_decreases_and_xp_stays_below_threshold(self, engine):
        previous_level = engine.progress.level
        for amount in [0, 30, 99, 1, 500, 7, 1000, 0, 3, 12345, 2]:
            engine.add_xp(amount)
            p = engine.progress
            assert p.level >= previous_level
            assert 0 <= p.xp < p.xp_to_next_level
            previous_level = p.level

    def test_negative_amount_rejected(self, engine):
        with pytest.raises(InvalidArgument):
            engine.add_xp(-1)
        assert engine.progress.xp == 0

    @pytest.mark.parametrize("amount", [1.5, "10", None, True])
    def test_non_integer_rejected(self, engine, amount):
        with pytest.raises(InvalidArgument):
            engine.add_xp(amount)


class TestCompleteLesson:
    def test_first_completion_awards_xp(self, engine):
        outcome = engine.complete_lesson("l1", 50)
        assert outcome.newly_completed
        assert not outcome.leveled_up
        assert engine.progress.xp == 50
        assert engine.progress.completed_lessons == ["l1"]

    def test_completing_twice_awards_once(self, engine):
        engine.complete_lesson("l1", 50)
        second = engine.complete_lesson("l1", 50)
        assert not second.newly_completed
        assert engine.progress.xp == 50
        assert engine.progress.completed_lessons.count("l1") == 1

    def test_reports_level_up(self, engine):
        outcome = engine.complete_lesson("big", 260)
        assert outcome.leveled_up
        assert outcome.levels_gained == 2

    def test_first_five_fires_on_fifth_lesson_only(self, engine):
        signalled = []
        for i in range(1, 8):
            outcome = engine.complete_lesson(f"lesson-{i}", 10)
            signalled.append(outcome.badges)
        assert signalled[4] == [FIRST_FIVE_BADGE]
        assert [b for i, b in enumerate(signalled) if i != 4] == [[]] * 6

    def test_repeat_of_fifth_lesson_does_not_fire_again(self, engine):
        for i in range(1, 6):
            engine.complete_lesson(f"lesson-{i}", 10)
        assert engine.complete_lesson("lesson-5", 10).badges == []

    def test_signal_does_not_earn_badge_by_itself(self, engine):
        for i in range(1, 6):
            engine.complete_lesson(f"lesson-{i}", 10)
        assert engine.progress.badges == []

    def test_negative_reward_rejected(self, engine):
        with pytest.raises(InvalidArgument):
            engine.complete_lesson("l1", -5)
        assert engine.progress.completed_lessons == []

    def test_empty_id_rejected(self, engine):
        with pytest.raises(InvalidArgument):
            engine.complete_lesson("", 10)

    def test_zero_reward_is_allowed(self, engine):
        assert engine.complete_lesson("free", 0).newly_completed
        assert engine.progress.xp == 0


class TestCompleteChallenge:
    def test_idempotent(self, engine):
        engine.complete_challenge("c1", 80)
        engine.complete_challenge("c1", 80)
        assert engine.progress.xp == 80
        assert engine.progress.completed_challenges == ["c1"]

    def test_challenge_master_on_third(self, engine):
        badges = [engine.complete_challenge(f"c{i}", 10).badges for i in range(1, 5)]
        assert badges == [[], [], [CHALLENGE_MASTER_BADGE], []]

    def test_lessons_and_challenges_are_separate(self, engine):
        engine.complete_lesson("x", 10)
        engine.complete_challenge("x", 10)
        assert engine.progress.xp == 20


class TestEarnBadge:
    def test_idempotent(self, engine):
        engine.earn_badge("first-five")
        engine.earn_badge("first-five")
        assert engine.progress.badges == ["first-five"]

    def test_empty_id_rejected(self, engine):
        with pytest.raises(InvalidArgument):
            engine.earn_badge("")


class TestReadModels:
    def test_total_xp_counts_previous_levels(self, engine):
        engine.add_xp(260)
        assert engine.total_xp == 260

    def test_level_progress_and_remaining(self, engine):
        engine.add_xp(25)
        assert engine.level_progress == 25.0
        assert engine.xp_remaining == 75

    def test_is_unlocked(self, engine):
        assert engine.is_unlocked(1)
        assert not engine.is_unlocked(2)
        engine.add_xp(100)
        assert engine.is_unlocked(2)

    @pytest.mark.parametrize("level,title", [
        (1, "Code Apprentice"), (4, "Code Apprentice"),
        (5, "Code Wizard"), (9, "Code Wizard"),
        (10, "Code Master"), (14, "Code Master"),
        (15, "Code Grandmaster"), (40, "Code Grandmaster"),
    ])
    def test_character_title(self, level, title):
        assert character_title(level) == title

    def test_wraps_existing_progress(self):
        progress = UserProgress(level=3, xp=10, xp_to_next_level=225)
        engine = ProgressionEngine(progress)
        engine.add_xp(215)
        assert progress.level == 4
        assert progress.xp == 0
