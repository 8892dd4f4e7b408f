"""Unit tests for mood and sleep insight generation."""

from config import SLEEP_TIPS
from neurosphere.services.analytics.insights import (
    generate_mood_insights,
    generate_sleep_insights,
    mood_label,
    select_sleep_tips,
)
from neurosphere.services.analytics.metrics import MoodMetrics, SleepMetrics


# ─────────────────────────────────────────────────────────────────
# Mood insights
# ─────────────────────────────────────────────────────────────────


class TestMoodInsights:
    def test_empty_window(self):
        assert generate_mood_insights(MoodMetrics(), 0) == [
            "Start logging your moods to receive personalized insights."
        ]

    def test_positive_average_sentence(self):
        insights = generate_mood_insights(MoodMetrics(average_mood=4.2), 1)

        assert insights[0] == (
            "Your average mood has been good during this period. "
            "That's great! Keep engaging in activities that boost your wellbeing."
        )

    def test_low_average_sentence_rounds_half_up(self):
        # 1.5 rounds to 2 ("Low"), below 2.5
        insights = generate_mood_insights(MoodMetrics(average_mood=1.5), 1)

        assert insights[0].startswith("Your average mood has been low during this period.")
        assert insights[0].endswith("Consider focusing more on self-care and activities that spark joy.")

    def test_balanced_average_sentence(self):
        insights = generate_mood_insights(MoodMetrics(average_mood=2.5), 1)

        assert insights[0] == (
            "Your average mood has been okay during this period. "
            "Your emotional state is balanced, but there's room for improvement."
        )

    def test_trend_sentence_needs_three_records(self):
        metrics = MoodMetrics(average_mood=3, mood_trend="improving")

        with_two = generate_mood_insights(metrics, 2)
        with_three = generate_mood_insights(metrics, 3)

        assert not any("improving recently" in i for i in with_two)
        assert with_three[1].startswith("Your mood has been improving recently.")

    def test_neutral_trend_reads_as_stable(self):
        insights = generate_mood_insights(MoodMetrics(average_mood=3), 4)

        assert insights[1].startswith("Your mood has been relatively stable recently.")

    def test_correlation_sentences_use_icons_and_labels(self):
        metrics = MoodMetrics(
            average_mood=3,
            correlations=[
                {"activity": "exercise", "impact": 1.5, "count": 3},
                {"activity": "work", "impact": -0.9, "count": 4},
                {"activity": "music", "impact": 0.6, "count": 2},
                {"activity": "reading", "impact": 0.2, "count": 2},
            ],
        )

        insights = generate_mood_insights(metrics, 12)

        assert (
            "Activities associated with improved mood: 🏃‍♂️ Exercise, 🎵 Music. "
            "Consider prioritizing these in your routine."
        ) in insights
        assert (
            "Activities associated with lower mood: 💼 Work. "
            "Consider how to manage or balance these activities."
        ) in insights

    def test_unknown_activity_falls_back_to_id(self):
        metrics = MoodMetrics(
            average_mood=3,
            correlations=[{"activity": "knitting", "impact": 1.0, "count": 2}],
        )

        insights = generate_mood_insights(metrics, 12)

        assert any("improved mood: knitting." in i for i in insights)

    def test_variability_warning_and_praise_are_exclusive(self):
        swings = generate_mood_insights(MoodMetrics(average_mood=3, mood_variability=1.5), 6)
        steady = generate_mood_insights(MoodMetrics(average_mood=3, mood_variability=0.2), 6)
        steady_few = generate_mood_insights(MoodMetrics(average_mood=3, mood_variability=0.2), 5)

        assert any(i.startswith("Your mood shows significant variability.") for i in swings)
        assert not any(i.startswith("Your mood is very consistent.") for i in swings)
        assert any(i.startswith("Your mood is very consistent.") for i in steady)
        assert not any(i.startswith("Your mood is very consistent.") for i in steady_few)

    def test_energy_sentences(self):
        up = generate_mood_insights(MoodMetrics(average_mood=3, energy_trend="increasing"), 3)
        down = generate_mood_insights(MoodMetrics(average_mood=3, energy_trend="decreasing"), 3)

        assert any(i.startswith("Your energy levels appear to be improving.") for i in up)
        assert any(i.startswith("Your energy levels seem to be decreasing.") for i in down)

    def test_single_record_gets_generic_and_log_more_sentences(self):
        insights = generate_mood_insights(MoodMetrics(average_mood=5), 1)

        assert len(insights) == 3
        assert insights[1].startswith("Regular mood tracking helps identify patterns")
        assert insights[2].startswith("Continue logging your moods")

    def test_no_log_more_sentence_with_ten_records(self):
        insights = generate_mood_insights(MoodMetrics(average_mood=3), 10)

        assert not any(i.startswith("Continue logging your moods") for i in insights)

    def test_always_at_least_one_insight(self):
        for count in (0, 1, 3, 20):
            assert len(generate_mood_insights(MoodMetrics(average_mood=3), count)) >= 1

    def test_mood_label(self):
        assert mood_label(4.6) == "Excellent"
        assert mood_label(3.4) == "Okay"
        assert mood_label(0) == "Neutral"


# ─────────────────────────────────────────────────────────────────
# Sleep insights and tips
# ─────────────────────────────────────────────────────────────────


class TestSleepInsights:
    def test_empty_window(self):
        assert generate_sleep_insights(SleepMetrics(), 0) == [
            "Start logging your sleep to get personalized insights."
        ]

    def test_short_sleep_low_quality_variable_schedule(self):
        metrics = SleepMetrics(average_duration=400, average_quality=2, consistency_score=40)

        insights = generate_sleep_insights(metrics, 4)

        assert insights[0].startswith("You're averaging less than 7 hours of sleep")
        assert insights[1].startswith("Your sleep quality seems to be below average.")
        assert insights[2].startswith("Your sleep schedule shows significant variation.")

    def test_healthy_duration_excellent_quality_consistent(self):
        metrics = SleepMetrics(average_duration=480, average_quality=4, consistency_score=90)

        insights = generate_sleep_insights(metrics, 4)

        assert insights == [
            "Your average sleep duration falls within the recommended 7-9 hours for adults. "
            "Great job maintaining a healthy sleep duration!",
            "You're reporting excellent sleep quality! Continue your current sleep habits "
            "to maintain this positive pattern.",
            "You have a very consistent sleep schedule, which is excellent for your "
            "circadian rhythm and sleep quality.",
        ]

    def test_long_sleep(self):
        metrics = SleepMetrics(average_duration=560, average_quality=3, consistency_score=70)

        insights = generate_sleep_insights(metrics, 2)

        assert len(insights) == 1
        assert insights[0].startswith("You're sleeping more than 9 hours on average.")

    def test_activity_sentences(self):
        metrics = SleepMetrics(
            average_duration=480,
            average_quality=3,
            consistency_score=70,
            common_activities=["screen", "alcohol", "meditation"],
        )

        insights = generate_sleep_insights(metrics, 3)

        assert insights[1].startswith("Screen time before bed appears frequently")
        assert insights[2].startswith("Caffeine and/or alcohol consumption")
        assert insights[3].startswith("Your bedtime routine includes relaxing activities")


class TestSleepTips:
    def test_empty_window_gets_moderate_tips(self):
        assert select_sleep_tips(SleepMetrics(), 0) == SLEEP_TIPS["moderate"]

    def test_tiers(self):
        assert select_sleep_tips(SleepMetrics(average_quality=2.4), 3) == SLEEP_TIPS["poor"]
        assert select_sleep_tips(SleepMetrics(average_quality=2.5), 3) == SLEEP_TIPS["moderate"]
        assert select_sleep_tips(SleepMetrics(average_quality=3.9), 3) == SLEEP_TIPS["moderate"]
        assert select_sleep_tips(SleepMetrics(average_quality=4), 3) == SLEEP_TIPS["good"]

    def test_five_tips_each(self):
        for tier in ("poor", "moderate", "good"):
            assert len(SLEEP_TIPS[tier]) == 5
