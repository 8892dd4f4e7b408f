"""
Onboarding profile options.
"""

GENDER_OPTIONS = ["Male", "Female", "Non-binary", "Prefer not to say"]

# Wellbeing goal id -> label
GOAL_OPTIONS = {
    "reduce-anxiety": "Reduce Anxiety",
    "improve-sleep": "Improve Sleep Quality",
    "mindfulness": "Practice Mindfulness",
    "manage-stress": "Manage Stress",
    "boost-mood": "Boost Mood",
    "self-discovery": "Self Discovery",
    "improve-focus": "Improve Focus",
    "build-resilience": "Build Resilience",
}
