"""
Mood and sleep tracking vocabularies.

Fixed option lists shared by entry validation, analytics and insights.
"""

# Mood value -> label/emoji (5 = best)
MOOD_OPTIONS = {
    5: {"label": "Excellent", "emoji": "😄"},
    4: {"label": "Good", "emoji": "🙂"},
    3: {"label": "Okay", "emoji": "😐"},
    2: {"label": "Low", "emoji": "😔"},
    1: {"label": "Bad", "emoji": "😣"},
}

# Activity tag id -> label/icon for mood entries
MOOD_ACTIVITY_TAGS = {
    "work": {"label": "Work", "icon": "💼"},
    "exercise": {"label": "Exercise", "icon": "🏃‍♂️"},
    "family": {"label": "Family", "icon": "👪"},
    "friends": {"label": "Friends", "icon": "👫"},
    "hobbies": {"label": "Hobbies", "icon": "🎨"},
    "studying": {"label": "Studying", "icon": "📚"},
    "socializing": {"label": "Socializing", "icon": "🎉"},
    "selfCare": {"label": "Self-care", "icon": "🧘‍♀️"},
    "dating": {"label": "Dating", "icon": "❤️"},
    "gaming": {"label": "Gaming", "icon": "🎮"},
    "resting": {"label": "Resting", "icon": "😴"},
    "cooking": {"label": "Cooking", "icon": "🍳"},
    "travel": {"label": "Travel", "icon": "✈️"},
    "shopping": {"label": "Shopping", "icon": "🛍️"},
    "nature": {"label": "Nature", "icon": "🌿"},
    "music": {"label": "Music", "icon": "🎵"},
    "reading": {"label": "Reading", "icon": "📖"},
}

# Sleep quality value -> label
SLEEP_QUALITY_OPTIONS = {
    1: "Poor",
    2: "Fair",
    3: "Good",
    4: "Very Good",
    5: "Excellent",
}

# How the user felt on waking
WAKE_MOOD_OPTIONS = {
    "refreshed": "Refreshed",
    "energized": "Energized",
    "tired": "Tired",
    "groggy": "Groggy",
    "neutral": "Neutral",
}

# Pre-sleep activity tag id -> label
SLEEP_ACTIVITY_OPTIONS = {
    "reading": "Reading before bed",
    "meditation": "Meditation",
    "screen": "Screen time",
    "exercise": "Exercise (>2hrs before)",
    "caffeine": "Caffeine",
    "alcohol": "Alcohol",
    "heavyMeal": "Heavy meal",
    "nap": "Daytime nap",
}
