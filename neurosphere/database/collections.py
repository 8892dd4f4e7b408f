"""
NeuroSphere collection names.

Services look these up on the Motor database handle they are given.
"""

# ─────────────────────────────────────────────────────────────────
# Main Database Collections (neurosphere)
# ─────────────────────────────────────────────────────────────────

MOOD_COLLECTION = "moodData"
SLEEP_COLLECTION = "sleepData"
USERS_COLLECTION = "users"


# ─────────────────────────────────────────────────────────────────
# Indexes (created at startup)
# ─────────────────────────────────────────────────────────────────

# History reads page newest-first per user; analytics read everything per user
ENTRY_INDEXES = {
    MOOD_COLLECTION: [[("userId", 1), ("timestamp", -1)]],
    SLEEP_COLLECTION: [[("userId", 1), ("sleepDate", -1)]],
}
