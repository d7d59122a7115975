"""Constants for schedule generation."""

# Above this many subjects the partial dispatcher switches from exhaustive
# search to the greedy heuristic, and exhaustive mode warns about runtime
SMALL_N_THRESHOLD_PARTIAL = 12

# Random attempts made by the fast strategy per call
FAST_MAX_ATTEMPTS = 1000

# Score = courses * SCORE_PER_COURSE + total units
SCORE_PER_COURSE = 100

# Time-of-day bucket boundaries ("HH:MM", compared lexically)
AFTERNOON_START = "12:00"
EVENING_START = "17:00"
