# ABOUTME: Tunable numeric constants for the title, author, and ISBN match decision.
# ABOUTME: Empirical values; changing any of them changes which books get auto-downloaded.

# Title matcher
TITLE_MATCH_THRESHOLD = 0.75
SUBTITLE_CONTAINMENT_FLOOR = 0.95
SUBTITLE_BASE_SCORE = 0.95
SUBTITLE_PENALTY_PER_EXTRA_TOKEN = 0.03
SUBTITLE_MAX_PENALTY = 0.20
SUBTITLE_SINGLE_TOKEN_PENALTY = 0.05
DERIVATIVE_SCORE_CAP = 0.4

# Author matcher
AUTHOR_MATCH_THRESHOLD = 0.6
AUTHOR_NEUTRAL_SCORE = 0.5
AUTHOR_SUBSTRING_SCORE = 0.95
AUTHOR_ALL_TOKENS_SCORE = 0.9
AUTHOR_PARTIAL_TOKENS_FACTOR = 0.8
AUTHOR_EDIT_DISTANCE_FACTOR = 0.9

# Orchestrator: combined confidence weights (must sum to 1.0)
WEIGHT_TITLE = 0.6
WEIGHT_AUTHOR = 0.4
ISBN_CONFIDENCE = 1.0
