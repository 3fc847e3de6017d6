"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TARGET_PERCENT = 75
PERCENT_DECIMALS = 2
DAYS_PER_WEEK = 7
MAX_USER_ID_LENGTH = 128
