"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_STORAGE_KEY = "students"
CORRUPT_SLOT_SUFFIX = ".corrupt"

DISPLAY_ID_PREFIX = "STU-"
DISPLAY_ID_TIME_CHARS = 4
DISPLAY_ID_RANDOM_CHARS = 4

NO_DATA_LABEL = "No Data"

CHART_WIDTH = 300
CHART_HEIGHT = 220
CHART_INNER_RATIO = 0.6
