"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

PAGE_SIZE = 20

# Reports in the current month needed for each traffic light.
RED_MAX_REPORTS = 2
GREEN_MIN_REPORTS = 4

ACTIVE_WINDOW_DAYS = 30
RECENT_REPORT_DAYS = 7
REPORT_EDIT_WINDOW_DAYS = 14
