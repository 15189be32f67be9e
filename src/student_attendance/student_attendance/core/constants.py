"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

UNKNOWN = "Unknown"
NOT_AVAILABLE = "N/A"
ZERO_RATE = "0.00"

ATTENDANCE_KEY_PREFIX = "_"
RANKING_SIZE = 5

ATTENDANCE_UPDATE_EVENT = "attendanceUpdate"
STUDENT_PHOTO_FOLDER = "attendance/students"
