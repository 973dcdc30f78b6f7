"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

HALF_DAY_HOURS = 4.0
DEFAULT_WINDOW_DAYS = 31
DEFAULT_TIMEZONE = "Asia/Kolkata"

DAYS_PER_PAYROLL_MONTH = 30
BASIC_SHARE = 0.4
HRA_SHARE_OF_BASIC = 0.4
PF_RATE = 0.12
PF_CAP = 1800.0
PROFESSIONAL_TAX = 200.0
