"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

DEFAULT_BASIC_PERCENT = Decimal("100")
DEFAULT_HRA_PERCENT = Decimal("0")
DEFAULT_ALLOWANCES_AMOUNT = Decimal("0")
DEFAULT_PF_PERCENT = Decimal("12")
DEFAULT_ESI_PERCENT = Decimal("0.75")
DEFAULT_ALLOWED_LEAVE_DAYS = 2
DEFAULT_DEPARTMENT = "Operations"

# Calendar tap order; None means unmarked.
ATTENDANCE_CYCLE = (None, "present", "half", "leave", "absent")

PHONE_PATTERN = r"^[\d\s\-+()]+$"
