from __future__ import annotations

import re
from decimal import Decimal
from typing import List, Optional


def check_non_empty(errors: List[str], value: Optional[str], message: str) -> bool:
    if not value or not value.strip():
        errors.append(message)
        return False
    return True


def check_pattern(errors: List[str], value: str, pattern: str, message: str) -> bool:
    if not re.match(pattern, value):
        errors.append(message)
        return False
    return True


def check_percent(errors: List[str], value: Decimal, field_name: str) -> bool:
    if value < 0 or value > 100:
        errors.append(f"{field_name} must be between 0 and 100")
        return False
    return True
