"""Shared field validators for request models."""

import re
from typing import Optional

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def normalize_email(value: Optional[str]) -> Optional[str]:
    """Validate an email address and return it lower-cased.

    Raises:
        ValueError: If the value is not a plausible email address
    """
    if value is None:
        return value
    if not EMAIL_PATTERN.match(value):
        raise ValueError("Invalid email address")
    return value.lower()
