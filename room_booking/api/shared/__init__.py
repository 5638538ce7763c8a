"""
Shared utilities for the Room Booking API.

Request decoding (validators.py) and error translation (errors.py).
"""

from .errors import (
    throw_booking_error,
    throw_unexpected_error,
)
from .validators import (
    validate_attendees,
    validate_datetime_string,
    validate_day,
    validate_id,
    validate_optional_id,
)

__all__ = [
    # Errors
    "throw_booking_error",
    "throw_unexpected_error",
    # Validators
    "validate_attendees",
    "validate_datetime_string",
    "validate_day",
    "validate_id",
    "validate_optional_id",
]
