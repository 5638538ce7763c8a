"""
Request Validators

Decode raw request arguments (always strings over HTTP) into the types the
scheduling core expects. Invalid input is rejected with the booking
ValidationError, which the API answers with HTTP 400.
"""

import re
from datetime import date, datetime
from typing import Any, List, Optional

import frappe
import pytz
from frappe import _
from frappe.utils import get_datetime, getdate

from room_booking.room_booking.scheduling.errors import ValidationError

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
DATETIME_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}(:\d{2}(\.\d+)?)?(Z|[+-]\d{2}:?\d{2})?$"
)


def validate_id(value: Any, field_name: str = "id") -> int:
    """
    Validate a numeric document id.

    Args:
        value: Raw id (int or numeric string)
        field_name: Name of field for error messages

    Returns:
        int: The id

    Raises:
        ValidationError: If the id is missing, not numeric or not positive
    """
    if value in (None, ""):
        frappe.throw(_(f"{field_name} is required"), ValidationError)

    try:
        parsed = int(str(value).strip())
    except ValueError:
        frappe.throw(_(f"Invalid {field_name}"), ValidationError)

    if parsed <= 0:
        frappe.throw(_(f"Invalid {field_name}"), ValidationError)

    return parsed


def validate_optional_id(value: Any, field_name: str = "id") -> Optional[int]:
    """Like validate_id, but empty values mean "no filter"."""
    if value in (None, "", 0, "0"):
        return None
    return validate_id(value, field_name)


def validate_datetime_string(datetime_str: Any, field_name: str = "datetime") -> datetime:
    """
    Validate and parse an ISO-8601 / RFC 3339 datetime.

    Naive values are UTC; values with an offset are converted to UTC.

    Raises:
        ValidationError: If the value is missing or malformed
    """
    if not datetime_str:
        frappe.throw(_(f"{field_name} is required"), ValidationError)

    datetime_str = str(datetime_str).strip()

    if not DATETIME_PATTERN.match(datetime_str):
        frappe.throw(
            _(f"Invalid {field_name} format. Use RFC 3339, e.g. 2026-01-20T09:00:00Z"),
            ValidationError,
        )

    try:
        value = get_datetime(datetime_str)
    except Exception:
        frappe.throw(_(f"Invalid {field_name}"), ValidationError)

    if value.tzinfo is None:
        return pytz.UTC.localize(value)
    return value.astimezone(pytz.UTC)


def validate_day(day_str: Any, field_name: str = "date") -> date:
    """
    Parse the day of an availability query.

    Accepts YYYY-MM-DD or a full RFC 3339 datetime (its UTC date is used).
    An empty value means today (UTC).
    """
    if not day_str:
        return datetime.now(pytz.UTC).date()

    day_str = str(day_str).strip()

    if DATE_PATTERN.match(day_str):
        try:
            return getdate(day_str)
        except Exception:
            frappe.throw(_(f"Invalid {field_name}"), ValidationError)

    return validate_datetime_string(day_str, field_name).date()


def validate_attendees(value: Any) -> List[str]:
    """
    Decode the attendee list: a list, a JSON list or a comma separated string.
    """
    if value in (None, ""):
        return []

    if isinstance(value, str):
        text = value.strip()
        if text.startswith("["):
            try:
                value = frappe.parse_json(text)
            except Exception:
                frappe.throw(_("Invalid attendees"), ValidationError)
        else:
            value = text.split(",")

    if not isinstance(value, (list, tuple)):
        frappe.throw(_("attendees must be a list"), ValidationError)

    return [str(item).strip() for item in value if str(item).strip()]
