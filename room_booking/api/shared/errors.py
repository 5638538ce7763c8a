"""
API Error Handling

Booking errors carry their own http_status_code, so re-raising them through
frappe.throw gives the caller the right status plus the message list.
"""

import frappe
from frappe import _

from room_booking.room_booking.scheduling.errors import BookingError, StorageFailure


def throw_booking_error(error: BookingError) -> None:
    """
    Re-raise a booking error as a Frappe response.

    Raises:
        The same BookingError class, with the message queued for the client
    """
    frappe.throw(_(str(error)), type(error), title=_("Room Booking"))


def throw_unexpected_error(action: str, error: Exception) -> None:
    """
    Log an unexpected failure to Error Log and answer with StorageFailure (500).
    """
    frappe.log_error(
        title=f"Room Booking API: {action}",
        message=f"{error}\n\n{frappe.get_traceback()}",
    )
    frappe.throw(
        _(f"Unexpected error in {action}. The failure was logged."),
        StorageFailure,
        title=_("Room Booking"),
    )
