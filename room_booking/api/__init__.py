"""
Room Booking API

Structure:
    api/
    ├── __init__.py              # This file
    ├── meetings/                # Booking and availability
    │   ├── __init__.py          # Re-exports endpoints
    │   └── endpoints.py
    ├── rooms/                   # Room catalogue
    │   ├── __init__.py          # Re-exports endpoints
    │   └── endpoints.py
    └── shared/                  # Request validators and error translation
        ├── __init__.py
        ├── errors.py
        └── validators.py

Usage:
    frappe.call("room_booking.api.meetings.create_meeting", ...)
    frappe.call("room_booking.api.rooms.get_rooms", ...)

    REST: POST /api/method/room_booking.api.meetings.create_meeting
"""

from . import meetings
from . import rooms
from . import shared

__all__ = [
    "meetings",
    "rooms",
    "shared",
]
