"""
Meetings API Domain

Booking, lookup and deletion of meetings, and daily room availability.
"""

from room_booking.api.meetings.endpoints import (
	create_meeting,
	delete_meeting,
	get_available,
	get_meeting,
	get_meetings,
)

__all__ = [
	"create_meeting",
	"delete_meeting",
	"get_available",
	"get_meeting",
	"get_meetings",
]
