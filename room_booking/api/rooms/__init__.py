"""
Rooms API Domain

Room catalogue management.
"""

from room_booking.api.rooms.endpoints import (
	create_room,
	delete_room,
	get_room,
	get_rooms,
)

__all__ = [
	"create_room",
	"delete_room",
	"get_room",
	"get_rooms",
]
