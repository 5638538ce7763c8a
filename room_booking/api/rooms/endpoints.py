"""
Room API Endpoints

Whitelisted functions to manage the room catalogue.
"""

import frappe
from typing import Any, Dict, List, Optional

from room_booking.room_booking.scheduling.errors import BookingError
from room_booking.room_booking.scheduling.models import RoomRequest
from room_booking.room_booking.services import get_room_service
from room_booking.api.shared import (
	throw_booking_error,
	throw_unexpected_error,
	validate_id,
)


@frappe.whitelist(methods=['POST'])
def create_room(number: str, company: str) -> Dict[str, Any]:
	"""
	Crea una sala para una compañía.

	Args:
		number: número de sala (único por compañía)
		company: "coke" o "pepsi" (o su código "C" / "P")

	Returns:
		dict: {"id": 1, "name": "C12", "number": 12, "company": "coke"}

	Errors:
		400 ValidationError, 409 RoomExists
	"""
	request = RoomRequest(
		number=validate_id(number, "number"),
		company=(company or "").strip(),
	)

	try:
		room = get_room_service().create(request)
	except BookingError as e:
		throw_booking_error(e)
	except Exception as e:
		throw_unexpected_error("create_room", e)

	return room.as_dict()


@frappe.whitelist(methods=['GET'])
def get_rooms(name: Optional[str] = None, company: Optional[str] = None) -> List[Dict[str, Any]]:
	"""
	Lista salas, filtrando opcionalmente por nombre ("C12") y compañía.
	"""
	try:
		rooms = get_room_service().get_all(
			name=(name or "").strip() or None,
			company=(company or "").strip() or None,
		)
	except BookingError as e:
		throw_booking_error(e)
	except Exception as e:
		throw_unexpected_error("get_rooms", e)

	return [room.as_dict() for room in rooms]


@frappe.whitelist(methods=['GET'])
def get_room(room_id: str) -> Dict[str, Any]:
	"""
	Obtiene una sala por id.

	Errors:
		404 RoomNotFound
	"""
	room_id = validate_id(room_id, "room_id")

	try:
		room = get_room_service().get(room_id)
	except BookingError as e:
		throw_booking_error(e)
	except Exception as e:
		throw_unexpected_error("get_room", e)

	return room.as_dict()


@frappe.whitelist(methods=['POST', 'DELETE'])
def delete_room(room_id: str) -> Dict[str, Any]:
	"""
	Elimina una sala y todos sus meetings.
	"""
	room_id = validate_id(room_id, "room_id")

	try:
		get_room_service().delete(room_id)
	except BookingError as e:
		throw_booking_error(e)
	except Exception as e:
		throw_unexpected_error("delete_room", e)

	return {"deleted": room_id}
