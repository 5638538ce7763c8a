"""
Meeting API Endpoints

Whitelisted functions to book rooms and query availability.
Requests are decoded here; scheduling rules live in BookingService.
"""

import frappe
from typing import Any, Dict, List, Optional

from room_booking.room_booking.scheduling.errors import BookingError
from room_booking.room_booking.scheduling.models import MeetingRequest
from room_booking.room_booking.services import get_booking_service
from room_booking.api.shared import (
	throw_booking_error,
	throw_unexpected_error,
	validate_attendees,
	validate_datetime_string,
	validate_day,
	validate_id,
	validate_optional_id,
)


@frappe.whitelist(methods=['POST'])
def create_meeting(
	room_id: str,
	title: str,
	start: str,
	attendees: Optional[Any] = None
) -> Dict[str, Any]:
	"""
	Reserva una sala por un slot.

	El fin del meeting se deriva del inicio más la duración de slot
	configurada en Room Booking Settings.

	Args:
		room_id: id de la Meeting Room
		title: título del meeting
		start: inicio RFC 3339 alineado a un slot (ej. 2026-01-20T09:00:00Z)
		attendees: lista JSON de asistentes (opcional)

	Returns:
		dict: meeting creado (id, room_id, title, attendees, created, start, end)

	Errors:
		400 ValidationError, 404 RoomNotFound, 409 MeetingConflict

	Example:
		```javascript
		frappe.call({
			method: "room_booking.api.meetings.create_meeting",
			args: {
				room_id: 1,
				title: "Weekly sync",
				start: "2026-01-20T09:00:00Z",
				attendees: ["ana@example.com", "luis@example.com"]
			},
			callback: function(r) {
				console.log(r.message.end); // 2026-01-20T10:00:00+00:00
			}
		});
		```
	"""
	request = MeetingRequest(
		room_id=validate_id(room_id, "room_id"),
		title=(title or "").strip(),
		start=validate_datetime_string(start, "start"),
		attendees=validate_attendees(attendees),
	)

	try:
		meeting = get_booking_service().create(request)
	except BookingError as e:
		throw_booking_error(e)
	except Exception as e:
		throw_unexpected_error("create_meeting", e)

	return meeting.as_dict()


@frappe.whitelist(methods=['GET'])
def get_meetings(room_id: Optional[str] = None) -> List[Dict[str, Any]]:
	"""
	Lista todos los meetings, opcionalmente solo los de una sala.

	Args:
		room_id: id de la Meeting Room (opcional)
	"""
	room_filter = validate_optional_id(room_id, "room_id")

	try:
		meetings = get_booking_service().get_all(room_filter)
	except BookingError as e:
		throw_booking_error(e)
	except Exception as e:
		throw_unexpected_error("get_meetings", e)

	return [meeting.as_dict() for meeting in meetings]


@frappe.whitelist(methods=['GET'])
def get_meeting(meeting_id: str) -> Dict[str, Any]:
	"""
	Obtiene un meeting por id.

	Errors:
		404 MeetingNotFound
	"""
	meeting_id = validate_id(meeting_id, "meeting_id")

	try:
		meeting = get_booking_service().get(meeting_id)
	except BookingError as e:
		throw_booking_error(e)
	except Exception as e:
		throw_unexpected_error("get_meeting", e)

	return meeting.as_dict()


@frappe.whitelist(methods=['POST', 'DELETE'])
def delete_meeting(meeting_id: str) -> Dict[str, Any]:
	"""
	Elimina un meeting por id.

	Un id inexistente no es error salvo que Strict Delete esté activo.
	"""
	meeting_id = validate_id(meeting_id, "meeting_id")

	try:
		get_booking_service().delete(meeting_id)
	except BookingError as e:
		throw_booking_error(e)
	except Exception as e:
		throw_unexpected_error("delete_meeting", e)

	return {"deleted": meeting_id}


@frappe.whitelist(methods=['GET'])
def get_available(date: Optional[str] = None) -> Dict[str, Dict[str, Optional[Dict[str, Any]]]]:
	"""
	Disponibilidad de todas las salas para un día (UTC).

	Args:
		date: YYYY-MM-DD o RFC 3339 (por defecto hoy, UTC)

	Returns:
		dict: {
			"<room_id>": {
				"2026-01-20T00:00:00+00:00": null,
				"2026-01-20T01:00:00+00:00": {"id": 7, "title": "...", ...},
				...
			},
			...
		}
	"""
	day = validate_day(date, "date")

	try:
		grid = get_booking_service().get_available(day)
	except BookingError as e:
		throw_booking_error(e)
	except Exception as e:
		throw_unexpected_error("get_available", e)

	return grid.as_dict()
