"""
Frappe Storage

Repositories for the scheduling core backed by the Meeting Room and
Meeting DocTypes. Datetimes are stored as naive UTC values.

Frappe errors are translated into the booking error kinds:
- DoesNotExistError -> RoomNotFound / MeetingNotFound
- LinkValidationError (meeting pointing to a missing room) -> RoomNotFound
- UniqueValidationError / DuplicateEntryError -> RoomExists / MeetingConflict
- anything else -> StorageFailure
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

import frappe
import pytz
from frappe.utils import get_datetime

from room_booking.room_booking.scheduling.errors import (
	BookingError,
	MeetingConflict,
	MeetingNotFound,
	RoomExists,
	RoomNotFound,
	StorageFailure,
)
from room_booking.room_booking.scheduling.models import Company, Meeting, Room
from room_booking.room_booking.scheduling.slots import to_utc

ROOM_DOCTYPE = "Meeting Room"
MEETING_DOCTYPE = "Meeting"

ROOM_FIELDS = ["name", "room_name", "number", "company"]
MEETING_FIELDS = [
	"name",
	"room",
	"title",
	"attendees",
	"creation",
	"start_datetime",
	"end_datetime",
]


def _to_db_datetime(value: datetime) -> datetime:
	"""UTC naive, como se guarda en la base de datos."""
	return to_utc(value).replace(tzinfo=None)


def _system_to_utc(value: Any) -> Optional[datetime]:
	"""
	Convierte un timestamp de Frappe (creation, naive en la zona del sistema) a UTC.
	"""
	if not value:
		return None

	value = get_datetime(value)
	tz_name = frappe.utils.get_system_timezone() or "UTC"

	try:
		tz = pytz.timezone(tz_name)
	except pytz.UnknownTimeZoneError:
		tz = pytz.UTC

	return tz.localize(value).astimezone(pytz.UTC)


def _to_room(row: Dict[str, Any]) -> Room:
	return Room(
		id=int(row["name"]),
		name=row["room_name"],
		number=int(row["number"]),
		company=Company.lookup(row["company"]),
	)


def _to_meeting(row: Dict[str, Any]) -> Meeting:
	attendees = frappe.parse_json(row.get("attendees")) or []

	return Meeting(
		id=int(row["name"]),
		room_id=int(row["room"]),
		title=row["title"],
		attendees=[str(a) for a in attendees],
		created=_system_to_utc(row.get("creation")),
		start=get_datetime(row["start_datetime"]),
		end=get_datetime(row["end_datetime"]),
	)


def _room_error(exc: Exception) -> BookingError:
	if isinstance(exc, BookingError):
		return exc
	if isinstance(exc, frappe.DoesNotExistError):
		return RoomNotFound("room does not exist")
	if isinstance(exc, (frappe.UniqueValidationError, frappe.DuplicateEntryError)):
		return RoomExists("room already exist")
	return StorageFailure(f"room storage failure: {exc}")


def _meeting_error(exc: Exception) -> BookingError:
	if isinstance(exc, BookingError):
		return exc
	if isinstance(exc, frappe.DoesNotExistError):
		return MeetingNotFound("meeting does not exist")
	if isinstance(exc, frappe.LinkValidationError):
		return RoomNotFound("room does not exist")
	if isinstance(exc, (frappe.UniqueValidationError, frappe.DuplicateEntryError)):
		return MeetingConflict("meeting already exist")
	return StorageFailure(f"meeting storage failure: {exc}")


class FrappeRoomRepository:
	def insert(self, room: Room) -> Room:
		try:
			doc = frappe.get_doc({
				"doctype": ROOM_DOCTYPE,
				"room_name": room.name,
				"number": room.number,
				"company": room.company.code,
			})
			doc.insert(ignore_permissions=True)
		except Exception as e:
			raise _room_error(e) from e

		return _to_room(doc.as_dict())

	def find(
		self,
		name: Optional[str] = None,
		company: Optional[Company] = None
	) -> List[Room]:
		filters = {}
		if name:
			filters["room_name"] = name
		if company:
			filters["company"] = company.code

		try:
			rows = frappe.get_all(
				ROOM_DOCTYPE,
				filters=filters,
				fields=ROOM_FIELDS,
				order_by="name asc"
			)
		except Exception as e:
			raise _room_error(e) from e

		return [_to_room(row) for row in rows]

	def find_by_id(self, room_id: int) -> Room:
		try:
			row = frappe.db.get_value(ROOM_DOCTYPE, room_id, ROOM_FIELDS, as_dict=True)
		except Exception as e:
			raise _room_error(e) from e

		if not row:
			raise RoomNotFound(f"room {room_id} does not exist")
		return _to_room(row)

	def delete_by_id(self, room_id: int) -> bool:
		try:
			if not frappe.db.exists(ROOM_DOCTYPE, room_id):
				return False
			# on_trash de Meeting Room borra los meetings de la sala
			frappe.delete_doc(ROOM_DOCTYPE, room_id, ignore_permissions=True)
		except Exception as e:
			raise _room_error(e) from e

		return True


class FrappeMeetingRepository:
	def insert(self, meeting: Meeting) -> Meeting:
		try:
			doc = frappe.get_doc({
				"doctype": MEETING_DOCTYPE,
				"room": meeting.room_id,
				"title": meeting.title,
				"attendees": frappe.as_json(list(meeting.attendees)),
				"start_datetime": _to_db_datetime(meeting.start),
				"end_datetime": _to_db_datetime(meeting.end),
			})
			# BookingService ya verificó conflictos con la sala bloqueada
			doc.flags.conflict_checked = True
			doc.insert(ignore_permissions=True)
		except Exception as e:
			raise _meeting_error(e) from e

		return _to_meeting(doc.as_dict())

	def find(self, room_id: Optional[int] = None) -> List[Meeting]:
		filters = {}
		if room_id:
			filters["room"] = room_id

		return self._get_all(filters)

	def find_by_room_overlapping(
		self,
		room_id: int,
		start: datetime,
		end: datetime
	) -> List[Meeting]:
		return self._get_all(self._overlap_filters(start, end, room=room_id))

	def find_overlapping(self, start: datetime, end: datetime) -> List[Meeting]:
		return self._get_all(self._overlap_filters(start, end))

	def find_by_id(self, meeting_id: int) -> Meeting:
		try:
			row = frappe.db.get_value(MEETING_DOCTYPE, meeting_id, MEETING_FIELDS, as_dict=True)
		except Exception as e:
			raise _meeting_error(e) from e

		if not row:
			raise MeetingNotFound(f"meeting {meeting_id} does not exist")
		return _to_meeting(row)

	def delete_by_id(self, meeting_id: int) -> bool:
		try:
			if not frappe.db.exists(MEETING_DOCTYPE, meeting_id):
				return False
			frappe.delete_doc(MEETING_DOCTYPE, meeting_id, ignore_permissions=True)
		except Exception as e:
			raise _meeting_error(e) from e

		return True

	def lock_room(self, room_id: int) -> None:
		"""
		SELECT ... FOR UPDATE sobre la sala.

		Creates concurrentes para la misma sala esperan aquí hasta que la
		transacción que tiene el lock haga commit o rollback.
		"""
		try:
			exists = frappe.db.get_value(ROOM_DOCTYPE, room_id, "name", for_update=True)
		except Exception as e:
			raise _room_error(e) from e

		if not exists:
			raise RoomNotFound(f"room {room_id} does not exist")

	def _overlap_filters(
		self,
		start: datetime,
		end: datetime,
		**extra: Any
	) -> Dict[str, Any]:
		# Intersección cerrada: start <= end_ventana AND end >= start_ventana
		filters = {
			"start_datetime": ["<=", _to_db_datetime(end)],
			"end_datetime": [">=", _to_db_datetime(start)],
		}
		filters.update(extra)
		return filters

	def _get_all(self, filters: Dict[str, Any]) -> List[Meeting]:
		try:
			rows = frappe.get_all(
				MEETING_DOCTYPE,
				filters=filters,
				fields=MEETING_FIELDS,
				order_by="start_datetime asc"
			)
		except Exception as e:
			raise _meeting_error(e) from e

		return [_to_meeting(row) for row in rows]
