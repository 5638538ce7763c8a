"""
Booking Errors

Typed error kinds raised by the scheduling core. Every class carries the
HTTP status the transport layer answers with, so the mapping is 1:1:

- ValidationError (400): malformed or missing input
- MeetingConflict (409): overlap with an existing meeting
- RoomExists (409): duplicate (number, company)
- RoomNotFound / MeetingNotFound (404)
- StorageFailure (500): opaque lower-layer failure
"""


class BookingError(Exception):
	"""Base class for all room booking errors."""

	kind = "booking_error"
	http_status_code = 500


class ValidationError(BookingError):
	kind = "validation_error"
	http_status_code = 400


class MeetingConflict(BookingError):
	kind = "meeting_conflict"
	http_status_code = 409


class RoomExists(BookingError):
	kind = "room_exists"
	http_status_code = 409


class RoomNotFound(BookingError):
	kind = "room_not_found"
	http_status_code = 404


class MeetingNotFound(BookingError):
	kind = "meeting_not_found"
	http_status_code = 404


class StorageFailure(BookingError):
	kind = "storage_failure"
	http_status_code = 500
