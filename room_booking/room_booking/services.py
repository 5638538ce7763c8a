"""
Service Wiring

Builds the scheduling services for the current site: configuration from
Room Booking Settings (falling back to site_config), Frappe repositories
and the app logger.
"""

import frappe

from room_booking.room_booking.scheduling.booking import BookingService
from room_booking.room_booking.scheduling.config import BookingConfig
from room_booking.room_booking.scheduling.rooms import RoomService
from room_booking.room_booking.storage import FrappeMeetingRepository, FrappeRoomRepository

SETTINGS_DOCTYPE = "Room Booking Settings"


def get_logger():
	return frappe.logger("room_booking")


def get_booking_config() -> BookingConfig:
	"""
	Obtiene la configuración de reservas.

	Prioridad:
		1. Room Booking Settings (DocType single)
		2. site_config.json: room_booking_slot_minutes, room_booking_strict_delete
		3. Valores por defecto de BookingConfig
	"""
	values = {
		"slot_minutes": frappe.conf.get("room_booking_slot_minutes"),
		"strict_delete": frappe.conf.get("room_booking_strict_delete"),
	}

	settings = frappe.get_cached_doc(SETTINGS_DOCTYPE)
	if settings.slot_duration_minutes:
		values["slot_minutes"] = settings.slot_duration_minutes
	if settings.strict_delete:
		values["strict_delete"] = settings.strict_delete

	return BookingConfig.from_mapping(values)


def get_booking_service() -> BookingService:
	return BookingService(
		get_booking_config(),
		FrappeMeetingRepository(),
		FrappeRoomRepository(),
		logger=get_logger(),
	)


def get_room_service() -> RoomService:
	return RoomService(
		get_booking_config(),
		FrappeRoomRepository(),
		logger=get_logger(),
	)
