# Copyright (c) 2026, Sebastian Ortiz Valencia and contributors
# For license information, please see license.txt

"""
Meeting DocType

A booking of one room for exactly one slot. Meetings are created and
deleted, never edited.
"""

import frappe
from frappe import _
from frappe.model.document import Document
from frappe.utils import get_datetime
from datetime import timedelta

from room_booking.room_booking.scheduling.errors import MeetingConflict, ValidationError
from room_booking.room_booking.scheduling.overlap import find_conflicts
from room_booking.room_booking.scheduling.slots import day_bounds, is_slot_aligned
from room_booking.room_booking.services import get_booking_config
from room_booking.room_booking.storage import FrappeMeetingRepository


class Meeting(Document):
	"""
	Meeting DocType con validación de slot y conflictos.

	Flujo:
	1. Validar campos requeridos y que el meeting sea nuevo
	2. Validar que start_datetime cae en el inicio de un slot (UTC)
	3. Derivar end_datetime = start_datetime + slot_duration_minutes
	4. Verificar conflictos en la sala (salvo que BookingService ya lo hizo)
	"""

	def validate(self) -> None:
		"""
		Validación antes de guardar.
		"""
		self._validate_not_modified()
		self._validate_required()

		config = get_booking_config()
		self._validate_slot_alignment(config.slot_minutes)
		self._set_end_datetime(config.slot_minutes)

		if not self.flags.conflict_checked:
			self._validate_no_conflicts()

	def _validate_not_modified(self) -> None:
		"""Los meetings no se editan: se eliminan y se crean de nuevo."""
		if not self.is_new():
			frappe.throw(_("Un meeting reservado no se puede modificar"), ValidationError)

	def _validate_required(self) -> None:
		if not self.room:
			frappe.throw(_("Room es requerido"), ValidationError)

		if not self.title or not self.title.strip():
			frappe.throw(_("Title es requerido"), ValidationError)

		if not self.start_datetime:
			frappe.throw(_("Start DateTime es requerido"), ValidationError)

	def _validate_slot_alignment(self, slot_minutes: int) -> None:
		start = get_datetime(self.start_datetime)

		if not is_slot_aligned(start, slot_minutes):
			frappe.throw(
				_(f"Start DateTime ({start.strftime('%H:%M:%S')}) debe coincidir con el inicio de un slot de {slot_minutes} minutos"),
				ValidationError
			)

	def _set_end_datetime(self, slot_minutes: int) -> None:
		self.end_datetime = get_datetime(self.start_datetime) + timedelta(minutes=slot_minutes)

	def _validate_no_conflicts(self) -> None:
		"""
		Chequeo de conflictos para meetings creados desde Desk.

		Bloquea la sala antes de consultar para que dos inserts
		simultáneos no pasen ambos el chequeo.
		"""
		repo = FrappeMeetingRepository()
		room_id = int(self.room)
		start = get_datetime(self.start_datetime)
		end = get_datetime(self.end_datetime)

		repo.lock_room(room_id)
		window_start, window_end = day_bounds(start)
		conflicts = find_conflicts(
			room_id,
			start,
			end,
			repo.find_by_room_overlapping(room_id, window_start, window_end)
		)

		if conflicts:
			frappe.throw(
				_(f"La sala ya está reservada en este horario ({conflicts[0].title})"),
				MeetingConflict
			)
