# Copyright (c) 2026, Sebastian Ortiz Valencia and contributors
# For license information, please see license.txt

"""
Room Booking Settings DocType

Site-wide booking configuration: slot duration and delete policy.
"""

import frappe
from frappe import _
from frappe.model.document import Document

from room_booking.room_booking.scheduling.errors import ValidationError
from room_booking.room_booking.scheduling.slots import validate_slot_minutes


class RoomBookingSettings(Document):
	def validate(self) -> None:
		self._validate_slot_duration()
		self._warn_if_slot_duration_changed()

	def _validate_slot_duration(self) -> None:
		"""La duración debe ser positiva y dividir exactamente el día."""
		try:
			self.slot_duration_minutes = validate_slot_minutes(self.slot_duration_minutes)
		except ValidationError as e:
			frappe.throw(_(str(e)), ValidationError, title=_("Slot Duration inválido"))

	def _warn_if_slot_duration_changed(self) -> None:
		"""
		Los meetings existentes conservan su end_datetime.

		Solo se informa; no se recalculan meetings ya reservados.
		"""
		if not self.has_value_changed("slot_duration_minutes"):
			return

		if frappe.db.count("Meeting"):
			frappe.msgprint(
				_("Los meetings ya reservados mantienen su duración anterior."),
				indicator="orange",
				alert=True
			)
