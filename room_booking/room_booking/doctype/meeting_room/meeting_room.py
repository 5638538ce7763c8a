# Copyright (c) 2026, Sebastian Ortiz Valencia and contributors
# For license information, please see license.txt

"""
Meeting Room DocType

A bookable room. The display name is the company code followed by the
room number (e.g. "C12"); (number, company) is unique.
"""

import frappe
from frappe import _
from frappe.model.document import Document

from room_booking.room_booking.scheduling.errors import BookingError, RoomExists
from room_booking.room_booking.scheduling.models import Company


class MeetingRoom(Document):
	"""
	Meeting Room con validación de número y compañía.

	Validations:
	- number > 0
	- company es una compañía conocida
	- (number, company) no repetido
	- room_name = código de compañía + número
	"""

	def validate(self) -> None:
		"""
		Validación antes de guardar.
		"""
		self._validate_number()
		self._validate_company()
		self._set_room_name()
		self._validate_unique_number()

	def on_trash(self) -> None:
		"""Borra en cascada los meetings de la sala."""
		deleted = frappe.db.count("Meeting", {"room": self.name})
		frappe.db.delete("Meeting", {"room": self.name})

		if deleted:
			frappe.logger("room_booking").info(
				f"Room {self.name} deleted with {deleted} meeting(s)"
			)

	def _validate_number(self) -> None:
		"""Valida que number esté presente y sea positivo."""
		if not self.number or self.number <= 0:
			frappe.throw(_("Room number es requerido y debe ser mayor que 0"))

	def _validate_company(self) -> None:
		"""Normaliza company a su código (acepta "coke" o "C")."""
		try:
			self.company = Company.lookup(self.company).code
		except BookingError as e:
			frappe.throw(_(str(e)), type(e))

	def _set_room_name(self) -> None:
		self.room_name = f"{self.company}{self.number}"

	def _validate_unique_number(self) -> None:
		"""Valida que no exista otra sala con el mismo número en la compañía."""
		filters = {"number": self.number, "company": self.company}
		if not self.is_new():
			filters["name"] = ["!=", self.name]

		if frappe.db.exists("Meeting Room", filters):
			frappe.throw(
				_(f"La sala {self.number} ya existe para {Company.lookup(self.company).display_name}"),
				RoomExists
			)


def on_doctype_update() -> None:
	# Respaldo en base de datos del chequeo de _validate_unique_number
	frappe.db.add_unique("Meeting Room", ["number", "company"], constraint_name="unique_room_number_company")
