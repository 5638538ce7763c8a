"""
Booking Models

Plain data objects shared by the scheduling core, the storage adapters and
the API:
- Company (closed enumeration)
- Room / RoomRequest
- Meeting / MeetingRequest
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Dict, List, Optional

from .errors import ValidationError
from .slots import is_slot_aligned, to_utc


class Company(str, Enum):
	"""Companies sharing the rooms. The value is the short code stored with a room."""

	COKE = "C"
	PEPSI = "P"

	@property
	def code(self) -> str:
		return self.value

	@property
	def display_name(self) -> str:
		return self.name.lower()

	@classmethod
	def lookup(cls, value: Any) -> "Company":
		"""
		Resuelve una compañía por nombre ("coke") o código ("C").

		Raises:
			ValidationError: si el valor no corresponde a ninguna compañía
		"""
		if isinstance(value, cls):
			return value

		text = str(value or "").strip()
		if not text:
			raise ValidationError("company empty")

		for company in cls:
			if text.lower() == company.display_name or text.upper() == company.code:
				return company

		raise ValidationError(f"invalid company name '{text}'")


def _isoformat(value: Optional[datetime]) -> Optional[str]:
	return value.isoformat() if value else None


@dataclass
class Room:
	id: Optional[int]
	name: str
	number: int
	company: Company

	def __str__(self) -> str:
		return f"Room<{self.id} {self.name} {self.number}>"

	def as_dict(self) -> Dict[str, Any]:
		return {
			"id": self.id,
			"name": self.name,
			"number": self.number,
			"company": self.company.display_name,
		}


@dataclass
class RoomRequest:
	number: int
	company: str

	def validate(self) -> None:
		if not self.number:
			raise ValidationError("room number empty")
		if self.number < 0:
			raise ValidationError("room number must be positive")
		Company.lookup(self.company)

	def to_room(self) -> Room:
		company = Company.lookup(self.company)
		return Room(
			id=None,
			name=f"{company.code}{self.number}",
			number=self.number,
			company=company,
		)


@dataclass
class Meeting:
	id: Optional[int]
	room_id: int
	title: str
	start: datetime
	end: datetime
	attendees: List[str] = field(default_factory=list)
	created: Optional[datetime] = None

	def __post_init__(self) -> None:
		self.start = to_utc(self.start)
		self.end = to_utc(self.end)
		if self.created is not None:
			self.created = to_utc(self.created)

	def __str__(self) -> str:
		return f"Meeting<{self.id} {self.room_id} {self.title}>"

	def as_dict(self) -> Dict[str, Any]:
		return {
			"id": self.id,
			"room_id": self.room_id,
			"title": self.title,
			"attendees": list(self.attendees),
			"created": _isoformat(self.created),
			"start": _isoformat(self.start),
			"end": _isoformat(self.end),
		}


@dataclass
class MeetingRequest:
	room_id: int
	title: str
	start: Optional[datetime]
	attendees: List[str] = field(default_factory=list)

	def validate(self, slot_minutes: int) -> None:
		"""
		Valida el request antes de llegar a storage.

		El inicio debe estar alineado con la grilla de slots del día (UTC).
		"""
		if not self.room_id:
			raise ValidationError("room-id empty")
		if not self.title or not self.title.strip():
			raise ValidationError("title empty")
		if self.start is None:
			raise ValidationError("start empty")
		if not is_slot_aligned(self.start, slot_minutes):
			raise ValidationError("invalid start time")

	def to_meeting(self, slot_minutes: int) -> Meeting:
		"""Construye el Meeting derivando end = start + slot_minutes."""
		start = to_utc(self.start)
		return Meeting(
			id=None,
			room_id=self.room_id,
			title=self.title.strip(),
			attendees=list(self.attendees or []),
			start=start,
			end=start + timedelta(minutes=slot_minutes),
		)
