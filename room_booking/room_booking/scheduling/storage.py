"""
Storage Interfaces

Repositories the scheduling core depends on, one per entity. The site
implementation lives in room_booking.room_booking.storage (Frappe DocTypes).

Implementations raise the errors from .errors:
- RoomNotFound / MeetingNotFound for lookup misses and dangling room references
- RoomExists for a duplicate (number, company)
- StorageFailure for anything else
"""

from datetime import datetime
from typing import List, Optional, Protocol, TypeVar

from .models import Company, Meeting, Room

T = TypeVar("T")


class Repository(Protocol[T]):
	def insert(self, entity: T) -> T:
		"""Persist a new entity and return it with its id assigned."""
		...

	def find_by_id(self, entity_id: int) -> T:
		...

	def delete_by_id(self, entity_id: int) -> bool:
		"""Delete by id. Returns False when nothing was deleted."""
		...


class RoomRepository(Repository[Room], Protocol):
	def find(
		self,
		name: Optional[str] = None,
		company: Optional[Company] = None
	) -> List[Room]:
		...


class MeetingRepository(Repository[Meeting], Protocol):
	def find(self, room_id: Optional[int] = None) -> List[Meeting]:
		...

	def find_by_room_overlapping(
		self,
		room_id: int,
		start: datetime,
		end: datetime
	) -> List[Meeting]:
		"""Meetings of a room whose [start, end] intersects the window (inclusive)."""
		...

	def find_overlapping(self, start: datetime, end: datetime) -> List[Meeting]:
		"""Meetings of any room whose [start, end] intersects the window (inclusive)."""
		...

	def lock_room(self, room_id: int) -> None:
		"""
		Lock the room until the current transaction ends.

		Raises RoomNotFound when the room does not exist.
		"""
		...
