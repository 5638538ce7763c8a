"""
Room Service

Room catalogue: create, look up and delete meeting rooms. Deleting a room
removes its meetings.
"""

import logging
from typing import List, Optional

from .config import BookingConfig
from .errors import RoomNotFound
from .models import Company, Room, RoomRequest
from .storage import RoomRepository


class RoomService:
	def __init__(
		self,
		config: BookingConfig,
		rooms: RoomRepository,
		logger: Optional[logging.Logger] = None
	):
		self.config = config
		self.rooms = rooms
		self.logger = logger or logging.getLogger(__name__)

	def create(self, request: RoomRequest) -> Room:
		"""
		Crea una sala.

		Raises:
			ValidationError: número o compañía inválidos
			RoomExists: ya existe una sala con ese número en la compañía
		"""
		request.validate()
		room = self.rooms.insert(request.to_room())
		self.logger.info(f"Room created: {room}")
		return room

	def get_all(
		self,
		name: Optional[str] = None,
		company: Optional[str] = None
	) -> List[Room]:
		"""Salas filtradas por nombre ("C12") y/o compañía (nombre o código)."""
		return self.rooms.find(
			name=name or None,
			company=Company.lookup(company) if company else None,
		)

	def get(self, room_id: int) -> Room:
		return self.rooms.find_by_id(room_id)

	def delete(self, room_id: int) -> None:
		"""Elimina la sala y, en cascada, sus meetings."""
		deleted = self.rooms.delete_by_id(room_id)

		if not deleted:
			if self.config.strict_delete:
				raise RoomNotFound(f"room {room_id} does not exist")
			self.logger.debug(f"Room {room_id} not found, nothing deleted")
			return

		self.logger.info(f"Room deleted: {room_id}")
