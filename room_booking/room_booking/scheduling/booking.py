"""
Booking Service

Meeting lifecycle: Absent -> Booked -> Absent. Meetings are created after
an overlap check and deleted by id; they are never updated in place.
"""

import logging
from typing import List, Optional

from .availability import AvailabilityGrid, compile_availability
from .config import BookingConfig
from .errors import MeetingConflict, MeetingNotFound
from .models import Meeting, MeetingRequest
from .overlap import find_conflicts
from .slots import DayLike, day_bounds
from .storage import MeetingRepository, RoomRepository


class BookingService:
	"""
	Reserva de salas en slots fijos.

	Flujo de create:
	1. Validar el request (inicio alineado a la grilla)
	2. Derivar end = start + slot_minutes
	3. Bloquear la sala para el resto de la transacción
	4. Consultar meetings de la sala alrededor del día y detectar conflictos
	5. Insertar solo si no hay conflicto
	"""

	def __init__(
		self,
		config: BookingConfig,
		meetings: MeetingRepository,
		rooms: RoomRepository,
		logger: Optional[logging.Logger] = None
	):
		self.config = config
		self.meetings = meetings
		self.rooms = rooms
		self.logger = logger or logging.getLogger(__name__)

	def create(self, request: MeetingRequest) -> Meeting:
		"""
		Crea un meeting si la sala está libre.

		Raises:
			ValidationError: request inválido
			RoomNotFound: la sala no existe
			MeetingConflict: el intervalo choca con otro meeting de la sala
		"""
		slot_minutes = self.config.slot_minutes
		request.validate(slot_minutes)
		meeting = request.to_meeting(slot_minutes)

		# Cierra la ventana entre el chequeo y el insert
		self.meetings.lock_room(meeting.room_id)

		window_start, window_end = day_bounds(meeting.start)
		candidates = self.meetings.find_by_room_overlapping(
			meeting.room_id, window_start, window_end
		)
		conflicts = find_conflicts(meeting.room_id, meeting.start, meeting.end, candidates)

		if conflicts:
			self.logger.info(
				f"Meeting rejected for room {meeting.room_id} at {meeting.start.isoformat()}: "
				f"conflicts with {', '.join(str(c) for c in conflicts)}"
			)
			raise MeetingConflict(
				f"room {meeting.room_id} is already booked at {meeting.start.isoformat()}"
			)

		stored = self.meetings.insert(meeting)
		self.logger.info(f"Meeting created: {stored}")
		return stored

	def get_all(self, room_id: Optional[int] = None) -> List[Meeting]:
		"""Todos los meetings, opcionalmente filtrados por sala (0 o None = todas)."""
		return self.meetings.find(room_id=room_id or None)

	def get(self, meeting_id: int) -> Meeting:
		return self.meetings.find_by_id(meeting_id)

	def delete(self, meeting_id: int) -> None:
		"""
		Elimina un meeting por id.

		Con strict_delete desactivado, borrar un id inexistente no es error.
		"""
		deleted = self.meetings.delete_by_id(meeting_id)

		if not deleted:
			if self.config.strict_delete:
				raise MeetingNotFound(f"meeting {meeting_id} does not exist")
			self.logger.debug(f"Meeting {meeting_id} not found, nothing deleted")
			return

		self.logger.info(f"Meeting deleted: {meeting_id}")

	def get_available(self, day: DayLike) -> AvailabilityGrid:
		"""
		Disponibilidad de todas las salas para un día (UTC).

		Algoritmo:
			1. Obtener todas las salas
			2. Obtener meetings que se solapan con [00:00, 24:00] del día
			3. Delegar en compile_availability
		"""
		rooms = self.rooms.find()
		start, end = day_bounds(day)
		meetings = self.meetings.find_overlapping(start, end)

		return compile_availability(
			start, self.config.slot_minutes, rooms, meetings, log=self.logger
		)
