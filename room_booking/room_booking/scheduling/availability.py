"""
Availability Service

Builds the availability grid of a day: for every room, every slot of the
day mapped to the meeting that occupies it, or None when it is free.

The grid is rebuilt from storage snapshots on every request.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional

from .models import Meeting, Room
from .slots import DayLike, day_start, get_day_slots, slot_start

logger = logging.getLogger(__name__)

SlotRow = Dict[datetime, Optional[Meeting]]


@dataclass
class AvailabilityGrid:
	"""
	Disponibilidad de todas las salas para un día.

	Attributes:
		day: fecha consultada (UTC)
		slot_minutes: duración de slot usada para construir la grilla
		rows: {room_id: {slot_start: Meeting | None}}
	"""

	day: date
	slot_minutes: int
	rows: Dict[int, SlotRow] = field(default_factory=dict)

	def __getitem__(self, room_id: int) -> SlotRow:
		return self.rows[room_id]

	def __contains__(self, room_id: object) -> bool:
		return room_id in self.rows

	def __len__(self) -> int:
		return len(self.rows)

	def room_ids(self) -> List[int]:
		return list(self.rows)

	def free_slots(self, room_id: int) -> List[datetime]:
		return [slot for slot, meeting in self.rows[room_id].items() if meeting is None]

	def occupied_slots(self, room_id: int) -> Dict[datetime, Meeting]:
		return {
			slot: meeting
			for slot, meeting in self.rows[room_id].items()
			if meeting is not None
		}

	def as_dict(self) -> Dict[str, Dict[str, Optional[dict]]]:
		"""
		Serializa la grilla: {"<room_id>": {"<slot ISO-8601>": meeting | None}}.
		"""
		return {
			str(room_id): {
				slot.isoformat(): (meeting.as_dict() if meeting else None)
				for slot, meeting in row.items()
			}
			for room_id, row in self.rows.items()
		}


def compile_availability(
	day: DayLike,
	slot_minutes: int,
	rooms: Iterable[Room],
	meetings: Iterable[Meeting],
	log: Optional[logging.Logger] = None
) -> AvailabilityGrid:
	"""
	Construye la grilla de disponibilidad para un día.

	Args:
		day: fecha a consultar (la hora se ignora)
		slot_minutes: duración del slot
		rooms: todas las salas a incluir
		meetings: meetings que se solapan con el día

	Returns:
		AvailabilityGrid con una fila completa por sala

	Algoritmo:
		1. Inicializar cada sala con todos los slots del día vacíos
		2. Para cada meeting, truncar su inicio al slot correspondiente (UTC)
		3. Si la fila de su sala contiene ese slot, asignarlo
		4. Ignorar meetings de salas desconocidas o fuera del día
	"""
	log = log or logger
	slots = get_day_slots(day, slot_minutes)
	grid = AvailabilityGrid(day=day_start(day).date(), slot_minutes=slot_minutes)

	# 1. Filas completas, todas vacías
	for room in rooms:
		grid.rows[room.id] = {slot: None for slot in slots}

	# 2-3. Ubicar cada meeting en su slot
	for meeting in meetings:
		row = grid.rows.get(meeting.room_id)
		if row is None:
			continue

		key = slot_start(meeting.start, slot_minutes)
		if key not in row:
			continue

		current = row[key]
		if current is not None and current.id != meeting.id:
			# Dos meetings en el mismo slot: el chequeo de conflictos fue evitado
			log.warning(
				f"Slot {key.isoformat()} of room {meeting.room_id} is double booked: "
				f"{current} and {meeting}"
			)

		row[key] = meeting

	return grid
