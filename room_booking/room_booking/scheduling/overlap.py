"""
Overlap Detection Service

Detects scheduling conflicts between a proposed meeting and the meetings
already booked in the same room.

Boundaries are inclusive: a meeting ending at 10:00 conflicts with one
starting at 10:00.
"""

from datetime import datetime
from typing import Iterable, List

from .models import Meeting
from .slots import to_utc


def intervals_conflict(
	start: datetime,
	end: datetime,
	other_start: datetime,
	other_end: datetime
) -> bool:
	"""
	Detecta si dos intervalos cerrados se solapan.

	Equivale a verificar ambas direcciones con comparaciones inclusivas:
	- el nuevo contiene el inicio o el fin del existente, o
	- el existente contiene el inicio o el fin del nuevo

	Intervalos que se tocan (end == other_start) cuentan como solapados.
	"""
	return start <= other_end and other_start <= end


def find_conflicts(
	room_id: int,
	start: datetime,
	end: datetime,
	existing: Iterable[Meeting]
) -> List[Meeting]:
	"""
	Obtiene los meetings existentes que chocan con [start, end].

	Args:
		room_id: id de la sala
		start: inicio del rango a validar
		end: fin del rango a validar
		existing: meetings candidatos (se filtran por sala aquí mismo)

	Returns:
		list[Meeting]: meetings en conflicto, en el orden recibido
	"""
	start = to_utc(start)
	end = to_utc(end)

	return [
		meeting for meeting in existing
		if meeting.room_id == room_id
		and intervals_conflict(start, end, meeting.start, meeting.end)
	]


def has_conflict(
	room_id: int,
	start: datetime,
	end: datetime,
	existing: Iterable[Meeting]
) -> bool:
	"""True si algún meeting de la misma sala choca con [start, end]."""
	return bool(find_conflicts(room_id, start, end, existing))
