"""
Slot Grid Service

Generates the fixed time slots of a day, all in UTC:
- Day slot starts for a given slot duration
- Slot alignment checks and truncation
- Day bounds used for storage queries
"""

from datetime import date, datetime, time, timedelta
from typing import List, Tuple, Union

import pytz

from .errors import ValidationError

MINUTES_PER_DAY = 24 * 60

DayLike = Union[date, datetime]


def to_utc(value: datetime) -> datetime:
	"""
	Normaliza un datetime a UTC.

	Los datetimes naive se interpretan como UTC; los aware se convierten.
	"""
	if value.tzinfo is None:
		return pytz.UTC.localize(value)
	return value.astimezone(pytz.UTC)


def validate_slot_minutes(slot_minutes: int) -> int:
	"""
	Valida la duración del slot en tiempo de configuración.

	Args:
		slot_minutes: duración del slot en minutos

	Returns:
		int: la duración validada

	Raises:
		ValidationError: si no es un entero positivo que divide 1440
	"""
	if isinstance(slot_minutes, float) and not slot_minutes.is_integer():
		raise ValidationError(f"slot duration must be a whole number of minutes, got {slot_minutes!r}")

	try:
		value = int(slot_minutes)
	except (TypeError, ValueError):
		raise ValidationError(f"slot duration must be an integer, got {slot_minutes!r}")

	if value <= 0:
		raise ValidationError(f"slot duration must be positive, got {value}")

	if MINUTES_PER_DAY % value != 0:
		raise ValidationError(f"slot duration of {value} minutes does not evenly divide a day")

	return value


def day_start(day: DayLike) -> datetime:
	"""Medianoche UTC del día (la hora del día se ignora)."""
	if isinstance(day, datetime):
		day = to_utc(day).date()
	return pytz.UTC.localize(datetime.combine(day, time.min))


def day_bounds(day: DayLike) -> Tuple[datetime, datetime]:
	"""
	Límites del día en UTC: (00:00, 24:00).

	El fin es la medianoche del día siguiente; las consultas de storage
	lo tratan como límite inclusivo.
	"""
	start = day_start(day)
	return start, start + timedelta(days=1)


def get_day_slots(day: DayLike, slot_minutes: int) -> List[datetime]:
	"""
	Genera los inicios de slot que cubren un día.

	Args:
		day: fecha (date o datetime; la hora se ignora)
		slot_minutes: duración del slot en minutos

	Returns:
		list[datetime]: 1440 // slot_minutes instantes UTC, ordenados,
		empezando a medianoche

	Algoritmo:
		1. Calcular medianoche UTC del día
		2. Avanzar slot_minutes por cada slot completo del día
		3. Retornar una lista nueva (llamadas repetidas dan el mismo resultado)
	"""
	if slot_minutes <= 0:
		raise ValidationError(f"slot duration must be positive, got {slot_minutes}")

	start = day_start(day)
	step = timedelta(minutes=slot_minutes)

	return [start + step * index for index in range(MINUTES_PER_DAY // slot_minutes)]


def minutes_since_midnight(instant: datetime) -> int:
	instant = to_utc(instant)
	return instant.hour * 60 + instant.minute


def is_slot_aligned(instant: datetime, slot_minutes: int) -> bool:
	"""
	Verifica que un instante coincide con el inicio de un slot del día.

	Segundos y microsegundos deben ser cero y los minutos desde medianoche
	(UTC) múltiplo de slot_minutes.
	"""
	instant = to_utc(instant)
	if instant.second or instant.microsecond:
		return False
	return minutes_since_midnight(instant) % slot_minutes == 0


def slot_start(instant: datetime, slot_minutes: int) -> datetime:
	"""Trunca un instante al inicio de su slot (UTC)."""
	instant = to_utc(instant)
	offset = minutes_since_midnight(instant) % slot_minutes
	truncated = instant.replace(second=0, microsecond=0)
	return truncated - timedelta(minutes=offset)
