"""
Booking Configuration

Settings the scheduling core needs. On a site they come from the
Room Booking Settings DocType (see room_booking.room_booking.services).
"""

from dataclasses import dataclass
from typing import Any, Mapping

from .slots import validate_slot_minutes

DEFAULT_SLOT_MINUTES = 60


@dataclass(frozen=True)
class BookingConfig:
	"""
	Attributes:
		slot_minutes: slot length; every meeting lasts exactly one slot
		strict_delete: deleting a missing id raises NotFound instead of succeeding
	"""

	slot_minutes: int = DEFAULT_SLOT_MINUTES
	strict_delete: bool = False

	def __post_init__(self) -> None:
		object.__setattr__(self, "slot_minutes", validate_slot_minutes(self.slot_minutes))
		object.__setattr__(self, "strict_delete", bool(self.strict_delete))

	@classmethod
	def from_mapping(cls, values: Mapping[str, Any]) -> "BookingConfig":
		"""Build a config from a plain mapping, ignoring empty values."""
		kwargs = {}
		if values.get("slot_minutes") not in (None, "", 0):
			kwargs["slot_minutes"] = values["slot_minutes"]
		if values.get("strict_delete") not in (None, ""):
			kwargs["strict_delete"] = _as_bool(values["strict_delete"])
		return cls(**kwargs)


def _as_bool(value: Any) -> bool:
	if isinstance(value, str):
		return value.strip().lower() in ("1", "true", "yes", "on")
	return bool(value)
