"""
Tests for scheduling/booking.py

Tests the meeting lifecycle (create, get, delete) and daily availability
against in-memory repositories.
"""

import logging
import unittest
from datetime import date, datetime, timedelta

import pytz

from room_booking.room_booking.scheduling.booking import BookingService
from room_booking.room_booking.scheduling.config import BookingConfig
from room_booking.room_booking.scheduling.errors import (
	MeetingConflict,
	MeetingNotFound,
	RoomNotFound,
	ValidationError,
)
from room_booking.room_booking.scheduling.models import Company, MeetingRequest, Room
from room_booking.room_booking.tests.fakes import InMemoryMeetingRepository, InMemoryRoomRepository

UTC = pytz.UTC
DAY = date(2026, 1, 20)


def at(hour, minute=0, day=DAY):
	return UTC.localize(datetime(day.year, day.month, day.day, hour, minute))


class BookingTestCase(unittest.TestCase):
	config = BookingConfig()

	def setUp(self):
		self.rooms = InMemoryRoomRepository()
		self.meetings = InMemoryMeetingRepository(self.rooms)
		self.room_1 = self.rooms.insert(Room(id=None, name="C1", number=1, company=Company.COKE))
		self.room_2 = self.rooms.insert(Room(id=None, name="P1", number=1, company=Company.PEPSI))
		self.service = BookingService(self.config, self.meetings, self.rooms)

	def book(self, room_id, start, title="Weekly sync", attendees=None):
		return self.service.create(MeetingRequest(
			room_id=room_id,
			title=title,
			start=start,
			attendees=attendees or [],
		))


class TestCreateMeeting(BookingTestCase):
	"""Tests for BookingService.create."""

	def test_create_and_get(self):
		"""Test a created meeting can be read back by id."""
		created = self.book(self.room_1.id, at(9), attendees=["ana@example.com"])

		fetched = self.service.get(created.id)

		self.assertEqual(fetched.id, created.id)
		self.assertEqual(fetched.room_id, self.room_1.id)
		self.assertEqual(fetched.title, "Weekly sync")
		self.assertEqual(fetched.attendees, ["ana@example.com"])
		self.assertIsNotNone(fetched.created)

	def test_end_derived_from_slot(self):
		"""Test end is always start plus the slot duration."""
		created = self.book(self.room_1.id, at(9))

		self.assertEqual(created.start, at(9))
		self.assertEqual(created.end, at(10))

	def test_title_trimmed(self):
		"""Test surrounding whitespace is removed from the title."""
		created = self.book(self.room_1.id, at(9), title="  Planning  ")

		self.assertEqual(created.title, "Planning")

	def test_same_slot_conflicts(self):
		"""Test booking the same slot twice fails with MeetingConflict."""
		self.book(self.room_1.id, at(9))

		with self.assertRaises(MeetingConflict):
			self.book(self.room_1.id, at(9))

		self.assertEqual(len(self.service.get_all(self.room_1.id)), 1)

	def test_adjacent_slot_conflicts(self):
		"""Test touching meetings conflict in both directions."""
		self.book(self.room_1.id, at(9))

		for start in (at(8), at(10)):
			with self.subTest(start=start):
				with self.assertRaises(MeetingConflict):
					self.book(self.room_1.id, start)

	def test_non_overlapping_succeed(self):
		"""Test meetings with a free slot between them both succeed."""
		first = self.book(self.room_1.id, at(9))
		second = self.book(self.room_1.id, at(11))

		self.assertNotEqual(first.id, second.id)

	def test_other_room_same_slot(self):
		"""Test the same slot in another room is free."""
		self.book(self.room_1.id, at(9))

		created = self.book(self.room_2.id, at(9))

		self.assertEqual(created.room_id, self.room_2.id)

	def test_conflict_across_midnight(self):
		"""Test a meeting at 00:00 conflicts with one ending at midnight the day before."""
		self.book(self.room_1.id, at(23, day=DAY - timedelta(days=1)))

		with self.assertRaises(MeetingConflict):
			self.book(self.room_1.id, at(0))

	def test_offset_start_converted(self):
		"""Test a start with an offset is stored in UTC."""
		start = pytz.timezone("America/Bogota").localize(datetime(2026, 1, 20, 4, 0))

		created = self.book(self.room_1.id, start)

		self.assertEqual(created.start, at(9))

	def test_room_locked_before_insert(self):
		"""Test the room is locked for the transaction."""
		self.book(self.room_1.id, at(9))

		self.assertEqual(self.meetings.locked, [self.room_1.id])

	def test_unknown_room(self):
		"""Test booking a missing room fails with RoomNotFound."""
		with self.assertRaises(RoomNotFound):
			self.book(999, at(9))

	def test_invalid_requests(self):
		"""Test malformed requests fail before reaching storage."""
		cases = [
			MeetingRequest(room_id=0, title="t", start=at(9)),
			MeetingRequest(room_id=self.room_1.id, title="", start=at(9)),
			MeetingRequest(room_id=self.room_1.id, title="   ", start=at(9)),
			MeetingRequest(room_id=self.room_1.id, title="t", start=None),
			MeetingRequest(room_id=self.room_1.id, title="t", start=at(9, 30)),
		]
		for request in cases:
			with self.subTest(request=request):
				with self.assertRaises(ValidationError):
					self.service.create(request)

		self.assertEqual(self.meetings.locked, [])
		self.assertEqual(self.service.get_all(), [])

	def test_conflict_logged(self):
		"""Test a rejected booking is logged."""
		self.book(self.room_1.id, at(9))

		with self.assertLogs("room_booking.room_booking.scheduling.booking", level=logging.INFO) as logs:
			with self.assertRaises(MeetingConflict):
				self.book(self.room_1.id, at(9))

		self.assertIn("Meeting rejected", logs.output[0])


class TestHalfHourSlots(BookingTestCase):
	"""Tests for BookingService with 30 minute slots."""

	config = BookingConfig(slot_minutes=30)

	def test_half_hour_start(self):
		"""Test a half hour start is accepted and ends 30 minutes later."""
		created = self.book(self.room_1.id, at(9, 30))

		self.assertEqual(created.end, at(10))

	def test_quarter_hour_rejected(self):
		"""Test a start off the 30 minute grid is rejected."""
		with self.assertRaises(ValidationError):
			self.book(self.room_1.id, at(9, 15))


class TestGetAndDeleteMeeting(BookingTestCase):
	"""Tests for BookingService.get_all, get and delete."""

	def test_get_all_filters_by_room(self):
		"""Test get_all lists every meeting or only those of a room."""
		self.book(self.room_1.id, at(9))
		self.book(self.room_1.id, at(12))
		self.book(self.room_2.id, at(9))

		self.assertEqual(len(self.service.get_all()), 3)
		self.assertEqual(len(self.service.get_all(self.room_1.id)), 2)
		self.assertEqual(len(self.service.get_all(0)), 3)

	def test_get_missing(self):
		"""Test reading a missing meeting fails with MeetingNotFound."""
		with self.assertRaises(MeetingNotFound):
			self.service.get(42)

	def test_delete_then_get(self):
		"""Test a deleted meeting is gone."""
		created = self.book(self.room_1.id, at(9))

		self.service.delete(created.id)

		with self.assertRaises(MeetingNotFound):
			self.service.get(created.id)

	def test_delete_frees_slot(self):
		"""Test the slot can be booked again after deleting."""
		created = self.book(self.room_1.id, at(9))
		self.service.delete(created.id)

		rebooked = self.book(self.room_1.id, at(9))

		self.assertEqual(rebooked.start, at(9))

	def test_delete_missing_is_noop(self):
		"""Test deleting a missing id succeeds by default."""
		self.assertIsNone(self.service.delete(42))

	def test_strict_delete_missing(self):
		"""Test deleting a missing id fails when strict delete is on."""
		service = BookingService(BookingConfig(strict_delete=True), self.meetings, self.rooms)

		with self.assertRaises(MeetingNotFound):
			service.delete(42)


class TestGetAvailable(BookingTestCase):
	"""Tests for BookingService.get_available."""

	def test_two_rooms_two_meetings(self):
		"""Test the grid for two rooms with one meeting each."""
		a = self.book(self.room_1.id, at(1))
		b = self.book(self.room_2.id, at(10))

		grid = self.service.get_available(DAY)

		self.assertEqual(sorted(grid.room_ids()), [self.room_1.id, self.room_2.id])
		self.assertEqual(grid[self.room_1.id][at(1)].id, a.id)
		self.assertEqual(grid[self.room_2.id][at(10)].id, b.id)
		free = len(grid.free_slots(self.room_1.id)) + len(grid.free_slots(self.room_2.id))
		self.assertEqual(free, 46)

	def test_other_days_excluded(self):
		"""Test meetings of other days do not show up."""
		self.book(self.room_1.id, at(9, day=DAY + timedelta(days=1)))

		grid = self.service.get_available(DAY)

		self.assertEqual(grid.occupied_slots(self.room_1.id), {})

	def test_datetime_day(self):
		"""Test a datetime query uses its UTC date."""
		self.book(self.room_1.id, at(9))

		grid = self.service.get_available(at(18))

		self.assertEqual(grid.day, DAY)
		self.assertEqual(len(grid.occupied_slots(self.room_1.id)), 1)

	def test_no_rooms(self):
		"""Test an empty catalogue gives an empty grid."""
		service = BookingService(self.config, InMemoryMeetingRepository(InMemoryRoomRepository()), InMemoryRoomRepository())

		self.assertEqual(len(service.get_available(DAY)), 0)


if __name__ == "__main__":
	unittest.main()
