# Copyright (c) 2026, Sebastian Ortiz Valencia and Contributors
# See license.txt

"""
Tests for Meeting DocType and the Frappe repositories

Tests slot alignment, derived end, conflicts and the API endpoints
against a site.
"""

from datetime import datetime

import frappe
import pytz
from frappe.tests.utils import FrappeTestCase
from frappe.utils import get_datetime

from room_booking.api.meetings import create_meeting, delete_meeting, get_available, get_meeting
from room_booking.room_booking.scheduling.errors import (
	MeetingConflict,
	MeetingNotFound,
	RoomNotFound,
	ValidationError,
)
from room_booking.room_booking.scheduling.models import Meeting
from room_booking.room_booking.storage import FrappeMeetingRepository


class TestMeeting(FrappeTestCase):
	"""Tests for Meeting DocType."""

	def setUp(self):
		"""Set up test data before each test."""
		self.room = frappe.get_doc({
			"doctype": "Meeting Room",
			"number": 9201,
			"company": "C",
		})
		self.room.insert(ignore_permissions=True)

	def make_meeting(self, start, title="Planning"):
		meeting = frappe.get_doc({
			"doctype": "Meeting",
			"room": self.room.name,
			"title": title,
			"start_datetime": start,
		})
		meeting.insert(ignore_permissions=True)
		return meeting

	def test_end_derived(self):
		"""Test end_datetime is start plus the slot duration."""
		meeting = self.make_meeting("2030-01-20 09:00:00")

		self.assertEqual(get_datetime(meeting.end_datetime), datetime(2030, 1, 20, 10, 0))

	def test_unaligned_start(self):
		"""Test a start off the slot grid is rejected."""
		with self.assertRaises(ValidationError):
			self.make_meeting("2030-01-20 09:30:00")

	def test_conflict_from_desk(self):
		"""Test the DocType rejects touching meetings in the same room."""
		self.make_meeting("2030-01-20 09:00:00")

		with self.assertRaises(MeetingConflict):
			self.make_meeting("2030-01-20 10:00:00")

	def test_not_editable(self):
		"""Test a booked meeting cannot be modified."""
		meeting = self.make_meeting("2030-01-20 09:00:00")
		meeting.title = "Renamed"

		with self.assertRaises(ValidationError):
			meeting.save(ignore_permissions=True)

	def test_repository_round_trip(self):
		"""Test the repository stores UTC and reads it back aware."""
		repo = FrappeMeetingRepository()
		start = pytz.UTC.localize(datetime(2030, 1, 20, 12))

		stored = repo.insert(Meeting(
			id=None,
			room_id=int(self.room.name),
			title="Round trip",
			start=start,
			end=start.replace(hour=13),
			attendees=["ana@example.com"],
		))
		fetched = repo.find_by_id(stored.id)

		self.assertEqual(fetched.start, start)
		self.assertEqual(fetched.attendees, ["ana@example.com"])
		self.assertIsNotNone(fetched.created)
		self.assertTrue(repo.delete_by_id(stored.id))
		self.assertFalse(repo.delete_by_id(stored.id))

	def test_repository_missing_room(self):
		"""Test locking a missing room fails with RoomNotFound."""
		with self.assertRaises(RoomNotFound):
			FrappeMeetingRepository().lock_room(987654)

	def test_api_create_get_delete(self):
		"""Test the whitelisted endpoints end to end."""
		created = create_meeting(
			room_id=str(self.room.name),
			title="API",
			start="2030-01-20T15:00:00Z",
			attendees='["luis@example.com"]',
		)

		self.assertEqual(created["end"], "2030-01-20T16:00:00+00:00")
		self.assertEqual(get_meeting(str(created["id"]))["title"], "API")

		grid = get_available("2030-01-20")
		self.assertEqual(grid[str(self.room.name)]["2030-01-20T15:00:00+00:00"]["id"], created["id"])

		delete_meeting(str(created["id"]))
		with self.assertRaises(MeetingNotFound):
			get_meeting(str(created["id"]))

	def test_api_conflict(self):
		"""Test the endpoint answers a double booking with MeetingConflict (409)."""
		create_meeting(room_id=str(self.room.name), title="First", start="2030-01-20T15:00:00Z")

		with self.assertRaises(MeetingConflict) as ctx:
			create_meeting(room_id=str(self.room.name), title="Second", start="2030-01-20T15:00:00Z")

		self.assertEqual(ctx.exception.http_status_code, 409)

	def tearDown(self):
		"""Clean up after tests."""
		frappe.db.rollback()
