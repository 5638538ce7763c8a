"""
Scheduling Services Module

This module provides core business logic for room booking. It does not
import Frappe; storage and transport are passed in as collaborators.
- Slot grid generation (slots.py)
- Overlap detection (overlap.py)
- Availability grid (availability.py)
- Meeting lifecycle (booking.py)
- Room catalogue (rooms.py)
"""
