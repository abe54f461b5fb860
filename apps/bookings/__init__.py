"""Bookings app package.

This app holds the booking model and the lifecycle services around it:
availability checks, creation, confirmation, cancellation, rescheduling
and the daily sweep that expires stale pending holds. Creation locks the
room row inside a transaction so overlapping requests are serialized.
"""
