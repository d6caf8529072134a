"""Worktime package.

Schedule resolution and time-entry aggregation for a time-tracking system,
organized by feature modules (schedules, time_entries, attendance, stats)
with read-only repository adapters and pure service layers.
"""
