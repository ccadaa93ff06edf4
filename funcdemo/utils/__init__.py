"""
Utility functions module.

Date/time helpers used by the date/time demo. All instants are
timezone-aware; naive datetimes are rejected so that arithmetic and
formatting never depend on the host's local timezone.
"""
