class CalendarError(Exception):
    """Raised for invalid holiday calendar data."""
