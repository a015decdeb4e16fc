class TimeBlockError(Exception):
    """Raised for invalid periods or time-block tables."""
