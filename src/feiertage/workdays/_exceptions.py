class WorkCalendarError(ValueError):
    """Base exception for all work-calendar errors."""
