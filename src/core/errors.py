"""
Exceptions raised while reading schedules and talking to Todoist.
"""


class ScheduleError(ValueError):
    """The schedule file cannot be turned into pickup events."""


class MalformedRecordError(ScheduleError):
    """A record is structurally wrong (missing columns, odd summary)."""


class InvalidDateError(ScheduleError):
    """A date field did not resolve into a calendar date."""


class NoEventsError(ScheduleError):
    """Nothing is left to create after filtering."""


class ConfigError(RuntimeError):
    """Required configuration is missing."""


class RemoteError(RuntimeError):
    """A Todoist API call failed."""
