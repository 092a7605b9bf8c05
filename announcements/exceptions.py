"""
announcements/exceptions.py

Client-visible failures raised by AnnouncementService. Views translate both
into a 422 with a null body; database errors are never wrapped here.
"""


class AnnouncementError(Exception):
    """Base class for announcement service errors."""


class InvalidArgument(AnnouncementError, ValueError):
    """The caller did not supply a usable user."""


class NotFound(AnnouncementError, LookupError):
    """The referenced announcement does not exist."""
