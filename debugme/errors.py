"""Domain errors raised by the progression and recommendation engines.

All of them are local and recoverable. The API layer maps them onto HTTP
status codes; nothing here performs I/O, so there is no retryable class.
"""


class DebugMeError(Exception):
    """Base class for every error the engines raise on purpose."""


class InvalidArgument(DebugMeError, ValueError):
    """Caller passed a value outside the operation's contract."""


class NotFound(DebugMeError, LookupError):
    """A catalog entry or stored item does not exist."""


class IndexOutOfRange(NotFound, IndexError):
    """A profile index that does not point at a stored profile."""


class PreconditionViolation(DebugMeError):
    """The operation is valid in general but not in the current state."""


class CatalogError(DebugMeError):
    """Reference data failed validation while loading."""


class TutorUnavailable(DebugMeError):
    """The chat model could not answer; the message is safe to show the user."""
