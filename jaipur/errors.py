"""Engine error types."""


class JaipurError(Exception):
    """Base class for all engine errors."""


class InvalidConfiguration(JaipurError, ValueError):
    """Configuration is missing a parameter or has an out-of-range value."""


class IllegalActionError(JaipurError):
    """Action is not legal in the current state."""


class InternalConsistencyError(JaipurError):
    """A state invariant was violated (engine bug)."""
