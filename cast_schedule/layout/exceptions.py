"""Layout system exceptions."""


class LayoutError(Exception):
    """Base exception for layout system errors."""



class LayoutConfigurationError(LayoutError):
    """Raised when a calendar view cannot be laid out with the given configuration."""



class UnrepresentableTimeError(LayoutConfigurationError):
    """Raised when a day start does not exist on the wall clock of the configured zone."""

