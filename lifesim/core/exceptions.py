"""Custom exceptions used throughout the simulator package."""

from typing import Any, Optional


class SimulatorError(Exception):
    """Base exception for all simulator errors.

    All simulator-specific exceptions should inherit from this class.
    This allows catching all simulator errors with a single except clause.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """

        super().__init__(message)
        self.details = details or {}


class ConfigurationError(SimulatorError):
    """Raised when there's an error in configuration.

    This includes:
    - Invalid configuration value (e.g. non-positive grid width)
    - Malformed YAML
    - Configuration validation failures
    """

    def __init__(
        self,
        config_key: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """Initialize configuration error.

        Args:
            config_key: The configuration key that caused the error
            message: Description of what's wrong. If omitted, config_key is
                treated as the message and the key defaults to "configuration".
            details: Additional context
        """
        if message is None:
            message = config_key or "Invalid configuration"
            config_key = "configuration"
        if config_key is None:
            config_key = "configuration"

        full_message = f"Configuration error for '{config_key}': {message}"
        super().__init__(message=full_message, details=details)
        self.config_key = config_key


class GridBoundsError(SimulatorError):
    """Raised when a position lies outside the board.

    Neighbor counting never raises this: off-grid neighbors simply count as
    dead. It is raised for explicit lookups and for writes into a grid,
    where an off-grid position means a caller bug.
    """

    def __init__(
        self,
        col: int,
        row: int,
        width: int,
        height: int,
        details: Optional[dict[str, Any]] = None,
    ):
        details = details or {}
        details["position"] = (col, row)
        details["size"] = (width, height)
        message = (
            f"Position (col={col}, row={row}) is outside the "
            f"{width}x{height} board"
        )
        super().__init__(message=message, details=details)
        self.col = col
        self.row = row
        self.width = width
        self.height = height


class PatternError(SimulatorError):
    """Raised when a seed pattern cannot be parsed or placed.

    Examples:
    - Unknown glyph in plaintext rows
    - Pattern larger than the target board
    """

    def __init__(
        self,
        message: str,
        pattern: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        if pattern is not None:
            details = details or {}
            details["pattern"] = pattern
        super().__init__(message=message, details=details)
        self.pattern = pattern
