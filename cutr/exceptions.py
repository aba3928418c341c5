"""Exception classes and exit codes for cutr."""


class ExitCode:
    """Standard exit codes for the cutr application."""

    OK = 0  # Success
    FILE_ERROR = 1  # One or more input files could not be read
    USAGE = 2  # Command line usage error
    CONFIG = 3  # Configuration file error
    OUTPUT = 4  # Output could not be written
    INTERNAL = 99  # Internal/unexpected error


class CliError(Exception):
    """Base class for command line interface errors."""

    exit_code = ExitCode.INTERNAL


class UsageError(CliError):
    """Error in command line usage or invalid parameters."""

    exit_code = ExitCode.USAGE


class ConfigError(CliError):
    """Error in configuration file format or content."""

    exit_code = ExitCode.CONFIG


# =============================================================================
# Selection (position list) errors
# =============================================================================


class SelectionError(UsageError):
    """Base class for errors raised while parsing a selection string.

    Subclasses keep the offending values as attributes so callers can inspect
    them; the user-facing text is produced by :meth:`__str__`.
    """

    def __str__(self) -> str:
        return self.render()

    def render(self) -> str:
        raise NotImplementedError


class InvalidToken(SelectionError):
    """A token (or one number of a range) failed lexical or numeric validation."""

    def __init__(self, token: str):
        super().__init__(token)
        self.token = token

    def render(self) -> str:
        return f'illegal list value: "{self.token}"'


class InvalidRangeOrder(SelectionError):
    """A ``low-high`` range where ``low`` is not strictly lower than ``high``."""

    def __init__(self, low: int, high: int):
        super().__init__(low, high)
        self.low = low
        self.high = high

    def render(self) -> str:
        return f"First number in range ({self.low}) must be lower than second number ({self.high})"


class EmptySelection(SelectionError):
    """The selection string, or one of its comma-separated tokens, is empty."""

    def render(self) -> str:
        return 'illegal list value: ""'
