"""Exception hierarchy for configuration resolution.

Every failure aborts resolution. The library exception that triggered the
failure, if any, is chained as ``__cause__``.
"""


class ConfigError(Exception):
    """Base exception for configuration resolution errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class FileReadError(ConfigError):
    """Defaults file is missing or unreadable."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(message)


class ParseError(ConfigError):
    """Defaults file content is not a valid key-value document."""

    pass


class InvalidStageError(ConfigError):
    """Stage value is not one of the known deployment stages."""

    def __init__(self, stage: str) -> None:
        self.stage = stage
        super().__init__(f"Invalid Stage type: {stage!r}")


class RemoteConnectionError(ConfigError):
    """Parameter store session could not be created or the query failed."""

    pass
