class ParseError(ValueError):
    """Raised when the input file cannot be read."""
    def __init__(self, message: str, *, path: str | None = None, cause: Exception | None = None):
        if path:
            message = f"{message} [file={path}]"
        super().__init__(message)
        self.path = path
        self.cause = cause


class InputUnavailableError(ParseError):
    """Raised when the input file does not exist."""


class ConfigError(ValueError):
    """Raised when a run configuration file is unreadable or invalid."""
    def __init__(self, message: str, *, path: str | None = None):
        if path:
            message = f"{message} [config={path}]"
        super().__init__(message)
        self.path = path
