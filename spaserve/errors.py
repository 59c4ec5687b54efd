class SpaServeError(Exception):
    """Base class for all spaserve errors."""


class StartupError(SpaServeError):
    """Configuration is unusable; the server must not start."""


class BindError(SpaServeError):
    """The listening socket could not be bound."""

    def __init__(self, host: str, port: int, reason: str):
        self.host = host
        self.port = port
        self.reason = reason
        super().__init__(f"Cannot bind {host}:{port}: {reason}")


class FileReadError(SpaServeError):
    """A matched file could not be read while handling a request."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")
