from pathlib import Path

from pythcheck.models import Position


class PythcheckError(Exception):
    """Base class for errors raised by pythcheck."""


class SourceReadError(PythcheckError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


class SourceEncodingError(PythcheckError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path} is not valid UTF-8: {reason}")
        self.path = path
        self.reason = reason


class ParseError(PythcheckError):
    def __init__(self, path: Path, position: Position, detail: str) -> None:
        super().__init__(f"{path}:{position}: {detail}")
        self.path = path
        self.position = position
        self.detail = detail


class DiscoveryError(PythcheckError):
    """The PATH argument cannot be scanned."""


class ConfigError(PythcheckError):
    """Invalid run configuration."""
