"""
Exceptions raised by the composition pipeline.

Every failure of a single composition is reported as one of the kinds below.
They also derive from the matching builtin exception so that callers catching
``ValueError`` or ``OSError`` keep working.
"""

from typing import Iterable, Optional


class BeautifyError(Exception):
    """Base class of all composition errors."""


class InvalidImage(BeautifyError, ValueError):
    """Source image dimensions cannot be resolved."""


class InvalidConfig(BeautifyError, ValueError):
    """A configuration option is out of range."""


class UnknownPreset(BeautifyError, ValueError):
    """Requested background preset is not in the catalog."""

    def __init__(self, name: str, available: Iterable[str]):
        self.name = name
        self.available = tuple(available)
        super().__init__(
            "Unknown preset: %s. Available: %s" % (name, ", ".join(self.available))
        )


class IOFailure(BeautifyError, OSError):
    """Reading, encoding or writing an image failed."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        if path is not None:
            message = "%s: %s" % (message, path)
        super().__init__(message)
