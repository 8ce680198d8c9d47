"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Exception hierarchy for the link pipeline.

Every failure that must abort a run is a LinkError subclass carrying the offending
path and the underlying cause. Nothing in core exits the process: errors travel up
to LinkCommand, and the CLI turns them into a single diagnostic line.
"""
from typing import Optional


class LinkError(Exception):
    """Base class for fatal pipeline errors."""

    def __init__(self, message: str, path: Optional[str] = None, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.path = path
        self.cause = cause

    def __str__(self) -> str:
        message = super().__str__()
        if self.path is not None:
            message = f"{message}: {self.path}"
        if self.cause is not None:
            message = f"{message} ({self.cause})"
        return message


class ConfigurationError(LinkError):
    """Invalid parameter or filter pattern. Raised before any work starts."""


class TraversalError(LinkError):
    """A directory could not be listed or an entry could not be examined."""


class ReadError(LinkError):
    """A file could not be opened or read while computing its fingerprint."""


class PlacementError(LinkError):
    """Shard directory or hard link creation failed for a reason other than 'already exists'."""
