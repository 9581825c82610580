"""Exceptions raised by the Epoch Forge engine."""

from __future__ import annotations

from collections.abc import Iterable


class ForgeError(Exception):
    """Base class for engine errors."""


class ConfigurationError(ForgeError, ValueError):
    """The match configuration cannot be resolved as entered."""


class ShareCodeError(ConfigurationError):
    """A share code could not be decoded into a match configuration."""


class ResolutionIntegrityError(ForgeError, RuntimeError):
    """A resolved configuration still contains unresolved fields."""

    def __init__(self, fields: Iterable[str]) -> None:
        self.fields = tuple(fields)
        super().__init__(
            "Random resolution failed; unresolved fields: " + ", ".join(self.fields)
        )


class RerollLockedError(ForgeError):
    """Rerolls are disabled for the resolved preset."""
