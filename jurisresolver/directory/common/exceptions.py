"""Exceptions raised by the court directory.

The hierarchy mirrors the three ways resolution can go wrong:

- The directory could not be acquired (AcquisitionException), including the
  case where acquisition "succeeded" but produced nothing usable
  (EmptyDirectoryException).
- The directory is fine but a jurisdiction token matched nothing
  (UnrecognizedJurisdictionException).
- The configuration handed to the directory is invalid
  (ConfigurationException).

None of these are retried automatically.
"""

from typing import Any


class DirectoryException(Exception):
    """Base class for all court directory errors.

    Attributes:
        message: Human readable description of the failure.
        context: Extra structured data for logging and error payloads.
    """

    def __init__(
        self, message: str, context: dict[str, Any] | None = None
    ) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(message)


class AcquisitionException(DirectoryException):
    """The court record store could not produce a directory."""

    def __init__(
        self,
        message: str,
        source: str,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.source = source
        super().__init__(message, context={"source": source, **(context or {})})


class EmptyDirectoryException(AcquisitionException):
    """Acquisition returned zero usable court records.

    Treated exactly like any other acquisition failure. Zero courts is never
    a legitimate directory.
    """

    def __init__(self, source: str) -> None:
        super().__init__(
            f"Court record store '{source}' returned no usable courts",
            source=source,
        )


class UnrecognizedJurisdictionException(DirectoryException):
    """No resolution strategy matched the jurisdiction token."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(
            f"Unrecognized jurisdiction: {token}", context={"token": token}
        )


class NoCourtsAtLevelException(UnrecognizedJurisdictionException):
    """The token matched courts, but none of them at the requested level.

    Raised instead of returning an empty list, which would mean "all courts".
    """

    def __init__(self, token: str, level: str) -> None:
        super().__init__(token)
        self.level = level
        self.message = f"No {level} courts in jurisdiction: {token}"
        self.context["level"] = level
        self.args = (self.message,)


class ConfigurationException(DirectoryException):
    """A configuration value is missing or malformed."""

    def __init__(self, setting: str, value: Any, reason: str) -> None:
        self.setting = setting
        self.value = value
        super().__init__(
            f"Invalid value for {setting}: {value!r} ({reason})",
            context={"setting": setting, "value": value},
        )
