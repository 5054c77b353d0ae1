"""Errors raised while building, loading or serializing compiler configuration.

Field-level parse failures are reported by pydantic as `pydantic.ValidationError`
and are not wrapped here.
"""


class ZkSolcConfigError(Exception):
    """Base class for errors raised by this package."""


class ConfigBuildError(ZkSolcConfigError):
    """A `CompilerConfigBuilder` could not produce a config."""


class ConfigLoadError(ZkSolcConfigError):
    """A configuration file exists but could not be parsed."""

    def __init__(self, path, reason: str) -> None:
        super().__init__(f"Invalid configuration file {path}: {reason}")
        self.path = path
        self.reason = reason


class InputSerializationError(ZkSolcConfigError):
    """A compiler input holds a value that cannot be written as JSON."""
