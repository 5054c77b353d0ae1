"""Top-level `zksolc` configuration and its builder."""

import logging
import os
from typing import Any, Optional, Self

import pydantic

from .errors import ConfigBuildError
from .settings import Settings, with_defaults

logger = logging.getLogger(__name__)


class CompilerConfig(pydantic.BaseModel):
    """Configuration of the `zksolc` compiler for one compilation run.

    Both `contracts_to_compile` and `avoid_contracts` may be set at once;
    reconciling them is left to the caller. `compiler_path` and `settings`
    default in code but are required in a parsed document.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    compiler_path: str = pydantic.Field(description="Path to the zksolc binary. Can be a URL.")
    settings: Settings
    contracts_to_compile: Optional[list[str]] = pydantic.Field(
        description="Contracts to compile. Unset means all of them.", default=None
    )
    avoid_contracts: Optional[list[str]] = pydantic.Field(description="Contracts to skip.", default=None)

    def __init__(self, **data: Any) -> None:
        super().__init__(**with_defaults(type(self), data, {"compiler_path": str, "settings": Settings}))

    @pydantic.field_validator("compiler_path", mode="before")
    @classmethod
    def validate_compiler_path(cls, v: Any) -> Any:
        if isinstance(v, os.PathLike):
            return os.fspath(v)
        return v

    @pydantic.field_validator("settings")
    @classmethod
    def copy_settings(cls, v: Settings) -> Settings:
        return v.model_copy(deep=True)

    @classmethod
    def builder(cls) -> "CompilerConfigBuilder":
        return CompilerConfigBuilder()


class CompilerConfigBuilder:
    """Accumulates the pieces of a `CompilerConfig`.

    A builder is single use: once `build()` has returned, further calls to it
    raise `ConfigBuildError`.
    """

    def __init__(self) -> None:
        self._compiler_path: str | os.PathLike | None = None
        self._settings: Settings | None = None
        self._contracts_to_compile: list[str] | None = None
        self._avoid_contracts: list[str] | None = None
        self._consumed = False

    def _check_unused(self) -> None:
        if self._consumed:
            raise ConfigBuildError("Builder has already been consumed by build()")

    def with_compiler_path(self, path: str | os.PathLike) -> Self:
        """Set the path or URL of the `zksolc` binary."""
        self._check_unused()
        self._compiler_path = path
        return self

    def with_settings(self, settings: Settings) -> Self:
        self._check_unused()
        self._settings = settings
        return self

    def with_contracts_to_compile(self, contracts: list[str]) -> Self:
        self._check_unused()
        self._contracts_to_compile = list(contracts)
        return self

    def with_avoid_contracts(self, contracts: list[str]) -> Self:
        self._check_unused()
        self._avoid_contracts = list(contracts)
        return self

    def build(self) -> CompilerConfig:
        """Build the config, using `Settings()` when no settings were given.

        Raises:
            ConfigBuildError: The builder was already consumed, or the
                accumulated values do not form a valid config.
        """
        self._check_unused()
        self._consumed = True
        if self._settings is None:
            logger.debug("No settings given, using defaults")
        try:
            return CompilerConfig(
                compiler_path=self._compiler_path if self._compiler_path is not None else "",
                settings=self._settings if self._settings is not None else Settings(),
                contracts_to_compile=self._contracts_to_compile,
                avoid_contracts=self._avoid_contracts,
            )
        except pydantic.ValidationError as e:
            raise ConfigBuildError(str(e)) from e
