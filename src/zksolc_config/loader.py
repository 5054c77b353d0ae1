"""Loading `CompilerConfig` from TOML files."""

import logging
import pathlib
from typing import Any

import pydantic
import tomli as tomllib

from .config import CompilerConfig
from .errors import ConfigLoadError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "zksolc.toml"
PYPROJECT_FILE_NAME = "pyproject.toml"


def _zksolc_table(document: dict[str, Any]) -> Any:
    tool = document.get("tool")
    if not isinstance(tool, dict):
        return None
    return tool.get("zksolc")


def _over_defaults(table: dict[str, Any]) -> dict[str, Any]:
    """Lay a config table over the default config document.

    The top level, `settings` and `settings.optimizer` are merged key by key;
    any other value in the table replaces the default outright.
    """
    defaults = CompilerConfig().model_dump(mode="json", by_alias=True)
    document = {**defaults, **table}
    settings = table.get("settings")
    if isinstance(settings, dict):
        document["settings"] = {**defaults["settings"], **settings}
        optimizer = settings.get("optimizer")
        if isinstance(optimizer, dict):
            document["settings"]["optimizer"] = {**defaults["settings"]["optimizer"], **optimizer}
    return document


def load_config_from_toml(config_path: pathlib.Path) -> CompilerConfig:
    """Load a config from a TOML file.

    The `[tool.zksolc]` table is used when the file has one (pyproject style),
    otherwise the whole document. `settings` uses the compiler's camel case
    key names; anything left out keeps its default.
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file {config_path} does not exist")

    with open(config_path, "rb") as f:
        try:
            document = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigLoadError(config_path, str(e)) from e

    table = _zksolc_table(document)
    if table is None:
        table = document
    if not isinstance(table, dict):
        raise ConfigLoadError(config_path, "[tool.zksolc] must be a table")

    try:
        return CompilerConfig.model_validate(_over_defaults(table))
    except pydantic.ValidationError as e:
        raise ConfigLoadError(config_path, str(e)) from e


def collect_config(
    work_dir: pathlib.Path,
    override_config_file: pathlib.Path | None = None,
) -> CompilerConfig:
    """Find and load the config for `work_dir`.

    Looks for an explicit override, then `zksolc.toml`, then a
    `pyproject.toml` with a `[tool.zksolc]` table. Falls back to the
    default config when none is found.
    """
    if not work_dir.exists():
        raise FileNotFoundError(f"Work directory {work_dir} does not exist")

    config_file: pathlib.Path | None = None

    if override_config_file is not None:
        config_file = override_config_file
    elif (work_dir / CONFIG_FILE_NAME).exists():
        config_file = work_dir / CONFIG_FILE_NAME
    elif (work_dir / PYPROJECT_FILE_NAME).exists():
        with open(work_dir / PYPROJECT_FILE_NAME, "rb") as f:
            try:
                pyproject = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigLoadError(work_dir / PYPROJECT_FILE_NAME, str(e)) from e
        if _zksolc_table(pyproject) is not None:
            config_file = work_dir / PYPROJECT_FILE_NAME

    if config_file is None:
        logger.debug("No configuration file found in %s, using defaults", work_dir)
        return CompilerConfig()

    logger.debug("Loading configuration from %s", config_file)
    return load_config_from_toml(config_file)
