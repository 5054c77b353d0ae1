"""Loading compiler configs from TOML files."""

import pathlib

import pytest

from zksolc_config import CompilerConfig, ConfigLoadError, collect_config, load_config_from_toml

ZKSOLC_TOML = """
compiler_path = "/opt/zksolc/zksolc-v1.3.16"
avoid_contracts = ["Mock"]

[settings]
isSystem = true
remappings = ["@openzeppelin/=lib/openzeppelin-contracts/"]

[settings.optimizer]
enabled = true
mode = "z"
fallbackToOptimizingForSize = true

[settings.libraries."contracts/Lib.sol"]
MathLib = "0x0000000000000000000000000000000000000123"
"""

PYPROJECT_TOML = """
[project]
name = "my-contracts"

[tool.zksolc]
compiler_path = "/usr/bin/zksolc"
contracts_to_compile = ["Greeter"]

[tool.zksolc.settings]
forceEvmla = true
"""


def test_load_config(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "zksolc.toml"
    path.write_text(ZKSOLC_TOML)

    config = load_config_from_toml(path)

    assert config.compiler_path == "/opt/zksolc/zksolc-v1.3.16"
    assert config.avoid_contracts == ["Mock"]
    assert config.contracts_to_compile is None
    assert config.settings.is_system is True
    assert str(config.settings.remappings[0]) == "@openzeppelin/=lib/openzeppelin-contracts/"
    assert config.settings.optimizer.enabled is True
    assert config.settings.optimizer.mode == "z"
    assert config.settings.optimizer.fallback_to_optimizing_for_size is True
    assert config.settings.libraries.root == {"contracts/Lib.sol": {"MathLib": "0x0000000000000000000000000000000000000123"}}


def test_load_pyproject_table(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text(PYPROJECT_TOML)

    config = load_config_from_toml(path)

    assert config.compiler_path == "/usr/bin/zksolc"
    assert config.contracts_to_compile == ["Greeter"]
    assert config.settings.force_evmla is True


def test_load_missing_file(tmp_path: pathlib.Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config_from_toml(tmp_path / "zksolc.toml")


def test_load_invalid_toml(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "zksolc.toml"
    path.write_text("compiler_path = \n")

    with pytest.raises(ConfigLoadError):
        load_config_from_toml(path)


def test_load_invalid_field(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "zksolc.toml"
    path.write_text('[settings]\nisSystem = "maybe"\n')

    with pytest.raises(ConfigLoadError) as exc_info:
        load_config_from_toml(path)
    assert exc_info.value.path == path


def test_collect_prefers_zksolc_toml(tmp_path: pathlib.Path) -> None:
    (tmp_path / "zksolc.toml").write_text(ZKSOLC_TOML)
    (tmp_path / "pyproject.toml").write_text(PYPROJECT_TOML)

    assert collect_config(tmp_path).compiler_path == "/opt/zksolc/zksolc-v1.3.16"


def test_collect_pyproject(tmp_path: pathlib.Path) -> None:
    (tmp_path / "pyproject.toml").write_text(PYPROJECT_TOML)

    assert collect_config(tmp_path).compiler_path == "/usr/bin/zksolc"


def test_collect_pyproject_without_table(tmp_path: pathlib.Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "my-contracts"\n')

    assert collect_config(tmp_path) == CompilerConfig()


def test_collect_override(tmp_path: pathlib.Path) -> None:
    (tmp_path / "zksolc.toml").write_text(ZKSOLC_TOML)
    override = tmp_path / "other.toml"
    override.write_text('compiler_path = "/other/zksolc"\n')

    assert collect_config(tmp_path, override_config_file=override).compiler_path == "/other/zksolc"


def test_collect_defaults(tmp_path: pathlib.Path) -> None:
    assert collect_config(tmp_path) == CompilerConfig()


def test_collect_missing_work_dir(tmp_path: pathlib.Path) -> None:
    with pytest.raises(FileNotFoundError):
        collect_config(tmp_path / "missing")


def test_load_minimal_file(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "zksolc.toml"
    path.write_text("[settings.optimizer]\nmode = \"3\"\n")

    config = load_config_from_toml(path)

    assert config.compiler_path == ""
    assert config.settings.optimizer.mode == "3"
    assert config.settings.optimizer.disable_system_request_memoization is False
    assert config.settings.is_system is False


def test_load_non_table_tool_key(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "zksolc.toml"
    path.write_text('tool = "x"\ncompiler_path = "/opt/zksolc"\n')

    assert load_config_from_toml(path).compiler_path == "/opt/zksolc"


def test_load_non_table_zksolc_key(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text('[tool]\nzksolc = "x"\n')

    with pytest.raises(ConfigLoadError):
        load_config_from_toml(path)


def test_collect_pyproject_with_non_table_tool(tmp_path: pathlib.Path) -> None:
    (tmp_path / "pyproject.toml").write_text('tool = "x"\n')

    assert collect_config(tmp_path) == CompilerConfig()
