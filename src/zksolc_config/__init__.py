from .compiler_input import SOLIDITY, OrderedCompilerInput, OrderedSources
from .config import CompilerConfig, CompilerConfigBuilder
from .errors import ConfigBuildError, ConfigLoadError, InputSerializationError, ZkSolcConfigError
from .loader import collect_config, load_config_from_toml
from .settings import Optimizer, Settings

__all__ = [
    "SOLIDITY",
    "CompilerConfig",
    "CompilerConfigBuilder",
    "ConfigBuildError",
    "ConfigLoadError",
    "InputSerializationError",
    "Optimizer",
    "OrderedCompilerInput",
    "OrderedSources",
    "Settings",
    "ZkSolcConfigError",
    "collect_config",
    "load_config_from_toml",
]
