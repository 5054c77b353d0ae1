from .libraries import Libraries
from .metadata import BytecodeHash, SettingsMetadata
from .optimizer import OptimizerDetails, YulDetails
from .output_selection import OutputSelection
from .remappings import Remapping
from .sources import Source

__all__ = [
    "BytecodeHash",
    "Libraries",
    "OptimizerDetails",
    "OutputSelection",
    "Remapping",
    "SettingsMetadata",
    "Source",
    "YulDetails",
]
