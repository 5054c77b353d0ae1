"""Field name casing for the compiler's JSON dialect."""

import re

_RX_ENSURE_CAMEL = re.compile(r"(?<=[A-Z])(?!$)(?!_)(?![A-Z])")
_RX_LOW_AFTER_START_OR_UNDERSCORE = re.compile(r"(?:^|(?<=_))([a-z])")
_RX_UP_AFTER_START = re.compile(r"^([A-Z])")


def snake_case(string: str) -> str:
    """Converts a JSON key to the snake case used by Python attributes.

    Consecutive uppercase letters do not receive underscores between them.

    Args:
        string: The string to convert.

    Returns:
        The converted string.
    """
    return _RX_ENSURE_CAMEL.sub("_", string[::-1]).lower()[::-1]


def camel_case(string: str) -> str:
    """Converts an attribute name to the camel case `zksolc` expects in JSON.

    Used as the pydantic alias generator for settings models, so
    `missing_libraries_path` is written as `missingLibrariesPath`.

    Args:
        string: The string to convert.

    Returns:
        The converted string.
    """
    pascal = _RX_LOW_AFTER_START_OR_UNDERSCORE.sub(lambda m: m.group(1).upper(), snake_case(string)).replace("_", "")
    return _RX_UP_AFTER_START.sub(lambda m: m.group(0).lower(), pascal)
