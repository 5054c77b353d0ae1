"""Test conversions between snake_case attribute names and camelCase JSON keys."""

import pytest

from zksolc_config.string_case import camel_case, snake_case


@pytest.mark.parametrize(
    "input,expected",
    [
        ("", ""),
        ("snake_case", "snake_case"),
        ("SNAKE_CASE", "snake_case"),
        ("camelCase", "camel_case"),
        ("CamelCase", "camel_case"),
        ("outputSelection", "output_selection"),
        ("missingLibrariesPath", "missing_libraries_path"),
        ("123", "123"),
        ("A123B456", "a123_b456"),
    ],
)
def test_ensure_snake_case(input: str, expected: str) -> None:
    assert snake_case(input) == expected


@pytest.mark.parametrize(
    "input,expected",
    [
        ("", ""),
        ("snake_case", "snakeCase"),
        ("SNAKE_CASE", "snakeCase"),
        ("camelCase", "camelCase"),
        ("CamelCase", "camelCase"),
        ("is_system", "isSystem"),
        ("force_evmla", "forceEvmla"),
        ("output_selection", "outputSelection"),
        ("missing_libraries_path", "missingLibrariesPath"),
        ("are_libraries_missing", "areLibrariesMissing"),
        ("contracts_to_compile", "contractsToCompile"),
        ("simple_counter_for_loop_unchecked_increment", "simpleCounterForLoopUncheckedIncrement"),
        ("cse", "cse"),
        ("123_456", "123456"),
        ("a123_b456_c789", "a123B456C789"),
    ],
)
def test_ensure_camel_case(input: str, expected: str) -> None:
    assert camel_case(input) == expected
