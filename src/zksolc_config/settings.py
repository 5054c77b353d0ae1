"""Settings for a single `zksolc` compilation run."""

from collections.abc import Callable
from typing import Any, Optional

import pydantic

from .artifacts import Libraries, OptimizerDetails, OutputSelection, Remapping, SettingsMetadata
from .string_case import camel_case

# Left out of the JSON input entirely while unset, rather than sent as null/[].
_OMITTED_WHEN_EMPTY = ("remappings", "metadata", "missing_libraries_path", "contracts_to_compile")


def with_defaults(
    model: type[pydantic.BaseModel], data: dict[str, Any], defaults: dict[str, Callable[[], Any]]
) -> dict[str, Any]:
    """Fill keyword arguments the caller left out, by field name.

    Fields listed in `defaults` are required when a document is parsed but
    optional when a model is constructed in code.
    """
    for name, factory in defaults.items():
        if name not in data and model.model_fields[name].alias not in data:
            data[name] = factory()
    return data


class Optimizer(pydantic.BaseModel):
    """Bytecode optimization parameters.

    An unset `enabled` means "use the backend default", not "disabled". No
    field is checked against another; `mode` and `enabled` may disagree and
    the compiler decides.
    """

    model_config = pydantic.ConfigDict(populate_by_name=True, validate_assignment=True)

    enabled: Optional[bool] = pydantic.Field(description="Whether the optimizer is enabled.", default=None)
    mode: Optional[str] = pydantic.Field(description="Optimization mode, e.g. '3' or 'z'.", default=None)
    details: Optional[OptimizerDetails] = pydantic.Field(description="The `solc` optimizer details.", default=None)
    fallback_to_optimizing_for_size: Optional[bool] = pydantic.Field(
        alias="fallbackToOptimizingForSize",
        description="Recompile with -Oz if the bytecode is too large.",
        default=None,
    )
    disable_system_request_memoization: bool = pydantic.Field(
        alias="disableSystemRequestMemoization",
        description="Whether to disable the system request memoization.",
    )

    def __init__(self, **data: Any) -> None:
        super().__init__(**with_defaults(type(self), data, {"disable_system_request_memoization": lambda: False}))


class Settings(pydantic.BaseModel):
    """Compiler settings for `zksolc`.

    Every field has a default, so `Settings()` is always a complete value,
    but a parsed document must still carry `optimizer`, `isSystem` and
    `forceEvmla`. JSON keys are camel case.
    """

    model_config = pydantic.ConfigDict(alias_generator=camel_case, populate_by_name=True, validate_assignment=True)

    remappings: list[Remapping] = pydantic.Field(
        description="Remappings applied to the source files.", default_factory=list
    )
    optimizer: Optimizer
    metadata: Optional[SettingsMetadata] = None
    output_selection: OutputSelection = pydantic.Field(
        description="Outputs to produce, selected by file and contract name.",
        default_factory=OutputSelection.default_output_selection,
    )
    libraries: Libraries = pydantic.Field(
        description="Addresses of deployed libraries. If not all libraries are given here, "
        "the output may contain unlinked objects. The empty file key refers to the global level.",
        default_factory=Libraries,
    )
    is_system: bool = pydantic.Field(description="Enable the system contract compilation mode.")
    force_evmla: bool = pydantic.Field(description="Force the EVM legacy assembly pipeline.")
    missing_libraries_path: Optional[str] = pydantic.Field(
        description="Where to record library dependencies that could not be resolved.",
        default=None,
    )
    are_libraries_missing: bool = pydantic.Field(
        description="Set when libraries are missing; callers use it to silence success logs.",
        default=False,
    )
    contracts_to_compile: list[str] = pydantic.Field(
        description="Restrict compilation to these contracts.", default_factory=list
    )

    def __init__(self, **data: Any) -> None:
        super().__init__(
            **with_defaults(
                type(self),
                data,
                {"optimizer": Optimizer, "is_system": lambda: False, "force_evmla": lambda: False},
            )
        )

    @pydantic.model_serializer(mode="wrap")
    def serialize_settings(self, handler: pydantic.SerializerFunctionWrapHandler) -> dict:
        data = handler(self)
        for name in _OMITTED_WHEN_EMPTY:
            if getattr(self, name) in (None, []):
                data.pop(name, None)
                data.pop(camel_case(name), None)
        return data
