from typing import Optional

import pydantic

from ..string_case import camel_case


class YulDetails(pydantic.BaseModel):
    """Tuning of the Yul optimizer."""

    model_config = pydantic.ConfigDict(alias_generator=camel_case, populate_by_name=True)

    stack_allocation: Optional[bool] = None
    optimizer_steps: Optional[str] = pydantic.Field(
        description="Custom optimization step sequence.", default=None
    )

    @pydantic.model_serializer(mode="wrap")
    def serialize_set_fields(self, handler: pydantic.SerializerFunctionWrapHandler) -> dict:
        return {key: value for key, value in handler(self).items() if value is not None}


class OptimizerDetails(pydantic.BaseModel):
    """Fine-grained `solc` optimizer switches.

    Every switch is optional; unset ones are left out of the JSON input so the
    compiler applies its own default.
    """

    model_config = pydantic.ConfigDict(alias_generator=camel_case, populate_by_name=True)

    peephole: Optional[bool] = None
    inliner: Optional[bool] = None
    jumpdest_remover: Optional[bool] = None
    order_literals: Optional[bool] = None
    deduplicate: Optional[bool] = None
    cse: Optional[bool] = None
    constant_optimizer: Optional[bool] = None
    yul: Optional[bool] = None
    yul_details: Optional[YulDetails] = None
    simple_counter_for_loop_unchecked_increment: Optional[bool] = None

    @pydantic.model_serializer(mode="wrap")
    def serialize_set_fields(self, handler: pydantic.SerializerFunctionWrapHandler) -> dict:
        return {key: value for key, value in handler(self).items() if value is not None}
