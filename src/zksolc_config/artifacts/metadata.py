from enum import Enum
from typing import Optional

import pydantic

from ..string_case import camel_case


class BytecodeHash(str, Enum):
    """Hash method appended to the bytecode metadata."""

    IPFS = "ipfs"
    NONE = "none"
    BZZR1 = "bzzr1"


class SettingsMetadata(pydantic.BaseModel):
    """Metadata emission settings."""

    model_config = pydantic.ConfigDict(alias_generator=camel_case, populate_by_name=True)

    use_literal_content: Optional[bool] = pydantic.Field(
        description="Use only literal content and not URLs.", default=None
    )
    bytecode_hash: Optional[BytecodeHash] = None
    cbor_metadata: Optional[bool] = pydantic.Field(
        description="Whether to append CBOR-encoded metadata to the bytecode.", default=None
    )

    @pydantic.model_serializer(mode="wrap")
    def serialize_set_fields(self, handler: pydantic.SerializerFunctionWrapHandler) -> dict:
        return {key: value for key, value in handler(self).items() if value is not None}
