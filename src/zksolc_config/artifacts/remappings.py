from typing import Any, Optional

import pydantic


class Remapping(pydantic.BaseModel):
    """Import remapping, written in JSON as `[context:]name=path`."""

    model_config = pydantic.ConfigDict(frozen=True)

    context: Optional[str] = pydantic.Field(
        description="Source unit prefix the remapping is restricted to.", default=None
    )
    name: str = pydantic.Field(description="Import prefix to replace.", min_length=1)
    path: str = pydantic.Field(description="Replacement for the import prefix.", min_length=1)

    @classmethod
    def parse(cls, remapping: str) -> "Remapping":
        """Parse a `[context:]name=path` remapping string."""
        target, sep, path = remapping.partition("=")
        if not sep:
            raise ValueError(f"Remapping '{remapping}' is missing '='")
        context, sep, name = target.partition(":")
        if not sep:
            context, name = "", target
        if not name.strip():
            raise ValueError(f"Remapping '{remapping}' has an empty name")
        if not path.strip():
            raise ValueError(f"Remapping '{remapping}' has an empty path")
        return cls(context=context or None, name=name, path=path)

    @pydantic.model_validator(mode="before")
    @classmethod
    def validate_remapping_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            parsed = cls.parse(data)
            return {"context": parsed.context, "name": parsed.name, "path": parsed.path}
        return data

    @pydantic.model_serializer(mode="plain")
    def serialize_remapping(self) -> str:
        return str(self)

    def __str__(self) -> str:
        prefix = f"{self.context}:" if self.context else ""
        path = self.path if self.path.endswith("/") else f"{self.path}/"
        return f"{prefix}{self.name}={path}"
