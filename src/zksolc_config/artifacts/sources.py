import pathlib

import pydantic


class Source(pydantic.BaseModel):
    """Content of a single source unit."""

    model_config = pydantic.ConfigDict(frozen=True)

    content: str

    @classmethod
    def read(cls, path: pathlib.Path) -> "Source":
        """Read a source file as UTF-8."""
        with open(path, "r", encoding="utf-8") as source_file:
            return cls(content=source_file.read())
