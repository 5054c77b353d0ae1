"""Standard JSON input for `zksolc` with caller-ordered sources.

Block explorers list verified source files in the order they appear in the
`sources` object of the submitted input. A plain mapping type would let that
order drift (or be sorted), so `sources` is held as a tuple of
`(path, Source)` pairs and written out pair by pair. Paths are strings, never
normalized.
"""

import json
import logging
import os
from collections.abc import Iterable, Mapping
from typing import Annotated, Any, Optional

import pydantic

from .artifacts import Source
from .errors import InputSerializationError
from .settings import Settings

logger = logging.getLogger(__name__)

SOLIDITY = "Solidity"

SourcePair = tuple[str, Source]


def _pairs_from_document(value: Any) -> Any:
    """Read a JSON object's entries as pairs, in document order."""
    if isinstance(value, Mapping):
        value = list(value.items())
    if isinstance(value, (list, tuple)):
        return [_fspath_pair(pair) for pair in value]
    return value


def _fspath_pair(pair: Any) -> Any:
    if isinstance(pair, (list, tuple)) and pair and isinstance(pair[0], os.PathLike):
        return (os.fspath(pair[0]), *pair[1:])
    return pair


def _reject_duplicate_paths(pairs: tuple[SourcePair, ...]) -> tuple[SourcePair, ...]:
    seen: set[str] = set()
    for path, _ in pairs:
        if path in seen:
            raise ValueError(f"Duplicate source path '{path}'")
        seen.add(path)
    return pairs


def _pairs_to_document(pairs: tuple[SourcePair, ...]) -> dict[str, Source]:
    """Write pairs as object entries, first pair first."""
    return {path: source for path, source in pairs}


OrderedSources = Annotated[
    tuple[SourcePair, ...],
    pydantic.BeforeValidator(_pairs_from_document),
    pydantic.AfterValidator(_reject_duplicate_paths),
    pydantic.PlainSerializer(_pairs_to_document),
]


def _reject_duplicate_keys(entries: list[tuple[str, Any]]) -> dict[str, Any]:
    document: dict[str, Any] = {}
    for key, value in entries:
        if key in document:
            raise ValueError(f"Duplicate key '{key}' in JSON document")
        document[key] = value
    return document


class OrderedCompilerInput(pydantic.BaseModel):
    """Compiler input whose `sources` keep the order they were given in.

    Two inputs holding the same sources in a different order are different
    values and serialize differently.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    language: str
    sources: OrderedSources
    settings: Settings

    @pydantic.field_validator("settings")
    @classmethod
    def copy_settings(cls, v: Settings) -> Settings:
        return v.model_copy(deep=True)

    @classmethod
    def new(
        cls,
        sources: Iterable[tuple[str | os.PathLike, Source]] | Mapping[str | os.PathLike, Source],
        settings: Optional[Settings] = None,
    ) -> "OrderedCompilerInput":
        """Create a Solidity input from `(path, source)` pairs in display order."""
        compiler_input = cls(
            language=SOLIDITY,
            sources=sources if isinstance(sources, Mapping) else list(sources),
            settings=settings if settings is not None else Settings(),
        )
        logger.debug("Assembled compiler input with %d source(s)", len(compiler_input.sources))
        return compiler_input

    def source_paths(self) -> list[str]:
        return [path for path, _ in self.sources]

    def to_dict(self) -> dict[str, Any]:
        """Dump the input as a JSON-compatible dict with `zksolc` key names.

        Raises:
            InputSerializationError: A path or source cannot be represented.
        """
        try:
            return self.model_dump(mode="json", by_alias=True)
        except ValueError as e:
            raise InputSerializationError(f"Cannot serialize compiler input: {e}") from e

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize the input as UTF-8 representable JSON text.

        Raises:
            InputSerializationError: A path or source cannot be represented.
        """
        text = json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
        try:
            text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise InputSerializationError(f"Cannot serialize compiler input: {e}") from e
        return text

    @classmethod
    def from_json(cls, text: str | bytes) -> "OrderedCompilerInput":
        """Parse a standard JSON input, keeping `sources` in document order.

        Raises:
            ValueError: The document is not valid JSON or repeats a key.
            pydantic.ValidationError: A field has the wrong shape.
        """
        return cls.model_validate(json.loads(text, object_pairs_hook=_reject_duplicate_keys))
