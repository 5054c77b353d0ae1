import pydantic


class Libraries(pydantic.RootModel[dict[str, dict[str, str]]]):
    """Deployed library addresses, keyed by source file then library name.

    The empty file key `""` holds libraries linked at global level.
    """

    root: dict[str, dict[str, str]] = pydantic.Field(default_factory=dict)
