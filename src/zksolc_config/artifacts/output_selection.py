import pydantic

DEFAULT_CONTRACT_OUTPUTS = ("abi", "evm.bytecode", "evm.deployedBytecode", "evm.methodIdentifiers")
DEFAULT_FILE_OUTPUTS = ("ast",)


class OutputSelection(pydantic.RootModel[dict[str, dict[str, list[str]]]]):
    """Requested compiler outputs, keyed by file then by contract.

    `"*"` matches every file or contract; the empty contract key `""` selects
    file-level outputs such as the AST.
    """

    root: dict[str, dict[str, list[str]]] = pydantic.Field(default_factory=dict)

    @classmethod
    def default_output_selection(cls) -> "OutputSelection":
        return cls(
            {
                "*": {
                    "*": list(DEFAULT_CONTRACT_OUTPUTS),
                    "": list(DEFAULT_FILE_OUTPUTS),
                }
            }
        )
