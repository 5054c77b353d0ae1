"""Command line interface for zksolc-config."""

import argparse
import logging
import pathlib as pl
import sys

from zksolc_config.artifacts import Source
from zksolc_config.compiler_input import OrderedCompilerInput
from zksolc_config.errors import ZkSolcConfigError
from zksolc_config.loader import collect_config

logger = logging.getLogger(__name__)


def _cli(argv: list[str] | None = None) -> int:
    """Write the ordered standard JSON input for a set of Solidity files."""
    parser = argparse.ArgumentParser(
        prog="zksolc-input",
        description="Build a zksolc standard JSON input that keeps source files in the given order.",
    )

    parser.add_argument(
        "sources",
        type=str,
        nargs="+",
        help="Solidity source files, in the order they should be listed.",
    )
    parser.add_argument("-c", "--config", type=pl.Path, help="Path to the configuration file")
    parser.add_argument(
        "-o",
        "--output",
        type=pl.Path,
        help="Path to the output JSON file.",
    )
    parser.add_argument("--indent", type=int, default=None, help="Indent the JSON output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING, format="%(levelname)s: %(message)s")

    try:
        config = collect_config(work_dir=pl.Path.cwd(), override_config_file=args.config)
        compiler_input = OrderedCompilerInput.new(
            [(path, Source.read(pl.Path(path))) for path in args.sources],
            config.settings,
        )
        document = compiler_input.to_json(indent=args.indent)
    except (OSError, ValueError, ZkSolcConfigError) as e:
        logger.error("%s", e)
        return 1

    path_output: pl.Path | None = args.output
    if path_output is None:
        print(document)
    else:
        with open(path_output, "w", encoding="utf-8") as json_file:
            json_file.write(document)
        if not config.settings.are_libraries_missing:
            print(f"Wrote {len(compiler_input.sources)} source(s) to {path_output}")

    return 0


def main() -> None:
    sys.exit(_cli())


if __name__ == "__main__":
    main()
