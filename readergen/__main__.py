"""Entry point: python -m readergen

Renders the AWS catalog and writes reader_generated.go.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .catalog import AWS_FUNCTIONS
from .codegen import RenderError, render_source, write_source
from .config import DEFAULT_OUTPUT, GeneratorConfig


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="readergen", description=__doc__.splitlines()[0])
    parser.add_argument("-o", "--output", type=Path, default=DEFAULT_OUTPUT)
    parser.add_argument("--package", default=GeneratorConfig.package_name)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = GeneratorConfig(package_name=args.package, output_path=args.output)
    try:
        source = render_source(AWS_FUNCTIONS, config)
    except RenderError as exc:
        print(f"readergen: {exc}", file=sys.stderr)
        return 1

    write_source(source, config.output_path)
    function_count = sum(1 for d in AWS_FUNCTIONS if not d.skip_body)
    print(f"Generated {config.output_path} ({function_count} functions)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
