#!/usr/bin/env python3
"""
Command-line script to regenerate the API modules from the reference page.

Reads the saved reference document, runs the generator once and writes the
types module and the operations module into the output directory. Prints a
single success or failure line; the exit status tells scripts which.

Usage:
    python run_generator.py
    python run_generator.py TelegramBotAPI.html -o ./Sources/TelegramBotAPI
    python run_generator.py page.html -o out --verbose
    python run_generator.py page.html --log-file codegen.log
"""

import argparse
import logging
import sys

# Load .env file automatically (APIDOC_SOURCE, APIDOC_OUTPUT_DIR, ...)
from dotenv import load_dotenv

from apidoc_codegen.config import GeneratorConfig
from apidoc_codegen.exceptions import CodegenError
from apidoc_codegen.logger import setup_logger
from apidoc_codegen.main import CodeGenerator
from apidoc_codegen.writer import write_sources


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate Python types and request builders from an API reference page"
    )
    parser.add_argument(
        "source",
        nargs="?",
        help="Saved HTML reference page (default: $APIDOC_SOURCE or TelegramBotAPI.html)"
    )
    parser.add_argument(
        "--output-dir", "-o",
        help="Directory for the generated modules (default: $APIDOC_OUTPUT_DIR or ./generated)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose logging"
    )
    parser.add_argument(
        "--log-file",
        help="Also append log records to this file"
    )
    parser.add_argument(
        "--no-fast-init",
        action="store_true",
        help="Skip the per-variant constructors on generated unions"
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    load_dotenv()

    overrides = {"source": args.source, "output_dir": args.output_dir}
    if args.no_fast_init:
        overrides["fast_initialization"] = False
    config = GeneratorConfig.from_env(**overrides)

    setup_logger(
        level=logging.DEBUG if args.verbose else config.log_level,
        log_file=args.log_file,
    )

    try:
        generator = CodeGenerator(config=config)
        sources = generator.generate_file(config.source)
        write_sources(sources, config.output_dir, config)
    except CodegenError as e:
        print(f"Failed: {e.message}")
        return 1

    print("Success!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
