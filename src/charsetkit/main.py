#!/usr/bin/env python3
"""
charsetkit command line interface.

Detect, read, write and convert text files in legacy and Unicode encodings.
"""

import argparse
import asyncio
import os
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .logger import setup_logging, shutdown_logging
from .service import EncodingService
from .utils import get_config, load_config_from_file
from .utils.error_handler import create_error_handler


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="charsetkit",
        description="Detect and transcode text file encodings."
    )
    parser.add_argument("--config", type=Path, help="JSON configuration file")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List supported encodings")

    resolve = sub.add_parser("resolve", help="Show the canonical label for an encoding name")
    resolve.add_argument("name")

    detect = sub.add_parser("detect", help="Guess the encoding of files")
    detect.add_argument("paths", nargs="+")

    read = sub.add_parser("read", help="Print a file decoded as text")
    read.add_argument("path")
    read.add_argument("-e", "--encoding", help="Decode with this encoding instead of detecting")

    write = sub.add_parser("write", help="Write text to a file in an encoding")
    write.add_argument("path")
    write.add_argument("-e", "--encoding", required=True)
    write.add_argument("-i", "--input", type=Path, help="UTF-8 text file to take content from (default: stdin)")

    convert = sub.add_parser("convert", help="Preview or apply a conversion to another encoding")
    convert.add_argument("path")
    convert.add_argument("-t", "--to", required=True, dest="target")
    convert.add_argument("--save", action="store_true", help="Rewrite the file in the target encoding")

    return parser


class CharsetKitCLI:
    """Runs one parsed command against an EncodingService."""

    def __init__(self, service: EncodingService, console: Optional[Console] = None):
        self.service = service
        self.console = console or Console()

    async def run(self, args: argparse.Namespace) -> int:
        handler = getattr(self, f"cmd_{args.command}")
        return await handler(args)

    async def cmd_list(self, args) -> int:
        table = Table(title="Supported encodings")
        table.add_column("Name", style="bold")
        table.add_column("Label")
        table.add_column("Category")
        for descriptor in self.service.list_supported_encodings():
            table.add_row(descriptor.name, descriptor.label, descriptor.category.value)
        self.console.print(table)
        return 0

    async def cmd_resolve(self, args) -> int:
        label = self.service.resolve(args.name)
        if not self.service.registry.is_supported(args.name):
            self.console.print(f"[yellow]Unknown encoding {args.name!r}, using {label}[/yellow]")
        else:
            self.console.print(label)
        return 0

    async def cmd_detect(self, args) -> int:
        labels = await asyncio.gather(
            *(self.service.detect_file_encoding(path) for path in args.paths)
        )
        for path, label in zip(args.paths, labels):
            self.console.print(f"{path}: [bold]{label}[/bold]")
        return 0

    async def cmd_read(self, args) -> int:
        document = await self.service.open_document(args.path, args.encoding)
        self.console.print(document.text, end="", markup=False, highlight=False)
        if document.had_substitutions:
            self.console.print(
                f"[yellow]warning:[/yellow] some bytes are not valid {document.encoding} and were replaced",
                style="dim"
            )
        return 0

    async def cmd_write(self, args) -> int:
        if args.input is not None:
            text = args.input.read_text(encoding="utf-8")
        else:
            text = sys.stdin.read()
        written = await self.service.save_document(args.path, text, args.encoding)
        self.console.print(f"Wrote {written} bytes to {args.path} as {self.service.resolve(args.encoding)}")
        return 0

    async def cmd_convert(self, args) -> int:
        document = await self.service.open_document(args.path)
        result = self.service.preview_conversion(document.text, document.encoding, args.target)
        if result.lossy:
            self.console.print(
                f"[yellow]warning:[/yellow] converting {document.encoding} -> {result.encoding} loses characters"
            )
        if args.save:
            written = await self.service.save_document(document, document.text, result.encoding)
            self.console.print(f"Converted {args.path}: {document.encoding} -> {result.encoding} ({written} bytes)")
        else:
            self.console.print(result.text, end="", markup=False, highlight=False)
        return 0


async def run(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    """Parse ``argv`` and execute the command; returns the exit code."""
    args = build_parser().parse_args(argv)

    config_error = None
    if args.config:
        try:
            load_config_from_file(args.config)
        except (OSError, ValueError) as e:
            config_error = e

    log_level = os.getenv("CHARSETKIT_LOG_LEVEL", get_config().logging.level)
    logger = setup_logging(log_level)
    console = console or Console()
    errors = create_error_handler(
        logger, reporter=lambda message: console.print(f"[red]error:[/red] {escape(message)}")
    )

    try:
        if config_error is not None:
            await errors.handle_error(
                config_error, context={"config": str(args.config)},
                user_message=f"cannot load {args.config}: {config_error}"
            )
            return 1

        cli = CharsetKitCLI(EncodingService(logger=logger), console)
        try:
            return await cli.run(args)
        except (OSError, ValueError) as e:
            # UnicodeDecodeError from --input lands here as a ValueError
            await errors.handle_error(e, context={"command": args.command}, user_message=str(e))
            return 1
    finally:
        await shutdown_logging()


def main():
    """Main entry point."""
    load_dotenv()
    sys.exit(asyncio.run(run()))


if __name__ == "__main__":
    main()
