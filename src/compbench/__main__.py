"""CLI entry point for the benchmark script generator."""

import argparse
import logging
import sys
from pathlib import Path

from .config import GeneratorConfig, ScriptLayout
from .corpus import DEFAULT_CORPUS
from .errors import CompbenchError
from .generator import generate, render
from .registry import default_registry

logger = logging.getLogger("compbench.cli")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="compbench",
        description="Generate randomized compression benchmark scripts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  compbench                          # Write autogen-test.bash and autogen-test-dec.bash
  compbench --tools zstd brotli      # Benchmark a subset of tools
  compbench --no-shuffle --dry-run   # Print both scripts in registry order
        """,
    )

    parser.add_argument(
        "--script-dir",
        type=Path,
        default=Path("."),
        help="Directory the generated scripts are written to (default: .)",
    )

    parser.add_argument(
        "--input-dir",
        default="corpora",
        help="Corpus directory as referenced by the scripts (default: corpora)",
    )

    parser.add_argument(
        "--output-dir",
        default="output",
        help="Staging directory for compressed files (default: output)",
    )

    parser.add_argument(
        "--tools",
        nargs="+",
        default=None,
        metavar="TOOL",
        help="Tool ids to benchmark (default: all registered tools)",
    )

    parser.add_argument(
        "--files",
        nargs="+",
        default=None,
        metavar="FILE",
        help="Corpus files relative to the input directory (default: built-in corpus)",
    )

    parser.add_argument(
        "--no-shuffle",
        action="store_true",
        help="Keep registry order instead of randomizing tool order",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print both scripts to stdout instead of writing them",
    )

    parser.add_argument(
        "--list-tools",
        action="store_true",
        help="List registered tools and exit",
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", action="store_true", help="Log debug output")
    verbosity.add_argument("--quiet", action="store_true", help="Only log errors")

    return parser.parse_args(argv)


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.ERROR if quiet else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def list_tools() -> None:
    for tool in default_registry():
        print(f"{tool.id:<20} {tool.extension:<8} {tool.compress_template}")
        print(f"{'':<20} {'':<8} {tool.decompress_template}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    if args.list_tools:
        list_tools()
        return 0

    try:
        config = GeneratorConfig(
            tool_ids=args.tools,
            files=args.files if args.files is not None else DEFAULT_CORPUS,
            layout=ScriptLayout(input_dir=args.input_dir, output_dir=args.output_dir),
            script_dir=args.script_dir,
            shuffle=not args.no_shuffle,
        )

        if args.dry_run:
            scripts = render(config)
            sys.stdout.write(scripts.compression)
            sys.stdout.write(f"\n# --- {config.decompress_script} ---\n\n")
            sys.stdout.write(scripts.decompression)
            return 0

        result = generate(config)
    except (CompbenchError, ValueError) as e:
        logger.error(str(e))
        return 1

    if not args.quiet:
        print(f"Compression order:   {' '.join(t.id for t in result.compression_order)}")
        print(f"Decompression order: {' '.join(t.id for t in result.decompression_order)}")
        print("\nScripts written to:")
        print(f"  {result.compress_path}")
        print(f"  {result.decompress_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
