"""
Main Entry Point for the lisp-to-c CLI.

This module handles argument parsing and dispatches to the command handlers
defined in `lisp_to_c.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from lisp_to_c import __version__
from lisp_to_c.cli import commands
from lisp_to_c.enums import OutputFormat


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="lisp-to-c: Prefix to Infix Call Compiler")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: COMPILE ---
  cmd_comp = subparsers.add_parser("compile", help="Compile a source file, inline code, or stdin")
  source = cmd_comp.add_mutually_exclusive_group()
  source.add_argument("path", type=Path, nargs="?", default=None, help="Input source file (default: stdin)")
  source.add_argument("--code", default=None, help="Inline source text")
  cmd_comp.add_argument("--out", type=Path, default=None, help="Output file (default: stdout)")
  cmd_comp.add_argument(
    "--format",
    dest="output_format",
    choices=[f.value for f in OutputFormat],
    default=None,
    help="Stage output to emit (default: from toml, else 'code')",
  )
  cmd_comp.add_argument(
    "--json-trace", type=Path, default=None, help="Dump stage trace events to a JSON file."
  )

  args = parser.parse_args(argv)

  if args.command == "compile":
    return commands.handle_compile(args.path, args.code, args.out, args.output_format, args.json_trace)

  return 0


if __name__ == "__main__":
  sys.exit(main())
