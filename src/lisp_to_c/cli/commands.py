"""
CLI Command Handlers.

Reads input, runs the `Engine`, and writes results. Compile failures are
reported through logging and mapped to exit codes; they are not raised.
"""

import json
import sys
from pathlib import Path
from typing import Optional

from rich.markup import escape

from lisp_to_c.config import RuntimeConfig
from lisp_to_c.core.engine import Engine
from lisp_to_c.utils.console import log_error, log_info, log_success


def handle_compile(
  path: Optional[Path],
  code: Optional[str],
  out: Optional[Path],
  output_format: Optional[str],
  json_trace: Optional[Path],
) -> int:
  """
  Handles the 'compile' command.

  Args:
      path: Input file. Ignored when `code` is given.
      code: Inline source text.
      out: Output file. Writes to stdout when None.
      output_format: Override for `RuntimeConfig.output_format`.
      json_trace: If set, trace events are written to this file.

  Returns:
      int: 0 on success, 1 on any failure.
  """
  if code is not None:
    source = code
  elif path is not None:
    try:
      source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
      log_error(f"Cannot read [path]{escape(str(path))}[/path]: {escape(str(e))}")
      return 1
  else:
    source = sys.stdin.read()

  try:
    config = RuntimeConfig.load(output_format=output_format, trace=True if json_trace else None)
  except ValueError as e:
    log_error(f"Invalid configuration: {escape(str(e))}")
    return 1

  result = Engine(config).run(source)

  if json_trace:
    json_trace.write_text(json.dumps(result.trace_events, indent=2), encoding="utf-8")
    log_info(f"Trace written to [path]{escape(str(json_trace))}[/path]")

  if not result.success:
    for err in result.errors:
      log_error(escape(err))
    return 1

  if out is not None:
    out.write_text(result.code + "\n", encoding="utf-8")
    log_success(f"Wrote [path]{escape(str(out))}[/path]")
  else:
    sys.stdout.write(result.code + "\n")

  return 0
