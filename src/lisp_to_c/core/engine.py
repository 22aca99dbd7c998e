"""
Orchestration Engine.

This module provides the `Engine`, the driver used by the command line and by
callers that want a result object instead of exceptions.

The Engine pipeline consists of:

1.  **Lexing**: source text -> tokens.
2.  **Parsing**: tokens -> source AST.
3.  **Transforming**: source AST -> target AST.
4.  **Rendering**: target AST -> infix code.

The run short-circuits after the stage matching the configured
`OutputFormat` (e.g. ``tokens`` stops after lexing and dumps JSON).
"""

import json
import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from lisp_to_c.config import RuntimeConfig
from lisp_to_c.core.pipeline import lex, parse, render, transform
from lisp_to_c.core.tracer import TraceLogger
from lisp_to_c.enums import OutputFormat
from lisp_to_c.errors import CompileError

logger = logging.getLogger(__name__)


class ConversionResult(BaseModel):
  """
  Structured result of a single compile run.
  """

  code: str = Field(default="", description="The generated output (code or JSON dump).")
  errors: List[str] = Field(default_factory=list, description="A list of error messages.")
  success: bool = Field(
    default=True,
    description="True if every requested stage completed.",
  )
  trace_events: List[Dict[str, Any]] = Field(default_factory=list, description="A log of internal trace events.")

  @property
  def has_errors(self) -> bool:
    """
    Returns True if any errors were recorded during the run.

    Returns:
        bool: True if errors list is non-empty.
    """
    return len(self.errors) > 0


class Engine:
  """
  The main compilation unit.

  Holds configuration only; every call to `run` builds its own trees and
  tracer, so one Engine may be shared between threads.
  """

  def __init__(self, config: Optional[RuntimeConfig] = None):
    """
    Initializes the Engine.

    Args:
        config: Runtime settings. Defaults to `RuntimeConfig()`.
    """
    self.config = config or RuntimeConfig()

  def run(self, code: str) -> ConversionResult:
    """
    Executes the pipeline on a source string.

    Compile errors are captured into the result rather than raised.

    Args:
        code: The input source code.

    Returns:
        ConversionResult: The output text, errors and trace events.
    """
    tracer = TraceLogger()
    try:
      output = self._run_stages(code, tracer)
    except CompileError as e:
      tracer.fail_phase(e)
      logger.debug("Compilation failed: %s", e)
      return ConversionResult(
        errors=[f"{type(e).__name__}: {e}"],
        success=False,
        trace_events=self._trace(tracer),
      )

    return ConversionResult(code=output, trace_events=self._trace(tracer))

  def _run_stages(self, code: str, tracer: TraceLogger) -> str:
    fmt = self.config.output_format

    tracer.start_phase("Lexing", f"{len(code)} characters")
    tokens = lex(code)
    tracer.end_phase(tokens=len(tokens))
    if fmt == OutputFormat.TOKENS:
      return self._dump([t.to_dict() for t in tokens])

    tracer.start_phase("Parsing")
    ast = parse(tokens)
    tracer.end_phase(top_level=len(ast.body))
    if fmt == OutputFormat.AST:
      return self._dump(ast.to_dict())

    tracer.start_phase("Transforming")
    new_ast = transform(ast)
    tracer.end_phase(top_level=len(new_ast.body))
    if fmt == OutputFormat.TARGET_AST:
      return self._dump(new_ast.to_dict())

    tracer.start_phase("Rendering")
    output = render(new_ast)
    tracer.end_phase(characters=len(output))
    return output

  def _dump(self, data: Any) -> str:
    return json.dumps(data, indent=self.config.indent)

  def _trace(self, tracer: TraceLogger) -> List[Dict[str, Any]]:
    return tracer.export() if self.config.trace else []
