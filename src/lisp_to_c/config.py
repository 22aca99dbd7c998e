"""
Runtime Configuration Store.

Settings are read from the ``[tool.lisp_to_c]`` table of the nearest
``pyproject.toml`` and may be overridden by explicit (CLI) arguments.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from lisp_to_c.enums import OutputFormat

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

logger = logging.getLogger(__name__)

TOOL_SECTION = "lisp_to_c"


class RuntimeConfig(BaseModel):
  """
  Global configuration container for the compile engine.
  """

  output_format: OutputFormat = Field(OutputFormat.CODE, description="Which stage output a run returns.")
  trace: bool = Field(False, description="If True, record stage trace events in the result.")
  indent: int = Field(2, ge=0, description="JSON indentation used for token/AST dumps.")

  @field_validator("output_format", mode="before")
  @classmethod
  def normalize_format(cls, v: Any) -> Any:
    """
    Accepts format names case-insensitively, with '-' or '_' separators.

    Args:
        v: Raw value from TOML or CLI.

    Returns:
        The normalized value, left for enum validation.
    """
    if isinstance(v, str):
      return v.strip().lower().replace("-", "_")
    return v

  @classmethod
  def load(
    cls,
    output_format: Optional[str] = None,
    trace: Optional[bool] = None,
    indent: Optional[int] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        output_format: Override for the output format.
        trace: Override for tracing.
        indent: Override for JSON indentation.
        search_path: Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.

    Raises:
        ValueError: If a resolved value fails validation.
    """
    toml_config, _ = _load_toml_settings(search_path or Path.cwd())

    settings: Dict[str, Any] = dict(toml_config)
    overrides = {"output_format": output_format, "trace": trace, "indent": indent}
    settings.update({k: v for k, v in overrides.items() if v is not None})

    known = {k: v for k, v in settings.items() if k in cls.model_fields}
    for key in settings.keys() - known.keys():
      logger.warning("Ignoring unknown config key '%s'", key)

    return cls(**known)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches the start directory and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory definition was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Could not read %s: %s", toml_path, e)
        return {}, None

      tool = data.get("tool", {})
      section = tool.get(TOOL_SECTION, {}) if isinstance(tool, dict) else {}
      if not isinstance(section, dict):
        logger.warning("Ignoring non-table [tool.%s] in %s", TOOL_SECTION, toml_path)
        return {}, parent
      return section, parent

  return {}, None
