from __future__ import annotations
import os
import re
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

logger = logging.getLogger("benchparse.config")
_ENV_LOADED = False

INPUT_FORMATS = ("text", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_env_vars(dotenv_path: Optional[Path] = None) -> None:
    """Load environment variables from .env file"""
    global _ENV_LOADED
    if _ENV_LOADED and dotenv_path is None:
        return
    # core/config.py -> project root .env at ../../.env
    if dotenv_path is None:
        dotenv_path = Path(__file__).resolve().parent.parent.parent / ".env"
    if not dotenv_path.exists():
        logger.debug(".env file not found")
        _ENV_LOADED = True
        return
    try:
        env_content = dotenv_path.read_text(encoding='utf-8')
    except OSError as e:
        logger.warning(f"Error loading .env file: {e}")
        _ENV_LOADED = True
        return
    for line in env_content.splitlines():
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        match = re.match(r'^([A-Za-z0-9_]+)=(.*)$', line)
        if not match:
            continue
        key, value = match.groups()
        if key in os.environ:
            continue
        if (value.startswith('"') and value.endswith('"')) or (value.startswith("'") and value.endswith("'")):
            value = value[1:-1]
        else:
            comment_pos = value.find('#')
            if comment_pos >= 0:
                value = value[:comment_pos].strip()
        os.environ[key] = value
    _ENV_LOADED = True


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("true", "1", "yes")


@dataclass
class BenchParseConfig:
    """Parser configuration"""
    # Top-level benchmark names must start with this prefix
    case_prefix: str = "Benchmark"
    # printf-style format used when rendering float inputs
    float_format: str = "%f"
    # "text" for plain testing.B output, "json" for `go test -json` events
    input_format: str = "text"
    validate_events: bool = False
    log_level: str = field(default_factory=lambda: os.getenv("BENCHPARSE_LOG_LEVEL", "INFO"))

    def __post_init__(self):
        if self.input_format not in INPUT_FORMATS:
            raise ValueError(f"input_format must be one of: {' | '.join(INPUT_FORMATS)}, got '{self.input_format}'")
        if not self.case_prefix:
            raise ValueError("case_prefix must not be empty")
        try:
            self.float_format % 1.0
        except (TypeError, ValueError):
            raise ValueError(f"float_format '{self.float_format}' is not a valid float format")
        if str(self.log_level).upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {' | '.join(LOG_LEVELS)}, got '{self.log_level}'")

    @classmethod
    def from_env(cls) -> 'BenchParseConfig':
        """Build config from BENCHPARSE_* variables; a project .env file fills unset ones."""
        load_env_vars()
        return cls(
            case_prefix=os.getenv("BENCHPARSE_CASE_PREFIX", "Benchmark"),
            float_format=os.getenv("BENCHPARSE_FLOAT_FORMAT", "%f"),
            input_format=os.getenv("BENCHPARSE_INPUT_FORMAT", "text").lower(),
            validate_events=_env_bool("BENCHPARSE_VALIDATE_EVENTS"),
            log_level=os.getenv("BENCHPARSE_LOG_LEVEL", "INFO"),
        )

    @classmethod
    def default(cls) -> 'BenchParseConfig':
        return cls()

    @classmethod
    def for_json(cls, validate_events: bool = False) -> 'BenchParseConfig':
        return cls(input_format="json", validate_events=validate_events)
