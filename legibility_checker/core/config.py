"""Settings for the legibility-tool CLI, from the environment and .env files.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  LEGIBILITY_MIN_RATIO    default contrast floor (4.5)
  LEGIBILITY_PROBE_ALPHA  opacity of the black/white probes (0.5)
  LEGIBILITY_LOG_LEVEL    logging level name (WARNING)

The engine functions never read these; the CLI passes them explicitly.
"""

import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path

from legibility_checker.core.blend import DEFAULT_PROBE_ALPHA
from legibility_checker.core.contrast import DEFAULT_MIN_RATIO

logger = logging.getLogger(__name__)

ENV_PREFIX = 'LEGIBILITY_'


@dataclass(frozen=True)
class Settings:
    min_ratio: float = DEFAULT_MIN_RATIO
    probe_alpha: float = DEFAULT_PROBE_ALPHA
    log_level: str = 'WARNING'


def find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a normal clone, a file in a worktree
        if (current / '.git').exists():
            return None
        if current.parent == current:
            return None
        current = current.parent


def parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value / KEY="value" lines, skipping comments and blanks."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = raw_value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set. Returns the path used."""
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            logger.warning('env file not found: %s', env_file)
            return None
    else:
        path = find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def _float_var(name: str, default: float) -> float:
    raw = os.environ.get(ENV_PREFIX + name)
    if raw is None or raw == '':
        return default
    try:
        value = float(raw)
    except ValueError:
        value = math.nan
    if not math.isfinite(value):
        logger.warning('%s%s=%r is not a number, using %s', ENV_PREFIX, name, raw, default)
        return default
    return value


def load_settings() -> Settings:
    """Read Settings from os.environ (call load_env first to pick up .env)."""
    level = os.environ.get(ENV_PREFIX + 'LOG_LEVEL', 'WARNING').upper()
    if not isinstance(logging.getLevelName(level), int):
        level = 'WARNING'
    return Settings(
        min_ratio=_float_var('MIN_RATIO', DEFAULT_MIN_RATIO),
        probe_alpha=_float_var('PROBE_ALPHA', DEFAULT_PROBE_ALPHA),
        log_level=level,
    )
