"""Environment configuration for swatch-tool.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  SWATCH_TOP_N           number of colours to rank (default 20)
  SWATCH_INCLUDE_ALPHA   1/true/yes/on to make alpha part of colour identity
"""

import os
from dataclasses import dataclass
from pathlib import Path

from swatch_tool.core.ranker import DEFAULT_TOP_N

_TRUTHY = {'1', 'true', 'yes', 'on'}


@dataclass
class Settings:
    top_n: int = DEFAULT_TOP_N
    include_alpha: bool = False


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        if (current / '.git').exists():
            return None
        if current.parent == current:
            return None
        current = current.parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines; quotes stripped, comments and junk lines skipped."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.removeprefix('export ').strip()
        if key:
            result[key] = raw_value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def settings_from_env() -> Settings:
    """Read SWATCH_* variables. Malformed values fall back to defaults."""
    settings = Settings()
    raw_top = os.environ.get('SWATCH_TOP_N', '').strip()
    try:
        top_n = int(raw_top)
    except ValueError:
        top_n = -1
    if top_n >= 0:
        settings.top_n = top_n
    settings.include_alpha = os.environ.get('SWATCH_INCLUDE_ALPHA', '').strip().lower() in _TRUTHY
    return settings
