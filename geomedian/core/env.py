"""Configuration from the environment and .env files.

Lookup order for a setting (first wins):
  1. Command-line option (handled by the caller).
  2. OS environment variable — never overwritten by a .env file.
  3. .env file at --env-file, or the first .env found walking up from the
     cwd. The walk stops at the nearest .git (file or dir) so a .env from
     outside the repo is never picked up.
  4. Built-in default.

Recognised variables:
  GEOMEDIAN_DIVISOR   cross size divisor (int, default 16)
  GEOMEDIAN_COLOUR    cross colour as hex (default #000000)
"""

import os
from pathlib import Path

ENV_PREFIX = 'GEOMEDIAN_'


def _find_dotenv(start: Path) -> Path | None:
    """Nearest .env at or above `start`, or None once .git or / is reached."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        if (directory / '.git').exists():
            return None
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """KEY=value lines into a dict. Quotes around values are stripped."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env entries into os.environ for keys not already set.

    Returns the file that was loaded, or None.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def env_str(name: str, default: str) -> str:
    """GEOMEDIAN_<name> from the environment, or `default` when unset or blank."""
    value = os.environ.get(ENV_PREFIX + name, '').strip()
    return value or default


def env_int(name: str, default: int) -> int:
    raw = env_str(name, '')
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f'{ENV_PREFIX}{name} must be an integer, got {raw!r}') from None
