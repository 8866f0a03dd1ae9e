"""Environment and .env configuration for img2header.

Load order (first wins):
  1. Existing OS environment variables — never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  IMG2HEADER_COLORS   default colour limit for indexed mode (16)
  IMG2HEADER_DIALECT  default dialect for library callers (plain-array)
  IMG2HEADER_NEAREST  nearest-colour strategy, linear or numpy (linear)
"""

import os
from dataclasses import dataclass
from pathlib import Path

from img2header.core.types import InvalidConfiguration

DEFAULT_COLORS = 16
DEFAULT_DIALECT = 'plain-array'
DEFAULT_NEAREST = 'linear'


def _find_dotenv(start: Path) -> Path | None:
    """First .env at or above `start`; None once a .git boundary is passed."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        if (directory / '.git').exists():
            return None
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """KEY=value lines; quotes stripped, comments and junk lines skipped."""
    values: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if line.startswith('export '):
            line = line[len('export ') :].lstrip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            values[key] = value.strip().strip('"').strip("'")
    return values


def load_env(env_file: str | None = None) -> Path | None:
    """Merge a .env into os.environ without overriding existing keys.

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


@dataclass(frozen=True)
class Settings:
    """Defaults for the CLI and library callers, resolved from the environment."""

    colors: int = DEFAULT_COLORS
    dialect: str = DEFAULT_DIALECT
    nearest: str = DEFAULT_NEAREST

    @classmethod
    def from_environ(cls, environ: dict[str, str] | None = None) -> 'Settings':
        env = os.environ if environ is None else environ
        raw_colors = env.get('IMG2HEADER_COLORS', '').strip()
        colors = DEFAULT_COLORS
        if raw_colors:
            try:
                colors = int(raw_colors)
            except ValueError as e:
                raise InvalidConfiguration(f'IMG2HEADER_COLORS must be an integer, got {raw_colors!r}') from e
        return cls(
            colors=colors,
            dialect=env.get('IMG2HEADER_DIALECT', '').strip() or DEFAULT_DIALECT,
            nearest=env.get('IMG2HEADER_NEAREST', '').strip() or DEFAULT_NEAREST,
        )
