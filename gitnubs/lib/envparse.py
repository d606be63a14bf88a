"""
Parser for .git-nubs.env files.

The file holds KEY=value lines and is read without a shell. Values are
booleans, numbers, version strings or tag globs; shell metacharacters are
rejected.
"""

import re
from pathlib import Path

KEY_PATTERN = re.compile(r'^[A-Z][A-Z0-9_]*$')

# Expansion, substitution, chaining and redirection. Glob characters are allowed.
SHELL_META = re.compile(r'[`$;|&<>]')


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    return value


def parse_env(text: str) -> dict[str, str]:
    """
    Parse KEY=value lines, return dict.

    Blank lines, `#` comments and a leading `export ` are accepted.

    Raises:
        ValueError: on a malformed line or a value with shell metacharacters
    """
    result = {}

    for lineno, line in enumerate(text.splitlines(), 1):
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        if line.startswith('export '):
            line = line[len('export '):].lstrip()

        key, sep, value = line.partition('=')
        if not sep:
            raise ValueError(f"Line {lineno}: Invalid syntax (no '=')")

        key = key.strip()
        if not KEY_PATTERN.match(key):
            raise ValueError(f"Line {lineno}: Invalid key '{key}'")

        value = _unquote(value.strip())
        meta = SHELL_META.search(value)
        if meta:
            raise ValueError(f"Line {lineno}: Forbidden character '{meta.group()}' in {key}")

        result[key] = value

    return result


def load_env(filepath: str) -> dict[str, str]:
    """
    Read and parse an env file.

    Raises:
        FileNotFoundError: if file doesn't exist
        ValueError: see parse_env
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Env file not found: {filepath}")
    return parse_env(path.read_text())
