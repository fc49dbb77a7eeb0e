"""
Environment File Loader

Best-effort loading of ``KEY=VALUE`` pairs from a local ``.env`` file into
the process environment. Failures are reported as a warning on stderr and
never stop startup.
"""

import os
import sys
from pathlib import Path
from typing import Dict, MutableMapping, Optional, Union

from dotenv.parser import parse_stream

from src.utils.exceptions import EnvironmentLoadError


DEFAULT_ENV_FILE = '.env'
ENV_LOAD_WARNING = 'Failed to load environment variables from .env:'

PathLike = Union[str, os.PathLike]


def read_env_file(path: PathLike) -> Dict[str, str]:
    """
    Parse an environment file.

    Args:
        path: Path to the environment file

    Returns:
        Mapping of variable name to value, in file order. Keys declared
        without a value are skipped.

    Raises:
        EnvironmentLoadError: If the file cannot be read or a statement
            cannot be parsed
    """
    env_path = Path(path)
    try:
        with open(env_path, encoding='utf-8') as f:
            bindings = list(parse_stream(f))
    except (OSError, UnicodeDecodeError) as e:
        raise EnvironmentLoadError(str(e), path=str(env_path)) from e

    values: Dict[str, str] = {}
    for binding in bindings:
        line = binding.original.line
        if binding.error:
            raise EnvironmentLoadError(
                f"could not parse statement starting at line {line}",
                path=str(env_path),
                line=line,
            )
        if binding.key is None or binding.value is None:
            continue
        # os.environ rejects NUL; fail before anything is merged
        if '\x00' in binding.key or '\x00' in binding.value:
            raise EnvironmentLoadError(
                f"null byte in statement starting at line {line}",
                path=str(env_path),
                line=line,
            )
        values[binding.key] = binding.value

    return values


def load_environment(
    path: Optional[PathLike] = None,
    environ: Optional[MutableMapping[str, str]] = None,
    override: bool = False,
) -> Optional[EnvironmentLoadError]:
    """
    Load an environment file into the process environment.

    Variables that are already set win over the file unless ``override``
    is true, so calling this again never contradicts what is in place.

    Args:
        path: Environment file (default: ``.env`` in the working directory)
        environ: Target mapping (default: ``os.environ``)
        override: Replace variables that are already set

    Returns:
        None on success, otherwise the load error (already reported)
    """
    env_path = Path(path) if path is not None else Path.cwd() / DEFAULT_ENV_FILE
    target = os.environ if environ is None else environ

    try:
        values = read_env_file(env_path)
    except EnvironmentLoadError as error:
        # Logging is configured from the config this step feeds, so it is not up yet.
        print(ENV_LOAD_WARNING + '\n', error.message, file=sys.stderr)
        return error

    for key, value in values.items():
        if override or key not in target:
            target[key] = value

    return None
