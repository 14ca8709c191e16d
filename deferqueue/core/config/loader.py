"""Read queue definitions from YAML, substituting ${VAR} references from the environment."""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from deferqueue.core.config.models import Config

ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


def expand_env_vars(value: str) -> str:
    """Substitute ${NAME} references that are set in the environment.

    References to unset variables stay in place so check_unexpanded_vars can
    report them together.
    """
    return ENV_VAR_PATTERN.sub(lambda m: os.environ.get(m.group(1), m.group(0)), value)


def expand_env_vars_recursive(obj: Any) -> Any:
    """Apply expand_env_vars to every string inside nested dicts and lists."""
    if isinstance(obj, dict):
        return {key: expand_env_vars_recursive(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [expand_env_vars_recursive(item) for item in obj]
    elif isinstance(obj, str):
        return expand_env_vars(obj)
    return obj


def _iter_strings(obj: Any):
    if isinstance(obj, dict):
        for value in obj.values():
            yield from _iter_strings(value)
    elif isinstance(obj, list):
        for item in obj:
            yield from _iter_strings(item)
    elif isinstance(obj, str):
        yield obj


def check_unexpanded_vars(data: Any, source: str) -> None:
    """Reject queue settings that still reference unset variables.

    Args:
        data: Settings after expansion.
        source: Where the settings came from, quoted in the error.

    Raises:
        ValueError: Listing every distinct ${NAME} left in ``data``.
    """
    leftovers = {f"${{{name}}}" for text in _iter_strings(data) for name in ENV_VAR_PATTERN.findall(text)}
    if leftovers:
        raise ValueError(
            f"Unresolved environment variable(s) in {source}: {', '.join(sorted(leftovers))}. "
            f"Export them before loading or drop the references."
        )


def load_config(path: Path | str) -> Config:
    """Build a Config from a YAML file of logging and queue settings.

    Args:
        path: YAML file to read.

    Returns:
        Validated Config; an empty file yields all defaults.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If a ${VAR} reference cannot be resolved.
        yaml.YAMLError: If the file is not valid YAML.
        pydantic.ValidationError: If a setting has the wrong type or value.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open() as f:
        data: dict[str, Any] = yaml.safe_load(f) or {}

    data = expand_env_vars_recursive(data)
    check_unexpanded_vars(data, source=str(config_path))

    return Config(**data)
