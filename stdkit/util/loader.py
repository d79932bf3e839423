"""
Configuration source utilities for stdkit.
Provides loading of raw configuration mappings from files and the environment.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from ..errors import ConfigurationError, EncodingError
from . import nested
from .encoding import json_decode, yaml_decode

logger = logging.getLogger(__name__)

_VARIABLE_RE = re.compile(r'\$\{([^}]+)\}')


def load_config_from_env(prefix: str, environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Load configuration from environment variables with given prefix.

    The prefix is stripped and the remainder lower-cased. A double
    underscore nests: ``APP_DB__HOST=x`` gives ``{'db': {'host': 'x'}}``.
    Values are kept as strings.
    """
    if environ is None:
        environ = os.environ

    config: Dict[str, Any] = {}
    for key, value in environ.items():
        if key.startswith(prefix):
            config_key = key[len(prefix):].lower().replace('__', '.')
            if config_key:
                nested.set(config, config_key, value)

    logger.debug(f"Loaded {len(config)} configuration keys from environment prefix {prefix}")
    return config


def load_config_file(file_path: str) -> Dict[str, Any]:
    """Load configuration from a file (JSON or YAML)."""
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    file_ext = path.suffix.lower()
    content = path.read_text(encoding='utf-8')

    try:
        if file_ext == '.json':
            data = json_decode(content)
        elif file_ext in ('.yaml', '.yml'):
            data = yaml_decode(content)
        else:
            raise ConfigurationError(
                f"Unsupported configuration file format: {file_ext}", source=str(path)
            )
    except EncodingError as e:
        raise ConfigurationError(
            f"Unable to parse configuration file: {file_path}", source=str(path), cause=e
        ) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file must contain a mapping, got {type(data).__name__}",
            source=str(path)
        )

    logger.debug(f"Loaded configuration file {path}")
    return data


def expand_config_variables(config: Any, variables: Optional[Mapping[str, str]] = None) -> Any:
    """
    Expand variables in configuration values.
    Variables are specified as ${VAR_NAME} in config values; unknown
    variables are left untouched.
    """
    if variables is None:
        variables = dict(os.environ)

    def replace_var(match):
        return variables.get(match.group(1), match.group(0))

    if isinstance(config, str):
        return _VARIABLE_RE.sub(replace_var, config)
    elif isinstance(config, dict):
        return {k: expand_config_variables(v, variables) for k, v in config.items()}
    elif isinstance(config, list):
        return [expand_config_variables(item, variables) for item in config]
    return config
