"""Config file discovery and loading.

The core never looks at the process working directory on its own: a
project-local ``globtree.yaml`` is only considered when the caller names the
directory to look in.
"""

import logging
import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import GlobtreeConfig

logger = logging.getLogger(__name__)

PROJECT_CONFIG_NAME = "globtree.yaml"

_ENV_REF = re.compile(r"\$\{(\w+)\}")


def candidate_paths(cli_path: str | None = None, base_dir: str | os.PathLike[str] | None = None) -> list[Path]:
    """Config files to try, highest precedence first."""
    paths: list[Path] = []
    if cli_path:
        paths.append(Path(cli_path))
    if base_dir is not None:
        paths.append(Path(base_dir) / PROJECT_CONFIG_NAME)
    paths.append(Path.home() / ".globtree" / "config.yaml")
    return paths


def _read_yaml(path: Path) -> dict | None:
    try:
        raw = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid config in {path}: expected a mapping, got {type(raw).__name__}")
    return _expand_env_vars(raw)


def load_config(
    cli_path: str | None = None,
    base_dir: str | os.PathLike[str] | None = None,
) -> GlobtreeConfig:
    """Load the first non-empty config among :func:`candidate_paths`, else defaults.

    Raises ValueError naming the file when it is not valid YAML or does not
    fit the schema.
    """
    for path in candidate_paths(cli_path, base_dir):
        if not path.is_file():
            continue
        raw = _read_yaml(path)
        if raw is None:
            continue
        try:
            cfg = GlobtreeConfig.model_validate(raw)
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e
        logger.debug("Loaded config from %s", path)
        return cfg

    return GlobtreeConfig()


def _expand_env_vars(obj: object) -> object:
    """Replace ``${VAR}`` in every string of a parsed document; unset vars become ''."""
    if isinstance(obj, str):
        return _ENV_REF.sub(lambda m: os.environ.get(m.group(1), ""), obj)
    if isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Written by `globtree config init`
DEFAULT_CONFIG_TEMPLATE = """\
# globtree.yaml

# Plain listings (dirs / files)
listing:
  unix_style: true             # join paths with "/" on every platform

# Pattern used by dirset / dirhash when none is given
pattern:
  default: "**"

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
