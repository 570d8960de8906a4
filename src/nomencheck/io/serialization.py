"""YAML serialization for CheckConfig.

Requires pyyaml. Raises ImportError with clear install instructions
if pyyaml is not available.
"""

from __future__ import annotations

from dataclasses import fields
from pathlib import Path
from typing import Any

from nomencheck.io.models import CheckConfig

_KNOWN_KEYS = frozenset(f.name for f in fields(CheckConfig))
_BOOL_KEYS = ("verbose", "print_to_screen", "write_log", "recursive")


def _require_yaml() -> Any:
    """Import and return the yaml module, or raise a helpful error."""
    try:
        import yaml

        return yaml
    except ImportError:
        raise ImportError(
            "pyyaml is required for config serialization. "
            "Install it with: pip install pyyaml"
        ) from None


def config_to_yaml(config: CheckConfig, path: Path) -> None:
    """Serialize a CheckConfig to a YAML file.

    Args:
        config: The configuration to serialize.
        path: File path to write.
    """
    yaml = _require_yaml()

    data: dict[str, Any] = {
        "verbose": config.verbose,
        "print_to_screen": config.print_to_screen,
        "write_log": config.write_log,
        "recursive": config.recursive,
        "extensions": list(config.extensions),
    }
    if config.log_dir is not None:
        data["log_dir"] = str(config.log_dir)

    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


def config_from_yaml(path: Path) -> CheckConfig:
    """Deserialize a CheckConfig from a YAML file.

    Missing keys take their defaults.

    Args:
        path: Path to the YAML file.

    Returns:
        The CheckConfig described by the file.

    Raises:
        FileNotFoundError: If the YAML file doesn't exist.
        ValueError: If the YAML cannot be parsed, is not a mapping, has
            unknown keys or values of the wrong type.
    """
    yaml = _require_yaml()

    path = Path(path)
    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid config YAML: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Invalid config YAML: expected a mapping, got {type(data).__name__}")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ValueError(f"Invalid config YAML: unknown key(s) {', '.join(unknown)}")

    for key in _BOOL_KEYS:
        if key in data and not isinstance(data[key], bool):
            raise ValueError(f"Invalid config YAML: '{key}' must be true or false")

    kwargs: dict[str, Any] = {key: data[key] for key in _BOOL_KEYS if key in data}

    if data.get("log_dir") is not None:
        kwargs["log_dir"] = Path(data["log_dir"])

    if "extensions" in data:
        extensions = data["extensions"]
        if not isinstance(extensions, list):
            raise ValueError("Invalid config YAML: 'extensions' must be a list")
        kwargs["extensions"] = tuple(extensions)

    return CheckConfig(**kwargs)
