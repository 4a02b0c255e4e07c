"""Configuration loading for Trade Risk Manager.

The config file only supplies starting defaults for the plan inputs.
Nothing a user types in a session is ever written back to it.
"""

import logging
from pathlib import Path
from typing import Optional

import toml

from riskmanager.calculator.inputs import (
    FIELD_DEFAULTS,
    InputError,
    build_input,
    resolve_field_name,
)
from riskmanager.models import PlanInput

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "riskmanager"
CONFIG_PATH = CONFIG_DIR / "config.toml"


def get_config(config_path: Optional[Path] = None) -> Optional[dict]:
    """Lazily load configuration.

    Args:
        config_path: Path to the TOML file. Defaults to CONFIG_PATH.

    Returns:
        Config dict or None if missing or unreadable.
    """
    config_path = config_path or CONFIG_PATH

    if not config_path.exists():
        return None

    try:
        return toml.load(config_path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_path, e)
        return None


def create_template_config(config_path: Optional[Path] = None) -> Path:
    """Create a template configuration file.

    Returns:
        Path of the written file.
    """
    config_path = config_path or CONFIG_PATH
    config_path.parent.mkdir(parents=True, exist_ok=True)

    template = {
        "defaults": {
            name: value for name, value in FIELD_DEFAULTS.items() if name != "notes"
        },
    }

    with open(config_path, "w") as f:
        toml.dump(template, f)

    logger.debug("Wrote template config to %s", config_path)
    return config_path


def get_default_input(config: Optional[dict] = None) -> PlanInput:
    """Build the starting PlanInput from the ``[defaults]`` config section.

    Values pass through the same clamps as typed entry. Unknown keys are
    logged and skipped.
    """
    defaults = (config or {}).get("defaults", {})
    if not isinstance(defaults, dict):
        logger.warning("Ignoring [defaults]: expected a table, got %r", defaults)
        defaults = {}

    fields = {}
    for name, value in defaults.items():
        try:
            field = resolve_field_name(name)
        except InputError:
            logger.warning("Ignoring unknown config default %r", name)
            continue
        fields[field] = value

    return build_input(**fields)
