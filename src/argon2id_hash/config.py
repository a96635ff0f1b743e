# file: argon2id_hash/config.py
"""
YAML configuration loading for password policies.
"""

import logging
import os
from typing import Any, Dict, Optional

import yaml

from .hash_errors import ConfigurationError, InvalidParametersError
from .params import PRESETS, Parameters
from .policy import MAX_PASSWORD_LENGTH, MIN_PASSWORD_LENGTH, PasswordPolicy


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default_config.yaml")

PARAM_FIELDS = ('memory_cost', 'iterations', 'parallelism', 'salt_length', 'key_length')


def get_default_config() -> Dict[str, Any]:
    """
    Get hardcoded default configuration.

    Returns:
        Default configuration dictionary
    """
    return {
        'policy': {
            'min_password_length': MIN_PASSWORD_LENGTH,
            'max_password_length': MAX_PASSWORD_LENGTH,
        },
        'params': {
            'preset': 'lambda',
        },
    }


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to YAML config file. If None, the packaged
            default_config.yaml is used.

    Returns:
        Configuration dictionary

    Raises:
        ConfigurationError: If the file is not valid YAML or not a mapping
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not os.path.exists(config_path):
        logger.warning(f"Config file not found: {config_path}, using defaults")
        return get_default_config()

    try:
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ConfigurationError(f"Top level of {config_path} must be a mapping")

    logger.debug(f"Loaded configuration from {config_path}")
    return config


def params_from_config(section: Optional[Dict[str, Any]]) -> Parameters:
    """
    Build Parameters from the 'params' config section.

    Configuration Schema:
        params['preset']: 'lambda' | 'default' (default: 'lambda')
        params[<field>]: optional override of any Parameters field
    """
    if section is not None and not isinstance(section, dict):
        raise ConfigurationError(f"params section must be a mapping, got {type(section).__name__}")
    section = dict(section or {})

    preset_name = section.pop('preset', 'lambda')
    if preset_name not in PRESETS:
        raise ConfigurationError(
            f"Unknown preset {preset_name!r}; expected one of {sorted(PRESETS)}"
        )

    unknown = set(section) - set(PARAM_FIELDS)
    if unknown:
        raise ConfigurationError(f"Unknown params keys: {sorted(unknown)}")

    values = PRESETS[preset_name].to_dict()
    values.update(section)

    try:
        return Parameters(**values)
    except InvalidParametersError as e:
        raise ConfigurationError(f"Invalid params: {e}") from e


def policy_from_config(config: Dict[str, Any]) -> PasswordPolicy:
    """
    Build a PasswordPolicy from a configuration dictionary.

    Raises:
        ConfigurationError: If any section holds invalid values
    """
    if not isinstance(config, dict):
        raise ConfigurationError(f"Configuration must be a mapping, got {type(config).__name__}")

    policy_config = config.get('policy') or {}
    if not isinstance(policy_config, dict):
        raise ConfigurationError("policy section must be a mapping")

    params = params_from_config(config.get('params'))

    try:
        return PasswordPolicy(
            min_length=policy_config.get('min_password_length', MIN_PASSWORD_LENGTH),
            max_length=policy_config.get('max_password_length', MAX_PASSWORD_LENGTH),
            params=params,
        )
    except InvalidParametersError as e:
        raise ConfigurationError(f"Invalid policy: {e}") from e


def load_policy(config_path: Optional[str] = None) -> PasswordPolicy:
    """Load a configuration file and build its PasswordPolicy."""
    return policy_from_config(load_config(config_path))
