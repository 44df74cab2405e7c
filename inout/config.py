# inout/config.py
"""
Load and validate YAML engine configurations.
"""
import math
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from cerberus import Validator

from core.exceptions import ConfigError
from utils.logging_config import get_logger
from utils.units import parse_frequency

logger = get_logger(__name__)

# Logger namespaces that follow EngineConfig.log_level.
PACKAGE_LOGGERS = ("core", "components", "inout", "interaction")


def _check_finite(field, value, error):
    # min/max rules let NaN through and put no ceiling on inf
    if isinstance(value, float) and not math.isfinite(value):
        error(field, "must be a finite number")


# Cerberus schema for the engine configuration
CONFIG_SCHEMA = {
    'z0': {'type': 'float', 'coerce': float, 'min': 1e-9, 'check_with': _check_finite},
    'snap_threshold': {'type': 'float', 'coerce': float, 'min': 1e-9, 'check_with': _check_finite},
    'snap_hysteresis': {'type': 'float', 'coerce': float, 'min': 1.0, 'check_with': _check_finite},
    'smoothing_time_constant': {'type': 'float', 'coerce': float, 'min': 0.0,
                                'check_with': _check_finite},
    'reduced_motion': {'type': 'boolean'},
    'allow_direct_drag': {'type': 'boolean'},
    # "1 GHz" or a plain number of hertz
    'default_frequency_hz': {'type': ['float', 'integer', 'string']},
    'hover_radius_px': {'type': 'float', 'coerce': float, 'min': 0.0, 'check_with': _check_finite},
    'log_level': {'type': 'string', 'nullable': True, 'allowed': ['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                  'coerce': lambda v: v.upper() if isinstance(v, str) else v},
}


@dataclass(frozen=True)
class EngineConfig:
    z0: float = 50.0
    snap_threshold: float = 0.15
    snap_hysteresis: float = 1.5
    smoothing_time_constant: float = 0.05  # seconds
    reduced_motion: bool = False
    allow_direct_drag: bool = True
    default_frequency_hz: float = 1e9
    hover_radius_px: float = 24.0
    log_level: Optional[str] = None  # None: inherit from the host's logging setup


def config_from_dict(raw: Dict[str, Any]) -> EngineConfig:
    """
    Validate a mapping against the schema and build an EngineConfig.

    Raises:
        ConfigError: On schema violations or an unparseable frequency.
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Engine configuration must be a mapping, got {type(raw).__name__}")

    validator = Validator(CONFIG_SCHEMA, allow_unknown=False)
    if not validator.validate(raw):
        raise ConfigError(f"Engine config schema validation errors: {validator.errors}")
    doc: Dict[str, Any] = dict(validator.document)

    if 'default_frequency_hz' in doc:
        try:
            freq = parse_frequency(doc['default_frequency_hz'])
        except ValueError as e:
            raise ConfigError(str(e)) from e
        if not (math.isfinite(freq) and freq > 0):
            raise ConfigError(f"default_frequency_hz must be positive and finite, got {freq}")
        doc['default_frequency_hz'] = freq

    known = {f.name for f in fields(EngineConfig)}
    return EngineConfig(**{k: v for k, v in doc.items() if k in known})


def load_engine_config(path: Union[str, Path]) -> EngineConfig:
    """
    Load a YAML engine configuration file.

    Raises:
        ConfigError: If file read fails or schema validation fails.
    """
    path = Path(path)
    try:
        raw = yaml.safe_load(path.read_text())
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to read engine config YAML '{path}': {e}") from e

    config = config_from_dict(raw)
    logger.debug(f"Loaded engine config from {path}: {config}")
    return config


def apply_log_level(config: EngineConfig) -> None:
    """Set the package loggers to ``config.log_level``; no-op when it is unset."""
    if config.log_level is None:
        return
    for name in PACKAGE_LOGGERS:
        get_logger(name, config.log_level)
