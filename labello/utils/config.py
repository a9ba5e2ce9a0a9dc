"""Configuration loading utilities."""

import importlib
import logging
from pathlib import Path

import yaml

from labello.core.errors import ConfigurationError
from labello.core.schema import Config, EncoderType, MappingFn

log = logging.getLogger(__name__)


def load_config(config_path: str = "configs/default.yaml") -> dict:
    """Load YAML configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    with open(path) as f:
        cfg = yaml.safe_load(f) or {}

    if not isinstance(cfg, dict):
        raise ConfigurationError(f"Config root must be a mapping: {config_path}")
    if "encoder" not in cfg:
        raise ConfigurationError(f"Missing config key: encoder ({config_path})")
    return cfg


def resolve_mapping_fn(path: str) -> MappingFn:
    """Import a 'package.module:function' reference."""
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigurationError(
            f"mapping_fn must look like 'module:function', got '{path}'"
        )
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigurationError(f"Cannot import mapping_fn module '{module_name}': {e}") from e

    fn = getattr(module, attr, None)
    if not callable(fn):
        raise ConfigurationError(f"'{path}' is not a callable")
    return fn


def config_from_dict(section: dict) -> tuple[EncoderType, Config]:
    """Build (strategy, Config) from the `encoder` section of a config file."""
    section = section or {}
    strategy = EncoderType.parse(section.get("strategy"))

    fn_ref = section.get("mapping_fn")
    mapping_fn = resolve_mapping_fn(fn_ref) if fn_ref else None

    config = Config(max_classes=section.get("max_classes"), mapping_fn=mapping_fn)
    log.debug(f"Encoder config: strategy={strategy.value}, max_classes={config.max_classes}")
    return strategy, config
