"""
Configuration for the Hanoi visualizer.

Values are layered, lowest priority first:
    packaged data/defaults.yaml
    user YAML file (--config)
    HANOI_* environment variables (a .env file is honored)
    keyword overrides, usually from CLI flags
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

from .pacing import PACING_NONE, PACING_SLEEP, Pacer, create_pacer
from .renderer import RenderStyle

logger = logging.getLogger(__name__)

DEFAULTS_FILE = Path(__file__).parent / "data" / "defaults.yaml"

# YAML section -> {yaml key: config field}
SECTION_KEYS = {
    'display': {
        'peg_names': 'peg_names',
        'rod_char': 'rod_char',
        'disk_char': 'disk_char',
        'border_char': 'border_char',
    },
    'pacing': {
        'strategy': 'pacing',
        'delay_ms': 'delay_ms',
    },
    'input': {
        'confirm_threshold': 'confirm_threshold',
    },
    'logging': {
        'log_dir': 'log_dir',
        'log_level': 'log_level',
        'console_log_level': 'console_log_level',
        'log_to_file': 'log_to_file',
    },
}

ENV_KEYS = {
    'HANOI_DELAY_MS': 'delay_ms',
    'HANOI_PACING': 'pacing',
    'HANOI_CONFIRM_THRESHOLD': 'confirm_threshold',
    'HANOI_LOG_LEVEL': 'log_level',
    'HANOI_LOG_DIR': 'log_dir',
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class HanoiConfig(BaseModel):
    """Validated settings for one visualizer run"""
    peg_names: List[str] = Field(default_factory=lambda: ["A", "B", "C"])
    rod_char: str = Field("|", min_length=1, max_length=1)
    disk_char: str = Field("=", min_length=1, max_length=1)
    border_char: str = Field("-", min_length=1, max_length=1)

    pacing: str = PACING_SLEEP
    delay_ms: int = Field(500, ge=0)

    confirm_threshold: int = Field(8, ge=1)

    log_dir: str = "logs"
    log_level: str = "INFO"
    console_log_level: str = "WARNING"
    log_to_file: bool = True

    model_config = {'extra': 'forbid'}

    @field_validator('peg_names')
    @classmethod
    def check_peg_names(cls, value: List[str]) -> List[str]:
        if len(value) != 3 or len(set(value)) != 3:
            raise ValueError(f"peg_names must be three distinct names, got {value}")
        if any(len(name) != 1 for name in value):
            raise ValueError(f"peg names must be single characters, got {value}")
        return value

    @field_validator('pacing')
    @classmethod
    def check_pacing(cls, value: str) -> str:
        value = value.lower()
        if value not in (PACING_SLEEP, PACING_NONE):
            raise ValueError(f"pacing must be '{PACING_SLEEP}' or '{PACING_NONE}', got {value!r}")
        return value

    @field_validator('log_level', 'console_log_level')
    @classmethod
    def check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value!r}")
        return value

    @property
    def render_style(self) -> RenderStyle:
        return RenderStyle(rod=self.rod_char, disk=self.disk_char, border=self.border_char)

    def create_pacer(self) -> Pacer:
        return create_pacer(self.pacing, self.delay_ms)


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")
    with open(path, 'r') as f:
        return yaml.safe_load(f) or {}


def flatten_sections(config: Mapping[str, Any]) -> Dict[str, Any]:
    """Turn the sectioned YAML layout into HanoiConfig field names."""
    values: Dict[str, Any] = {}
    for section, keys in SECTION_KEYS.items():
        section_values = config.get(section) or {}
        for key, value in section_values.items():
            if key not in keys:
                raise ValueError(f"Unknown setting '{section}.{key}'")
            values[keys[key]] = value

    unknown = set(config) - set(SECTION_KEYS)
    if unknown:
        raise ValueError(f"Unknown configuration sections: {sorted(unknown)}")
    return values


def env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    return {field: environ[var] for var, field in ENV_KEYS.items() if environ.get(var)}


def load_config(config_file: Optional[str] = None,
                config_dict: Optional[Dict] = None,
                environ: Optional[Mapping[str, str]] = None,
                **kwargs) -> HanoiConfig:
    """
    Build a HanoiConfig from every configuration source.

    Args:
        config_file: Path to a YAML file using the same sections as defaults.yaml
        config_dict: Same layout as the YAML file, used instead of config_file
        environ: Environment to read HANOI_* variables from; os.environ (after
            loading .env) when omitted
        **kwargs: Field overrides; None values are ignored

    Returns:
        The validated configuration
    """
    if config_file is not None and config_dict is not None:
        raise ValueError("Cannot provide both config_file and config_dict.")

    values = flatten_sections(_read_yaml(DEFAULTS_FILE))

    if config_file is not None:
        logger.info(f"Loading configuration from {config_file}")
        values.update(flatten_sections(_read_yaml(Path(config_file))))
    elif config_dict is not None:
        values.update(flatten_sections(config_dict))

    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ
    values.update(env_overrides(environ))

    values.update({key: value for key, value in kwargs.items() if value is not None})
    return HanoiConfig(**values)
