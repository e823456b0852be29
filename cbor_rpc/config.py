"""Codec and transport configuration."""
import logging
from pathlib import Path
from typing import Literal, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

# Section name looked up in YAML files shared with other settings
CONFIG_SECTION = "cbor_rpc"


class TransportConfig(BaseModel):
    """Options passed through to the CBOR encoder and decoder."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Encode maps with sorted keys and minimal-size floats (RFC 8949 4.2)
    canonical: bool = False
    value_sharing: bool = False
    str_errors: Literal["strict", "replace"] = "strict"
    # Hex dump every frame at DEBUG level
    log_frames: bool = False


DEFAULT_CONFIG = TransportConfig()


def load_config(config_path: Optional[Union[str, Path]] = None) -> TransportConfig:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to config file. The options may sit at the top
            level or under a `cbor_rpc:` section.

    Returns:
        Validated TransportConfig; defaults when the path is None or missing
    """
    if config_path is None:
        return DEFAULT_CONFIG

    path = Path(config_path)
    if not path.exists():
        logger.info(f"Config file not found: {path}, using defaults")
        return DEFAULT_CONFIG

    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    if isinstance(data, dict) and CONFIG_SECTION in data:
        data = data[CONFIG_SECTION] or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    config = TransportConfig(**data)
    logger.debug(f"Loaded transport config from {path}: {config}")
    return config
