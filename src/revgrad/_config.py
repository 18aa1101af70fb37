"""
Runtime configuration for revgrad.

Settings are read from environment variables once, at import time, and can
be replaced for the rest of the process with `set_config`:

- ``REVGRAD_LOG_LEVEL``      logging level name for the ``revgrad`` logger
                             (default ``WARNING``)
- ``REVGRAD_DEFAULT_DTYPE``  element type used when a constructor or
                             factory is not given one (default ``float32``)
- ``REVGRAD_SEED``           integer seed for `rand`/`randn` when no seed
                             argument is passed (default: unseeded)
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Optional

from .domain._element_type import ElementType
from .domain._errors import UnsupportedTypeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeConfig:
    """
    Immutable bundle of process-wide settings.

    Attributes
    ----------
    log_level : str
        Level name applied to the package logger.
    default_element_type : ElementType
        Element type used when none is specified.
    seed : Optional[int]
        Default seed for random factories.
    """

    log_level: str = "WARNING"
    default_element_type: ElementType = ElementType.FLOAT32
    seed: Optional[int] = None


def _element_type_from_env() -> ElementType:
    raw = os.getenv("REVGRAD_DEFAULT_DTYPE")
    if raw in (None, ""):
        return RuntimeConfig.default_element_type
    try:
        return ElementType.coerce(raw)
    except UnsupportedTypeError:
        logger.warning(
            "ignoring REVGRAD_DEFAULT_DTYPE=%r: not one of %s; using %s",
            raw,
            ", ".join(et.value for et in ElementType),
            RuntimeConfig.default_element_type.value,
        )
        return RuntimeConfig.default_element_type


def _seed_from_env() -> Optional[int]:
    raw = os.getenv("REVGRAD_SEED")
    if raw in (None, ""):
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("ignoring REVGRAD_SEED=%r: not an integer", raw)
        return None


def load_config_from_env() -> RuntimeConfig:
    """
    Build a `RuntimeConfig` from the ``REVGRAD_*`` environment variables.

    Unparseable values are logged as warnings and replaced by the defaults.
    """
    return RuntimeConfig(
        log_level=os.getenv("REVGRAD_LOG_LEVEL", "WARNING").upper(),
        default_element_type=_element_type_from_env(),
        seed=_seed_from_env(),
    )


_CONFIG: RuntimeConfig = load_config_from_env()


def get_config() -> RuntimeConfig:
    """Return the active configuration."""
    return _CONFIG


def set_config(**overrides: Any) -> RuntimeConfig:
    """
    Replace fields of the active configuration.

    Parameters
    ----------
    **overrides
        Field names of `RuntimeConfig` and their new values. An element type
        may be given in any form accepted by `ElementType.coerce`.

    Returns
    -------
    RuntimeConfig
        The new active configuration.
    """
    global _CONFIG
    if "default_element_type" in overrides:
        overrides["default_element_type"] = ElementType.coerce(
            overrides["default_element_type"]
        )
    _CONFIG = replace(_CONFIG, **overrides)
    if "log_level" in overrides:
        from ._logging import apply_log_level

        apply_log_level(_CONFIG.log_level)
    return _CONFIG
