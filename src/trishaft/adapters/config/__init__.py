"""Configuration adapter built on lib_layered_config.

The only section the package reads is ``[lib_log_rich]``; the ``config``
command renders whatever the layers merged.
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path, validate_profile

__all__ = ["display_config", "get_config", "get_default_config_path", "validate_profile"]
