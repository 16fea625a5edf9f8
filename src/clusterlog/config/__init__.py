"""Application configuration helpers."""

from __future__ import annotations

from .cluster_file import ClusterFileSpec, load_cluster_file
from .control_plane import ControlPlaneConfig, get_control_plane_config
from .env import optional_env_var, optional_float_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .logging import configure_logging

__all__ = [
    "ClusterFileSpec",
    "ConfigurationError",
    "ControlPlaneConfig",
    "MissingConfigurationError",
    "configure_logging",
    "get_control_plane_config",
    "load_cluster_file",
    "optional_env_var",
    "optional_float_env_var",
    "require_env_vars",
]
