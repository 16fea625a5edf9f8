"""Control-plane endpoint configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import optional_env_var, optional_float_env_var, require_env_vars

ENDPOINT_ENV: Final[str] = "CLUSTERLOG_ENDPOINT"
REGION_ENV: Final[str] = "CLUSTERLOG_REGION"
TOKEN_ENV: Final[str] = "CLUSTERLOG_TOKEN"
TIMEOUT_ENV: Final[str] = "CLUSTERLOG_TIMEOUT_SECONDS"

DEFAULT_TIMEOUT_SECONDS: Final[float] = 30.0


@dataclass(frozen=True, slots=True)
class ControlPlaneConfig:
    """Holds the control-plane API configuration for one region."""

    base_url: str
    region: str
    token: str | None = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers


def get_control_plane_config(*, region: str | None = None) -> ControlPlaneConfig:
    """Load the control-plane config; an explicit ``region`` overrides the environment."""

    required = (ENDPOINT_ENV,) if region else (ENDPOINT_ENV, REGION_ENV)
    values = require_env_vars(required)
    return ControlPlaneConfig(
        base_url=values[ENDPOINT_ENV].rstrip("/"),
        region=region or values[REGION_ENV],
        token=optional_env_var(TOKEN_ENV),
        timeout_seconds=optional_float_env_var(TIMEOUT_ENV, DEFAULT_TIMEOUT_SECONDS),
    )
