"""Loader for YAML ClusterConfig files.

Only the fields the logging command needs are modelled; everything else in the
file is ignored. Example::

    metadata:
      name: prod
      region: eu-west-1
    cloudWatch:
      clusterLogging:
        enableTypes: ["api", "audit"]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from clusterlog.domain.cluster import ClusterRef

from .errors import ConfigurationError

if TYPE_CHECKING:
    from pathlib import Path


class ClusterFileModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class MetadataModel(ClusterFileModel):
    name: str = Field(min_length=1)
    region: str | None = None


class ClusterLoggingModel(ClusterFileModel):
    enable_types: list[str] = Field(default_factory=list, alias="enableTypes")


class CloudWatchModel(ClusterFileModel):
    cluster_logging: ClusterLoggingModel | None = Field(default=None, alias="clusterLogging")


class ClusterConfigModel(ClusterFileModel):
    metadata: MetadataModel
    cloud_watch: CloudWatchModel | None = Field(default=None, alias="cloudWatch")

    def enable_types(self) -> tuple[str, ...]:
        if self.cloud_watch is None or self.cloud_watch.cluster_logging is None:
            return ()
        return tuple(self.cloud_watch.cluster_logging.enable_types)


@dataclass(frozen=True, slots=True)
class ClusterFileSpec:
    cluster: ClusterRef
    enable_types: tuple[str, ...]


def load_cluster_file(path: Path, *, region: str | None = None) -> ClusterFileSpec:
    """Read ``path``; an explicit ``region`` takes precedence over the file's."""

    try:
        with path.open() as handle:
            data = yaml.safe_load(handle) or {}
    except OSError as exc:
        raise ConfigurationError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in config file {path}: {exc}") from exc

    try:
        model = ClusterConfigModel.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid cluster config in {path}: {exc}") from exc

    effective_region = region or model.metadata.region
    if not effective_region:
        raise ConfigurationError(
            f"No region in config file {path}; set metadata.region or pass --region"
        )

    return ClusterFileSpec(
        cluster=ClusterRef(name=model.metadata.name, region=effective_region),
        enable_types=model.enable_types(),
    )
