"""Pydantic models describing the control-plane cluster payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ControlPlaneBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class LogSetupModel(ControlPlaneBaseModel):
    types: list[str] = Field(default_factory=list)
    enabled: bool = False


class LoggingModel(ControlPlaneBaseModel):
    cluster_logging: list[LogSetupModel] = Field(default_factory=list, alias="clusterLogging")


class ClusterModel(ControlPlaneBaseModel):
    name: str
    status: str | None = None
    logging: LoggingModel = Field(default_factory=LoggingModel)


class DescribeClusterResponse(ControlPlaneBaseModel):
    cluster: ClusterModel


class UpdateClusterConfigRequest(ControlPlaneBaseModel):
    logging: LoggingModel


class UpdateModel(ControlPlaneBaseModel):
    id: str
    status: str | None = None
    type: str | None = None


class UpdateClusterConfigResponse(ControlPlaneBaseModel):
    update: UpdateModel


class ErrorResponse(ControlPlaneBaseModel):
    message: str | None = None
    code: str | None = None
