"""Resource tags identifying the project, service or network they belong to."""

from __future__ import annotations

from ecsdeploy.project import Network, Project, Service

PROJECT_LABEL = "com.docker.compose.project"
SERVICE_LABEL = "com.docker.compose.service"
NETWORK_LABEL = "com.docker.compose.network"


def _tag(key: str, value: str) -> dict[str, str]:
    return {"Key": key, "Value": value}


def project_tags(project: Project) -> list[dict[str, str]]:
    """Tags for a project-wide resource."""
    return [_tag(PROJECT_LABEL, project.name)]


def service_tags(project: Project, service: Service) -> list[dict[str, str]]:
    """Tags for a resource that belongs to one service."""
    return [_tag(PROJECT_LABEL, project.name), _tag(SERVICE_LABEL, service.name)]


def network_tags(project: Project, network: Network) -> list[dict[str, str]]:
    """Tags for a resource that belongs to one network."""
    return [_tag(PROJECT_LABEL, project.name), _tag(NETWORK_LABEL, network.name)]