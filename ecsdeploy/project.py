"""A compose project model covering what deployment planning needs."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import yaml

from ecsdeploy.units import ram_in_bytes


@dataclass(frozen=True)
class DeviceRequest:
    """A device reservation such as a GPU; a count of -1 means all devices."""

    capabilities: tuple[str, ...] = ()
    count: int = 0


@dataclass(frozen=True)
class Reservations:
    """Resources a service reserves on its host."""

    memory: int = 0
    cpus: str = ""
    generic_resources: tuple[tuple[str, int], ...] = ()
    devices: tuple[DeviceRequest, ...] = ()


@dataclass(frozen=True)
class Service:
    """A service of a compose project."""

    name: str
    image: str = ""
    placement_constraints: tuple[str, ...] = ()
    reservations: Reservations | None = None


@dataclass(frozen=True)
class Network:
    """A network of a compose project."""

    name: str


@dataclass
class Project:
    """A compose project: a name, its services and its networks."""

    name: str
    services: list[Service] = field(default_factory=list)
    networks: dict[str, Network] = field(default_factory=dict)


def _mapping(value: Any, what: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"{what} must be a mapping")
    return value


def _sequence(value: Any, what: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{what} must be a list")
    return value


def _memory(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        raise ValueError(f"invalid memory value: {value!r}")
    if isinstance(value, int):
        return value
    return ram_in_bytes(str(value))


def _device(data: Any, service: str) -> DeviceRequest:
    device = _mapping(data, f"device of service {service!r}")
    count = device.get("count", 0)
    if count == "all":
        count = -1
    try:
        count = int(count)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"invalid device count for service {service!r}: {count!r}") from exc
    capabilities = tuple(str(c) for c in _sequence(device.get("capabilities"), "capabilities"))
    return DeviceRequest(capabilities=capabilities, count=count)


def _reservations(data: Any, service: str) -> Reservations:
    res = _mapping(data, f"reservations of service {service!r}")
    generic = []
    for entry in _sequence(res.get("generic_resources"), "generic_resources"):
        spec = _mapping(_mapping(entry, "generic resource").get("discrete_resource_spec"), "discrete_resource_spec")
        generic.append((str(spec.get("kind", "")), int(spec.get("value", 0))))
    cpus = res.get("cpus")
    return Reservations(
        memory=_memory(res.get("memory")),
        cpus="" if cpus is None else str(cpus),
        generic_resources=tuple(generic),
        devices=tuple(_device(d, service) for d in _sequence(res.get("devices"), "devices")),
    )


def _service(name: str, data: Any) -> Service:
    config = _mapping(data, f"service {name!r}")
    deploy = config.get("deploy")
    if deploy is None:
        return Service(name=name, image=str(config.get("image", "")))
    deploy = _mapping(deploy, f"deploy of service {name!r}")
    placement = _mapping(deploy.get("placement"), "placement")
    constraints = tuple(str(c) for c in _sequence(placement.get("constraints"), "constraints"))
    resources = _mapping(deploy.get("resources"), "resources")
    reservations = resources.get("reservations")
    return Service(
        name=name,
        image=str(config.get("image", "")),
        placement_constraints=constraints,
        reservations=None if reservations is None else _reservations(reservations, name),
    )


def project_from_dict(data: Mapping[str, Any], name: str) -> Project:
    """Build a project named ``name`` from a parsed compose document."""
    document = _mapping(data, "compose document")
    services = [
        _service(str(key), value)
        for key, value in _mapping(document.get("services"), "services").items()
    ]
    networks = {}
    for key, value in _mapping(document.get("networks"), "networks").items():
        config = _mapping(value, f"network {key!r}")
        networks[str(key)] = Network(name=str(config.get("name", f"{name}_{key}")))
    return Project(name=name, services=services, networks=networks)


def load_project(content: str, name: str) -> Project:
    """Parse compose YAML text into a project named ``name``."""
    data = yaml.safe_load(content)
    if not isinstance(data, Mapping):
        raise ValueError("compose document must be a mapping")
    return project_from_dict(data, name)