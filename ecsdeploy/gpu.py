"""Choosing an EC2 machine type that fits GPU-bound services."""

from __future__ import annotations

from dataclasses import dataclass

from ecsdeploy.project import Project, Service

PLACEMENT_CONSTRAINT_AMI = "node.ami == "
PLACEMENT_CONSTRAINT_MACHINE = "node.machine == "

_GIB = 1024**3


@dataclass(frozen=True)
class Machine:
    """An EC2 instance type and the resources it offers."""

    id: str
    cpus: float
    memory: int
    gpus: int


GPU_FAMILY: tuple[Machine, ...] = (
    Machine("g4dn.xlarge", 4, 16 * _GIB, 1),
    Machine("g4dn.2xlarge", 8, 32 * _GIB, 1),
    Machine("g4dn.4xlarge", 16, 64 * _GIB, 1),
    Machine("g4dn.8xlarge", 32, 128 * _GIB, 1),
    Machine("g4dn.12xlarge", 48, 192 * _GIB, 4),
    Machine("g4dn.16xlarge", 64, 256 * _GIB, 1),
    Machine("g4dn.metal", 96, 384 * _GIB, 8),
)


@dataclass(frozen=True)
class ResourceRequirements:
    """Memory, CPUs and GPUs a service or project needs."""

    memory: int = 0
    cpus: float = 0.0
    gpus: int = 0

    def combine(self, other: ResourceRequirements | None) -> ResourceRequirements:
        """Return the per-resource maximum of both requirements."""
        if other is None:
            return self
        return ResourceRequirements(
            memory=max(self.memory, other.memory),
            cpus=max(self.cpus, other.cpus),
            gpus=max(self.gpus, other.gpus),
        )


class NoMatchingMachineError(Exception):
    """Raised when no machine type meets the requirements."""

    def __init__(self, requirements: ResourceRequirements) -> None:
        self.requirements = requirements
        super().__init__(
            "none of the Amazon EC2 G4 instance types meet the requirements for "
            f"memory:{requirements.memory} cpu:{requirements.cpus:f} gpus:{requirements.gpus}"
        )


def resource_requirements(service: Service) -> ResourceRequirements | None:
    """Return what a service reserves, or None when it reserves nothing."""
    reservations = service.reservations
    if reservations is None:
        return None

    gpus = next((value for kind, value in reservations.generic_resources if kind == "gpus"), 0)
    for device in reservations.devices:
        if "gpu" in device.capabilities:
            gpus = device.count if device.count > 0 else 1
            break

    cpus = float(reservations.cpus) if reservations.cpus else 0.0
    return ResourceRequirements(memory=reservations.memory, cpus=cpus, gpus=gpus)


def project_requirements(project: Project) -> ResourceRequirements:
    """Combine the requirements of every service that needs GPUs."""
    requirements = [resource_requirements(service) for service in project.services]
    total = ResourceRequirements()
    for requirement in requirements:
        if requirement is not None and requirement.gpus != 0:
            total = total.combine(requirement)
    return total


def guess_machine_type(project: Project) -> str:
    """Pick the first GPU machine type that satisfies every GPU-bound service."""
    needed = project_requirements(project)
    for machine in GPU_FAMILY:
        # Memory available to tasks is lower than the machine's total memory.
        if machine.memory > needed.memory and machine.cpus >= needed.cpus and machine.gpus >= needed.gpus:
            return machine.id
    raise NoMatchingMachineError(needed)


def get_user_defined_machine(service: Service) -> tuple[str, str]:
    """Return the AMI and machine type set through placement constraints."""
    ami = ""
    machine_type = ""
    for constraint in service.placement_constraints:
        if constraint.startswith(PLACEMENT_CONSTRAINT_AMI):
            ami = constraint[len(PLACEMENT_CONSTRAINT_AMI):]
        if constraint.startswith(PLACEMENT_CONSTRAINT_MACHINE):
            machine_type = constraint[len(PLACEMENT_CONSTRAINT_MACHINE):]
    return ami, machine_type