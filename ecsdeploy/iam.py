"""IAM policy documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

ECS_TASK_EXECUTION_POLICY = "arn:aws:iam::aws:policy/service-role/AmazonECSTaskExecutionRolePolicy"
ECR_READ_ONLY_POLICY = "arn:aws:iam::aws:policy/AmazonEC2ContainerRegistryReadOnly"
ECS_EC2_INSTANCE_ROLE = "arn:aws:iam::aws:policy/service-role/AmazonEC2ContainerServiceforEC2Role"

ACTION_GET_SECRET_VALUE = "secretsmanager:GetSecretValue"
ACTION_GET_PARAMETERS = "ssm:GetParameters"
ACTION_DECRYPT = "kms:Decrypt"
ACTION_AUTO_SCALING = "application-autoscaling:*"
ACTION_GET_METRICS = "cloudwatch:GetMetricStatistics"
ACTION_DESCRIBE_SERVICE = "ecs:DescribeServices"
ACTION_UPDATE_SERVICE = "ecs:UpdateService"

POLICY_VERSION = "2012-10-17"


@dataclass
class PolicyPrincipal:
    """The principal a statement applies to."""

    service: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"Service": self.service} if self.service else {}


@dataclass
class Condition:
    """The conditions of a statement."""

    string_equals: dict[str, str] = field(default_factory=dict)
    bool: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.string_equals:
            result["StringEquals"] = dict(self.string_equals)
        if self.bool:
            result["Bool"] = dict(self.bool)
        return result


@dataclass
class PolicyStatement:
    """One statement of a policy document."""

    effect: str = ""
    action: list[str] = field(default_factory=list)
    principal: PolicyPrincipal = field(default_factory=PolicyPrincipal)
    resource: list[str] = field(default_factory=list)
    condition: Condition = field(default_factory=Condition)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.effect:
            result["Effect"] = self.effect
        if self.action:
            result["Action"] = list(self.action)
        result["Principal"] = self.principal.to_dict()
        if self.resource:
            result["Resource"] = list(self.resource)
        result["Condition"] = self.condition.to_dict()
        return result


@dataclass
class PolicyDocument:
    """An IAM policy document."""

    version: str = ""
    statement: list[PolicyStatement] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the document in its JSON form, leaving out empty values."""
        result: dict[str, Any] = {}
        if self.version:
            result["Version"] = self.version
        if self.statement:
            result["Statement"] = [s.to_dict() for s in self.statement]
        return result


def policy_document(service: str) -> PolicyDocument:
    """A policy allowing ``service`` to assume the role."""
    return PolicyDocument(
        version=POLICY_VERSION,
        statement=[
            PolicyStatement(
                effect="Allow",
                principal=PolicyPrincipal(service=service),
                action=["sts:AssumeRole"],
            )
        ],
    )


ECS_TASK_ASSUME_ROLE_POLICY_DOCUMENT = policy_document("ecs-tasks.amazonaws.com")
EC2_INSTANCE_ASSUME_ROLE_POLICY_DOCUMENT = policy_document("ec2.amazonaws.com")
AUTOSCALING_ASSUME_ROLE_POLICY_DOCUMENT = policy_document("application-autoscaling.amazonaws.com")