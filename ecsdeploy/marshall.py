"""Serialising CloudFormation templates to YAML or JSON."""

from __future__ import annotations

import copy
import json
from collections.abc import Mapping
from typing import Any

import yaml

_INIT_CONTAINER_SUFFIX = "_InitContainer"


def _mark_init_containers(template: Any) -> None:
    if not isinstance(template, Mapping):
        return
    resources = template.get("Resources")
    if not isinstance(resources, Mapping):
        return
    for resource in resources.values():
        if not isinstance(resource, dict) or resource.get("Type") != "AWS::ECS::TaskDefinition":
            continue
        properties = resource.get("Properties") or {}
        for definition in properties.get("ContainerDefinitions") or []:
            if str(definition.get("Name", "")).endswith(_INIT_CONTAINER_SUFFIX):
                definition["Essential"] = False


def marshall(template: Mapping[str, Any], fmt: str) -> bytes:
    """Render a template as ``yaml`` or ``json``, marking init containers as non-essential."""
    if fmt not in ("yaml", "json"):
        raise ValueError(f'unsupported format "{fmt}"')
    document = copy.deepcopy(dict(template))
    _mark_init_containers(document)
    if fmt == "yaml":
        text = yaml.safe_dump(document, default_flow_style=False, allow_unicode=True, sort_keys=True)
    else:
        text = json.dumps(document, indent=2, sort_keys=True, ensure_ascii=False)
    return text.encode("utf-8")