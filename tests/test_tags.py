from ecsdeploy.project import Network, Project, Service
from ecsdeploy.tags import (
    NETWORK_LABEL,
    PROJECT_LABEL,
    SERVICE_LABEL,
    network_tags,
    project_tags,
    service_tags,
)


def test_project_tags():
    assert project_tags(Project(name="demo")) == [{"Key": PROJECT_LABEL, "Value": "demo"}]


def test_service_tags():
    tags = service_tags(Project(name="demo"), Service(name="web"))
    assert tags == [
        {"Key": PROJECT_LABEL, "Value": "demo"},
        {"Key": SERVICE_LABEL, "Value": "web"},
    ]


def test_network_tags():
    tags = network_tags(Project(name="demo"), Network(name="demo_front"))
    assert tags == [
        {"Key": PROJECT_LABEL, "Value": "demo"},
        {"Key": NETWORK_LABEL, "Value": "demo_front"},
    ]


def test_labels_are_distinct():
    project = Project(name="demo")
    tags = service_tags(project, Service(name="web")) + network_tags(
        project, Network(name="demo_front")
    )
    keys = {tag["Key"] for tag in tags}
    assert len(keys) == 3
    assert project_tags(project)[0]["Key"] == "com.docker.compose.project"