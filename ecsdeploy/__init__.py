"""Building blocks for deploying Compose projects to Amazon ECS, plus resolver and secrets sidecar commands."""

__version__ = "0.1.0"