"""
Constants and resource type definitions for taskspec.

Defines the replacement key namespaces and the fields each supported
resource type exports for substitution (git, image, storage, cluster).
"""

from dataclasses import dataclass, field

# ─── Replacement Key Namespaces ──────────────────────────────────

PARAM_KEY_PREFIX = "inputs.params"

INPUT_SCOPE = "inputs"
OUTPUT_SCOPE = "outputs"
RESOURCE_SCOPES = (INPUT_SCOPE, OUTPUT_SCOPE)

DEBUG_ENV = "DEBUG"


@dataclass
class ResourceTypeConfig:
    """Configuration for a single resource type."""

    name: str
    fields: list[str] = field(default_factory=list)
    description: str = ""


# ─── Resource Type Definitions ───────────────────────────────────

RESOURCE_TYPES: dict[str, ResourceTypeConfig] = {
    "git": ResourceTypeConfig(
        name="git",
        fields=["url", "revision"],
        description="Git repository checked out at a revision",
    ),
    "image": ResourceTypeConfig(
        name="image",
        fields=["url", "digest"],
        description="Container image reference",
    ),
    "storage": ResourceTypeConfig(
        name="storage",
        fields=["location", "dir"],
        description="Blob storage location (bucket path or directory)",
    ),
    "cluster": ResourceTypeConfig(
        name="cluster",
        fields=["url", "username", "password", "insecure", "cadata", "token"],
        description="Kubernetes cluster credentials",
    ),
}


def get_resource_type(type_name: str) -> ResourceTypeConfig:
    """Get resource type configuration, raising KeyError if not found."""
    if type_name not in RESOURCE_TYPES:
        available = ", ".join(RESOURCE_TYPES.keys())
        raise KeyError(f"Unknown resource type '{type_name}'. Available: {available}")
    return RESOURCE_TYPES[type_name]


def list_resource_types() -> list[str]:
    """Get all available resource type names."""
    return list(RESOURCE_TYPES.keys())
