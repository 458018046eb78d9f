"""Version tracking and resolution for js2bin builds."""

from .models import ArtifactVersions, NodeVersions, ResolverOptions, VersionSet
from .resolver import VersionResolver

__all__ = [
    "ArtifactVersions",
    "NodeVersions",
    "ResolverOptions",
    "VersionResolver",
    "VersionSet",
]
