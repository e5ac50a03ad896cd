from __future__ import annotations

from collections.abc import Callable

from buildmeta.domain.contracts import PublicationTargetResolver
from buildmeta.resolvers.artifactory import ArtifactoryTargetResolver
from buildmeta.resolvers.maven import MavenTargetResolver
from buildmeta.targets import validate_target

_RESOLVERS: dict[str, Callable[[], PublicationTargetResolver]] = {
    "artifactory": ArtifactoryTargetResolver,
    "maven": MavenTargetResolver,
}


def build_target_resolver(kind: str) -> PublicationTargetResolver:
    target = validate_target(kind)
    return _RESOLVERS[target.name]()
