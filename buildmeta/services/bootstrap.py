from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from buildmeta.build_definition import BuildDefinition
from buildmeta.domain.contracts import PublicationTargetResolver
from buildmeta.domain.environment import EnvironmentSnapshot, capture_environment
from buildmeta.domain.models import ArtifactIdentity, PublicationDescriptor
from buildmeta.domain.version import resolve_version
from buildmeta.resolvers import build_target_resolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolutionContainer:
    definition: BuildDefinition
    environment: EnvironmentSnapshot
    target_resolver: PublicationTargetResolver


def build_resolution_container(
    definition: BuildDefinition,
    env: Mapping[str, str] | None = None,
) -> ResolutionContainer:
    environment = env if isinstance(env, EnvironmentSnapshot) else capture_environment(env)
    return ResolutionContainer(
        definition=definition,
        environment=environment,
        target_resolver=build_target_resolver(definition.target),
    )


def resolve_publication(
    definition: BuildDefinition,
    env: Mapping[str, str] | None = None,
) -> PublicationDescriptor:
    """Resolve version and target from one snapshot into a publish descriptor.

    Passing env=None captures os.environ at call time. Every call resolves
    from scratch.
    """
    container = build_resolution_container(definition, env)
    version = resolve_version(container.environment)
    target = container.target_resolver.resolve(container.environment)
    identity = ArtifactIdentity(
        group_id=definition.group_id,
        artifact_id=definition.artifact_id,
        version=version,
    )

    logger.info(
        "publication resolved",
        extra={
            "target": target.kind,
            "version": version,
            "username_state": target.credentials.username_state,
            "password_state": target.credentials.password_state,
        },
    )
    return PublicationDescriptor(
        identity=identity,
        target=target,
        defaults=container.target_resolver.publish_defaults(),
    )
