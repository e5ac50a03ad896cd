from __future__ import annotations

from dataclasses import dataclass
from typing import cast

from buildmeta.domain.errors import UnsupportedTargetError
from buildmeta.domain.models import PublicationTargetKind

SUPPORTED_TARGETS: tuple[PublicationTargetKind, ...] = (
    "artifactory",
    "maven",
)


@dataclass(frozen=True)
class PublicationTargetChoice:
    name: PublicationTargetKind


def validate_target(target: str) -> PublicationTargetChoice:
    if target in SUPPORTED_TARGETS:
        return PublicationTargetChoice(name=cast(PublicationTargetKind, target))

    supported = ", ".join(SUPPORTED_TARGETS)
    raise UnsupportedTargetError(
        f"Unsupported publication target '{target}'. Supported targets: {supported}. "
        "Use artifactory for the fixed registry or maven for a MAVEN_URL endpoint."
    )
