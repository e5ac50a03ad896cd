from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from buildmeta.domain.models import PublicationTarget, PublicationTargetKind, PublishDefaults


@runtime_checkable
class PublicationTargetResolver(Protocol):
    """Strategy contract for turning an environment snapshot into a target.

    Implementations are pure: the same snapshot always yields an equal
    target, and an unset variable degrades to a fallback instead of raising.
    Authentication or network problems surface later, in the publisher.
    """

    kind: PublicationTargetKind

    def resolve(self, env: Mapping[str, str]) -> PublicationTarget: ...

    def publish_defaults(self) -> PublishDefaults: ...
