from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from buildmeta.domain.models import (
    PASSWORD_PLACEHOLDER,
    USERNAME_PLACEHOLDER,
    Credentials,
    PublicationTarget,
    PublicationTargetKind,
    PublishDefaults,
)

MAVEN_URL_ENV = "MAVEN_URL"
MAVEN_USERNAME_ENV = "MAVEN_USERNAME"
MAVEN_PASSWORD_ENV = "MAVEN_PASSWORD"


@dataclass(frozen=True)
class MavenTargetResolver:
    kind: PublicationTargetKind = "maven"

    def resolve(self, env: Mapping[str, str]) -> PublicationTarget:
        # Only an unset variable falls back; an empty value is kept.
        return PublicationTarget(
            kind=self.kind,
            url=env.get(MAVEN_URL_ENV, ""),
            credentials=Credentials(
                username=env.get(MAVEN_USERNAME_ENV, USERNAME_PLACEHOLDER),
                password=env.get(MAVEN_PASSWORD_ENV, PASSWORD_PLACEHOLDER),
            ),
        )

    def publish_defaults(self) -> PublishDefaults:
        return PublishDefaults()
