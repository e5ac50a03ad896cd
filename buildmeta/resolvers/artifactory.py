from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from buildmeta.domain.models import Credentials, PublicationTarget, PublicationTargetKind, PublishDefaults

ARTIFACTORY_CONTEXT_URL = "https://alcatrazescapee.jfrog.io/artifactory"
ARTIFACTORY_REPOSITORY_KEY = "mods"
ARTIFACTORY_USERNAME_ENV = "ARTIFACTORY_USERNAME"
ARTIFACTORY_PASSWORD_ENV = "ARTIFACTORY_PASSWORD"


@dataclass(frozen=True)
class ArtifactoryTargetResolver:
    """Fixed third-party registry: constant endpoint and bucket.

    Credentials come straight from CI; an unset variable leaves the field
    absent rather than substituting a placeholder.
    """

    context_url: str = ARTIFACTORY_CONTEXT_URL
    repository_key: str = ARTIFACTORY_REPOSITORY_KEY
    kind: PublicationTargetKind = "artifactory"

    def resolve(self, env: Mapping[str, str]) -> PublicationTarget:
        return PublicationTarget(
            kind=self.kind,
            url=self.context_url,
            repository_key=self.repository_key,
            credentials=Credentials(
                username=env.get(ARTIFACTORY_USERNAME_ENV),
                password=env.get(ARTIFACTORY_PASSWORD_ENV),
            ),
        )

    def publish_defaults(self) -> PublishDefaults:
        return PublishDefaults(publication_name="mavenJava", publish_artifacts=True, publish_pom=True)
