from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

PublicationTargetKind = Literal["artifactory", "maven"]

# Descriptor models handed to the external publisher.
# They carry resolved values only; nothing here talks to a registry.

# Visible fallbacks for unset generic-registry credentials. A publish attempt
# with these values is expected to be rejected.
USERNAME_PLACEHOLDER = "<username>"
PASSWORD_PLACEHOLDER = "<password>"

CredentialState = Literal["set", "placeholder", "absent"]


class Credentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    # None means the source variable was unset and no placeholder applies.
    username: str | None = None
    password: str | None = None

    @property
    def username_state(self) -> CredentialState:
        return _credential_state(self.username, USERNAME_PLACEHOLDER)

    @property
    def password_state(self) -> CredentialState:
        return _credential_state(self.password, PASSWORD_PLACEHOLDER)


def _credential_state(value: str | None, placeholder: str) -> CredentialState:
    if value is None:
        return "absent"
    if value == placeholder:
        return "placeholder"
    return "set"


class PublicationTarget(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: PublicationTargetKind
    # Empty url means the local/default store.
    url: str
    credentials: Credentials
    # Named bucket inside the registry, fixed-registry variant only.
    repository_key: str | None = None

    @property
    def is_local(self) -> bool:
        return self.url == ""


class ArtifactIdentity(BaseModel):
    model_config = ConfigDict(frozen=True)

    group_id: str = Field(min_length=1)
    artifact_id: str = Field(min_length=1)
    version: str = Field(min_length=1)

    @property
    def coordinates(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"


class PublishDefaults(BaseModel):
    model_config = ConfigDict(frozen=True)

    publication_name: str = "mavenJava"
    publish_artifacts: bool = True
    publish_pom: bool = True


class PublicationDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    identity: ArtifactIdentity
    target: PublicationTarget
    defaults: PublishDefaults = Field(default_factory=PublishDefaults)
