import pytest
from pydantic import ValidationError

from buildmeta.domain.contracts import PublicationTargetResolver
from buildmeta.domain.environment import capture_environment
from buildmeta.domain.models import Credentials, PublicationTarget
from buildmeta.resolvers.artifactory import (
    ARTIFACTORY_CONTEXT_URL,
    ARTIFACTORY_REPOSITORY_KEY,
    ArtifactoryTargetResolver,
)
from buildmeta.resolvers.maven import (
    PASSWORD_PLACEHOLDER,
    USERNAME_PLACEHOLDER,
    MavenTargetResolver,
)


@pytest.mark.unit
def test_resolvers_implement_shared_contract() -> None:
    assert isinstance(ArtifactoryTargetResolver(), PublicationTargetResolver)
    assert isinstance(MavenTargetResolver(), PublicationTargetResolver)


@pytest.mark.unit
@pytest.mark.parametrize(
    "env",
    [
        {},
        {"ARTIFACTORY_USERNAME": "bot", "ARTIFACTORY_PASSWORD": "secret"},
        {"MAVEN_URL": "https://repo.example.com", "VERSION": "1.2.3"},
    ],
)
def test_artifactory_endpoint_and_key_ignore_environment(env: dict[str, str]) -> None:
    target = ArtifactoryTargetResolver().resolve(env)

    assert target.url == ARTIFACTORY_CONTEXT_URL == "https://alcatrazescapee.jfrog.io/artifactory"
    assert target.repository_key == ARTIFACTORY_REPOSITORY_KEY == "mods"
    assert target.kind == "artifactory"


@pytest.mark.unit
def test_artifactory_username_without_password_leaves_password_absent() -> None:
    target = ArtifactoryTargetResolver().resolve({"ARTIFACTORY_USERNAME": "bot"})

    assert target == PublicationTarget(
        kind="artifactory",
        url=ARTIFACTORY_CONTEXT_URL,
        repository_key=ARTIFACTORY_REPOSITORY_KEY,
        credentials=Credentials(username="bot", password=None),
    )


@pytest.mark.unit
def test_artifactory_credentials_have_no_placeholder() -> None:
    credentials = ArtifactoryTargetResolver().resolve({}).credentials

    assert credentials.username is None
    assert credentials.password is None


@pytest.mark.unit
def test_maven_scenario_with_url_and_username() -> None:
    env = {"MAVEN_URL": "https://repo.example.com", "MAVEN_USERNAME": "ci"}
    target = MavenTargetResolver().resolve(env)

    assert target.url == "https://repo.example.com"
    assert target.credentials == Credentials(username="ci", password="<password>")
    assert target.repository_key is None
    assert target.is_local is False


@pytest.mark.unit
def test_maven_unset_variables_use_visible_placeholders() -> None:
    target = MavenTargetResolver().resolve({})

    assert target.url == ""
    assert target.is_local is True
    assert target.credentials.username == USERNAME_PLACEHOLDER == "<username>"
    assert target.credentials.password == PASSWORD_PLACEHOLDER == "<password>"


@pytest.mark.unit
def test_maven_empty_values_are_kept() -> None:
    target = MavenTargetResolver().resolve({"MAVEN_USERNAME": "", "MAVEN_PASSWORD": ""})

    assert target.credentials.username == ""
    assert target.credentials.password == ""


@pytest.mark.unit
@pytest.mark.parametrize("resolver", [ArtifactoryTargetResolver(), MavenTargetResolver()])
def test_resolution_is_idempotent(resolver: PublicationTargetResolver) -> None:
    snapshot = capture_environment(
        {"ARTIFACTORY_USERNAME": "bot", "MAVEN_URL": "https://repo.example.com"}
    )
    assert resolver.resolve(snapshot) == resolver.resolve(snapshot)


@pytest.mark.unit
def test_resolved_target_is_immutable() -> None:
    target = MavenTargetResolver().resolve({})
    with pytest.raises(ValidationError):
        target.url = "https://elsewhere.example.com"  # type: ignore[misc]
