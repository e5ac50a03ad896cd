from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path

import yaml

from buildmeta.domain.errors import BuildDefinitionError
from buildmeta.domain.models import PublicationTargetKind
from buildmeta.targets import validate_target

DEFAULT_GROUP_ID = "com.alcatrazescapee"
DEFAULT_ARTIFACT_ID = "epsilon"
DEFAULT_TARGET: PublicationTargetKind = "artifactory"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildDefinition:
    """Static, build-wide settings that are not read from the environment."""

    group_id: str = DEFAULT_GROUP_ID
    artifact_id: str = DEFAULT_ARTIFACT_ID
    target: PublicationTargetKind = DEFAULT_TARGET

    def with_target(self, target: str) -> BuildDefinition:
        return replace(self, target=validate_target(target).name)


def load_build_definition(path: str | Path | None = None) -> BuildDefinition:
    if path is None:
        return BuildDefinition()

    definition_path = Path(path)
    try:
        raw = yaml.safe_load(definition_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise BuildDefinitionError(f"cannot read build definition {definition_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise BuildDefinitionError(f"malformed build definition {definition_path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise BuildDefinitionError(f"build definition {definition_path} must be a mapping")

    bad_keys = [key for key in raw if not isinstance(key, str)]
    if bad_keys:
        raise BuildDefinitionError(f"build definition keys must be strings: {', '.join(map(repr, bad_keys))}")

    known = {field.name for field in fields(BuildDefinition)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise BuildDefinitionError(f"unknown build definition keys: {', '.join(unknown)}")

    for key in ("group_id", "artifact_id"):
        value = raw.get(key)
        if value is not None and (not isinstance(value, str) or not value):
            raise BuildDefinitionError(f"{key} must be a non-empty string")

    definition = BuildDefinition(
        group_id=raw.get("group_id") or DEFAULT_GROUP_ID,
        artifact_id=raw.get("artifact_id") or DEFAULT_ARTIFACT_ID,
    )
    if "target" in raw:
        definition = definition.with_target(str(raw["target"]))

    logger.info("build definition loaded", extra={"target": definition.target})
    return definition
