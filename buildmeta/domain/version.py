from __future__ import annotations

from collections.abc import Mapping

VERSION_ENV = "VERSION"
DEFAULT_VERSION = "indev"


def resolve_version(env: Mapping[str, str]) -> str:
    # Any non-empty value is accepted as-is; there is no version format.
    return env.get(VERSION_ENV) or DEFAULT_VERSION
