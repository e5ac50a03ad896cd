from __future__ import annotations


class BuildMetaError(Exception):
    pass


class BuildDefinitionError(BuildMetaError):
    pass


class UnsupportedTargetError(BuildDefinitionError, ValueError):
    pass
