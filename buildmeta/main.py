from __future__ import annotations

import argparse
import json
import logging
import sys
import uuid
from collections.abc import Mapping
from pathlib import Path

from buildmeta.build_definition import load_build_definition
from buildmeta.domain.environment import capture_environment
from buildmeta.domain.errors import BuildDefinitionError
from buildmeta.domain.models import PublicationDescriptor
from buildmeta.logging_setup import configure_logging
from buildmeta.services.bootstrap import resolve_publication
from buildmeta.targets import SUPPORTED_TARGETS

SECRET_MASK = "***"


def parse_args(argv: list[str] | None = None, env: Mapping[str, str] | None = None) -> argparse.Namespace:
    env = env if env is not None else {}
    parser = argparse.ArgumentParser(description="Resolve build version and publication target")
    parser.add_argument(
        "--target",
        default=env.get("PUBLISH_TARGET"),
        help=f"Publication target ({', '.join(SUPPORTED_TARGETS)})",
    )
    parser.add_argument(
        "--config",
        default=env.get("BUILDMETA_CONFIG"),
        help="Build definition YAML file",
    )
    parser.add_argument("--output", default=None, help="Write the descriptor to this file")
    parser.add_argument(
        "--show-secrets",
        action="store_true",
        help="Print passwords instead of masking them",
    )
    parser.add_argument(
        "--version-only",
        action="store_true",
        help="Print only the resolved version",
    )
    return parser.parse_args(argv)


def render_descriptor(descriptor: PublicationDescriptor, *, show_secrets: bool = False) -> str:
    payload = descriptor.model_dump(mode="json")
    credentials = payload["target"]["credentials"]
    if not show_secrets and credentials["password"] is not None:
        credentials["password"] = SECRET_MASK
    return json.dumps(payload, indent=2, sort_keys=True)


def run(argv: list[str] | None = None) -> int:
    environment = capture_environment()
    args = parse_args(argv, environment)
    configure_logging()
    run_id = str(uuid.uuid4())
    logger = logging.getLogger("buildmeta")

    try:
        definition = load_build_definition(args.config)
        if args.target:
            definition = definition.with_target(args.target)
    except BuildDefinitionError as exc:
        supported = ", ".join(SUPPORTED_TARGETS)
        sys.stderr.write(f"ERROR: {exc}\n")
        sys.stderr.write(f"Supported targets: {supported}\n")
        return 2

    descriptor = resolve_publication(definition, environment)
    logger.info(
        "resolution complete",
        extra={"target": definition.target, "version": descriptor.identity.version, "run_id": run_id},
    )

    if args.version_only:
        output = descriptor.identity.version
    else:
        output = render_descriptor(descriptor, show_secrets=args.show_secrets)

    if args.output:
        try:
            Path(args.output).write_text(output + "\n", encoding="utf-8")
        except OSError as exc:
            sys.stderr.write(f"ERROR: cannot write descriptor to {args.output}: {exc}\n")
            return 2
    else:
        sys.stdout.write(output + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(run())
