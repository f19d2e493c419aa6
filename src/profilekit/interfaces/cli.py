"""Command line interface.

Usage:
  profilekit roles
  profilekit create admin --name "Alice" --age 30
  profilekit create editor --extra delete --seed 7
  profilekit random --count 3
  profilekit serve --port 8000
"""
from __future__ import annotations

import argparse
import json
import sys

from profilekit import __version__
from profilekit.application.dto.profile_dto import ProfileCreateInput, ProfileOutput
from profilekit.application.dto.role_dto import RoleOutput
from profilekit.application.use_cases.profile.create_profile import CreateProfileUseCase
from profilekit.config import get_settings
from profilekit.domain.exceptions import ProfileKitError
from profilekit.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="profilekit", description="Build role-based user profiles")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("roles", help="List registered roles")

    create = sub.add_parser("create", help="Create a profile for a role")
    create.add_argument("role", help="Registered role name")
    create.add_argument("--name", help="Profile name (generated when omitted)")
    create.add_argument("--age", type=int, help="Profile age (generated when omitted)")
    create.add_argument(
        "--extra",
        action="append",
        default=[],
        metavar="PERMISSION",
        help="Extra permission beyond the role's set; repeatable",
    )
    create.add_argument("--seed", type=int, help="Seed for generated values")

    rand = sub.add_parser("random", help="Create fully generated profiles")
    rand.add_argument("--count", type=int, default=1, help="Number of profiles")
    rand.add_argument("--role", help="Restrict to one role")
    rand.add_argument("--seed", type=int, help="Seed for generated values")

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", help="Bind address")
    serve.add_argument("--port", type=int, help="Port")
    return parser


def run(argv: list[str] | None = None) -> int:
    """Run the CLI and return an exit code."""
    from profilekit.main import build_factory, build_registry, run_server

    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.effective_log_level)

    if args.command == "serve":
        run_server(host=args.host, port=args.port)
        return 0

    if getattr(args, "seed", None) is not None:
        settings = settings.model_copy(update={"random_seed": args.seed})
    registry = build_registry()
    factory = build_factory(registry, settings)

    try:
        if args.command == "roles":
            for role in registry.list_roles():
                print(json.dumps(RoleOutput.from_role(role).to_dict()))
        elif args.command == "create":
            profile = CreateProfileUseCase(factory).execute(
                ProfileCreateInput(
                    role=args.role,
                    name=args.name,
                    age=args.age,
                    extra_permissions=args.extra,
                )
            )
            print(json.dumps(ProfileOutput.from_profile(profile).to_dict()))
        elif args.command == "random":
            for _ in range(args.count):
                profile = factory.create_random(args.role)
                print(json.dumps(ProfileOutput.from_profile(profile).to_dict()))
    except ProfileKitError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0
