"""mcadm - admin and support commands for object storage clusters."""

import argparse
import logging
import sys
from typing import Optional

from cli.config import init_settings, Settings
from cli.group import GROUP_EPILOG, cmd_group_status
from cli.perf import PERF_EPILOG, cmd_perf
from common import console


def global_flags(suppress_defaults: bool = False) -> argparse.ArgumentParser:
    """Flags accepted by every command, before or after the command name.

    Subcommand copies suppress their defaults so they do not overwrite a
    flag given before the command name.
    """
    defaults = {"default": argparse.SUPPRESS} if suppress_defaults else {}
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("--json", action="store_true", help="Enable JSON formatted output", **defaults)
    parser.add_argument("--debug", action="store_true", help="Enable debug output", **defaults)
    parser.add_argument("--no-color", action="store_true", help="Disable color theme", **defaults)
    parser.add_argument("--config-dir", help="Path to configuration folder", **defaults)
    return parser


def add_perf_flags(parser: argparse.ArgumentParser) -> None:
    """Benchmark and support portal flags of the perf command."""
    parser.add_argument(
        "--duration",
        default="10s",
        help="duration the entire perf tests are run (default: 10s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="display per-server stats")
    parser.add_argument("--size", default="64MiB", help=argparse.SUPPRESS)
    parser.add_argument("--concurrent", type=int, default=32, help=argparse.SUPPRESS)
    parser.add_argument("--bucket", default=None, help=argparse.SUPPRESS)

    # Drive test specific flags
    parser.add_argument("--filesize", default="1GiB", help=argparse.SUPPRESS)
    parser.add_argument("--blocksize", default="4MiB", help=argparse.SUPPRESS)
    parser.add_argument("--serial", action="store_true", help=argparse.SUPPRESS)

    # Support portal
    parser.add_argument(
        "--airgap",
        action="store_true",
        help="use in environments without network access to SUBNET (e.g. airgapped, firewalled)",
    )
    parser.add_argument("--api-key", default=None, help="SUBNET API key")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcadm",
        description="Admin and support commands for object storage clusters",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        parents=[global_flags()],
    )
    common = global_flags(suppress_defaults=True)

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # group enable|disable
    group_parser = subparsers.add_parser("group", help="Manage groups")
    group_parser.set_defaults(parser=group_parser)
    group_subparsers = group_parser.add_subparsers(dest="group_command", help="Group commands")
    for name, help_text in (("enable", "enable a group"), ("disable", "disable a group")):
        status_parser = group_subparsers.add_parser(
            name,
            help=help_text,
            parents=[common],
            usage=f"mcadm group {name} [FLAGS] TARGET GROUPNAME",
            epilog=GROUP_EPILOG,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        status_parser.add_argument("args", nargs="*", metavar="TARGET GROUPNAME")
        status_parser.set_defaults(func=cmd_group_status, parser=status_parser)

    # perf
    perf_parser = subparsers.add_parser(
        "perf",
        help="upload object, network and drive performance analysis",
        parents=[common],
        usage="mcadm perf [COMMAND] [FLAGS] TARGET",
        epilog=PERF_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    perf_parser.add_argument("args", nargs="*", metavar="[drive|object|net] TARGET")
    add_perf_flags(perf_parser)
    perf_parser.set_defaults(func=cmd_perf, parser=perf_parser)

    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Initialize settings; flags given on the command line win over the environment."""
    overrides = {}
    if getattr(args, "json", False):
        overrides["json_output"] = True
    if getattr(args, "debug", False):
        overrides["debug"] = True
    if getattr(args, "no_color", False):
        overrides["no_color"] = True
    if getattr(args, "airgap", False):
        overrides["airgapped"] = True
    if getattr(args, "config_dir", None):
        overrides["config_dir"] = args.config_dir
    return init_settings(**overrides)


def configure_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format=settings.log_format,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def parse_command_line(parser: argparse.ArgumentParser, argv: Optional[list[str]]) -> argparse.Namespace:
    """Parse argv, allowing flags between a command's positional arguments."""
    args, extras = parser.parse_known_args(argv)
    if extras and (any(a.startswith("-") for a in extras) or not hasattr(args, "args")):
        parser.error(f"unrecognized arguments: {' '.join(extras)}")
    if extras:
        args.args = [*args.args, *extras]
    return args


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parse_command_line(parser, argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if not hasattr(args, "func"):
        args.parser.print_help()
        sys.exit(1)

    settings = settings_from_args(args)
    configure_logging(settings)
    console.set_color(not settings.no_color)

    args.func(args)


if __name__ == "__main__":
    main()
