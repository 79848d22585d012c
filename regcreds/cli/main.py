"""
regcreds CLI - Main entry point.

Usage:
    regcreds init                      # Write default config file
    regcreds check [options]           # Validate and summarize credentials
    regcreds export --output PATH      # Write normalized credentials as JSON
"""

import argparse
import sys

from regcreds import __version__


def main(argv=None):
    """Main CLI entry point."""

    parser = argparse.ArgumentParser(
        prog="regcreds",
        description="Extract and validate package registry credentials for build jobs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  init        Write a default config file
  check       Validate credentials and print a summary (no secrets)
  export      Write normalized credentials to a JSON file

Inputs are read from INPUT_REGISTRY_SECRETS, INPUT_REGISTRIES_CREDENTIALS and
INPUT_LANGUAGE unless overridden in the config file or on the command line.

Examples:
  # Summarize whatever the job was given
  regcreds check

  # Only keep cargo registries
  regcreds check --language rust

  # Hand credentials to the proxy
  regcreds export --output /tmp/proxy/credentials.json

Use 'regcreds <command> --help' for more information on a command.
""",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override logging level from config",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    subparsers.add_parser(
        "init",
        help="Write a default config file",
        description="Create ~/.regcreds/config.yaml (or $REGCREDS_CONFIG) if missing",
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Validate credentials and print a summary",
        description="Validate registry credentials and print one line per credential",
    )
    _setup_input_args(check_parser)

    export_parser = subparsers.add_parser(
        "export",
        help="Write normalized credentials to a JSON file",
        description="Validate registry credentials and write them to a private JSON file",
    )
    _setup_input_args(export_parser)
    export_parser.add_argument(
        "--output", "-o",
        required=True,
        help="Destination file (created with mode 0600)",
    )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    # Dispatch to subcommand handler
    if args.command == "init":
        from regcreds.cli.init import handle_init

        return handle_init(args)
    elif args.command == "check":
        from regcreds.cli.extract import handle_check

        return handle_check(args)
    elif args.command == "export":
        from regcreds.cli.extract import handle_export

        return handle_export(args)
    else:
        parser.print_help()
        return 1


def _setup_input_args(parser: argparse.ArgumentParser):
    """Arguments shared by commands that read credentials."""
    parser.add_argument(
        "--registry-secrets",
        help="JSON array of credentials (overrides environment)",
    )

    parser.add_argument(
        "--registries-credentials",
        help="Base64-encoded JSON array of credentials (overrides environment)",
    )

    parser.add_argument(
        "--language", "-l",
        help="Only keep credentials for this language's registry type",
    )


if __name__ == "__main__":
    sys.exit(main())
