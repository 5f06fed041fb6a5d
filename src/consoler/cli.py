"""Main CLI entry point for consoler.

Implements a Docker-style two-pass argument parser:
  1. First pass: extract global flags (--no-color, --config, --state, ...)
  2. Second pass: dispatch to subcommand with shared parent args

Global flags can appear before OR after the subcommand:
  consoler --dev verbose        # works
  consoler verbose --dev        # also works

Subcommands self-register via register(subparsers, parents) convention.
"""

import argparse
import sys

from consoler._version import BASE_VERSION, VERSION


# ---------------------------------------------------------------------------
# Global flags (Docker-style: can precede the subcommand)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--no-color": {"action": "store_true", "default": False,
                   "help": "Disable colored output"},
    "--config": {"metavar": "PATH", "default": None,
                 "help": "Path to config file (default: ~/.consoler/config.json)"},
    "--state": {"metavar": "PATH", "default": None, "dest": "state_path",
                "help": "Path to the verbose state file "
                        "(default: ~/.consoler/state.json)"},
    "--password": {"metavar": "SECRET", "default": None,
                   "help": "Password expected by 'verbose' (overrides config)"},
    "--dev": {"action": "store_true", "default": False,
              "help": "Treat this run as a development environment"},
    "--categories": {"action": "store_true", "default": False,
                     "help": "List known categories and exit"},
}


def _extract_global_flags(argv):
    """Two-pass parse: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        global_parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    global_args, remaining = global_parser.parse_known_args(argv)
    return global_args, remaining


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules.

    Each module in consoler.commands must export:
      register(subparsers, parents) — add itself to the subparser
      run(args) — execute the command
    """
    from consoler.commands import clear, emit, status, verbose
    return [verbose, status, clear, emit]


def _build_parser(commands):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="consoler",
        description="consoler — verbosity-gated logging facade",
        epilog=(
            "Run 'consoler <command> --help' for details on a specific command.\n"
            "\n"
            "Global flags (--no-color, --config, --state, --password, --dev)\n"
            "can appear before or after the subcommand."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"consoler {BASE_VERSION} ({VERSION})",
    )

    # Add global flags to main parser too (for --help display)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    # Let each command register itself
    for cmd_module in commands:
        cmd_module.register(subparsers, parents=[])

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for consoler CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success).
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: extract global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)

    # Pass 2: parse subcommand + specific args
    commands = _discover_commands()
    parser = _build_parser(commands)

    if global_args.categories:
        # Bare --categories behaves like 'status'
        from consoler.commands import status
        args = global_args
        args.func = status.run
    else:
        # If no args at all, print help
        if not remaining:
            parser.print_help()
            return 0

        args = parser.parse_args(remaining)

        # If subcommand selected but no handler, print help
        if not hasattr(args, "func"):
            parser.print_help()
            return 0

        # Global flags were stripped from `remaining`, so pass 1 is authoritative
        for key, value in vars(global_args).items():
            setattr(args, key, value)

    # Dispatch
    try:
        return args.func(args) or 0
    except ValueError as e:
        from consoler.output import print_error
        print_error(str(e))
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1


if __name__ == "__main__":
    sys.exit(main())
