"""consoler emit — send one message through the gate from the shell.

    consoler emit warn "disk almost full" 93%
    consoler emit network "socket opened"

Built-in categories map to log/warn/error/success; anything else is
looked up (case-insensitively) among the configured tags.
"""

from consoler.config import build_consoler
from consoler.lib.log_lib import ConsoleSink
from consoler.output import print_error


def register(subparsers, parents):
    """Register the 'emit' subcommand."""
    p = subparsers.add_parser(
        "emit",
        parents=parents,
        help="Dispatch a message under a category",
    )
    p.add_argument("category", help="INFO, WARN, ERROR, SUCCESS or a tag name")
    p.add_argument("message", help="Message text")
    p.add_argument("params", nargs="*", help="Extra values shown after the message")
    p.set_defaults(func=run)


def _resolve_target(consoler, category):
    builtins = {
        "INFO": consoler.log,
        "WARN": consoler.warn,
        "ERROR": consoler.error,
        "SUCCESS": consoler.success,
    }
    key = category.upper()
    if key in builtins:
        return builtins[key]
    for name, fn in consoler.tags.items():
        if name.upper() == key:
            return fn
    return None


def run(args):
    consoler = build_consoler(args, sink=ConsoleSink(color=False if args.no_color else None))
    target = _resolve_target(consoler, args.category)
    if target is None:
        print_error(f"Unknown category: {args.category}")
        return 1
    target(args.message, *args.params)
    return 0
