"""consoler verbose — authorize and choose which categories to show.

Runs the interactive configuration flow against the persisted state file:
password prompt (skipped with --dev or in a development environment),
then a category prompt. A recognized selection replaces the stored set.
"""

from consoler.config import build_consoler
from consoler.lib.log_lib import ConsoleSink, FlowState
from consoler.output import print_error, print_ok


def register(subparsers, parents):
    """Register the 'verbose' subcommand."""
    p = subparsers.add_parser(
        "verbose",
        parents=parents,
        help="Authorize and choose the enabled categories",
    )
    p.set_defaults(func=run)


def run(args):
    consoler = build_consoler(args, sink=ConsoleSink(color=False if args.no_color else None))
    state = consoler.verbose()

    if state is FlowState.COMMITTED:
        print_ok(f"Verbose mode saved: {','.join(consoler.store.get() or [])}")
        return 0
    if state is FlowState.UNAUTHORIZED:
        print_error("Not authorized.")
    return 1
