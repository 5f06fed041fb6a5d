"""consoler clear — remove the persisted verbose set.

Afterwards every category is gated off until the next 'consoler verbose'
(or the next development-mode start, which seeds the defaults again).
"""

from consoler.config import open_state
from consoler.output import print_ok, print_skip


def register(subparsers, parents):
    """Register the 'clear' subcommand."""
    p = subparsers.add_parser(
        "clear",
        parents=parents,
        help="Remove the persisted verbose set",
    )
    p.set_defaults(func=run)


def run(args):
    store = open_state(args)
    if store.raw() is None:
        print_skip("No verbose mode stored")
        return 0
    store.clear()
    print_ok("Verbose mode cleared")
    return 0
