"""consoler status — show the persisted verbose set and known categories."""

from consoler.config import open_state, parse_tags, resolve_config
from consoler.lib.log_lib import format_category_list


def register(subparsers, parents):
    """Register the 'status' subcommand."""
    p = subparsers.add_parser(
        "status",
        parents=parents,
        help="Show the enabled categories",
    )
    p.set_defaults(func=run)


def run(args):
    store = open_state(args)
    tags = parse_tags(resolve_config(args, ["tags"])["tags"])
    enabled = store.get()

    print(f"Verbose mode: {store.raw() or '(none)'}")
    print(format_category_list([t.display_name for t in tags], enabled))
    return 0
