"""nsdebug demo — emit sample lines from a few channels.

Useful for eyeballing colors, multi-line alignment and the elapsed-time
suffix on a real terminal:

    $ nsdebug demo
    $ nsdebug demo --debug "demo:*,-demo:worker" --no-color
"""

import argparse
import time

from nsdebug.lib.debug_lib import get_registry


def register(subparsers, parents):
    """Register the 'demo' subcommand."""
    p = subparsers.add_parser(
        "demo",
        parents=parents,
        help="Emit sample output from a few demo channels",
        description=(
            "Create demo:server, demo:worker and demo:dotenv channels and\n"
            "emit sample lines. Without --debug or $DEBUG, all demo channels\n"
            "are on."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--pause", type=float, default=0.3, metavar="SECONDS",
                   help="Delay before the last line, to show elapsed time (default: 0.3)")
    p.set_defaults(func=run)


def run(args):
    """Execute the demo command."""
    registry = get_registry()
    if getattr(args, "debug", None) is None and not registry.env.load():
        registry.enable("demo:*")

    server = registry.create("demo:server")
    worker = registry.create("demo:worker")
    dotenv = registry.create("demo:dotenv")

    dotenv.emit("env variables loaded")
    server.emit("this is a number: %d", 5)
    server.emit("this is a string: %s, and some json here: %j", "server", {"bla": True})
    server.emit("what is this, %o, an object?", {"bla": True})
    server.emit({"bla": True, "justify": "column", "align": {"center": True}})
    server.emit("my name is %s", "demo server", 5)
    server.emit("multi-line\nmessages stay\naligned")

    http = worker.extend("http")
    http.emit("hello from extended worker")
    tcp = worker.extend("tcp", "-")
    tcp.emit("hello from extended worker with custom delimiter")

    worker.emit("foo bar")
    if args.pause > 0:
        time.sleep(args.pause)
    worker.emit("working")
    return 0
