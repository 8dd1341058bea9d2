"""Main CLI entry point for nsdebug.

Implements a Docker-style two-pass argument parser:
  1. First pass: extract global flags (--no-color, --hide-date, --debug)
  2. Second pass: dispatch to subcommand

Global flags can appear before OR after the subcommand:
  nsdebug --no-color demo           # works
  nsdebug demo --no-color           # also works

Subcommands self-register via register(subparsers, parents) convention.
"""

import argparse
import sys

from nsdebug._version import __app_name__, __version__


# ---------------------------------------------------------------------------
# Global flags (Docker-style: can precede the subcommand)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--no-color": {"action": "store_true", "default": False,
                   "help": "Disable colored output"},
    "--hide-date": {"action": "store_true", "default": False,
                    "help": "Omit timestamps from plain (no-color) lines"},
    "--debug": {"metavar": "SPEC", "default": None,
                "help": "Enable spec, overrides $DEBUG (e.g. 'server:*,-server:db')"},
}


def _extract_global_flags(argv):
    """Two-pass parse: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False)
    for flag, kwargs in GLOBAL_FLAGS.items():
        global_parser.add_argument(flag, **kwargs)

    global_args, remaining = global_parser.parse_known_args(argv)
    return global_args, remaining


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules.

    Each module in nsdebug.commands must export:
      register(subparsers, parents) — add itself to the subparser
      run(args) — execute the command
    """
    from nsdebug.commands import check, demo
    return [check, demo]


def _build_parser(commands):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="nsdebug",
        description="nsdebug — namespace-scoped debug channels",
        epilog=(
            "Run 'nsdebug <command> --help' for details on a specific command.\n"
            "\n"
            "Global flags (--no-color, --hide-date, --debug) can appear\n"
            "before or after the subcommand."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"{__app_name__} {__version__}",
    )

    for flag, kwargs in GLOBAL_FLAGS.items():
        parser.add_argument(flag, **kwargs)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    for cmd_module in commands:
        cmd_module.register(subparsers, parents=[])

    return parser


def _init_registry(global_args):
    """Initialize the process-wide registry from global flags and $DEBUG."""
    from nsdebug.lib.debug_lib import init_registry, load_inspect_options

    opts = load_inspect_options()
    if global_args.no_color:
        opts.colors = False
    if global_args.hide_date:
        opts.hide_date = True
    registry = init_registry(inspect_opts=opts)
    if global_args.debug is not None:
        registry.enable(global_args.debug)
    return registry


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for nsdebug CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success).
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: extract global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)
    _init_registry(global_args)

    # Pass 2: parse subcommand + specific args
    commands = _discover_commands()
    parser = _build_parser(commands)

    if not remaining:
        parser.print_help()
        return 0

    args = parser.parse_args(remaining)

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    # Merge global args into the namespace for convenience
    for key, value in vars(global_args).items():
        if key not in vars(args) or getattr(args, key) is None:
            setattr(args, key, value)

    try:
        return args.func(args) or 0
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1


if __name__ == "__main__":
    sys.exit(main())
