"""nsdebug check — evaluate an enable spec against namespaces.

Shows which of the given namespaces a spec would switch on, without
touching the process environment:

    $ nsdebug check "server:*,-server:db" server:http server:db client
      [ON]  server:http
      [OFF] server:db
      [OFF] client
      spec: server:*,-server:db
"""

import argparse

from nsdebug.lib.debug_lib import EnvStore, Registry


def register(subparsers, parents):
    """Register the 'check' subcommand."""
    p = subparsers.add_parser(
        "check",
        parents=parents,
        help="Show which namespaces an enable spec turns on",
        description=(
            "Evaluate SPEC against each NAMESPACE and print ON/OFF.\n"
            "Deny rules (-pattern) take precedence over allow rules.\n"
            "The normalized spec is printed last."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("spec", metavar="SPEC",
                   help="Enable spec, e.g. 'server:*,-server:db'")
    p.add_argument("namespaces", metavar="NAMESPACE", nargs="*",
                   help="Namespaces to evaluate")
    p.set_defaults(func=run)


def evaluate(spec, namespaces):
    """Return (results, normalized_spec) for ``spec``.

    ``results`` is a list of (namespace, enabled) pairs in input order.
    """
    registry = Registry(env=EnvStore({}))
    registry.enable(spec)
    results = [(ns, registry.enabled(ns)) for ns in namespaces]
    return results, registry.disable()


def run(args):
    """Execute the check command."""
    results, normalized = evaluate(args.spec, args.namespaces)
    for namespace, is_on in results:
        label = "[ON] " if is_on else "[OFF]"
        print(f"  {label} {namespace}")
    print(f"  spec: {normalized}")
    return 0
