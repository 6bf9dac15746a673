"""CLI adapter – parses arguments, dispatches to use cases, formats output."""

from __future__ import annotations

import argparse
import json
import sys
import textwrap

from clock_toolkit.adapters.command_spec import COMMAND_SPEC
from clock_toolkit.adapters import presenters


# ---------------------------------------------------------------------------
# Help text
# ---------------------------------------------------------------------------
HELP_TEXT = textwrap.dedent("""\
    Clock Toolkit – injectable, process-wide clock suppliers.

    Usage:
      clock <command> [options]

    Commands:
      help [cmd]      Show help (or help for a specific command)
      spec            Output machine-readable command spec (JSON)
      doctor          Validate caching flag, providers, zone data
      now             Print the current time (UTC or local zone)
      default         Resolve and print the default clock supplier
      fixed           Create (and optionally save) a fixed clock
      load            Load a saved fixed clock

    Examples:
      clock doctor
      clock now --local
      clock now --zone America/Chicago --json
      clock default
      clock fixed 2017-10-02T17:03:00Z --zone America/Chicago --save release
      clock load release.json

    Default supplier (set in .env or the environment):
      CLOCK_TOOLKIT_CLOCK_SUPPLIER_DEFAULT_CACHED=false
          look the registered supplier up on every get() instead of once

    For detailed help:  clock help <command>
""")

COMMAND_HELP: dict[str, str] = {
    "help": "Usage: clock help [<command>]\n\nShow general help or help for a specific command.",
    "spec": "Usage: clock spec\n\nOutputs the full machine-readable command spec as JSON.\nUseful for agent onboarding.",
    "doctor": (
        "Usage: clock doctor [--json]\n\n"
        "Runs diagnostic checks:\n"
        "  - Caching flag (CLOCK_TOOLKIT_CLOCK_SUPPLIER_DEFAULT_CACHED)\n"
        "  - Clock supplier discovery (clock_toolkit.clock_suppliers entry points)\n"
        "  - Zone database availability\n"
        "  - Process default zone"
    ),
    "now": (
        "Usage: clock now [--local] [--zone ZONE] [--json]\n\n"
        "Print the current time.\n"
        "  --local   Use the process default zone instead of UTC\n"
        "  --zone    Also render the instant in this IANA zone\n"
        "  --json    Output as JSON"
    ),
    "default": (
        "Usage: clock default [--json]\n\n"
        "Resolve the process-wide default clock supplier and print it\n"
        "together with the clock value it currently produces.\n"
        "  --json    Output as JSON"
    ),
    "fixed": (
        "Usage: clock fixed <instant> [--zone ZONE] [--save NAME] [--dir DIR] [--json]\n\n"
        "Create a fixed clock supplier.\n"
        "  instant   ISO-8601 instant, e.g. 2017-10-02T17:03:00Z\n"
        "  --zone    IANA zone id (default: Etc/UTC)\n"
        "  --save    Persist the supplier as <DIR>/<NAME>.json (or to a .json path)\n"
        "  --dir     Directory for --save names (default: current directory)\n"
        "  --json    Output as JSON"
    ),
    "load": (
        "Usage: clock load <path> [--json]\n\n"
        "Load a fixed clock saved with 'clock fixed --save'.\n"
        "  path      Path to the JSON file\n"
        "  --json    Output as JSON"
    ),
}


# ---------------------------------------------------------------------------
# Build container (lazy import to avoid circular deps)
# ---------------------------------------------------------------------------
def _build_container() -> dict:
    """Build the dependency container from config."""
    from clock_toolkit.infrastructure.config import DEFAULT_ENTRY_POINT_GROUP, EnvironmentConfig, load_config
    from clock_toolkit.infrastructure.entry_point_registry import EntryPointRegistry
    from clock_toolkit.infrastructure.logger import ConsoleLogger

    config = load_config()
    verbose = (config.get("CLOCK_TOOLKIT_VERBOSE") or "").lower() in ("1", "true", "yes")
    logger = ConsoleLogger(verbose=verbose)
    registry = EntryPointRegistry(DEFAULT_ENTRY_POINT_GROUP, logger=logger)

    return {
        "config": config,
        "config_source": EnvironmentConfig(),
        "logger": logger,
        "registry": registry,
    }


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------
def cmd_help(args: argparse.Namespace) -> None:
    if args.topic:
        text = COMMAND_HELP.get(args.topic)
        if text:
            print(text)
        else:
            print(f"Unknown command: {args.topic}")
            print(HELP_TEXT)
    else:
        print(HELP_TEXT)


def cmd_spec(_args: argparse.Namespace) -> None:
    print(json.dumps(COMMAND_SPEC, indent=2))


def cmd_doctor(args: argparse.Namespace) -> None:
    c = _build_container()
    from clock_toolkit.application.use_cases.doctor_checks import DoctorChecks

    uc = DoctorChecks(registry=c["registry"], config=c["config_source"], logger=c["logger"])
    resp = uc.execute()
    presenters.present_doctor(resp, as_json=getattr(args, "json", False))


def cmd_now(args: argparse.Namespace) -> None:
    from clock_toolkit import clocks
    from clock_toolkit.domain.value_objects import ZoneId

    supplier = clocks.system_default_zone_clock_supplier() if args.local else clocks.system_utc_clock_supplier()
    extra_zone = ZoneId(args.zone) if args.zone else None
    presenters.present_now(supplier.get(), extra_zone, as_json=args.json)


def cmd_default(args: argparse.Namespace) -> None:
    from clock_toolkit import clocks

    supplier = clocks.get_default()
    value = supplier.get()
    presenters.present_supplier(supplier, value, as_json=args.json)


def cmd_fixed(args: argparse.Namespace) -> None:
    from clock_toolkit import clocks
    from clock_toolkit.domain.value_objects import Timestamp
    from clock_toolkit.infrastructure.fixed_clock_store import JsonFixedClockStore

    supplier = clocks.fixed_clock_supplier(Timestamp.from_iso(args.instant), args.zone)
    saved_to = None
    if args.save:
        saved_to = JsonFixedClockStore(args.dir).save(supplier, args.save)
    presenters.present_supplier(supplier, supplier.get(), saved_to=saved_to, as_json=args.json)


def cmd_load(args: argparse.Namespace) -> None:
    from clock_toolkit.infrastructure.fixed_clock_store import JsonFixedClockStore

    store = JsonFixedClockStore()
    if not store.exists(args.path):
        print(f"ERROR: {args.path} not found.", file=sys.stderr)
        sys.exit(1)
    supplier = store.load(args.path)
    presenters.present_supplier(supplier, supplier.get(), as_json=args.json)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clock",
        description="Clock Toolkit CLI",
        add_help=False,
    )
    sub = parser.add_subparsers(dest="command")

    # help
    p_help = sub.add_parser("help", add_help=False)
    p_help.add_argument("topic", nargs="?", default=None)
    p_help.set_defaults(func=cmd_help)

    # spec
    p_spec = sub.add_parser("spec", add_help=False)
    p_spec.set_defaults(func=cmd_spec)

    # doctor
    p_doctor = sub.add_parser("doctor", add_help=False)
    p_doctor.add_argument("--json", action="store_true", default=False)
    p_doctor.set_defaults(func=cmd_doctor)

    # now
    p_now = sub.add_parser("now", add_help=False)
    p_now.add_argument("--local", action="store_true", default=False)
    p_now.add_argument("--zone", type=str, default=None)
    p_now.add_argument("--json", action="store_true", default=False)
    p_now.set_defaults(func=cmd_now)

    # default
    p_default = sub.add_parser("default", add_help=False)
    p_default.add_argument("--json", action="store_true", default=False)
    p_default.set_defaults(func=cmd_default)

    # fixed
    p_fixed = sub.add_parser("fixed", add_help=False)
    p_fixed.add_argument("instant", type=str)
    p_fixed.add_argument("--zone", type=str, default="Etc/UTC")
    p_fixed.add_argument("--save", type=str, default=None)
    p_fixed.add_argument("--dir", type=str, default=".")
    p_fixed.add_argument("--json", action="store_true", default=False)
    p_fixed.set_defaults(func=cmd_fixed)

    # load
    p_load = sub.add_parser("load", add_help=False)
    p_load.add_argument("path", type=str)
    p_load.add_argument("--json", action="store_true", default=False)
    p_load.set_defaults(func=cmd_load)

    return parser


def run_cli(argv: list[str] | None = None) -> None:
    """Parse args and dispatch to the appropriate command handler."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        print(HELP_TEXT)
        return

    if hasattr(args, "func"):
        try:
            args.func(args)
        except Exception as exc:
            print(f"ERROR: {exc}", file=sys.stderr)
            sys.exit(1)
    else:
        print(HELP_TEXT)
