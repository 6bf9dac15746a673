"""Machine-readable command specification for agent onboarding."""

from __future__ import annotations

COMMAND_SPEC: dict = {
    "name": "clock",
    "version": "1.0.0",
    "description": (
        "Clock Toolkit CLI – inspect the process-wide default clock supplier, "
        "read the current time, and create or load fixed clocks."
    ),
    "environment": {
        "CLOCK_TOOLKIT_CLOCK_SUPPLIER_DEFAULT_CACHED": {
            "description": (
                "Cache the discovered clock supplier (default: true). Any value other "
                "than 'true' (case-insensitive) disables caching. Read once per process."
            ),
            "default": None,
        },
        "CLOCK_TOOLKIT_VERBOSE": {
            "description": "Emit debug log lines on stderr when set to 1/true/yes.",
            "default": None,
        },
    },
    "entry_point_group": "clock_toolkit.clock_suppliers",
    "commands": {
        "help": {
            "description": "Show help for all commands or a specific command.",
            "usage": "clock help [<command>]",
            "args": [
                {"name": "command", "type": "string", "required": False, "description": "Command name to get help for"}
            ],
            "flags": [],
        },
        "spec": {
            "description": "Output machine-readable command specification as JSON.",
            "usage": "clock spec",
            "args": [],
            "flags": [],
        },
        "doctor": {
            "description": "Validate the caching flag, provider discovery, zone database and local zone.",
            "usage": "clock doctor [--json]",
            "args": [],
            "flags": [
                {"name": "--json", "description": "Output results as JSON"},
            ],
        },
        "now": {
            "description": "Print the current time from the system UTC or system default-zone clock.",
            "usage": "clock now [--local] [--zone ZONE] [--json]",
            "args": [],
            "flags": [
                {"name": "--local", "description": "Use the process default zone instead of UTC"},
                {"name": "--zone", "type": "string", "description": "Also render the instant in this IANA zone"},
                {"name": "--json", "description": "Output as JSON"},
            ],
        },
        "default": {
            "description": "Resolve the default clock supplier and print it with its current value.",
            "usage": "clock default [--json]",
            "args": [],
            "flags": [
                {"name": "--json", "description": "Output as JSON"},
            ],
        },
        "fixed": {
            "description": "Create a fixed clock supplier, optionally saving it as JSON.",
            "usage": "clock fixed <instant> [--zone ZONE] [--save NAME] [--dir DIR] [--json]",
            "args": [
                {"name": "instant", "type": "string", "required": True, "description": "ISO-8601 instant, e.g. 2017-10-02T17:03:00Z"}
            ],
            "flags": [
                {"name": "--zone", "type": "string", "default": "Etc/UTC", "description": "IANA zone id"},
                {"name": "--save", "type": "string", "description": "Name (or path) to persist the supplier under"},
                {"name": "--dir", "type": "string", "default": ".", "description": "Directory for --save names"},
                {"name": "--json", "description": "Output as JSON"},
            ],
        },
        "load": {
            "description": "Load a persisted fixed clock supplier and print its value.",
            "usage": "clock load <path> [--json]",
            "args": [
                {"name": "path", "type": "string", "required": True, "description": "Path to a saved fixed clock JSON file"}
            ],
            "flags": [
                {"name": "--json", "description": "Output as JSON"},
            ],
        },
    },
}
