"""Entry point for the Clock Toolkit CLI.

Usage:
    python -m clock_toolkit <command> [args...]
    clock <command> [args...]          (after pip install -e .)
"""

from clock_toolkit.adapters.cli import run_cli


def main() -> None:
    run_cli()


if __name__ == "__main__":
    main()
