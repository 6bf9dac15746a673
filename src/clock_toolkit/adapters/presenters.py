"""Presenters – format use-case responses for terminal or JSON output."""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.table import Table

from clock_toolkit.application.ports import ClockSupplier
from clock_toolkit.application.use_cases.doctor_checks import DoctorResponse
from clock_toolkit.domain.value_objects import ClockValue, ZoneId

console = Console()


def _json_out(data: Any) -> None:
    print(json.dumps(data, indent=2, default=str))


def _value_table(value: ClockValue, extra_zone: ZoneId | None = None) -> Table:
    table = Table(show_header=False, show_lines=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("instant", value.instant.iso())
    table.add_row("zone", value.zone.id)
    table.add_row("local", value.now().isoformat())
    if extra_zone is not None:
        table.add_row(extra_zone.id, value.instant.dt.astimezone(extra_zone.tzinfo).isoformat())
    return table


# ---------------------------------------------------------------------------
# Doctor
# ---------------------------------------------------------------------------
def present_doctor(resp: DoctorResponse, *, as_json: bool = False) -> None:
    if as_json:
        _json_out({"checks": [{"name": c.name, "passed": c.passed, "message": c.message} for c in resp.checks]})
        return

    table = Table(title="Doctor Checks", show_lines=True)
    table.add_column("Check", style="bold")
    table.add_column("Status")
    table.add_column("Details")
    for c in resp.checks:
        status = "[green]PASS[/green]" if c.passed else "[red]FAIL[/red]"
        table.add_row(c.name, status, c.message)
    console.print(table)
    if resp.all_passed:
        console.print("\n[bold green]All checks passed![/bold green]")
    else:
        console.print("\n[bold red]Some checks failed. See above.[/bold red]")


# ---------------------------------------------------------------------------
# Now
# ---------------------------------------------------------------------------
def present_now(value: ClockValue, extra_zone: ZoneId | None = None, *, as_json: bool = False) -> None:
    if as_json:
        data = value.to_dict()
        if extra_zone is not None:
            data["in_zone"] = {
                "zone": extra_zone.id,
                "local": value.instant.dt.astimezone(extra_zone.tzinfo).isoformat(),
            }
        _json_out(data)
        return

    console.print(_value_table(value, extra_zone))


# ---------------------------------------------------------------------------
# Supplier (default / fixed / load)
# ---------------------------------------------------------------------------
def present_supplier(
    supplier: ClockSupplier,
    value: ClockValue,
    *,
    saved_to: str | None = None,
    as_json: bool = False,
) -> None:
    if as_json:
        data: dict[str, Any] = {"supplier": repr(supplier), "value": value.to_dict()}
        if saved_to is not None:
            data["saved_to"] = saved_to
        _json_out(data)
        return

    console.print(f"\n[bold]Supplier:[/bold] {supplier!r}")
    console.print(_value_table(value))
    if saved_to is not None:
        console.print(f"[green]Saved:[/green] {saved_to}")
