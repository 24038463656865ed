from __future__ import annotations

from enum import Enum
from typing import Optional

import typer

from leasefee.domain.fees import DEFAULT_SCHEDULE, band_bounds, tiered_rate_sum
from leasefee.domain.lease import LEASE_TYPES, RawInputs
from leasefee.services.fee_calculator import FeeForm, evaluate
from leasefee.services.presenter import render_breakdown, render_fee

app = typer.Typer(help="Leasing fee calculator (tiered new-lease fee, flat renewal fee).")


class Display(str, Enum):
    fixed = "fixed"
    currency = "currency"


def _policy(display: Optional[Display]) -> Optional[str]:
    return display.value if display else None


_PROMPTS = {
    "rent": "Rent (EUR)",
    "contract_length": "Contract length (months)",
    "rent_free": "Rent-free (months)",
    "capex": "Capex (EUR)",
    "lease_type": f"Type ({'/'.join(LEASE_TYPES)})",
}


@app.command()
def calc(
    rent: str = typer.Option("", "--rent", help="Monthly rent, comma or dot decimals"),
    months: str = typer.Option("", "--months", help="Contract length in months"),
    rent_free: str = typer.Option("", "--rent-free", help="Rent-free months"),
    capex: str = typer.Option("", "--capex", help="Capex credited against the fee"),
    lease_type: str = typer.Option("new", "--type", help="new | renewal | other"),
    breakdown: bool = typer.Option(False, "--breakdown", help="Also print the intermediate values."),
    display: Optional[Display] = typer.Option(
        None, "--display", case_sensitive=False, help="Fee display (default from config)"
    ),
) -> None:
    """
    Compute the fee once and print it.
    """
    result = evaluate(
        RawInputs(
            rent_text=rent,
            contract_length_text=months,
            rent_free_text=rent_free,
            capex_text=capex,
            lease_type=lease_type,
        )
    )
    if breakdown:
        for line in render_breakdown(result, _policy(display)):
            typer.echo(line)
    typer.echo(render_fee(result, _policy(display)))


@app.command()
def form(
    display: Optional[Display] = typer.Option(
        None, "--display", case_sensitive=False, help="Fee display (default from config)"
    ),
) -> None:
    """
    Interactive form: pick a field, type a value, the fee is re-rendered
    after every edit. Empty choice or 'q' exits.
    """
    state = FeeForm()
    fields = list(FeeForm.FIELDS)

    while True:
        for i, field in enumerate(fields, start=1):
            typer.echo(f"  {i}. {_PROMPTS[field]}: {state[field]}")
        typer.echo(render_fee(state.result, _policy(display)))

        choice = typer.prompt("Field to edit (1-5, q to quit)", default="", show_default=False).strip()
        if choice in ("", "q", "Q"):
            break
        if not choice.isdigit() or not 1 <= int(choice) <= len(fields):
            typer.echo(f"Unknown field: {choice}")
            continue

        field = fields[int(choice) - 1]
        value = typer.prompt(_PROMPTS[field], default=state[field], show_default=False)
        state.update(field, value)


@app.command()
def schedule(
    months: Optional[int] = typer.Option(None, "--months", min=0, help="Show rate sum for this duration"),
) -> None:
    """
    Print the new-lease tier bands.
    """
    for first, last, rate in band_bounds(DEFAULT_SCHEDULE):
        span = f"{first}+" if last is None else f"{first}-{last}"
        typer.echo(f"months {span:<8} {rate:.4%}")

    if months is not None:
        total = tiered_rate_sum(months)
        effective = total / months if months else 0.0
        typer.echo(f"{months} months: rate sum {total:.4f}, effective {effective:.4%}")


if __name__ == "__main__":
    app()
