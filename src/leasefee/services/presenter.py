# src/leasefee/services/presenter.py
from __future__ import annotations

from leasefee.adapters.config import config
from leasefee.domain.lease import FeeResult


def format_amount(amount: float, policy: str | None = None, currency_symbol: str | None = None) -> str:
    """
    fixed    -> "4200.00"   (two decimals, no grouping, no symbol)
    currency -> "€4,200.00"
    """
    policy = (policy or config.DISPLAY_POLICY).strip().lower()
    amount = amount or 0.0

    if policy == "fixed":
        return f"{amount:.2f}"
    if policy == "currency":
        symbol = config.CURRENCY_SYMBOL if currency_symbol is None else currency_symbol
        return f"{symbol}{amount:,.2f}"
    raise ValueError(f"unknown display policy: {policy}")


def render_fee(result: FeeResult | float, policy: str | None = None, label: str | None = None) -> str:
    fee = result.fee if isinstance(result, FeeResult) else result
    label = config.FEE_LABEL if label is None else label
    return f"{label}{format_amount(fee, policy)}"


def render_breakdown(result: FeeResult, policy: str | None = None) -> list[str]:
    inp = result.inputs
    b = result.breakdown
    return [
        f"type:            {inp.lease_type}",
        f"rent:            {format_amount(inp.rent, policy)}",
        f"duration:        {inp.duration_months} months "
        f"({inp.contract_length_months} - {inp.rent_free_months} rent-free)",
        f"capex:           {format_amount(inp.capex, policy)}",
        f"rate sum:        {b.rate_sum:.4f}",
        f"effective rate:  {b.effective_rate:.4%}",
        f"fee on rent:     {format_amount(b.fee_on_rent, policy)}",
        f"capex credit:    {format_amount(b.fee_on_capex, policy)}",
    ]
