# src/leasefee/domain/fees.py
from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from leasefee.domain.lease import FeeBreakdown, LeaseType


@dataclass(frozen=True)
class TierBand:
    width: int | None   # months in the band; None = open-ended
    rate: float         # fee per month of rent, e.g. 0.035


# months 1-60 @ 3.5%, 61-120 @ 2.75%, 121+ @ 2.5%
DEFAULT_SCHEDULE: tuple[TierBand, ...] = (
    TierBand(width=60, rate=0.035),
    TierBand(width=60, rate=0.0275),
    TierBand(width=None, rate=0.025),
)

# renewal / other: flat 1% of net rent over the term
FLAT_RATE = 0.01


def tiered_rate_sum(duration_months: int, schedule: Sequence[TierBand] = DEFAULT_SCHEDULE) -> float:
    """
    Progressive rate sum: each band contributes months-in-band * band rate.

      12  -> 12 * 0.035                 = 0.42
      72  -> 60 * 0.035 + 12 * 0.0275   = 2.43
      150 -> 2.1 + 1.65 + 30 * 0.025    = 4.50
    """
    remaining = max(0, int(duration_months))
    total = 0.0
    for band in schedule:
        in_band = remaining if band.width is None else min(remaining, band.width)
        total += in_band * band.rate
        remaining -= in_band
    return total


def marginal_rate(month: int, schedule: Sequence[TierBand] = DEFAULT_SCHEDULE) -> float:
    """Rate earned by the given (1-based) month of the term."""
    if month <= 0:
        return 0.0
    start = 0
    for band in schedule:
        if band.width is None or month <= start + band.width:
            return band.rate
        start += band.width
    # schedule without an open-ended band: months past the end earn nothing
    return 0.0


def band_bounds(schedule: Sequence[TierBand] = DEFAULT_SCHEDULE) -> list[tuple[int, int | None, float]]:
    """(first_month, last_month, rate) per band; last_month is None when open-ended."""
    out = []
    start = 1
    for band in schedule:
        if band.width is None:
            out.append((start, None, band.rate))
            break
        out.append((start, start + band.width - 1, band.rate))
        start += band.width
    return out


def _saturate(fee: float) -> float:
    # overflowing products (rent or months near float max) stay finite
    if math.isnan(fee):
        return 0.0
    if math.isinf(fee):
        return sys.float_info.max
    return fee


def compute_fee_breakdown(
    rent: float,
    duration_months: int,
    capex: float,
    lease_type: LeaseType,
    schedule: Sequence[TierBand] = DEFAULT_SCHEDULE,
) -> tuple[float, FeeBreakdown]:
    # Incomplete input -> no fee
    if not rent or not duration_months:
        return 0.0, FeeBreakdown(
            rate_sum=0.0,
            fee_on_rent=0.0,
            effective_rate=0.0,
            fee_on_capex=0.0,
            gross_fee=0.0,
        )

    if lease_type != "new":
        net_rent = duration_months * rent - capex
        fee = max(0.0, net_rent) * FLAT_RATE
        return _saturate(fee), FeeBreakdown(
            rate_sum=duration_months * FLAT_RATE,
            fee_on_rent=duration_months * rent * FLAT_RATE,
            effective_rate=FLAT_RATE,
            fee_on_capex=capex * FLAT_RATE,
            gross_fee=net_rent * FLAT_RATE,
        )

    rate_sum = tiered_rate_sum(duration_months, schedule)
    fee_on_rent = rent * rate_sum
    # capex is credited at the blended rate of the whole term
    effective_rate = rate_sum / duration_months
    fee_on_capex = capex * effective_rate
    gross_fee = fee_on_rent - fee_on_capex

    return _saturate(max(0.0, gross_fee)), FeeBreakdown(
        rate_sum=rate_sum,
        fee_on_rent=fee_on_rent,
        effective_rate=effective_rate,
        fee_on_capex=fee_on_capex,
        gross_fee=gross_fee,
    )


def compute_fee(
    rent: float,
    duration_months: int,
    capex: float,
    lease_type: LeaseType,
    schedule: Sequence[TierBand] = DEFAULT_SCHEDULE,
) -> float:
    fee, _ = compute_fee_breakdown(rent, duration_months, capex, lease_type, schedule)
    return fee
