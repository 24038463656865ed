# src/leasefee/services/sanitizer.py

import math
from collections.abc import Mapping
from typing import Any

from leasefee.domain.lease import LEASE_TYPES, EffectiveInputs, LeaseType, RawInputs

DEFAULT_LEASE_TYPE: LeaseType = "new"


def parse_decimal(val: Any) -> float:
    """
    Lenient converter for the free-text money fields.

    Accepts:
      - 10000
      - "10000"
      - "1234,56"   (comma as decimal point)
      - " 12.5 "
    Returns 0.0 when missing/blank/garbage/NaN/inf.
    """
    if val is None:
        return 0.0
    if isinstance(val, bool):
        return 0.0
    if isinstance(val, (int, float)):
        f = float(val)
    elif isinstance(val, str):
        s = val.replace(",", ".").strip()
        # float() also takes "1_000" and non-ASCII digits
        if not s or "_" in s or not s.isascii():
            return 0.0
        try:
            f = float(s)
        except ValueError:
            return 0.0
    else:
        return 0.0

    if not math.isfinite(f):
        return 0.0
    return f


def parse_months(val: Any) -> int:
    """Whole months: parsed like a decimal, floored, never below zero."""
    f = parse_decimal(val)
    return max(0, math.floor(f))


def normalize_lease_type(val: Any) -> LeaseType:
    """
    Map selector text to a lease type.

    Anything unrecognised falls back to "new", the selector's default.
    """
    t = str(val or "").strip().lower()
    if t in LEASE_TYPES:
        return t  # type: ignore[return-value]
    return DEFAULT_LEASE_TYPE


def sanitize_inputs(raw: RawInputs | Mapping[str, Any]) -> EffectiveInputs:
    """
    The only way raw form text becomes numbers.

    Responsibilities:
      - comma -> dot, then parse; garbage becomes 0
      - rent and capex clamped at 0
      - month fields floored and clamped at 0
      - lease type normalized (unknown -> "new")
    """
    if not isinstance(raw, RawInputs):
        raw = RawInputs(**dict(raw))

    return EffectiveInputs(
        rent=max(0.0, parse_decimal(raw.rent_text)),
        contract_length_months=parse_months(raw.contract_length_text),
        rent_free_months=parse_months(raw.rent_free_text),
        capex=max(0.0, parse_decimal(raw.capex_text)),
        lease_type=normalize_lease_type(raw.lease_type),
    )
