# src/leasefee/domain/lease.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator

LeaseType = Literal["new", "renewal", "other"]

LEASE_TYPES: tuple[LeaseType, ...] = ("new", "renewal", "other")


class RawInputs(BaseModel):
    """
    The four free-text form fields plus the type selector, exactly as typed.

    Nothing in here is trusted. Permissive on purpose: numbers, None and
    stray extra keys are accepted and kept as text, the sanitizer decides
    what they are worth.
    """
    model_config = ConfigDict(extra="allow")

    rent_text: str = ""
    contract_length_text: str = ""
    rent_free_text: str = ""
    capex_text: str = ""
    lease_type: str = "new"

    @field_validator(
        "rent_text",
        "contract_length_text",
        "rent_free_text",
        "capex_text",
        "lease_type",
        mode="before",
    )
    @classmethod
    def _as_text(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v)


@dataclass(frozen=True)
class EffectiveInputs:
    rent: float                   # monthly rent, >= 0
    contract_length_months: int   # >= 0
    rent_free_months: int         # >= 0
    capex: float                  # landlord capex credit, >= 0
    lease_type: LeaseType

    @property
    def duration_months(self) -> int:
        # fee-bearing months; rent-free months never count
        return max(0, self.contract_length_months - self.rent_free_months)


@dataclass(frozen=True)
class FeeBreakdown:
    rate_sum: float         # tiered sum (new) or flat rate x months (renewal/other)
    fee_on_rent: float      # fee before the capex credit
    effective_rate: float   # rate_sum / duration_months
    fee_on_capex: float     # capex credit, in fee terms
    gross_fee: float        # fee_on_rent - fee_on_capex, before the zero floor


@dataclass(frozen=True)
class FeeResult:
    fee: float
    inputs: EffectiveInputs
    breakdown: FeeBreakdown
