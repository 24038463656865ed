# src/leasefee/services/fee_calculator.py
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from leasefee.adapters.config import config
from leasefee.adapters.logging_utils import get_logger, log_context
from leasefee.domain.fees import compute_fee_breakdown
from leasefee.domain.lease import FeeResult, RawInputs
from leasefee.services.sanitizer import sanitize_inputs

logger = get_logger(__name__)


def evaluate(raw: RawInputs | Mapping[str, Any]) -> FeeResult:
    """
    Raw form snapshot -> fee.

    Sanitizes first (so the formula only ever sees clamped numbers), then
    runs the fee formula on the derived duration.
    """
    inputs = sanitize_inputs(raw)
    fee, breakdown = compute_fee_breakdown(
        rent=inputs.rent,
        duration_months=inputs.duration_months,
        capex=inputs.capex,
        lease_type=inputs.lease_type,
    )

    logger.debug(
        "fee evaluated",
        extra=log_context(
            lease_type=inputs.lease_type,
            rent=inputs.rent,
            duration_months=inputs.duration_months,
            capex=inputs.capex,
            fee=fee,
        ),
    )
    return FeeResult(fee=fee, inputs=inputs, breakdown=breakdown)


class FeeForm:
    """
    Form state for the fee page.

    Holds the raw text of every field and recomputes on each edit, so
    `result` always matches what is on screen. There is no memoization;
    an evaluation is a handful of float ops.
    """

    FIELDS = ("rent", "contract_length", "rent_free", "capex", "lease_type")

    def __init__(
        self,
        rent: str | None = None,
        contract_length: str | None = None,
        rent_free: str = "",
        capex: str = "",
        lease_type: str = "new",
    ) -> None:
        self._values: dict[str, str] = {
            "rent": config.DEFAULT_RENT if rent is None else rent,
            "contract_length": config.DEFAULT_CONTRACT_LENGTH if contract_length is None else contract_length,
            "rent_free": rent_free,
            "capex": capex,
            "lease_type": lease_type,
        }
        self.result: FeeResult = self._recompute()

    def __getitem__(self, field: str) -> str:
        return self._values[field]

    @property
    def values(self) -> dict[str, str]:
        return dict(self._values)

    def raw_inputs(self) -> RawInputs:
        return RawInputs(
            rent_text=self._values["rent"],
            contract_length_text=self._values["contract_length"],
            rent_free_text=self._values["rent_free"],
            capex_text=self._values["capex"],
            lease_type=self._values["lease_type"],
        )

    def update(self, field: str, value: Any) -> FeeResult:
        """Set one field and recompute. Unknown field names raise KeyError."""
        if field not in self._values:
            raise KeyError(f"unknown form field: {field}")
        self._values[field] = "" if value is None else str(value)
        self.result = self._recompute()
        return self.result

    def _recompute(self) -> FeeResult:
        return evaluate(self.raw_inputs())
