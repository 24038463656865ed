import pytest

from leasefee.domain.lease import RawInputs
from leasefee.services.fee_calculator import FeeForm, evaluate


def _raw(rent, months, rent_free="", capex="", lease_type="new"):
    return RawInputs(
        rent_text=rent,
        contract_length_text=months,
        rent_free_text=rent_free,
        capex_text=capex,
        lease_type=lease_type,
    )


@pytest.mark.parametrize(
    "raw, expected",
    [
        (_raw("10000", "12"), 4200.0),
        (_raw("10000", "72"), 24_300.0),
        (_raw("10000", "12", rent_free="2", capex="5000"), 3325.0),
        (_raw("10000", "12", capex="20000", lease_type="renewal"), 1000.0),
        (_raw("5000", "6", capex="1000000", lease_type="renewal"), 0.0),
    ],
)
def test_evaluate_scenarios(raw, expected):
    assert evaluate(raw).fee == pytest.approx(expected)


def test_evaluate_comma_decimals(new_lease_inputs):
    comma = evaluate(_raw("10000,0", "12", capex="0,0"))
    assert comma.fee == pytest.approx(evaluate(new_lease_inputs).fee)


def test_evaluate_empty_rent_shows_zero():
    result = evaluate(_raw("", "12"))
    assert result.fee == 0.0
    assert result.inputs.rent == 0.0


def test_evaluate_all_rent_free_shows_zero():
    assert evaluate(_raw("10000", "12", rent_free="12")).fee == 0.0


def test_evaluate_keeps_effective_inputs(new_lease_inputs):
    result = evaluate(new_lease_inputs)
    assert result.inputs.duration_months == 12
    assert result.inputs.lease_type == "new"
    assert result.breakdown.rate_sum == pytest.approx(0.42)


def test_form_starts_from_page_defaults():
    form = FeeForm()
    assert form["rent"] == "10000"
    assert form["contract_length"] == "12"
    assert form["lease_type"] == "new"
    assert form.result.fee == pytest.approx(4200.0)


def test_form_recomputes_on_every_update():
    form = FeeForm()

    r1 = form.update("contract_length", "72")
    assert r1.fee == pytest.approx(24_300.0)

    r2 = form.update("lease_type", "renewal")
    assert r2.fee == pytest.approx(7200.0)

    r3 = form.update("capex", "720000")
    assert r3.fee == 0.0
    assert form.result is r3


def test_form_update_clears_field_with_none():
    form = FeeForm()
    form.update("rent", None)
    assert form["rent"] == ""
    assert form.result.fee == 0.0


def test_form_unknown_field_raises_key_error():
    form = FeeForm()
    with pytest.raises(KeyError):
        form.update("deposit", "100")


def test_form_values_is_a_copy():
    form = FeeForm(rent="500", contract_length="6")
    values = form.values
    values["rent"] = "999999"
    assert form["rent"] == "500"
    assert form.result.fee == pytest.approx(500 * 6 * 0.035)
