# tests/conftest.py
import pytest
from typer.testing import CliRunner

from leasefee.domain.lease import RawInputs


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def new_lease_inputs():
    # the form's opening state: 10000/month, 12 months, new lease
    return RawInputs(
        rent_text="10000",
        contract_length_text="12",
        rent_free_text="",
        capex_text="",
        lease_type="new",
    )
