"""Tests for identifier format checks."""

import pytest

from greenpro.exceptions import BadRequestException
from greenpro.modules.registration.validators import ensure_hex_id, is_hex_id


@pytest.mark.parametrize(
    "value",
    ["65f0a1b2c3d4e5f601000001", "65F0A1B2C3D4E5F601000001", "000000000000000000000000"],
)
def test_valid_hex_ids(value):
    assert is_hex_id(value)


@pytest.mark.parametrize(
    "value",
    ["65f0a1b2c3d4e5f60100000", "65f0a1b2c3d4e5f6010000011", "65f0a1b2c3d4e5f60100000g", ""],
)
def test_invalid_hex_ids(value):
    assert not is_hex_id(value)


def test_ensure_hex_id_normalises_case_and_whitespace():
    assert ensure_hex_id("  65F0A1B2C3D4E5F601000001 ", "countryId") == "65f0a1b2c3d4e5f601000001"


@pytest.mark.parametrize("value", [None, "", "   "])
def test_ensure_hex_id_required(value):
    with pytest.raises(BadRequestException, match="stateId is required"):
        ensure_hex_id(value, "stateId")


def test_ensure_hex_id_invalid_format():
    with pytest.raises(BadRequestException) as exc_info:
        ensure_hex_id("MH", "stateId")

    assert exc_info.value.message == (
        "Invalid stateId format. Must be a valid 24-character hex identifier."
    )
    assert exc_info.value.details[0]["field"] == "stateId"
