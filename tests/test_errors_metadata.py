import re

import pytest

from mplkit.errors_metadata import (
    ANCHOR_ERRORS,
    METADATA_ERRORS,
    lookup_anchor_error,
    lookup_metadata_error,
)

HEX_KEY = re.compile(r"^[0-9A-F]+$")


def test_metadata_first_code():
    assert (
        lookup_metadata_error("0")
        == "InstructionUnpackError: Failed to unpack instruction data"
    )


def test_metadata_lookup_is_case_insensitive():
    assert lookup_metadata_error("1a") == lookup_metadata_error("1A")
    assert lookup_metadata_error("1a") == (
        "TokenAccountOneTimeAuthMintMismatch: The One Time authorization mint "
        "does not match that on the token account!"
    )


def test_metadata_entry_without_message():
    assert lookup_metadata_error("21") == "PrintingMintAuthorizationAccountMismatch"


def test_metadata_last_code():
    assert (
        lookup_metadata_error("83")
        == "InvalidCollectionSizeChange: Invalid collection size change"
    )


@pytest.mark.parametrize("code", ["84", "ZZ", "", "0x1"])
def test_metadata_unknown_code(code):
    assert lookup_metadata_error(code) is None


def test_anchor_codes():
    assert (
        lookup_anchor_error("3e8")
        == "IdlInstructionStub: The program was compiled without idl instructions"
    )
    assert lookup_anchor_error("1388") == (
        "Deprecated: The API being used is deprecated and should no longer be used"
    )


def test_anchor_unknown_code():
    assert lookup_anchor_error("0") is None


def test_shared_code_differs_between_tables():
    assert lookup_metadata_error("64") == "TokenCloseFailed: Token close failed"
    assert lookup_anchor_error("64") == (
        "InstructionMissing: 8 byte instruction identifier not provided"
    )


def test_metadata_codes_are_contiguous():
    count = len(METADATA_ERRORS)
    found = [lookup_metadata_error(format(code, "X")) for code in range(count)]
    assert all(message is not None for message in found)
    assert lookup_metadata_error(format(count, "X")) is None


@pytest.mark.parametrize("table", [METADATA_ERRORS, ANCHOR_ERRORS])
def test_keys_are_upper_hex_and_roundtrip(table):
    for key in table:
        assert HEX_KEY.match(key)
        assert format(int(key, 16), "X") == key


@pytest.mark.parametrize(
    "table, lookup",
    [(METADATA_ERRORS, lookup_metadata_error), (ANCHOR_ERRORS, lookup_anchor_error)],
)
def test_every_entry_reachable_in_lower_case(table, lookup):
    for key, message in table.items():
        assert lookup(key.lower()) == message
        assert message.split(":")[0].isidentifier()


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        METADATA_ERRORS["84"] = "x"  # type: ignore[index]
    assert lookup_metadata_error("84") is None