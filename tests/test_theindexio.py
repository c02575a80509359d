import base64
import json

import pytest
import responses

from mplkit.snapshot_data import GetMintsArgs, Indexer, Method, NftsByCreatorArgs
from mplkit.theindexio import (
    SPL_TOKEN_PROGRAM_ID,
    THE_INDEX_MAINNET,
    THE_INDEX_ROOT,
    TOKEN_METADATA_PROGRAM_ID,
    GPAResult,
    IndexIoAccount,
    TLAResult,
    get_holder_token_accounts,
    get_mints,
    get_token_largest_accounts,
    get_verified_creator_accounts,
    jrpc_request,
)
from mplkit.utils import RpcError

API_KEY = "placeholder"
MAINNET_URL = f"{THE_INDEX_MAINNET}/{API_KEY}"
CREATOR = "11111111111111111111111111111111"


@pytest.fixture
def rsps():
    with responses.RequestsMock() as mock:
        yield mock


def _account_dict(payload: bytes):
    return {
        "data": [base64.b64encode(payload).decode(), "base64"],
        "executable": False,
        "lamports": 5,
        "owner": TOKEN_METADATA_PROGRAM_ID,
        "rentEpoch": 7,
    }


def _sent_body(mock, index=0):
    return json.loads(mock.calls[index].request.body)


def test_jrpc_request_shape():
    assert jrpc_request("getProgramAccounts", ["x"]) == {
        "method": "getProgramAccounts",
        "jsonrpc": "2.0",
        "params": ["x"],
        "id": 1,
    }


def test_account_from_dict_and_decode():
    account = IndexIoAccount.from_dict(_account_dict(b"payload"))
    assert account.decoded_data() == b"payload"
    assert account.rent_epoch == 7
    assert account.owner == TOKEN_METADATA_PROGRAM_ID


def test_account_with_unencoded_data():
    raw = _account_dict(b"")
    raw["data"] = {"parsed": {}}
    with pytest.raises(ValueError):
        IndexIoAccount.from_dict(raw).decoded_data()


def test_gpa_result_missing_field():
    with pytest.raises(ValueError, match="account"):
        GPAResult.from_dict({"pubkey": CREATOR})


def test_tla_result_from_dict():
    result = TLAResult.from_dict(
        {
            "context": {"slot": 9},
            "value": [
                {
                    "address": CREATOR,
                    "amount": "1",
                    "decimals": 0,
                    "uiAmount": 1.0,
                    "uiAmountString": "1",
                }
            ],
        }
    )
    assert result.slot == 9
    assert [entry.address for entry in result.value] == [CREATOR]
    assert result.value[0].ui_amount == 1.0


def test_get_verified_creator_accounts(rsps):
    rsps.add(
        responses.POST,
        MAINNET_URL,
        json={
            "jsonrpc": "2.0",
            "id": 1,
            "result": [{"pubkey": CREATOR, "account": _account_dict(b"md")}],
        },
    )
    args = NftsByCreatorArgs(
        creator=CREATOR, api_key=API_KEY, indexer=Indexer.THE_INDEX_IO, output="."
    )
    results = get_verified_creator_accounts(args)
    assert [r.pubkey for r in results] == [CREATOR]
    assert results[0].account.decoded_data() == b"md"

    sent = _sent_body(rsps)
    assert sent["method"] == "getProgramAccounts"
    assert sent["params"][0] == TOKEN_METADATA_PROGRAM_ID
    assert sent["params"][1]["filters"] == [
        {"memcmp": {"offset": 326, "bytes": CREATOR}},
        {"memcmp": {"offset": 358, "bytes": "2"}},
    ]


def test_get_holder_token_accounts(rsps):
    rsps.add(
        responses.POST,
        MAINNET_URL,
        json={"jsonrpc": "2.0", "id": 1, "result": []},
    )
    assert get_holder_token_accounts(API_KEY, CREATOR) == []
    sent = _sent_body(rsps)
    assert sent["params"][0] == SPL_TOKEN_PROGRAM_ID
    assert sent["params"][1]["filters"] == [
        {"memcmp": {"offset": 0, "bytes": CREATOR}},
        {"dataSize": 165},
    ]


def test_get_holder_token_accounts_error(rsps):
    rsps.add(
        responses.POST,
        MAINNET_URL,
        json={"jsonrpc": "2.0", "id": 1, "error": {"code": -32000, "message": "busy"}},
    )
    with pytest.raises(RpcError, match="busy"):
        get_holder_token_accounts(API_KEY, CREATOR)


def test_get_mints_writes_sorted_file(rsps, tmp_path):
    rsps.add(
        responses.POST,
        MAINNET_URL,
        json={
            "jsonrpc": "2.0",
            "id": 1,
            "result": [
                {"metadata": {"mint": "mintB"}},
                {"metadata": {"mint": "mintA"}},
            ],
        },
    )
    args = GetMintsArgs(
        address=TOKEN_METADATA_PROGRAM_ID,
        method=Method.COLLECTION,
        api_key=API_KEY,
        indexer=Indexer.THE_INDEX_IO,
        output=str(tmp_path),
    )
    path = get_mints(args)
    assert path.parent == tmp_path
    assert path.name == (
        f"{TOKEN_METADATA_PROGRAM_ID[:6]}_collection_mints_{Indexer.THE_INDEX_IO.value}.json"
    )
    assert json.loads(path.read_text()) == ["mintA", "mintB"]
    sent = _sent_body(rsps)
    assert sent["method"] == "getNFTsByCollection"
    assert sent["params"] == [TOKEN_METADATA_PROGRAM_ID]


def test_get_mints_rejects_short_address(tmp_path):
    args = GetMintsArgs(
        address="abc",
        method=Method.CREATOR,
        api_key=API_KEY,
        indexer=Indexer.THE_INDEX_IO,
        output=str(tmp_path),
    )
    with pytest.raises(ValueError):
        get_mints(args)


def test_get_token_largest_accounts(rsps):
    rsps.add(
        responses.POST,
        THE_INDEX_ROOT,
        json={
            "jsonrpc": "2.0",
            "id": 1,
            "result": {
                "context": {"slot": 3},
                "value": [
                    {
                        "address": CREATOR,
                        "amount": "1",
                        "decimals": 0,
                        "uiAmount": 1.0,
                        "uiAmountString": "1",
                    }
                ],
            },
        },
    )
    result = get_token_largest_accounts(CREATOR)
    assert result.slot == 3
    assert result.value[0].amount == "1"
    assert _sent_body(rsps)["params"] == [CREATOR]