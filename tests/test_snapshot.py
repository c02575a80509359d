import base64
import json

import pytest
import responses

from mplkit.snapshot import (
    get_holder_from_gpa_result,
    snapshot_indexed_holders,
    snapshot_indexed_mints,
    snapshot_mints_by_collection,
    snapshot_mints_by_creator,
)
from mplkit.snapshot_data import GetMintsArgs, Holder, Indexer, Method, NftsByCreatorArgs
from mplkit.theindexio import (
    SPL_TOKEN_PROGRAM_ID,
    THE_INDEX_MAINNET,
    TOKEN_METADATA_PROGRAM_ID,
    GPAResult,
)
from mplkit.utils import b58encode

API_KEY = "placeholder"
URL = f"{THE_INDEX_MAINNET}/{API_KEY}"


def key(n):
    return bytes([n]) * 32


def addr(n):
    return b58encode(key(n))


def metadata_bytes(mint_n):
    return b"\x04" + key(90) + key(mint_n) + b"\x00" * 20


def token_bytes(mint_n, owner_n, amount, state=1):
    data = bytearray(165)
    data[0:32] = key(mint_n)
    data[32:64] = key(owner_n)
    data[64:72] = amount.to_bytes(8, "little")
    data[108] = state
    return bytes(data)


def account_json(data, owner):
    return {
        "data": [base64.b64encode(data).decode(), "base64"],
        "executable": False,
        "lamports": 1,
        "owner": owner,
        "rentEpoch": 0,
    }


def gpa_entry(pubkey, data, owner):
    return {"pubkey": pubkey, "account": account_json(data, owner)}


def install(rsps, metadata_entries, token_entries_by_mint):
    def callback(request):
        body = json.loads(request.body)
        filters = body["params"][1]["filters"]
        memcmp = filters[0]["memcmp"]
        if memcmp["offset"] == 326:
            result = metadata_entries
        else:
            result = token_entries_by_mint.get(memcmp["bytes"], [])
        return 200, {}, json.dumps({"jsonrpc": "2.0", "id": 1, "result": result})

    rsps.add_callback(responses.POST, URL, callback=callback, content_type="application/json")


def md_result(pubkey, mint_n):
    return GPAResult.from_dict(gpa_entry(pubkey, metadata_bytes(mint_n), TOKEN_METADATA_PROGRAM_ID))


def test_holder_found_for_single_token_account():
    with responses.RequestsMock() as rsps:
        install(
            rsps,
            [],
            {addr(1): [gpa_entry(addr(20), token_bytes(1, 30, 1), SPL_TOKEN_PROGRAM_ID)]},
        )
        holder = get_holder_from_gpa_result(API_KEY, md_result(addr(10), 1))
    assert holder == Holder(
        owner_wallet=addr(30),
        mint_account=addr(1),
        metadata_account=addr(10),
        associated_token_address=addr(20),
    )


def test_holder_skips_empty_and_malformed_accounts():
    tokens = [
        gpa_entry(addr(21), b"\x00" * 10, SPL_TOKEN_PROGRAM_ID),
        gpa_entry(addr(22), token_bytes(1, 31, 0), SPL_TOKEN_PROGRAM_ID),
        gpa_entry(addr(23), token_bytes(1, 32, 1), SPL_TOKEN_PROGRAM_ID),
    ]
    with responses.RequestsMock() as rsps:
        install(rsps, [], {addr(1): tokens})
        holder = get_holder_from_gpa_result(API_KEY, md_result(addr(10), 1))
    assert holder.owner_wallet == addr(32)
    assert holder.associated_token_address == addr(23)


def test_no_holder_raises():
    with responses.RequestsMock() as rsps:
        install(
            rsps,
            [],
            {addr(1): [gpa_entry(addr(22), token_bytes(1, 31, 0), SPL_TOKEN_PROGRAM_ID)]},
        )
        with pytest.raises(ValueError, match="No holder found for mint"):
            get_holder_from_gpa_result(API_KEY, md_result(addr(10), 1))


def test_unreadable_metadata_raises():
    bad = GPAResult.from_dict(gpa_entry(addr(10), b"\x04\x01", TOKEN_METADATA_PROGRAM_ID))
    with pytest.raises(ValueError, match="Failed to parse metadata"):
        get_holder_from_gpa_result(API_KEY, bad)


def test_snapshot_indexed_mints_sorted_and_skips_bad(tmp_path):
    creator = addr(50)
    entries = [
        gpa_entry(addr(11), metadata_bytes(3), TOKEN_METADATA_PROGRAM_ID),
        gpa_entry(addr(12), b"\x04", TOKEN_METADATA_PROGRAM_ID),
        gpa_entry(addr(13), metadata_bytes(2), TOKEN_METADATA_PROGRAM_ID),
    ]
    args = NftsByCreatorArgs(creator, API_KEY, Indexer.THE_INDEX_IO, str(tmp_path))
    with responses.RequestsMock() as rsps:
        install(rsps, entries, {})
        path = snapshot_indexed_mints(args)
    assert path == tmp_path / f"{creator}_mint_accounts.json"
    assert json.loads(path.read_text()) == sorted([addr(3), addr(2)])


def test_snapshot_indexed_holders_writes_holders_and_errors(tmp_path):
    creator = addr(50)
    entries = [
        gpa_entry(addr(11), metadata_bytes(1), TOKEN_METADATA_PROGRAM_ID),
        gpa_entry(addr(12), metadata_bytes(2), TOKEN_METADATA_PROGRAM_ID),
    ]
    tokens = {addr(1): [gpa_entry(addr(20), token_bytes(1, 30, 1), SPL_TOKEN_PROGRAM_ID)]}
    args = NftsByCreatorArgs(creator, API_KEY, Indexer.THE_INDEX_IO, str(tmp_path))
    with responses.RequestsMock() as rsps:
        install(rsps, entries, tokens)
        path = snapshot_indexed_holders(args)

    assert path == tmp_path / f"{creator}_holders.json"
    assert json.loads(path.read_text()) == [
        {
            "owner_wallet": addr(30),
            "mint_account": addr(1),
            "metadata_account": addr(11),
            "associated_token_address": addr(20),
        }
    ]
    errors = json.loads((tmp_path / f"{creator}_errors.json").read_text())
    assert errors == [f"No holder found for mint {addr(2)}"]


def test_indexed_snapshots_reject_helius(tmp_path):
    args = NftsByCreatorArgs(addr(50), API_KEY, Indexer.HELIUS, str(tmp_path))
    with pytest.raises(ValueError):
        snapshot_indexed_mints(args)
    with pytest.raises(ValueError):
        snapshot_indexed_holders(args)


@pytest.mark.parametrize(
    "func, method",
    [
        (snapshot_mints_by_creator, Method.CREATOR),
        (snapshot_mints_by_collection, Method.COLLECTION),
    ],
)
def test_snapshot_mints_via_theindexio(tmp_path, func, method):
    address = addr(60)
    args = GetMintsArgs(address, method, API_KEY, Indexer.THE_INDEX_IO, str(tmp_path))
    body = {
        "jsonrpc": "2.0",
        "id": 1,
        "result": [{"metadata": {"mint": addr(5)}}, {"metadata": {"mint": addr(4)}}],
    }
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, URL, json=body)
        path = func(args)
    assert path.name == f"{address[:6]}_{method.value}_mints_theindexio.json"
    assert json.loads(path.read_text()) == sorted([addr(5), addr(4)])


def test_snapshot_mints_rejects_helius(tmp_path):
    args = GetMintsArgs(addr(60), Method.CREATOR, API_KEY, Indexer.HELIUS, str(tmp_path))
    with pytest.raises(ValueError):
        snapshot_mints_by_creator(args)
    with pytest.raises(ValueError):
        snapshot_mints_by_collection(args)