"""Queries against the TheIndex.io JSON-RPC indexer."""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import requests

from .snapshot_data import GetMintsArgs, Indexer, Method, NftsByCreatorArgs
from .spinner import create_alt_spinner, create_spinner
from .utils import RpcError

THE_INDEX_MAINNET = "https://rpc.theindex.io/mainnet-beta"
THE_INDEX_ROOT = "https://rpc.theindex.io"
TOKEN_METADATA_PROGRAM_ID = "metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s"
SPL_TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"

_TIMEOUT = 60.0
_FETCH_MESSAGE = "Fetching data from TheIndex.io. . ."
_METHOD_NAMES = {
    Method.CREATOR: "getNFTsByCreator",
    Method.COLLECTION: "getNFTsByCollection",
}


def _field(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except (KeyError, TypeError):
        raise ValueError(f"missing field `{key}`") from None


def jrpc_request(method: str, params: Any) -> Dict[str, Any]:
    """Build a JSON-RPC 2.0 request body."""
    return {"method": method, "jsonrpc": "2.0", "params": params, "id": 1}


@dataclass(frozen=True)
class IndexIoAccount:
    data: Any
    executable: bool
    lamports: int
    owner: str
    rent_epoch: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "IndexIoAccount":
        return cls(
            data=_field(data, "data"),
            executable=bool(_field(data, "executable")),
            lamports=int(_field(data, "lamports")),
            owner=str(_field(data, "owner")),
            rent_epoch=int(_field(data, "rentEpoch")),
        )

    def decoded_data(self) -> bytes:
        """Return the account data, which the indexer sends base64 encoded."""
        if (
            isinstance(self.data, (list, tuple))
            and self.data
            and isinstance(self.data[0], str)
        ):
            return base64.b64decode(self.data[0])
        raise ValueError("account data is not a base64 encoded array")


@dataclass(frozen=True)
class GPAResult:
    pubkey: str
    account: IndexIoAccount

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GPAResult":
        return cls(
            pubkey=str(_field(data, "pubkey")),
            account=IndexIoAccount.from_dict(_field(data, "account")),
        )


@dataclass(frozen=True)
class LargestAccount:
    address: str
    amount: str
    decimals: int
    ui_amount: Optional[float]
    ui_amount_string: str


def _largest_account(data: Mapping[str, Any]) -> LargestAccount:
    ui_amount = _field(data, "uiAmount")
    return LargestAccount(
        address=str(_field(data, "address")),
        amount=str(_field(data, "amount")),
        decimals=int(_field(data, "decimals")),
        ui_amount=None if ui_amount is None else float(ui_amount),
        ui_amount_string=str(_field(data, "uiAmountString")),
    )


@dataclass(frozen=True)
class TLAResult:
    """The answer to a largest-token-accounts query."""

    slot: int
    value: List[LargestAccount]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TLAResult":
        context = _field(data, "context")
        return cls(
            slot=int(_field(context, "slot")),
            value=[_largest_account(entry) for entry in _field(data, "value")],
        )


def _post(url: str, payload: Mapping[str, Any]) -> Mapping[str, Any]:
    response = requests.post(url, json=payload, timeout=_TIMEOUT)
    response.raise_for_status()
    body = response.json()
    if not isinstance(body, Mapping):
        raise RpcError("response is not a JSON object")
    error = body.get("error")
    if error is not None:
        if isinstance(error, Mapping):
            raise RpcError(str(error.get("message", error)), code=error.get("code"))
        raise RpcError(str(error))
    return body


def _result(body: Mapping[str, Any]) -> Any:
    if "result" not in body:
        raise RpcError("response carried no result")
    return body["result"]


def _mainnet_url(api_key: str) -> str:
    return f"{THE_INDEX_MAINNET}/{api_key}"


def _write_json(path: Path, value: Any) -> None:
    with path.open("w", encoding="utf-8") as handle:
        json.dump(value, handle, indent=2)


def get_mints(args: GetMintsArgs) -> Path:
    """Write the sorted mints of a creator or collection to a JSON file and return its path."""
    method = Method(args.method)
    indexer = Indexer(args.indexer)
    if len(args.address) < 6:
        raise ValueError(f"address too short: {args.address!r}")

    payload = jrpc_request(_METHOD_NAMES[method], [args.address])
    spinner = create_spinner(_FETCH_MESSAGE)
    try:
        body = _post(_mainnet_url(args.api_key), payload)
    finally:
        spinner.finish()

    mints = sorted(
        str(_field(_field(nft, "metadata"), "mint")) for nft in _result(body)
    )
    prefix = args.address[:6]
    path = Path(args.output) / f"{prefix}_{method.value}_mints_{indexer.value}.json"
    _write_json(path, mints)
    return path


def get_verified_creator_accounts(args: NftsByCreatorArgs) -> List[GPAResult]:
    """Return metadata accounts whose first creator is ``args.creator`` and verified."""
    params = [
        TOKEN_METADATA_PROGRAM_ID,
        {
            "commitment": "finalized",
            "encoding": "base64",
            "filters": [
                {"memcmp": {"offset": 326, "bytes": args.creator}},
                {"memcmp": {"offset": 358, "bytes": "2"}},
            ],
        },
    ]
    payload = jrpc_request("getProgramAccounts", params)
    spinner = create_alt_spinner(_FETCH_MESSAGE)
    try:
        body = _post(_mainnet_url(args.api_key), payload)
    finally:
        spinner.finish()
    return [GPAResult.from_dict(entry) for entry in _result(body)]


def get_holder_token_accounts(api_key: str, mint_account: str) -> List[GPAResult]:
    """Return every token account of ``mint_account``."""
    params = [
        SPL_TOKEN_PROGRAM_ID,
        {
            "commitment": "finalized",
            "encoding": "base64",
            "filters": [
                {"memcmp": {"offset": 0, "bytes": mint_account}},
                {"dataSize": 165},
            ],
        },
    ]
    body = _post(_mainnet_url(api_key), jrpc_request("getProgramAccounts", params))
    return [GPAResult.from_dict(entry) for entry in _result(body)]


def get_token_largest_accounts(mint_account: str) -> TLAResult:
    """Return the largest token accounts of ``mint_account``."""
    body = _post(THE_INDEX_ROOT, jrpc_request("getTokenLargestAccounts", [mint_account]))
    return TLAResult.from_dict(body.get("result", body))