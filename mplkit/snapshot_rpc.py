"""Snapshot helpers that query a Solana node directly over JSON-RPC."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Tuple

from .snapshot_data import (
    CandyMachineAccount,
    CandyMachineProgramAccounts,
    ConfigAccount,
)
from .theindexio import SPL_TOKEN_PROGRAM_ID
from .utils import (
    PUBKEY_LENGTH,
    TOKEN_ACCOUNT_LENGTH,
    RpcClient,
    b58encode,
    parse_pubkey,
)

CANDY_MACHINE_ACCOUNT_LENGTH = 529
CM_UPDATE_AUTHORITY_OFFSET = 8

_METADATA_MINT = slice(1 + PUBKEY_LENGTH, 1 + 2 * PUBKEY_LENGTH)

_TOKEN_MINT = slice(0, 32)
_TOKEN_OWNER = slice(32, 64)
_TOKEN_AMOUNT = slice(64, 72)
_TOKEN_STATE = 108
_TOKEN_IS_NATIVE_TAG = slice(109, 113)
_TOKEN_STATES = {1: "initialized", 2: "frozen"}

_U64_PATTERN = re.compile(r"[0-9]+")
_U64_MAX = (1 << 64) - 1


@dataclass(frozen=True)
class TokenAccountInfo:
    """The fields of an SPL token account that a holder snapshot needs."""

    mint: str
    owner: str
    amount: int
    state: str
    is_native: bool

    def to_parsed(self) -> Dict[str, Any]:
        """Return the account in the JSON shape a node's parsed encoding uses."""
        return {
            "type": "account",
            "info": {
                "mint": self.mint,
                "owner": self.owner,
                "tokenAmount": {
                    "amount": str(self.amount),
                    "decimals": 0,
                    "uiAmount": float(self.amount),
                    "uiAmountString": str(self.amount),
                },
                "state": self.state,
                "isNative": self.is_native,
            },
        }


def metadata_mint(data: bytes) -> str:
    """Return the mint address stored in a token metadata account."""
    if len(data) < _METADATA_MINT.stop:
        raise ValueError("metadata account data is too short")
    return b58encode(data[_METADATA_MINT])


def parse_token_account(data: bytes) -> TokenAccountInfo:
    """Decode the raw data of an SPL token account."""
    if len(data) != TOKEN_ACCOUNT_LENGTH:
        raise ValueError(
            f"token account data must be {TOKEN_ACCOUNT_LENGTH} bytes, got {len(data)}"
        )
    state_byte = data[_TOKEN_STATE]
    if state_byte == 0:
        raise ValueError("token account is not initialized")
    try:
        state = _TOKEN_STATES[state_byte]
    except KeyError:
        raise ValueError(f"invalid token account state {state_byte}") from None
    return TokenAccountInfo(
        mint=b58encode(data[_TOKEN_MINT]),
        owner=b58encode(data[_TOKEN_OWNER]),
        amount=int.from_bytes(data[_TOKEN_AMOUNT], "little"),
        state=state,
        is_native=int.from_bytes(data[_TOKEN_IS_NATIVE_TAG], "little") != 0,
    )


def _member(value: Any, key: str, message: str) -> Any:
    if not isinstance(value, Mapping) or key not in value:
        raise ValueError(message)
    return value[key]


def parse_token_amount(parsed: Mapping[str, Any]) -> int:
    """Return the raw token amount of a parsed token account."""
    info = _member(parsed, "info", "Invalid data account!")
    token_amount = _member(info, "tokenAmount", "Invalid token amount!")
    amount = _member(token_amount, "amount", "Invalid token amount!")
    if not isinstance(amount, str):
        raise ValueError("Invalid token amount!")
    if not _U64_PATTERN.fullmatch(amount) or int(amount) > _U64_MAX:
        raise ValueError(f"invalid digit found in amount: {amount!r}")
    return int(amount)


def parse_owner(parsed: Mapping[str, Any]) -> str:
    """Return the owner wallet of a parsed token account."""
    info = _member(parsed, "info", "Invalid owner account!")
    owner = _member(info, "owner", "Invalid owner account!")
    if not isinstance(owner, str):
        raise ValueError("Invalid owner amount!")
    return owner


def classify_cm_accounts(
    accounts: Iterable[Tuple[str, bytes]],
) -> CandyMachineProgramAccounts:
    """Split candy machine program accounts by size.

    Candy machine accounts have a fixed length; config accounts do not.
    """
    result = CandyMachineProgramAccounts()
    for address, data in accounts:
        length = len(data)
        if length == CANDY_MACHINE_ACCOUNT_LENGTH:
            result.candy_machine_accounts.append(CandyMachineAccount(address, length))
        else:
            result.config_accounts.append(ConfigAccount(address, length))
    return result


def snapshot_cm_accounts(
    client: RpcClient, update_authority: str, output: str, program_id: str
) -> Path:
    """Write the candy machine accounts of an update authority to a JSON file.

    Returns the path of the file written.
    """
    parse_pubkey(program_id)
    authority = b58encode(parse_pubkey(update_authority))
    filters = [
        {"memcmp": {"offset": CM_UPDATE_AUTHORITY_OFFSET, "bytes": authority}}
    ]
    accounts = client.get_program_accounts(program_id, filters)
    snapshot = classify_cm_accounts(accounts)

    path = Path(output) / f"{update_authority}_accounts.json"
    with path.open("w", encoding="utf-8") as handle:
        json.dump(snapshot.to_dict(), handle, indent=2)
    return path


def get_holder_token_accounts(
    client: RpcClient, mint_account: str
) -> List[Tuple[str, bytes]]:
    """Return ``(address, data)`` for every token account of ``mint_account``."""
    mint = b58encode(parse_pubkey(mint_account))
    filters = [
        {"memcmp": {"offset": 0, "bytes": mint}},
        {"dataSize": TOKEN_ACCOUNT_LENGTH},
    ]
    return client.get_program_accounts(SPL_TOKEN_PROGRAM_ID, filters)