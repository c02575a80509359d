"""JSON-RPC access, base58 keys and custom program error lookup."""

from __future__ import annotations

import base64
import re
import string
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence, Tuple

import requests

from .errors_metadata import lookup_anchor_error, lookup_metadata_error
from .errors_programs import ProgramDomain, lookup_program_error

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_ALPHABET_INDEX = {char: value for value, char in enumerate(_ALPHABET)}
_MAX_PUBKEY_TEXT = 44
PUBKEY_LENGTH = 32

TOKEN_ACCOUNT_LENGTH = 165
_TOKEN_OWNER = slice(32, 64)
_TOKEN_STATE_OFFSET = 108

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_ENTRY_TAIL = '",\n'
_U64_MASK = (1 << 64) - 1
_I64_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class FoundError:
    """An error message matched to the program that defines it."""

    domain: str
    message: str


class RpcError(Exception):
    """Raised when a JSON-RPC node reports an error or answers malformed."""

    def __init__(self, message: str, code: Optional[int] = None) -> None:
        super().__init__(message)
        self.code = code


class RpcClient:
    """A small synchronous JSON-RPC client for a Solana node."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._session = session if session is not None else requests.Session()

    def send(self, method: str, params: Any) -> Any:
        """Call ``method`` with ``params`` and return the ``result`` member."""
        payload = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}
        response = self._session.post(self.url, json=payload, timeout=self.timeout)
        response.raise_for_status()
        body = response.json()
        if not isinstance(body, Mapping):
            raise RpcError("response is not a JSON object")
        error = body.get("error")
        if error is not None:
            if isinstance(error, Mapping):
                raise RpcError(str(error.get("message", error)), code=error.get("code"))
            raise RpcError(str(error))
        if "result" not in body:
            raise RpcError("response carried no result")
        return body["result"]

    def get_program_accounts(
        self, program_id: str, filters: Sequence[Mapping[str, Any]]
    ) -> List[Tuple[str, bytes]]:
        """Return ``(address, data)`` for every account of ``program_id`` matching ``filters``."""
        config = {
            "encoding": "base64",
            "commitment": "confirmed",
            "filters": list(filters),
        }
        result = self.send("getProgramAccounts", [program_id, config])
        return [
            (entry["pubkey"], _decode_account_data(entry["account"]["data"]))
            for entry in result
        ]

    def get_account_data(self, pubkey: str) -> bytes:
        """Return the raw data of one account; raise RpcError if it does not exist."""
        config = {"encoding": "base64", "commitment": "confirmed"}
        result = self.send("getAccountInfo", [pubkey, config])
        value = result.get("value") if isinstance(result, Mapping) else None
        if value is None:
            raise RpcError(f"Account {pubkey} not found")
        return _decode_account_data(value["data"])


def _decode_account_data(data: Any) -> bytes:
    if isinstance(data, (list, tuple)) and data and isinstance(data[0], str):
        return base64.b64decode(data[0])
    if isinstance(data, str):
        return base64.b64decode(data)
    raise RpcError("account data is not base64 encoded")


def b58encode(data: bytes) -> str:
    """Encode bytes in base58 with the Bitcoin alphabet."""
    number = int.from_bytes(data, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(_ALPHABET[remainder])
    leading_zeros = len(data) - len(data.lstrip(b"\0"))
    return "1" * leading_zeros + "".join(reversed(digits))


def b58decode(text: str) -> bytes:
    """Decode base58 text; raise ValueError on a character outside the alphabet."""
    number = 0
    for char in text:
        try:
            number = number * 58 + _ALPHABET_INDEX[char]
        except KeyError:
            raise ValueError(f"invalid base58 character {char!r}") from None
    leading_ones = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    return b"\0" * leading_ones + body


def parse_pubkey(text: str) -> bytes:
    """Return the 32 bytes of a base58 public key; raise ValueError if it is not one."""
    if len(text) > _MAX_PUBKEY_TEXT:
        raise ValueError(f"Invalid public key: {text}")
    try:
        raw = b58decode(text)
    except ValueError:
        raise ValueError(f"Invalid public key: {text}") from None
    if len(raw) != PUBKEY_LENGTH:
        raise ValueError(f"Invalid public key: {text}")
    return raw


def generate_phf_map_var(var_name: str) -> str:
    """Return the opening line of a generated error table named ``var_name``."""
    return (
        f"pub static {var_name}: phf::Map<&'static str, &'static str> = phf_map! {{\n"
    )


def _ascii_upper(text: str) -> str:
    return text.translate(_ASCII_UPPER)


def _capitalize_word(word: str) -> str:
    if not word:
        raise ValueError("Malformed file name")
    return _ascii_upper(word[:1]) + word[1:]


def _parse_i64(text: str) -> int:
    text = text.strip()
    if not _I64_PATTERN.fullmatch(text):
        raise ValueError(f"invalid error number: {text!r}")
    value = int(text)
    if not -(1 << 63) <= value < (1 << 63):
        raise ValueError(f"error number out of range: {text!r}")
    return value


def convert_to_wtf_error(file_name: str, file_contents: str) -> str:
    """Turn an error enum source file into a generated error table.

    Each variant becomes an entry keyed by its upper-case hex code; a message
    attribute directly above a variant is appended after its name.
    """
    words = file_name.replace(".rs", "").replace("-", " ").split(" ")
    capitalized = "_".join(_ascii_upper(word) for word in words)

    parts = [generate_phf_map_var(capitalized)]
    is_anchor = "anchor" in file_name

    if is_anchor:
        number = 100
    elif "#[msg" in file_contents:
        number = 6000
    else:
        number = 0

    if is_anchor:
        enum_name = "ErrorCode"
    elif capitalized == "CANDY_CORE_ERROR":
        enum_name = "CandyError"
    else:
        enum_name = "".join(_capitalize_word(word) for word in words)

    index = file_contents.find(enum_name)
    if index < 0:
        raise ValueError("Could not find Error enum")

    start = index + len(enum_name) + 2
    if start > len(file_contents):
        raise ValueError("Malformed Error enum")
    body = file_contents[start:].strip()
    if "}" not in body:
        raise ValueError("Malformed Error enum")

    pending = _ENTRY_TAIL
    for raw_line in body.split("\n"):
        line = raw_line.strip()

        if line.startswith("}"):
            break
        if not line or line.startswith("/"):
            continue

        if (
            not line.startswith("#[")
            and not line.startswith('"')
            and not line.endswith('"')
            and not line.endswith(")]")
        ):
            comma = line.find(",")
            if comma < 0:
                raise ValueError("Malformed Error enum")
            variant = line[:comma]
            if "=" in variant:
                pieces = variant.split("=")
                variant = pieces[0].strip()
                number = _parse_i64(pieces[1])
            pending = f'    "{number & _U64_MASK:X}" => "{variant}{pending}'
        elif line.startswith("#[") and line.endswith(")]"):
            message = (
                line.replace("#[", "")
                .replace('error("', "")
                .replace('msg("', "")
                .replace('")]', "")
            )
            pending = f': {message}",\n'

        if "=>" in pending:
            parts.append(pending)
            number += 1
            pending = _ENTRY_TAIL

    parts.append("};\n\n")
    return "".join(parts)


def find_errors(hex_code: str) -> List[FoundError]:
    """Return every known error with this hex code, one per program that defines it."""
    code = hex_code.upper()
    found: List[FoundError] = []

    anchor = lookup_anchor_error(code)
    if anchor is not None:
        found.append(FoundError("Anchor Program", anchor))

    metadata = lookup_metadata_error(code)
    if metadata is not None:
        found.append(FoundError("Token Metadata", metadata))

    for domain in (
        ProgramDomain.AUCTION_HOUSE,
        ProgramDomain.AUCTIONEER,
        ProgramDomain.CANDY_MACHINE,
        ProgramDomain.CANDY_CORE,
        ProgramDomain.CANDY_GUARD,
    ):
        message = lookup_program_error(domain, code)
        if message is not None:
            found.append(FoundError(domain.value, message))

    return found


def get_largest_token_account_owner(client: RpcClient, mint: str) -> str:
    """Return the wallet holding the single token of ``mint``.

    Raises ValueError unless exactly one token account holds exactly one token.
    """
    parse_pubkey(mint)
    result = client.send("getTokenLargestAccounts", [mint, {"commitment": "confirmed"}])
    holders = [account for account in result["value"] if int(account["amount"]) == 1]

    if len(holders) > 1:
        raise ValueError(
            f"Mint account {mint} had more than one token account with 1 token"
        )
    if not holders:
        raise ValueError(f"Mint account {mint} had zero token accounts with 1 token")

    token_account = holders[0]["address"]
    parse_pubkey(token_account)
    data = client.get_account_data(token_account)

    if len(data) != TOKEN_ACCOUNT_LENGTH:
        raise ValueError(f"Token account {token_account} has invalid data length")
    if data[_TOKEN_STATE_OFFSET] == 0:
        raise ValueError(f"Token account {token_account} is not initialized")

    return b58encode(data[_TOKEN_OWNER])