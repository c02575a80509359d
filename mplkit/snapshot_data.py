"""Records and argument sets shared by the snapshot commands."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List

PARALLEL_LIMIT = 50


class Indexer(str, Enum):
    """Third-party indexing services that can answer snapshot queries."""

    HELIUS = "helius"
    THE_INDEX_IO = "theindexio"

    def __str__(self) -> str:
        return self.value


class Method(str, Enum):
    """How mints are selected from an indexer: by creator or by collection."""

    CREATOR = "creator"
    COLLECTION = "collection"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class Holder:
    """The current holder of one NFT; ordered by wallet, then mint."""

    owner_wallet: str
    mint_account: str
    metadata_account: str
    associated_token_address: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class ConfigAccount:
    address: str
    data_len: int


@dataclass(frozen=True)
class CandyMachineAccount:
    address: str
    data_len: int


@dataclass
class CandyMachineProgramAccounts:
    """Candy machine program accounts split into config and machine accounts."""

    config_accounts: List[ConfigAccount] = field(default_factory=list)
    candy_machine_accounts: List[CandyMachineAccount] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class NftsByCreatorArgs:
    creator: str
    api_key: str
    indexer: Indexer
    output: str


@dataclass(frozen=True)
class NftsByCollectionArgs:
    collection: str
    api_key: str
    indexer: Indexer
    output: str


@dataclass(frozen=True)
class GetMintsArgs:
    address: str
    method: Method
    api_key: str
    indexer: Indexer
    output: str