"""Snapshots of mints and holders built from indexer queries."""

from __future__ import annotations

import json
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, List, Union

from . import theindexio
from .snapshot_data import PARALLEL_LIMIT, GetMintsArgs, Holder, Indexer, NftsByCreatorArgs
from .snapshot_rpc import metadata_mint, parse_owner, parse_token_account, parse_token_amount
from .spinner import create_alt_spinner
from .theindexio import GPAResult

log = logging.getLogger(__name__)


def _require_theindexio(indexer: Union[Indexer, str], action: str) -> None:
    if Indexer(indexer) is not Indexer.THE_INDEX_IO:
        raise ValueError(f"{action} is not supported with the {Indexer(indexer)} indexer")


def _write_json(path: Path, value: Any) -> None:
    with path.open("w", encoding="utf-8") as handle:
        json.dump(value, handle, indent=2)


def get_holder_from_gpa_result(api_key: str, result: GPAResult) -> Holder:
    """Return the wallet currently holding the NFT of one metadata account.

    Raises ValueError when the metadata cannot be read, its token accounts
    cannot be fetched, or no token account holds exactly one token.
    """
    data = result.account.decoded_data()
    try:
        mint = metadata_mint(data)
    except ValueError:
        raise ValueError(f"Failed to parse metadata for account {result.pubkey}") from None

    try:
        token_results = theindexio.get_holder_token_accounts(api_key, mint)
    except Exception as exc:
        raise ValueError(f"Mint Account {mint} has no token accounts: {exc!r}") from exc

    for token_result in token_results:
        token_data = token_result.account.decoded_data()
        try:
            parsed = parse_token_account(token_data).to_parsed()
        except ValueError as exc:
            log.error("Account %s has no data: %s", token_result.pubkey, exc)
            continue

        try:
            amount = parse_token_amount(parsed)
        except ValueError as exc:
            log.error("Account %s has no amount: %s", token_result.pubkey, exc)
            continue

        # Only the current holder of the NFT has exactly one token.
        if amount != 1:
            continue
        try:
            owner_wallet = parse_owner(parsed)
        except ValueError as exc:
            log.error("Account %s has no owner: %s", token_result.pubkey, exc)
            continue
        return Holder(
            owner_wallet=owner_wallet,
            mint_account=mint,
            metadata_account=result.pubkey,
            associated_token_address=token_result.pubkey,
        )

    raise ValueError(f"No holder found for mint {mint}")


def snapshot_indexed_mints(args: NftsByCreatorArgs) -> Path:
    """Write the sorted mints of a verified creator to a JSON file and return its path."""
    _require_theindexio(args.indexer, "Indexed mint snapshots")
    results = theindexio.get_verified_creator_accounts(args)

    mints: List[str] = []
    for result in results:
        data = result.account.decoded_data()
        try:
            mints.append(metadata_mint(data))
        except ValueError:
            log.error("Failed to parse metadata for account %s", result.pubkey)

    mints.sort()
    path = Path(args.output) / f"{args.creator}_mint_accounts.json"
    _write_json(path, mints)
    return path


def snapshot_indexed_holders(args: NftsByCreatorArgs) -> Path:
    """Write the holders of a verified creator's NFTs to a JSON file and return its path.

    Mints whose holder could not be found are listed in a separate
    ``<creator>_errors.json`` file next to it.
    """
    _require_theindexio(args.indexer, "Indexed holder snapshots")
    md_results = theindexio.get_verified_creator_accounts(args)
    print(f"Found {len(md_results)} mints")

    outcomes: List[Union[Holder, Exception]] = []
    with ThreadPoolExecutor(max_workers=PARALLEL_LIMIT) as pool:
        spinner = create_alt_spinner("Sending network requests....")
        futures = [
            pool.submit(get_holder_from_gpa_result, args.api_key, md) for md in md_results
        ]
        spinner.finish()
        print(f"Tasks created: {len(futures)}")

        spinner = create_alt_spinner("Awaiting results....")
        for future in futures:
            try:
                outcomes.append(future.result())
            except Exception as exc:
                outcomes.append(exc)
        spinner.finish()

    holders = [outcome for outcome in outcomes if isinstance(outcome, Holder)]
    failures = [outcome for outcome in outcomes if isinstance(outcome, Exception)]
    print(f"Found {len(holders)} successful results")
    print(f"Found {len(failures)} failed results")

    output = Path(args.output)
    if failures:
        print(f"Failed results: {failures[0]!r}")
        _write_json(output / f"{args.creator}_errors.json", [str(exc) for exc in failures])

    print(f"Found {len(holders)} holders")
    path = output / f"{args.creator}_holders.json"
    _write_json(path, [holder.to_dict() for holder in holders])
    return path


def snapshot_mints_by_creator(args: GetMintsArgs) -> Path:
    """Write the mints an indexer lists for an address to a JSON file and return its path."""
    _require_theindexio(args.indexer, "Mint snapshots")
    return theindexio.get_mints(args)


def snapshot_mints_by_collection(args: GetMintsArgs) -> Path:
    """Write the mints an indexer lists for a collection to a JSON file and return its path."""
    _require_theindexio(args.indexer, "Mint snapshots")
    return theindexio.get_mints(args)