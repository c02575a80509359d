# mplkit

A small library for working with NFT token metadata on Solana.

It covers three jobs:

- **Error lookup.** Turn a hexadecimal program error code into a readable
  name and message. The tables cover Token Metadata, Anchor, Auction House,
  Auctioneer, Candy Machine, Candy Core and Candy Guard.
- **Snapshots.** Gather mint lists, current holders and candy machine
  accounts, either from an RPC node or through the TheIndex.io indexer.
  Results are written as JSON files indented by two spaces.
- **Helpers.** Base58 encoding, public-key parsing, a small JSON-RPC client,
  a terminal spinner, and a generator that turns the source text of an error
  enum into a lookup-table declaration.

Install with `pip install .`; the only runtime dependency is `requests`.

## Looking up an error code

```python
from mplkit.utils import find_errors

for found in find_errors("1770"):
    print(f"{found.domain}: {found.message}")
```

The same code can mean different things in different programs, so
`find_errors` returns a list of `FoundError` records, one per program that
defines the code, each with its `domain` and `message`. An empty list means
the code is unknown.

To ask one table only:

- `mplkit.errors_metadata.lookup_metadata_error(hex_code)`
- `mplkit.errors_metadata.lookup_anchor_error(hex_code)`
- `mplkit.errors_programs.lookup_program_error(domain, hex_code)`, where
  `domain` is a `ProgramDomain` member or its display name, such as
  `"Candy Guard"`. An unknown name raises `ValueError`.

Each returns the `"Name: message"` string, or `None`. Codes are matched
without regard to case, so `"177a"` and `"177A"` give the same result.

## Talking to an RPC node

`mplkit.utils.RpcClient(url)` sends JSON-RPC 2.0 requests:

- `send(method, params)` returns the `result` member and raises `RpcError`
  when the node answers with an error or without a result.
- `get_program_accounts(program_id, filters)` returns `(address, data)`
  pairs with the account data decoded from base64.
- `get_account_data(pubkey)` returns one account's raw data and raises
  `RpcError` if the account does not exist.

`get_largest_token_account_owner(client, mint)` returns the wallet that holds
the single token of a mint. It raises `ValueError` unless exactly one token
account holds exactly one token.

`b58encode`, `b58decode` and `parse_pubkey` handle base58 text;
`parse_pubkey` returns the 32 key bytes or raises `ValueError`.

## Snapshots from an RPC node

`mplkit.snapshot_rpc` works against an `RpcClient`:

- `snapshot_cm_accounts(client, update_authority, output, program_id)`
  writes `<output>/<update_authority>_accounts.json` and returns its path.
  Accounts of 529 bytes are listed as candy machine accounts, all others as
  config accounts. `classify_cm_accounts(accounts)` does the splitting alone.
- `get_holder_token_accounts(client, mint_account)` lists the token accounts
  of a mint as `(address, data)` pairs.
- `parse_token_account(data)` decodes a 165-byte token account into a
  `TokenAccountInfo`; its `to_parsed()` gives the JSON shape a node's parsed
  encoding uses, from which `parse_token_amount` and `parse_owner` read the
  amount and the owner.
- `metadata_mint(data)` reads the mint address out of a metadata account.

## Snapshots through an indexer

`mplkit.snapshot` queries the indexer and writes JSON files into an output
directory, returning the path of the main file:

- `snapshot_mints_by_creator(args)` and `snapshot_mints_by_collection(args)`
  take a `GetMintsArgs` and write the sorted mint addresses to
  `<first 6 characters of address>_<method>_mints_<indexer>.json`.
- `snapshot_indexed_mints(args)` takes an `NftsByCreatorArgs` and writes the
  sorted mints of a verified first creator to `<creator>_mint_accounts.json`.
- `snapshot_indexed_holders(args)` takes an `NftsByCreatorArgs`, looks up the
  holder of every mint in parallel, and writes `<creator>_holders.json`. Mints
  whose holder could not be found are listed in `<creator>_errors.json`.

Only `Indexer.THE_INDEX_IO` is supported; passing `Indexer.HELIUS` raises
`ValueError`. The lower-level queries live in `mplkit.theindexio`
(`get_mints`, `get_verified_creator_accounts`, `get_holder_token_accounts`,
`get_token_largest_accounts`).

The indexer needs an API key. Pass your own in place of the placeholder:

```python
from mplkit.snapshot import snapshot_indexed_holders
from mplkit.snapshot_data import Indexer, NftsByCreatorArgs

args = NftsByCreatorArgs(
    creator="<creator address>",
    api_key="placeholder",
    indexer=Indexer.THE_INDEX_IO,
    output="snapshots",
)
path = snapshot_indexed_holders(args)
```

## Spinner

```python
from mplkit.spinner import create_spinner

spinner = create_spinner("Getting accounts...")
# ... long-running work ...
spinner.finish_with_message("Getting accounts...Done!")
```

`create_spinner` and `create_alt_spinner` return a `Spinner` that is already
running; `create_alt_spinner` shows a bracketed bar instead of arrows. A
`Spinner` also works as a context manager. It draws only when its stream
(standard error by default) is a terminal.

## Building error tables

`convert_to_wtf_error(file_name, file_contents)` reads the text of an error
enum and returns a static map declaration keyed by upper-case hex codes.
Numbering starts at 100 for Anchor files, at 6000 for enums that carry
`#[msg(...)]` attributes, and at 0 otherwise; an explicit `= N` discriminant
resets the count. A missing or malformed enum raises `ValueError`.
`generate_phf_map_var(var_name)` returns the declaration's opening line.

## What this package does not do

- It has no command-line program; everything is called from Python.
- It does not build, sign or send transactions, so it cannot mint, burn,
  sign, verify or update metadata, or manage keypairs.
- It does not decode full metadata records; from a metadata account it reads
  only the mint address.
- It does not assemble a holder or mint snapshot from an RPC node on its
  own; `mplkit.snapshot_rpc` provides the building blocks for that.