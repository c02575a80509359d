"""Token metadata tooling: error-code lookup, RPC and indexer snapshots, base58 and spinners."""

__version__ = "0.1.0"