"""SCALE decoding, Rust type-name handling and a JSON-RPC client for Substrate-style chains."""

__version__ = "0.1.0"