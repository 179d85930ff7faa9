"""Queries for chain metadata and events built on the RPC client."""

from __future__ import annotations

import binascii
import logging
from dataclasses import dataclass

from submarine.rpc.client import PendingRequest, RpcClient

log = logging.getLogger(__name__)

SYSTEM_EVENT_KEY = "0x26aa394eea5630e07c48ae0c9558cef780d41e5e16056765bc8461851072c9d7"


@dataclass
class ChainMetadata:
    """The metadata version and the bytes that follow it."""

    version: int
    data: bytes


def decode_chain_metadata(pending: PendingRequest) -> ChainMetadata:
    """Decode a ``state_getMetadata`` response into version and payload."""
    try:
        metadata_hex = pending.as_string()
    except Exception as exc:
        raise ValueError(f"metadata hex: {exc}") from exc

    clean_hex = metadata_hex[2:] if metadata_hex.startswith("0x") else metadata_hex
    try:
        raw = binascii.unhexlify(clean_hex)
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"decode metadata hex: {exc}") from exc

    # Four magic bytes ("meta") come first, then the version byte.
    if len(raw) < 5:
        raise ValueError("Metadata is too short to contain a version number.")
    return ChainMetadata(version=raw[4], data=raw[5:])


def get_metadata(client: RpcClient, block_hash: str) -> ChainMetadata:
    """Fetch and decode the metadata at ``block_hash``."""
    pending = client.send("state_getMetadata", [block_hash])
    try:
        return decode_chain_metadata(pending)
    except ValueError as exc:
        raise ValueError(f"get metadata: {exc}") from exc


def get_events(client: RpcClient, block_hash: str) -> bytes:
    """Fetch the raw SCALE-encoded system events at ``block_hash``."""
    pending = client.send("state_getStorage", [SYSTEM_EVENT_KEY, block_hash])
    try:
        events_hex = pending.as_string()
    except Exception as exc:
        raise ValueError(f"Failed to get events: {exc}") from exc
    log.info("Events length: %d", len(events_hex))
    try:
        return binascii.unhexlify(events_hex[2:])
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"decode events hex: {exc}") from exc