"""Shapes of the JSON objects that chain nodes return."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping


@dataclass
class BlockHeader:
    """A block header with its hashes as hex strings."""

    parent_hash: str = ""
    number: str = ""
    state_root: str = ""
    extrinsics_root: str = ""
    digest_logs: List[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "BlockHeader":
        """Build a header from its decoded JSON object."""
        digest = data.get("digest") or {}
        return cls(
            parent_hash=data.get("parentHash") or "",
            number=data.get("number") or "",
            state_root=data.get("stateRoot") or "",
            extrinsics_root=data.get("extrinsicsRoot") or "",
            digest_logs=list(digest.get("logs") or []),
        )


@dataclass
class Block:
    """A block: its header and its extrinsics as hex strings."""

    header: BlockHeader = field(default_factory=BlockHeader)
    extrinsics: List[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Block":
        """Build a block from its decoded JSON object."""
        return cls(
            header=BlockHeader.from_json(data.get("header") or {}),
            extrinsics=list(data.get("extrinsics") or []),
        )


@dataclass
class SignedBlock:
    """The wrapper object returned when a block is fetched."""

    block: Block = field(default_factory=Block)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "SignedBlock":
        """Build a signed block from its decoded JSON object."""
        return cls(block=Block.from_json(data.get("block") or {}))


@dataclass
class RuntimeVersion:
    """The runtime name and version that a node reports."""

    spec_name: str = ""
    impl_name: str = ""
    apis: List[Any] = field(default_factory=list)
    spec_version: int = 0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "RuntimeVersion":
        """Build a runtime version from its decoded JSON object."""
        return cls(
            spec_name=data.get("specName") or "",
            impl_name=data.get("implName") or "",
            apis=list(data.get("apis") or []),
            spec_version=int(data.get("specVersion") or 0),
        )