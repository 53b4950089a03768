"""Atomic transaction groups and their group id."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

import msgpack
from cryptography.hazmat.primitives import hashes

from .encoding import raw_id
from .error import EmptyTransactionListError, MaxTransactionGroupSizeError
from .transaction import Transaction

MAX_TX_GROUP_SIZE = 16
GROUP_PREFIX = b"TG"


@dataclass
class TxGroup:
    """The list of transaction hashes that make up a group."""

    tx_group_hashes: list[bytes] = field(default_factory=list)

    def to_msgpack(self) -> bytes:
        return msgpack.packb(
            {"txlist": [bytes(h) for h in self.tx_group_hashes]}, use_bin_type=True
        )

    def bytes_to_sign(self) -> bytes:
        """The bytes hashed into the group id: the "TG" prefix and the encoding."""
        return GROUP_PREFIX + self.to_msgpack()


def compute_group_id(txns: Iterable[Transaction]) -> bytes:
    """The group id of the transactions, in the given order."""
    txns = list(txns)
    if not txns:
        raise EmptyTransactionListError()
    if len(txns) > MAX_TX_GROUP_SIZE:
        raise MaxTransactionGroupSizeError(MAX_TX_GROUP_SIZE)
    group = TxGroup([raw_id(txn) for txn in txns])
    digest = hashes.Hash(hashes.SHA512_256())
    digest.update(group.bytes_to_sign())
    return digest.finalize()


def assign_group_id(txns: Iterable[Transaction]) -> bytes:
    """Set the group id on every transaction; returns the id."""
    txns = list(txns)
    group_id = compute_group_id(txns)
    for txn in txns:
        txn.assign_group_id(group_id)
    return group_id