"""Auction bids and their signed form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import msgpack

from .types import Address

SIGNATURE_LENGTH = 64


@dataclass(frozen=True)
class Bid:
    """A bid by a user as part of an auction."""

    auction_id: int
    auction_key: Address
    bidder_key: Address
    bid_currency: int
    bid_id: int
    max_price: int

    def _wire(self) -> dict[str, Any]:
        return {
            "aid": self.auction_id,
            "auc": self.auction_key.public_key,
            "bidder": self.bidder_key.public_key,
            "cur": self.bid_currency,
            "id": self.bid_id,
            "price": self.max_price,
        }

    def to_msgpack(self) -> bytes:
        """Encode the bid as a msgpack map with its wire field names."""
        return msgpack.packb(self._wire(), use_bin_type=True)

    @classmethod
    def from_msgpack(cls, data: bytes) -> Bid:
        """Decode a bid from its msgpack encoding."""
        wire = msgpack.unpackb(data, raw=False)
        try:
            return cls(
                auction_id=wire["aid"],
                auction_key=Address(wire["auc"]),
                bidder_key=Address(wire["bidder"]),
                bid_currency=wire["cur"],
                bid_id=wire["id"],
                max_price=wire["price"],
            )
        except KeyError as exc:
            raise ValueError(f"bid field missing: {exc.args[0]}") from exc


@dataclass(frozen=True)
class SignedBid:
    """A bid together with the bidder's signature over its hash."""

    bid: Bid
    sig: bytes

    def __post_init__(self) -> None:
        sig = bytes(self.sig)
        if len(sig) != SIGNATURE_LENGTH:
            raise ValueError(f"signature must be {SIGNATURE_LENGTH} bytes, got {len(sig)}")
        object.__setattr__(self, "sig", sig)