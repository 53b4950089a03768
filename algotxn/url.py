"""Payment and asset-transfer links in the algorand:// URL scheme."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .types import Address

_UNRESERVED = frozenset(b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_.~")
_FORM_SAFE = frozenset(b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789*-._")


def _percent_encode(text: str) -> str:
    return "".join(
        chr(byte) if byte in _UNRESERVED else f"%{byte:02X}"
        for byte in text.encode("utf-8")
    )


def _form_encode(text: str) -> str:
    out = []
    for byte in text.encode("utf-8"):
        if byte in _FORM_SAFE:
            out.append(chr(byte))
        elif byte == 0x20:
            out.append("+")
        else:
            out.append(f"%{byte:02X}")
    return "".join(out)


@dataclass(frozen=True)
class Note:
    """A note attached to a link; editable notes may be changed by the user."""

    text: str
    editable: bool = True


@dataclass(frozen=True)
class LinkableTransaction:
    """A payment (asset is None) or asset transfer that can be shared as a link."""

    receiver: Address
    amount: int
    asset: Optional[int] = None
    label: Optional[str] = None
    note: Optional[Note] = None

    def _params(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        if self.label is not None:
            params.append(("label", self.label))
        if self.note is not None:
            params.append(("note" if self.note.editable else "xnote", self.note.text))
        if self.asset is not None:
            params.append(("asset", str(self.asset)))
        params.append(("amount", str(self.amount)))
        return params

    def as_url(self) -> str:
        """The link as a URL string; values are percent-encoded, then form-encoded."""
        query = "&".join(
            f"{_form_encode(key)}={_form_encode(_percent_encode(value))}"
            for key, value in self._params()
        )
        return f"algorand://{self.receiver}?{query}"


class LinkableTransactionBuilder:
    """Builds a LinkableTransaction."""

    def __init__(self, receiver: Address, amount: int, asset: Optional[int] = None) -> None:
        self._receiver = receiver
        self._amount = amount
        self._asset = asset
        self._label: Optional[str] = None
        self._note: Optional[Note] = None

    @classmethod
    def payment(cls, receiver: Address, amount: int) -> LinkableTransactionBuilder:
        return cls(receiver, amount)

    @classmethod
    def asset_transfer(
        cls, receiver: Address, asset: int, amount: int
    ) -> LinkableTransactionBuilder:
        return cls(receiver, amount, asset)

    def label(self, label: str) -> LinkableTransactionBuilder:
        """Address label, e.g. the receiver's name."""
        self._label = str(label)
        return self

    def note(self, note: Note) -> LinkableTransactionBuilder:
        self._note = note
        return self

    def build(self) -> LinkableTransaction:
        return LinkableTransaction(
            receiver=self._receiver,
            amount=self._amount,
            asset=self._asset,
            label=self._label,
            note=self._note,
        )