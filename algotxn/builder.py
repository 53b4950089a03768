"""Builders for transactions and for the non-application transaction kinds."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .transaction import (
    AssetAcceptTransaction,
    AssetClawbackTransaction,
    AssetConfigurationTransaction,
    AssetFreezeTransaction,
    AssetParams,
    AssetTransferTransaction,
    KeyRegistration,
    Payment,
    Transaction,
    TransactionType,
)
from .types import Address


@dataclass
class SuggestedTransactionParams:
    """Network parameters suggested for building a transaction."""

    genesis_id: str
    genesis_hash: bytes
    fee: int
    min_fee: int
    first_valid: int
    last_valid: int
    consensus_version: str = ""


class TxnBuilder:
    """Builds a Transaction from its common fields and a transaction kind."""

    def __init__(
        self,
        fee: int,
        first_valid: int,
        last_valid: int,
        genesis_hash: bytes,
        txn_type: TransactionType,
    ) -> None:
        self._fee = fee
        self._first_valid = first_valid
        self._last_valid = last_valid
        self._genesis_hash = genesis_hash
        self._txn_type = txn_type
        self._genesis_id: Optional[str] = None
        self._group: Optional[bytes] = None
        self._lease: Optional[bytes] = None
        self._note: Optional[bytes] = None
        self._rekey_to: Optional[Address] = None

    @classmethod
    def with_params(
        cls, params: SuggestedTransactionParams, txn_type: TransactionType
    ) -> TxnBuilder:
        """Start from suggested params; the fee is the larger of fee and min_fee."""
        return cls(
            max(params.fee, params.min_fee),
            params.first_valid,
            params.last_valid,
            params.genesis_hash,
            txn_type,
        ).genesis_id(params.genesis_id)

    def genesis_id(self, genesis_id: str) -> TxnBuilder:
        self._genesis_id = genesis_id
        return self

    def group(self, group: bytes) -> TxnBuilder:
        self._group = group
        return self

    def lease(self, lease: bytes) -> TxnBuilder:
        self._lease = lease
        return self

    def note(self, note: bytes) -> TxnBuilder:
        self._note = bytes(note)
        return self

    def rekey_to(self, rekey_to: Address) -> TxnBuilder:
        self._rekey_to = rekey_to
        return self

    def build(self) -> Transaction:
        return Transaction(
            fee=self._fee,
            first_valid=self._first_valid,
            genesis_hash=self._genesis_hash,
            last_valid=self._last_valid,
            txn_type=self._txn_type,
            genesis_id=self._genesis_id,
            group=self._group,
            lease=self._lease,
            note=self._note,
            rekey_to=self._rekey_to,
        )


class Pay:
    """Builds a Payment."""

    def __init__(self, sender: Address, receiver: Address, amount: int) -> None:
        self._sender = sender
        self._receiver = receiver
        self._amount = amount
        self._close_remainder_to: Optional[Address] = None

    def close_remainder_to(self, close_remainder_to: Address) -> Pay:
        self._close_remainder_to = close_remainder_to
        return self

    def build(self) -> Payment:
        return Payment(
            sender=self._sender,
            receiver=self._receiver,
            amount=self._amount,
            close_remainder_to=self._close_remainder_to,
        )


class RegisterKey:
    """Builds a KeyRegistration: online, offline or nonparticipating."""

    def __init__(
        self,
        sender: Address,
        *,
        vote_pk: Optional[bytes] = None,
        selection_pk: Optional[bytes] = None,
        vote_first: Optional[int] = None,
        vote_last: Optional[int] = None,
        vote_key_dilution: Optional[int] = None,
        nonparticipating: Optional[bool] = None,
    ) -> None:
        self._sender = sender
        self._vote_pk = vote_pk
        self._selection_pk = selection_pk
        self._vote_first = vote_first
        self._vote_last = vote_last
        self._vote_key_dilution = vote_key_dilution
        self._nonparticipating = nonparticipating

    @classmethod
    def online(
        cls,
        sender: Address,
        vote_pk: bytes,
        selection_pk: bytes,
        vote_first: int,
        vote_last: int,
        vote_key_dilution: int,
    ) -> RegisterKey:
        return cls(
            sender,
            vote_pk=vote_pk,
            selection_pk=selection_pk,
            vote_first=vote_first,
            vote_last=vote_last,
            vote_key_dilution=vote_key_dilution,
        )

    @classmethod
    def offline(cls, sender: Address) -> RegisterKey:
        return cls(sender)

    @classmethod
    def nonparticipating(cls, sender: Address, nonparticipating: bool) -> RegisterKey:
        return cls(sender, nonparticipating=nonparticipating)

    def build(self) -> KeyRegistration:
        return KeyRegistration(
            sender=self._sender,
            vote_pk=self._vote_pk,
            selection_pk=self._selection_pk,
            vote_first=self._vote_first,
            vote_last=self._vote_last,
            vote_key_dilution=self._vote_key_dilution,
            nonparticipating=self._nonparticipating,
        )


class _AssetParamsState:
    """Shared optional asset parameters of the create and update builders."""

    def __init__(self, sender: Address) -> None:
        self._sender = sender
        self._total: Optional[int] = None
        self._decimals: Optional[int] = None
        self._default_frozen: Optional[bool] = None
        self._unit_name: Optional[str] = None
        self._asset_name: Optional[str] = None
        self._url: Optional[str] = None
        self._meta_data_hash: Optional[bytes] = None
        self._manager: Optional[Address] = None
        self._reserve: Optional[Address] = None
        self._freeze: Optional[Address] = None
        self._clawback: Optional[Address] = None

    def _params(self) -> AssetParams:
        return AssetParams(
            asset_name=self._asset_name,
            decimals=self._decimals,
            default_frozen=self._default_frozen,
            total=self._total,
            unit_name=self._unit_name,
            meta_data_hash=self._meta_data_hash,
            url=self._url,
            clawback=self._clawback,
            freeze=self._freeze,
            manager=self._manager,
            reserve=self._reserve,
        )


class CreateAsset(_AssetParamsState):
    """Builds an asset configuration transaction that creates an asset."""

    def __init__(
        self, sender: Address, total: int, decimals: int, default_frozen: bool
    ) -> None:
        super().__init__(sender)
        self._total = total
        self._decimals = decimals
        self._default_frozen = default_frozen

    def unit_name(self, unit_name: str) -> CreateAsset:
        self._unit_name = unit_name
        return self

    def asset_name(self, asset_name: str) -> CreateAsset:
        self._asset_name = asset_name
        return self

    def url(self, url: str) -> CreateAsset:
        self._url = url
        return self

    def meta_data_hash(self, meta_data_hash: bytes) -> CreateAsset:
        self._meta_data_hash = bytes(meta_data_hash)
        return self

    def manager(self, manager: Address) -> CreateAsset:
        self._manager = manager
        return self

    def reserve(self, reserve: Address) -> CreateAsset:
        self._reserve = reserve
        return self

    def freeze(self, freeze: Address) -> CreateAsset:
        self._freeze = freeze
        return self

    def clawback(self, clawback: Address) -> CreateAsset:
        self._clawback = clawback
        return self

    def build(self) -> AssetConfigurationTransaction:
        return AssetConfigurationTransaction(
            sender=self._sender, params=self._params(), config_asset=None
        )


class UpdateAsset(_AssetParamsState):
    """Builds an asset configuration transaction that reconfigures an asset."""

    def __init__(self, sender: Address, asset_id: int) -> None:
        super().__init__(sender)
        self._asset_id = asset_id

    def total(self, total: int) -> UpdateAsset:
        self._total = total
        return self

    def decimals(self, decimals: int) -> UpdateAsset:
        self._decimals = decimals
        return self

    def default_frozen(self, default_frozen: bool) -> UpdateAsset:
        self._default_frozen = default_frozen
        return self

    def unit_name(self, unit_name: str) -> UpdateAsset:
        self._unit_name = unit_name
        return self

    def asset_name(self, asset_name: str) -> UpdateAsset:
        self._asset_name = asset_name
        return self

    def url(self, url: str) -> UpdateAsset:
        self._url = url
        return self

    def meta_data_hash(self, meta_data_hash: bytes) -> UpdateAsset:
        self._meta_data_hash = bytes(meta_data_hash)
        return self

    def manager(self, manager: Address) -> UpdateAsset:
        self._manager = manager
        return self

    def reserve(self, reserve: Address) -> UpdateAsset:
        self._reserve = reserve
        return self

    def freeze(self, freeze: Address) -> UpdateAsset:
        self._freeze = freeze
        return self

    def clawback(self, clawback: Address) -> UpdateAsset:
        self._clawback = clawback
        return self

    def build(self) -> AssetConfigurationTransaction:
        return AssetConfigurationTransaction(
            sender=self._sender, params=self._params(), config_asset=self._asset_id
        )


class DestroyAsset:
    """Builds an asset configuration transaction that destroys an asset."""

    def __init__(self, sender: Address, asset_id: int) -> None:
        self._sender = sender
        self._asset_id = asset_id

    def build(self) -> AssetConfigurationTransaction:
        return AssetConfigurationTransaction(
            sender=self._sender, params=None, config_asset=self._asset_id
        )


class TransferAsset:
    """Builds an AssetTransferTransaction."""

    def __init__(self, sender: Address, asset_id: int, amount: int, receiver: Address) -> None:
        self._sender = sender
        self._xfer = asset_id
        self._amount = amount
        self._receiver = receiver
        self._close_to: Optional[Address] = None

    def close_to(self, close_to: Address) -> TransferAsset:
        self._close_to = close_to
        return self

    def build(self) -> AssetTransferTransaction:
        return AssetTransferTransaction(
            sender=self._sender,
            xfer=self._xfer,
            amount=self._amount,
            receiver=self._receiver,
            close_to=self._close_to,
        )


class AcceptAsset:
    """Builds an AssetAcceptTransaction (opt-in)."""

    def __init__(self, sender: Address, asset_id: int) -> None:
        self._sender = sender
        self._asset_id = asset_id

    def build(self) -> AssetAcceptTransaction:
        return AssetAcceptTransaction(sender=self._sender, xfer=self._asset_id)


class ClawbackAsset:
    """Builds an AssetClawbackTransaction."""

    def __init__(
        self,
        sender: Address,
        asset_id: int,
        asset_amount: int,
        asset_sender: Address,
        asset_receiver: Address,
    ) -> None:
        self._sender = sender
        self._asset_id = asset_id
        self._asset_amount = asset_amount
        self._asset_sender = asset_sender
        self._asset_receiver = asset_receiver
        self._asset_close_to: Optional[Address] = None

    def asset_close_to(self, asset_close_to: Address) -> ClawbackAsset:
        self._asset_close_to = asset_close_to
        return self

    def build(self) -> AssetClawbackTransaction:
        return AssetClawbackTransaction(
            sender=self._sender,
            xfer=self._asset_id,
            asset_amount=self._asset_amount,
            asset_sender=self._asset_sender,
            asset_receiver=self._asset_receiver,
            asset_close_to=self._asset_close_to,
        )


class FreezeAsset:
    """Builds an AssetFreezeTransaction."""

    def __init__(
        self, sender: Address, freeze_account: Address, asset_id: int, frozen: bool
    ) -> None:
        self._sender = sender
        self._freeze_account = freeze_account
        self._asset_id = asset_id
        self._frozen = frozen

    def build(self) -> AssetFreezeTransaction:
        return AssetFreezeTransaction(
            sender=self._sender,
            freeze_account=self._freeze_account,
            asset_id=self._asset_id,
            frozen=self._frozen,
        )