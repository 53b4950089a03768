"""Transaction model: the transaction kinds, the transaction and its signatures."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Union

from .types import Address

MIN_TXN_FEE = 1000
HASH_LENGTH = 32
SIGNATURE_LENGTH = 64


def _check_digest(name: str, value: Optional[bytes]) -> Optional[bytes]:
    if value is None:
        return None
    value = bytes(value)
    if len(value) != HASH_LENGTH:
        raise ValueError(f"{name} must be {HASH_LENGTH} bytes, got {len(value)}")
    return value


@dataclass
class Payment:
    """Moves microAlgos from sender to receiver."""

    sender: Address
    receiver: Address
    amount: int
    close_remainder_to: Optional[Address] = None


@dataclass
class KeyRegistration:
    """Registers participation keys, or takes the account offline."""

    sender: Address
    vote_pk: Optional[bytes] = None
    selection_pk: Optional[bytes] = None
    vote_first: Optional[int] = None
    vote_last: Optional[int] = None
    vote_key_dilution: Optional[int] = None
    nonparticipating: Optional[bool] = None


@dataclass
class AssetParams:
    """Parameters used to create or reconfigure an asset."""

    asset_name: Optional[str] = None
    decimals: Optional[int] = None
    default_frozen: Optional[bool] = None
    total: Optional[int] = None
    unit_name: Optional[str] = None
    meta_data_hash: Optional[bytes] = None
    url: Optional[str] = None
    clawback: Optional[Address] = None
    freeze: Optional[Address] = None
    manager: Optional[Address] = None
    reserve: Optional[Address] = None


@dataclass
class AssetConfigurationTransaction:
    """Creates (no config_asset), reconfigures or destroys (no params) an asset."""

    sender: Address
    params: Optional[AssetParams] = None
    config_asset: Optional[int] = None


@dataclass
class AssetTransferTransaction:
    sender: Address
    xfer: int
    amount: int
    receiver: Address
    close_to: Optional[Address] = None


@dataclass
class AssetAcceptTransaction:
    """Opt-in to an asset: a zero transfer to oneself."""

    sender: Address
    xfer: int


@dataclass
class AssetClawbackTransaction:
    sender: Address
    xfer: int
    asset_amount: int
    asset_sender: Address
    asset_receiver: Address
    asset_close_to: Optional[Address] = None


@dataclass
class AssetFreezeTransaction:
    sender: Address
    freeze_account: Address
    asset_id: int
    frozen: bool


class OnComplete(enum.IntEnum):
    """Action taken after an application call's program runs."""

    NO_OP = 0
    OPT_IN = 1
    CLOSE_OUT = 2
    CLEAR_STATE = 3
    UPDATE_APPLICATION = 4
    DELETE_APPLICATION = 5


@dataclass
class StateSchema:
    number_ints: int = 0
    number_byteslices: int = 0


@dataclass
class ApplicationCallTransaction:
    sender: Address
    app_id: Optional[int]
    on_complete: OnComplete
    accounts: Optional[list[Address]] = None
    approval_program: Optional[bytes] = None
    app_arguments: Optional[list[bytes]] = None
    clear_state_program: Optional[bytes] = None
    foreign_apps: Optional[list[int]] = None
    foreign_assets: Optional[list[int]] = None
    global_state_schema: Optional[StateSchema] = None
    local_state_schema: Optional[StateSchema] = None
    extra_pages: int = 0


TransactionType = Union[
    Payment,
    KeyRegistration,
    AssetConfigurationTransaction,
    AssetTransferTransaction,
    AssetAcceptTransaction,
    AssetClawbackTransaction,
    AssetFreezeTransaction,
    ApplicationCallTransaction,
]


@dataclass
class Transaction:
    """A transaction that can appear in a block."""

    fee: int
    first_valid: int
    genesis_hash: bytes
    last_valid: int
    txn_type: TransactionType
    genesis_id: Optional[str] = None
    group: Optional[bytes] = None
    lease: Optional[bytes] = None
    note: Optional[bytes] = None
    rekey_to: Optional[Address] = None

    def __post_init__(self) -> None:
        self.genesis_hash = _check_digest("genesis hash", self.genesis_hash)
        self.group = _check_digest("group", self.group)
        self.lease = _check_digest("lease", self.lease)

    def sender(self) -> Address:
        """The account that signs the transaction and pays its fee."""
        return self.txn_type.sender

    def assign_group_id(self, group_id: bytes) -> None:
        self.group = _check_digest("group", group_id)


@dataclass
class SingleSignature:
    signature: bytes

    def __post_init__(self) -> None:
        self.signature = bytes(self.signature)
        if len(self.signature) != SIGNATURE_LENGTH:
            raise ValueError(f"signature must be {SIGNATURE_LENGTH} bytes")


@dataclass
class MultisigSignature:
    """Multisig signature; subsigs hold (public key, signature or None) pairs."""

    version: int
    threshold: int
    subsigs: list[tuple[bytes, Optional[bytes]]] = field(default_factory=list)


@dataclass
class DelegatedSig:
    signature: bytes


@dataclass
class DelegatedMultiSig:
    msig: MultisigSignature


@dataclass
class SignedLogic:
    """A logic signature; no sig means a contract account."""

    logic: bytes
    args: list[bytes] = field(default_factory=list)
    sig: Optional[Union[DelegatedSig, DelegatedMultiSig]] = None


TransactionSignature = Union[SingleSignature, MultisigSignature, SignedLogic]


@dataclass
class SignedTransaction:
    transaction: Transaction
    transaction_id: str
    sig: TransactionSignature