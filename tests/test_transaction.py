import os

import pytest

from algotxn.transaction import (
    MIN_TXN_FEE,
    AssetAcceptTransaction,
    AssetClawbackTransaction,
    AssetConfigurationTransaction,
    AssetFreezeTransaction,
    AssetParams,
    AssetTransferTransaction,
    ApplicationCallTransaction,
    KeyRegistration,
    OnComplete,
    Payment,
    SignedLogic,
    SingleSignature,
    StateSchema,
    Transaction,
)
from algotxn.types import Address

SENDER = Address(os.urandom(32))
OTHER = Address(os.urandom(32))
GENESIS = bytes(range(32))


def _txn(txn_type, **kwargs):
    return Transaction(
        fee=MIN_TXN_FEE,
        first_valid=10,
        genesis_hash=GENESIS,
        last_valid=1010,
        txn_type=txn_type,
        **kwargs,
    )


@pytest.mark.parametrize(
    "txn_type",
    [
        Payment(SENDER, OTHER, 5),
        KeyRegistration(SENDER),
        AssetConfigurationTransaction(SENDER, AssetParams(total=1)),
        AssetTransferTransaction(SENDER, 1, 2, OTHER),
        AssetAcceptTransaction(SENDER, 1),
        AssetClawbackTransaction(SENDER, 1, 2, OTHER, OTHER),
        AssetFreezeTransaction(SENDER, OTHER, 1, True),
        ApplicationCallTransaction(SENDER, None, OnComplete.NO_OP),
    ],
)
def test_sender_of_every_kind(txn_type):
    assert _txn(txn_type).sender() == SENDER


def test_assign_group_id():
    txn = _txn(Payment(SENDER, OTHER, 1))
    group = os.urandom(32)
    txn.assign_group_id(group)
    assert txn.group == group


def test_assign_group_id_rejects_wrong_length():
    txn = _txn(Payment(SENDER, OTHER, 1))
    with pytest.raises(ValueError):
        txn.assign_group_id(b"short")


def test_genesis_hash_length_checked():
    with pytest.raises(ValueError):
        Transaction(1000, 1, b"\x00" * 31, 2, Payment(SENDER, OTHER, 1))


def test_lease_length_checked():
    with pytest.raises(ValueError):
        _txn(Payment(SENDER, OTHER, 1), lease=b"\x01" * 33)


def test_on_complete_values():
    assert [int(v) for v in OnComplete] == [0, 1, 2, 3, 4, 5]
    assert OnComplete(5) is OnComplete.DELETE_APPLICATION


def test_defaults():
    call = ApplicationCallTransaction(SENDER, 7, OnComplete.OPT_IN)
    assert call.extra_pages == 0
    assert call.accounts is None
    assert StateSchema() == StateSchema(0, 0)
    assert SignedLogic(b"\x01").args == []


def test_equality_of_transactions():
    a = _txn(Payment(SENDER, OTHER, 3), note=b"hi")
    b = _txn(Payment(SENDER, OTHER, 3), note=b"hi")
    assert a == b
    b.note = b"ho"
    assert a != b
    assert a.note == b"hi"


def test_single_signature_length_checked():
    assert SingleSignature(bytes(64)).signature == bytes(64)
    with pytest.raises(ValueError):
        SingleSignature(bytes(10))