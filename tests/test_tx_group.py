import msgpack
import pytest

from algotxn.encoding import raw_id
from algotxn.error import EmptyTransactionListError, MaxTransactionGroupSizeError
from algotxn.transaction import Payment, Transaction
from algotxn.tx_group import TxGroup, assign_group_id, compute_group_id
from algotxn.types import Address

SENDER = Address(bytes([1]) * 32)
RECEIVER = Address(bytes([2]) * 32)


def _txn(amount):
    return Transaction(
        fee=1000,
        first_valid=1,
        genesis_hash=bytes([9]) * 32,
        last_valid=1001,
        txn_type=Payment(sender=SENDER, receiver=RECEIVER, amount=amount),
    )


def test_bytes_to_sign_layout():
    hashes_ = [bytes([5]) * 32, bytes([6]) * 32]
    data = TxGroup(hashes_).bytes_to_sign()
    assert data[:2] == b"TG"
    assert msgpack.unpackb(data[2:], raw=False) == {"txlist": hashes_}


def test_empty_group_encodes_empty_list():
    assert msgpack.unpackb(TxGroup().bytes_to_sign()[2:], raw=False) == {"txlist": []}


def test_empty_list_rejected():
    with pytest.raises(EmptyTransactionListError):
        compute_group_id([])


def test_too_many_rejected():
    with pytest.raises(MaxTransactionGroupSizeError) as info:
        compute_group_id([_txn(i) for i in range(1, 18)])
    assert info.value.size == 16


def test_sixteen_allowed():
    assert len(compute_group_id([_txn(i) for i in range(1, 17)])) == 32


def test_assign_sets_same_group():
    txns = [_txn(1), _txn(2), _txn(3)]
    expected = compute_group_id(txns)
    returned = assign_group_id(txns)
    assert returned == expected
    assert all(t.group == expected for t in txns)


def test_group_id_depends_on_order():
    a, b = _txn(1), _txn(2)
    assert compute_group_id([a, b]) != compute_group_id([b, a])
    assert compute_group_id([a, b]) == compute_group_id([_txn(1), _txn(2)])


def test_group_id_hashes_transaction_ids():
    from cryptography.hazmat.primitives import hashes

    txns = [_txn(1), _txn(2)]
    digest = hashes.Hash(hashes.SHA512_256())
    digest.update(TxGroup([raw_id(t) for t in txns]).bytes_to_sign())
    assert compute_group_id(txns) == digest.finalize()


def test_assign_rejects_empty():
    with pytest.raises(EmptyTransactionListError):
        assign_group_id([])