import pytest

from algotxn.error import (
    DeserializationError,
    EmptyTransactionListError,
    InsufficientTransactionsError,
    InvalidNumberOfSubsignaturesError,
    InvalidPublicKeyInMultisigError,
    InvalidSecretKeyInMultisigError,
    InvalidSenderInMultisigError,
    MaxTransactionGroupSizeError,
    MismatchingSignaturesError,
    TransactionError,
)


@pytest.mark.parametrize(
    ("cls", "text"),
    [
        (InvalidSenderInMultisigError, "Transaction sender does not match multisig identity."),
        (InvalidSecretKeyInMultisigError, "Multisig identity does not contain this secret key."),
        (InsufficientTransactionsError, "Can't merge only one transaction."),
        (
            InvalidNumberOfSubsignaturesError,
            "Multisig signatures to merge must have the same number of subsignatures.",
        ),
        (InvalidPublicKeyInMultisigError, "Transaction msig public keys do not match."),
        (MismatchingSignaturesError, "Transaction msig has mismatched signatures."),
        (EmptyTransactionListError, "Empty transaction list."),
    ],
)
def test_fixed_messages(cls, text):
    assert str(cls()) == text


def test_max_group_size_message():
    err = MaxTransactionGroupSizeError(16)
    assert str(err) == "Max group size is 16."
    assert err.size == 16


def test_deserialization_message():
    err = DeserializationError("receiver missing")
    assert str(err) == "Deserialization error: receiver missing"
    assert err.detail == "receiver missing"


@pytest.mark.parametrize(
    ("err", "text"),
    [
        (EmptyTransactionListError(), "Empty transaction list."),
        (DeserializationError("bad"), "Deserialization error: bad"),
        (MaxTransactionGroupSizeError(4), "Max group size is 4."),
    ],
)
def test_all_are_transaction_errors(err, text):
    with pytest.raises(TransactionError) as info:
        raise err
    assert info.value is err
    assert str(info.value) == text