"""Errors raised while building, encoding and grouping transactions."""

from __future__ import annotations


class TransactionError(Exception):
    """Base class of every transaction error."""

    message = "Transaction error."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.message)


class InvalidSenderInMultisigError(TransactionError):
    message = "Transaction sender does not match multisig identity."


class InvalidSecretKeyInMultisigError(TransactionError):
    message = "Multisig identity does not contain this secret key."


class InsufficientTransactionsError(TransactionError):
    message = "Can't merge only one transaction."


class InvalidNumberOfSubsignaturesError(TransactionError):
    message = "Multisig signatures to merge must have the same number of subsignatures."


class InvalidPublicKeyInMultisigError(TransactionError):
    message = "Transaction msig public keys do not match."


class MismatchingSignaturesError(TransactionError):
    message = "Transaction msig has mismatched signatures."


class EmptyTransactionListError(TransactionError):
    message = "Empty transaction list."


class MaxTransactionGroupSizeError(TransactionError):
    """A group holds more transactions than allowed."""

    def __init__(self, size: int) -> None:
        self.size = size
        super().__init__(f"Max group size is {size}.")


class DeserializationError(TransactionError):
    """Wire data could not be turned into a transaction."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Deserialization error: {detail}")