"""Wire encoding of signed transactions and logic signatures."""

from __future__ import annotations

from typing import Any, Optional

import msgpack

from .encoding import _compact, transaction_from_api, transaction_to_api
from .error import DeserializationError
from .transaction import (
    SIGNATURE_LENGTH,
    DelegatedMultiSig,
    DelegatedSig,
    MultisigSignature,
    SignedLogic,
    SignedTransaction,
    SingleSignature,
)


# ---------------------------------------------------------------- multisig


def _multisig_to_api(msig: MultisigSignature) -> dict[str, Any]:
    subsigs = []
    for public_key, signature in msig.subsigs:
        entry: dict[str, Any] = {"pk": bytes(public_key)}
        if signature is not None:
            entry["s"] = bytes(signature)
        subsigs.append(entry)
    return {"subsig": subsigs, "thr": msig.threshold, "v": msig.version}


def _as_bytes(name: str, value: Any) -> bytes:
    if not isinstance(value, (bytes, bytearray)):
        raise DeserializationError(f"field {name} must be bytes")
    return bytes(value)


def _as_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise DeserializationError(f"field {name} must be an integer")
    return value


def _as_map(name: str, value: Any) -> dict:
    if not isinstance(value, dict):
        raise DeserializationError(f"field {name} must be a map")
    return value


def _as_list(name: str, value: Any) -> list:
    if not isinstance(value, (list, tuple)):
        raise DeserializationError(f"field {name} must be a list")
    return list(value)


def _signature_from_api(value: Any) -> bytes:
    signature = _as_bytes("sig", value)
    if len(signature) != SIGNATURE_LENGTH:
        raise DeserializationError(f"signature must be {SIGNATURE_LENGTH} bytes")
    return signature


def _multisig_from_api(value: Any) -> MultisigSignature:
    data = _as_map("msig", value)
    subsigs: list[tuple[bytes, Optional[bytes]]] = []
    for entry in _as_list("subsig", data.get("subsig", [])):
        entry = _as_map("subsig", entry)
        public_key = _as_bytes("pk", entry.get("pk"))
        signature = entry.get("s")
        subsigs.append(
            (public_key, None if signature is None else _signature_from_api(signature))
        )
    return MultisigSignature(
        version=_as_int("v", data.get("v", 0)),
        threshold=_as_int("thr", data.get("thr", 0)),
        subsigs=subsigs,
    )


# ---------------------------------------------------------------- logic signatures


def signed_logic_to_api(lsig: SignedLogic) -> dict[str, Any]:
    """The wire map of a logic signature; the argument list is always written."""
    sig: Optional[bytes] = None
    msig: Optional[dict[str, Any]] = None
    if isinstance(lsig.sig, DelegatedSig):
        sig = bytes(lsig.sig.signature)
    elif isinstance(lsig.sig, DelegatedMultiSig):
        msig = _multisig_to_api(lsig.sig.msig)
    elif lsig.sig is not None:
        raise TypeError(f"unknown logic signature: {type(lsig.sig).__name__}")
    return _compact(
        {
            "arg": [bytes(arg) for arg in lsig.args],
            "l": bytes(lsig.logic),
            "msig": msig,
            "sig": sig,
        }
    )


def signed_logic_from_api(data: dict) -> SignedLogic:
    """Build a SignedLogic from its wire map."""
    data = _as_map("lsig", data)
    if data.get("l") is None:
        raise DeserializationError("logic missing")
    logic = _as_bytes("l", data["l"])
    args = [_as_bytes("arg", arg) for arg in _as_list("arg", data.get("arg", []))]
    sig, msig = data.get("sig"), data.get("msig")
    if sig is not None and msig is not None:
        raise DeserializationError("Invalid sig/msig combination")
    if sig is not None:
        signature: Optional[DelegatedSig | DelegatedMultiSig] = DelegatedSig(
            _signature_from_api(sig)
        )
    elif msig is not None:
        signature = DelegatedMultiSig(_multisig_from_api(msig))
    else:
        signature = None
    return SignedLogic(logic=logic, args=args, sig=signature)


# ---------------------------------------------------------------- signed transactions


def signed_transaction_to_api(stxn: SignedTransaction) -> dict[str, Any]:
    """The wire map of a signed transaction; the transaction id is not written."""
    fields: dict[str, Any] = {
        "lsig": None,
        "msig": None,
        "sig": None,
        "txn": transaction_to_api(stxn.transaction),
    }
    match stxn.sig:
        case SingleSignature():
            fields["sig"] = stxn.sig.signature
        case MultisigSignature():
            fields["msig"] = _multisig_to_api(stxn.sig)
        case SignedLogic():
            fields["lsig"] = signed_logic_to_api(stxn.sig)
        case _:
            raise TypeError(f"unknown transaction signature: {type(stxn.sig).__name__}")
    return _compact(fields)


def signed_transaction_from_api(data: dict) -> SignedTransaction:
    """Build a SignedTransaction from its wire map.

    The id is not part of the wire form, so it comes back empty.
    """
    data = _as_map("signed transaction", data)
    if data.get("txn") is None:
        raise DeserializationError("txn missing")
    transaction = transaction_from_api(data["txn"])
    sig, lsig, msig = data.get("sig"), data.get("lsig"), data.get("msig")
    present = [value is not None for value in (sig, lsig, msig)]
    if present.count(True) != 1:
        raise DeserializationError(f"Invalid sig combination: {data!r}")
    if sig is not None:
        signature: SingleSignature | MultisigSignature | SignedLogic = SingleSignature(
            _signature_from_api(sig)
        )
    elif lsig is not None:
        signature = signed_logic_from_api(lsig)
    else:
        signature = _multisig_from_api(msig)
    return SignedTransaction(transaction=transaction, transaction_id="", sig=signature)


def encode_signed_transaction(stxn: SignedTransaction) -> bytes:
    """The msgpack encoding of a signed transaction."""
    return msgpack.packb(signed_transaction_to_api(stxn), use_bin_type=True)


def decode_signed_transaction(data: bytes) -> SignedTransaction:
    """Decode a signed transaction from its msgpack encoding."""
    try:
        wire = msgpack.unpackb(data, raw=False)
    except (ValueError, TypeError) as exc:
        raise DeserializationError(f"invalid msgpack: {exc}") from exc
    return signed_transaction_from_api(wire)