"""Wire encoding of transactions: msgpack maps, signing bytes and ids.

The node checks signatures over the exact bytes it re-encodes, so keys are
written in alphabetical order and any field holding its zero value (0, False,
an empty string or an empty sequence) is left out. On reading, a missing key
means either None or the zero value, depending on the field.
"""

from __future__ import annotations

import base64
from typing import Any, Callable, Optional

import msgpack
from cryptography.hazmat.primitives import hashes

from .error import DeserializationError
from .transaction import (
    HASH_LENGTH,
    ApplicationCallTransaction,
    AssetAcceptTransaction,
    AssetClawbackTransaction,
    AssetConfigurationTransaction,
    AssetFreezeTransaction,
    AssetParams,
    AssetTransferTransaction,
    KeyRegistration,
    OnComplete,
    Payment,
    StateSchema,
    Transaction,
    TransactionType,
)
from .types import Address

TRANSACTION_PREFIX = b"TX"

_TYPE_NAMES: dict[type, str] = {
    Payment: "pay",
    KeyRegistration: "keyreg",
    AssetConfigurationTransaction: "acfg",
    AssetTransferTransaction: "axfer",
    AssetAcceptTransaction: "axfer",
    AssetClawbackTransaction: "axfer",
    AssetFreezeTransaction: "afrz",
    ApplicationCallTransaction: "appl",
}


# ---------------------------------------------------------------- writing


def _nonzero(value: Optional[int]) -> Optional[int]:
    return value if value else None


def _nonempty(value):
    return value if value else None


def _true(value: Optional[bool]) -> Optional[bool]:
    return True if value else None


def _key(address: Optional[Address]) -> Optional[bytes]:
    return None if address is None else address.public_key


def _compact(fields: dict[str, Any]) -> dict[str, Any]:
    """Drop absent fields and order the keys alphabetically."""
    return {key: fields[key] for key in sorted(fields) if fields[key] is not None}


def _asset_params_to_api(params: AssetParams) -> dict[str, Any]:
    # default_frozen ("df") is read from the wire but never written to it.
    return _compact(
        {
            "am": _nonempty(params.meta_data_hash),
            "an": _nonempty(params.asset_name),
            "au": _nonempty(params.url),
            "c": _key(params.clawback),
            "dc": _nonzero(params.decimals),
            "f": _key(params.freeze),
            "m": _key(params.manager),
            "r": _key(params.reserve),
            "t": _nonzero(params.total),
            "un": _nonempty(params.unit_name),
        }
    )


def _state_schema_to_api(schema: Optional[StateSchema]) -> Optional[dict[str, Any]]:
    if schema is None or (schema.number_ints == 0 and schema.number_byteslices == 0):
        return None
    return _compact(
        {
            "nbs": _nonzero(schema.number_byteslices),
            "nui": _nonzero(schema.number_ints),
        }
    )


def _kind_fields(kind: TransactionType) -> dict[str, Any]:
    match kind:
        case Payment():
            return {
                "rcv": kind.receiver.public_key,
                "amt": _nonzero(kind.amount),
                "close": _key(kind.close_remainder_to),
            }
        case KeyRegistration():
            return {
                "votekey": kind.vote_pk,
                "selkey": kind.selection_pk,
                "votefst": kind.vote_first,
                "votelst": kind.vote_last,
                "votekd": _nonzero(kind.vote_key_dilution),
                "nonpart": _true(kind.nonparticipating),
            }
        case AssetConfigurationTransaction():
            return {
                "apar": None
                if kind.params is None
                else _asset_params_to_api(kind.params),
                "caid": _nonzero(kind.config_asset),
            }
        case AssetTransferTransaction():
            return {
                "xaid": _nonzero(kind.xfer),
                "aamt": _nonzero(kind.amount),
                "arcv": kind.receiver.public_key,
                "aclose": _key(kind.close_to),
            }
        case AssetAcceptTransaction():
            return {"xaid": kind.xfer, "arcv": kind.sender.public_key}
        case AssetClawbackTransaction():
            return {
                "xaid": kind.xfer,
                "aamt": _nonzero(kind.asset_amount),
                "asnd": kind.asset_sender.public_key,
                "arcv": kind.asset_receiver.public_key,
                "aclose": _key(kind.asset_close_to),
            }
        case AssetFreezeTransaction():
            return {
                "fadd": kind.freeze_account.public_key,
                "faid": _nonzero(kind.asset_id),
                "afrz": _true(kind.frozen),
            }
        case ApplicationCallTransaction():
            return {
                "apid": _nonzero(kind.app_id),
                "apan": _nonzero(int(kind.on_complete)),
                "apat": None
                if kind.accounts is None
                else [account.public_key for account in kind.accounts],
                "apap": _nonempty(kind.approval_program),
                "apaa": _nonempty(kind.app_arguments),
                "apsu": _nonempty(kind.clear_state_program),
                "apfa": _nonempty(kind.foreign_apps),
                "apas": _nonempty(kind.foreign_assets),
                "apgs": _state_schema_to_api(kind.global_state_schema),
                "apls": _state_schema_to_api(kind.local_state_schema),
                "apep": _nonzero(kind.extra_pages),
            }
    raise TypeError(f"unknown transaction type: {type(kind).__name__}")


def transaction_to_api(txn: Transaction) -> dict[str, Any]:
    """The wire map of a transaction, ready to be packed with msgpack."""
    kind = txn.txn_type
    try:
        type_name = _TYPE_NAMES[type(kind)]
    except KeyError:
        raise TypeError(f"unknown transaction type: {type(kind).__name__}") from None
    fields: dict[str, Any] = {
        "fee": _nonzero(txn.fee),
        "fv": _nonzero(txn.first_valid),
        "gen": _nonempty(txn.genesis_id),
        "gh": txn.genesis_hash,
        "grp": txn.group,
        "lv": _nonzero(txn.last_valid),
        "lx": txn.lease,
        "note": _nonempty(txn.note),
        "rekey": _key(txn.rekey_to),
        "snd": txn.sender().public_key,
        "type": type_name,
    }
    fields.update(_kind_fields(kind))
    return _compact(fields)


# ---------------------------------------------------------------- reading


def _opt_int(data: dict, key: str) -> Optional[int]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise DeserializationError(f"field {key} must be an integer")
    return value


def _opt_bool(data: dict, key: str) -> Optional[bool]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise DeserializationError(f"field {key} must be a boolean")
    return value


def _opt_str(data: dict, key: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise DeserializationError(f"field {key} must be a string")
    return value


def _as_bytes(key: str, value: Any) -> bytes:
    if not isinstance(value, (bytes, bytearray)):
        raise DeserializationError(f"field {key} must be bytes")
    return bytes(value)


def _opt_bytes(data: dict, key: str) -> Optional[bytes]:
    value = data.get(key)
    return None if value is None else _as_bytes(key, value)


def _as_address(key: str, value: Any) -> Address:
    try:
        return Address(_as_bytes(key, value))
    except ValueError as exc:
        raise DeserializationError(f"field {key}: {exc}") from exc


def _opt_address(data: dict, key: str) -> Optional[Address]:
    value = data.get(key)
    return None if value is None else _as_address(key, value)


def _opt_digest(data: dict, key: str) -> Optional[bytes]:
    value = _opt_bytes(data, key)
    if value is not None and len(value) != HASH_LENGTH:
        raise DeserializationError(f"field {key} must be {HASH_LENGTH} bytes")
    return value


def _opt_list(data: dict, key: str, item: Callable[[str, Any], Any]) -> Optional[list]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, (list, tuple)):
        raise DeserializationError(f"field {key} must be a list")
    return [item(key, element) for element in value]


def _int_item(key: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise DeserializationError(f"field {key} must hold integers")
    return value


def _opt_map(data: dict, key: str) -> Optional[dict]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, dict):
        raise DeserializationError(f"field {key} must be a map")
    return value


def _required(value, message: str):
    if value is None:
        raise DeserializationError(message)
    return value


def _asset_params_from_api(data: dict) -> AssetParams:
    return AssetParams(
        asset_name=_opt_str(data, "an"),
        decimals=_opt_int(data, "dc") or 0,
        default_frozen=bool(_opt_bool(data, "df")),
        total=_opt_int(data, "t") or 0,
        unit_name=_opt_str(data, "un"),
        meta_data_hash=_opt_bytes(data, "am"),
        url=_opt_str(data, "au"),
        clawback=_opt_address(data, "c"),
        freeze=_opt_address(data, "f"),
        manager=_opt_address(data, "m"),
        reserve=_opt_address(data, "r"),
    )


def _state_schema_from_api(data: dict) -> StateSchema:
    return StateSchema(
        number_ints=_opt_int(data, "nui") or 0,
        number_byteslices=_opt_int(data, "nbs") or 0,
    )


def _parse_state_schema(
    on_complete: OnComplete, app_id: Optional[int], schema: Optional[dict]
) -> Optional[StateSchema]:
    if on_complete is OnComplete.NO_OP and app_id is None:
        # On creation a schema always exists; all zeros arrive as no schema.
        return StateSchema() if schema is None else _state_schema_from_api(schema)
    return None


def _on_complete(value: int) -> OnComplete:
    try:
        return OnComplete(value)
    except ValueError:
        raise DeserializationError(f"Invalid on complete value: {value}") from None


def _parse_asset_transfer(data: dict, sender: Address) -> TransactionType:
    xfer = _opt_int(data, "xaid")
    asset_sender = _opt_address(data, "asnd")
    asset_receiver = _opt_address(data, "arcv")
    asset_amount = _opt_int(data, "aamt")
    close_to = _opt_address(data, "aclose")
    if xfer is not None and asset_receiver is not None:
        if asset_sender is not None and asset_amount is not None:
            return AssetClawbackTransaction(
                sender=sender,
                xfer=xfer,
                asset_amount=asset_amount,
                asset_sender=asset_sender,
                asset_receiver=asset_receiver,
                asset_close_to=close_to,
            )
        if asset_sender is None and asset_amount is not None:
            return AssetTransferTransaction(
                sender=sender,
                xfer=xfer,
                amount=asset_amount,
                receiver=asset_receiver,
                close_to=close_to,
            )
        if asset_sender is None and asset_amount is None:
            # On opt-in the asset receiver is the sender itself.
            return AssetAcceptTransaction(sender=sender, xfer=xfer)
    raise DeserializationError(f"Invalid api asset transfer transaction: {data!r}")


def _kind_from_api(type_name: str, data: dict, sender: Address) -> TransactionType:
    if type_name == "pay":
        return Payment(
            sender=sender,
            receiver=_required(_opt_address(data, "rcv"), "receiver missing"),
            amount=_opt_int(data, "amt") or 0,
            close_remainder_to=_opt_address(data, "close"),
        )
    if type_name == "keyreg":
        return KeyRegistration(
            sender=sender,
            vote_pk=_opt_bytes(data, "votekey"),
            selection_pk=_opt_bytes(data, "selkey"),
            vote_first=_opt_int(data, "votefst"),
            vote_last=_opt_int(data, "votelst"),
            vote_key_dilution=_opt_int(data, "votekd") or 0,
            nonparticipating=_opt_bool(data, "nonpart"),
        )
    if type_name == "acfg":
        params = _opt_map(data, "apar")
        return AssetConfigurationTransaction(
            sender=sender,
            params=None if params is None else _asset_params_from_api(params),
            config_asset=_opt_int(data, "caid"),
        )
    if type_name == "axfer":
        return _parse_asset_transfer(data, sender)
    if type_name == "afrz":
        return AssetFreezeTransaction(
            sender=sender,
            freeze_account=_required(
                _opt_address(data, "fadd"), "freeze_account missing"
            ),
            asset_id=_required(_opt_int(data, "faid"), "asset_id missing"),
            frozen=bool(_opt_bool(data, "afrz")),
        )
    if type_name == "appl":
        on_complete = _on_complete(_opt_int(data, "apan") or 0)
        app_id = _opt_int(data, "apid")
        return ApplicationCallTransaction(
            sender=sender,
            app_id=app_id,
            on_complete=on_complete,
            accounts=_opt_list(data, "apat", _as_address),
            approval_program=_opt_bytes(data, "apap"),
            app_arguments=_opt_list(data, "apaa", _as_bytes),
            clear_state_program=_opt_bytes(data, "apsu"),
            foreign_apps=_opt_list(data, "apfa", _int_item),
            foreign_assets=_opt_list(data, "apas", _int_item),
            global_state_schema=_parse_state_schema(
                on_complete, app_id, _opt_map(data, "apgs")
            ),
            local_state_schema=_parse_state_schema(
                on_complete, app_id, _opt_map(data, "apls")
            ),
            extra_pages=_opt_int(data, "apep") or 0,
        )
    raise DeserializationError(f"Not supported transaction type: {type_name}")


def transaction_from_api(data: dict) -> Transaction:
    """Build a Transaction from its wire map."""
    if not isinstance(data, dict):
        raise DeserializationError("transaction must be a map")
    genesis_hash = _required(_opt_digest(data, "gh"), "genesis_hash missing")
    sender = _required(_opt_address(data, "snd"), "sender missing")
    type_name = _required(_opt_str(data, "type"), "type missing")
    kind = _kind_from_api(type_name, data, sender)
    return Transaction(
        fee=_opt_int(data, "fee") or 0,
        first_valid=_opt_int(data, "fv") or 0,
        genesis_hash=genesis_hash,
        last_valid=_opt_int(data, "lv") or 0,
        txn_type=kind,
        genesis_id=_opt_str(data, "gen"),
        group=_opt_digest(data, "grp"),
        lease=_opt_digest(data, "lx"),
        note=_opt_bytes(data, "note"),
        rekey_to=_opt_address(data, "rekey"),
    )


# ---------------------------------------------------------------- bytes


def encode_transaction(txn: Transaction) -> bytes:
    """The msgpack encoding of a transaction."""
    return msgpack.packb(transaction_to_api(txn), use_bin_type=True)


def decode_transaction(data: bytes) -> Transaction:
    """Decode a transaction from its msgpack encoding."""
    try:
        wire = msgpack.unpackb(data, raw=False)
    except (ValueError, TypeError) as exc:
        raise DeserializationError(f"invalid msgpack: {exc}") from exc
    return transaction_from_api(wire)


def bytes_to_sign(txn: Transaction) -> bytes:
    """The bytes a signature covers: the "TX" prefix and the encoding."""
    return TRANSACTION_PREFIX + encode_transaction(txn)


def raw_id(txn: Transaction) -> bytes:
    """The SHA-512/256 hash of the bytes to sign."""
    digest = hashes.Hash(hashes.SHA512_256())
    digest.update(bytes_to_sign(txn))
    return digest.finalize()


def transaction_id(txn: Transaction) -> str:
    """The transaction id: the raw id in unpadded base32."""
    return base64.b32encode(raw_id(txn)).decode("ascii").rstrip("=")