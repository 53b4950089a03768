import pytest

from algotxn.builder import (
    AcceptAsset,
    ClawbackAsset,
    CreateAsset,
    DestroyAsset,
    FreezeAsset,
    Pay,
    RegisterKey,
    SuggestedTransactionParams,
    TransferAsset,
    TxnBuilder,
    UpdateAsset,
)
from algotxn.transaction import (
    AssetAcceptTransaction,
    AssetClawbackTransaction,
    AssetConfigurationTransaction,
    AssetFreezeTransaction,
    AssetTransferTransaction,
    KeyRegistration,
    Payment,
)
from algotxn.types import Address

SENDER = Address(bytes([1] * 32))
RECEIVER = Address(bytes([2] * 32))
OTHER = Address(bytes([3] * 32))
GENESIS_HASH = bytes([9] * 32)


def params(fee, min_fee):
    return SuggestedTransactionParams(
        genesis_id="testnet-v1.0",
        genesis_hash=GENESIS_HASH,
        fee=fee,
        min_fee=min_fee,
        first_valid=100,
        last_valid=1100,
    )


def test_with_params_uses_min_fee_when_larger():
    txn = TxnBuilder.with_params(params(0, 1000), Pay(SENDER, RECEIVER, 5).build()).build()
    assert txn.fee == 1000
    assert txn.genesis_id == "testnet-v1.0"
    assert txn.first_valid == 100
    assert txn.last_valid == 1100
    assert txn.genesis_hash == GENESIS_HASH


def test_with_params_uses_fee_when_larger():
    txn = TxnBuilder.with_params(params(2500, 1000), Pay(SENDER, RECEIVER, 5).build()).build()
    assert txn.fee == 2500


def test_txn_builder_optional_fields():
    group = bytes([4] * 32)
    lease = bytes([5] * 32)
    txn = (
        TxnBuilder(1000, 1, 2, GENESIS_HASH, Pay(SENDER, RECEIVER, 5).build())
        .group(group)
        .lease(lease)
        .note(b"hello")
        .rekey_to(OTHER)
        .build()
    )
    assert txn.group == group
    assert txn.lease == lease
    assert txn.note == b"hello"
    assert txn.rekey_to == OTHER
    assert txn.genesis_id is None
    assert txn.sender() == SENDER


def test_txn_builder_rejects_bad_genesis_hash():
    with pytest.raises(ValueError):
        TxnBuilder(1000, 1, 2, b"short", Pay(SENDER, RECEIVER, 5).build()).build()


def test_pay():
    pay = Pay(SENDER, RECEIVER, 123456).close_remainder_to(OTHER).build()
    assert pay == Payment(SENDER, RECEIVER, 123456, OTHER)


def test_register_key_online():
    vote_pk = bytes([6] * 32)
    selection_pk = bytes([7] * 32)
    reg = RegisterKey.online(SENDER, vote_pk, selection_pk, 10, 20, 30).build()
    assert reg == KeyRegistration(SENDER, vote_pk, selection_pk, 10, 20, 30, None)


def test_register_key_offline_and_nonparticipating():
    assert RegisterKey.offline(SENDER).build() == KeyRegistration(SENDER)
    nonpart = RegisterKey.nonparticipating(SENDER, True).build()
    assert nonpart.nonparticipating is True
    assert nonpart.vote_pk is None


def test_create_asset():
    cfg = (
        CreateAsset(SENDER, 1000, 2, False)
        .unit_name("UNIT")
        .asset_name("Name")
        .url("example.com")
        .meta_data_hash(bytes(32))
        .manager(SENDER)
        .reserve(RECEIVER)
        .freeze(OTHER)
        .clawback(OTHER)
        .build()
    )
    assert isinstance(cfg, AssetConfigurationTransaction)
    assert cfg.config_asset is None
    assert cfg.params.total == 1000
    assert cfg.params.decimals == 2
    assert cfg.params.default_frozen is False
    assert cfg.params.unit_name == "UNIT"
    assert cfg.params.asset_name == "Name"
    assert cfg.params.url == "example.com"
    assert cfg.params.manager == SENDER
    assert cfg.params.reserve == RECEIVER
    assert cfg.params.freeze == OTHER
    assert cfg.params.clawback == OTHER


def test_update_asset():
    cfg = UpdateAsset(SENDER, 77).total(5).decimals(1).default_frozen(True).manager(OTHER).build()
    assert cfg.config_asset == 77
    assert cfg.params.total == 5
    assert cfg.params.decimals == 1
    assert cfg.params.default_frozen is True
    assert cfg.params.manager == OTHER
    assert cfg.params.unit_name is None


def test_destroy_asset():
    cfg = DestroyAsset(SENDER, 77).build()
    assert cfg == AssetConfigurationTransaction(SENDER, None, 77)


def test_transfer_asset():
    t = TransferAsset(SENDER, 77, 10, RECEIVER).close_to(OTHER).build()
    assert t == AssetTransferTransaction(SENDER, 77, 10, RECEIVER, OTHER)


def test_accept_asset():
    assert AcceptAsset(SENDER, 77).build() == AssetAcceptTransaction(SENDER, 77)


def test_clawback_asset():
    t = ClawbackAsset(SENDER, 77, 10, RECEIVER, OTHER).asset_close_to(SENDER).build()
    assert t == AssetClawbackTransaction(SENDER, 77, 10, RECEIVER, OTHER, SENDER)


def test_freeze_asset():
    t = FreezeAsset(SENDER, RECEIVER, 77, True).build()
    assert t == AssetFreezeTransaction(SENDER, RECEIVER, 77, True)