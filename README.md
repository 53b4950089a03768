# algotxn

Create Algorand transactions in plain Python. The package encodes them the
way the network expects, computes their ids and groups them into atomic
transfers.

## Installation

    pip install algotxn

## Modules

- `algotxn.types`: `Address`, a 32-byte public key. `Address.from_string`
  parses the checksummed base32 form and `str(address)` produces it.
- `algotxn.transaction`: dataclasses for the transaction kinds. These are
  `Payment`, `KeyRegistration`, `AssetConfigurationTransaction` with
  `AssetParams`, `AssetTransferTransaction`, `AssetAcceptTransaction`,
  `AssetClawbackTransaction`, `AssetFreezeTransaction` and
  `ApplicationCallTransaction` with `OnComplete` and `StateSchema`. The module
  also holds `Transaction` and `SignedTransaction`. A signed transaction
  carries a `SingleSignature`, a `MultisigSignature` or a `SignedLogic`.
  A `SignedLogic` can hold a `DelegatedSig` or a `DelegatedMultiSig`; with
  neither, it stands for a contract account.
- `algotxn.builder`: `TxnBuilder` (with `TxnBuilder.with_params` taking a
  `SuggestedTransactionParams`; the fee becomes the larger of `fee` and
  `min_fee`), `Pay`, `RegisterKey` (`online`, `offline`, `nonparticipating`),
  `CreateAsset`, `UpdateAsset`, `DestroyAsset`, `TransferAsset`,
  `AcceptAsset`, `ClawbackAsset` and `FreezeAsset`.
- `algotxn.app_builder`: `CreateApplication`, `UpdateApplication`,
  `CallApplication`, `ClearApplication`, `CloseApplication`,
  `DeleteApplication` and `OptInApplication`, all built on `AppCallBuilder`.
- `algotxn.encoding`: `transaction_to_api` / `transaction_from_api` (wire
  maps), `encode_transaction` / `decode_transaction` (msgpack),
  `bytes_to_sign`, `raw_id` and `transaction_id`. Keys are written in
  alphabetical order and zero values are left out. The node checks
  signatures against exactly that form.
- `algotxn.signed`: the same for signed transactions and logic signatures.
  These are `signed_transaction_to_api`, `signed_transaction_from_api`,
  `encode_signed_transaction`, `decode_signed_transaction`,
  `signed_logic_to_api` and `signed_logic_from_api`. The transaction id is
  not part of the wire form, so a decoded `SignedTransaction` has an empty
  `transaction_id`.
- `algotxn.tx_group`: `TxGroup`, `compute_group_id` and `assign_group_id`
  for atomic groups of at most 16 transactions.
- `algotxn.auction`: `Bid` (with `to_msgpack` / `from_msgpack`) and
  `SignedBid`.
- `algotxn.url`: `algorand://` payment and asset-transfer links through
  `LinkableTransactionBuilder`.

## Example

```python
from algotxn.builder import Pay, SuggestedTransactionParams, TxnBuilder
from algotxn.encoding import decode_transaction, encode_transaction, transaction_id
from algotxn.tx_group import assign_group_id
from algotxn.types import Address

sender = Address(bytes(32))
receiver = Address(bytes([1]) * 32)
print(str(receiver))  # checksummed base32 form

params = SuggestedTransactionParams(
    genesis_id="testnet-v1.0",
    genesis_hash=bytes(32),
    fee=0,
    min_fee=1000,
    first_valid=1000,
    last_valid=2000,
)

first = TxnBuilder.with_params(params, Pay(sender, receiver, 123_456).build()).build()
second = TxnBuilder.with_params(params, Pay(receiver, sender, 1_000).build()).build()

print(transaction_id(first))
raw = encode_transaction(first)
assert decode_transaction(raw) == first

# Atomic transfer: every transaction gets the same group id, which is returned.
group_id = assign_group_id([first, second])
assert first.group == second.group == group_id
```

## Payment links

```python
from algotxn.types import Address
from algotxn.url import LinkableTransactionBuilder, Note

receiver = Address(bytes([1]) * 32)
link = (
    LinkableTransactionBuilder.payment(receiver, 1_000_000)
    .label("Coffee shop")
    .note(Note("thanks"))                 # editable by the user
    .build()
)
print(link.as_url())

locked = (
    LinkableTransactionBuilder.asset_transfer(receiver, asset=31566704, amount=5)
    .note(Note("order 17", editable=False))  # written as "xnote"
    .build()
)
print(locked.as_url())
```

## Errors

Every failure in encoding, decoding and grouping raises a subclass of
`algotxn.error.TransactionError`. Two examples are
`EmptyTransactionListError` and `MaxTransactionGroupSizeError` for groups
that are empty or too large. Another is `DeserializationError` for malformed
or inconsistent wire data. Invalid values given to the models, such as a
public key that is not 32 bytes, raise `ValueError`.

## What it does not do

- It does not hold keys or sign. Signatures are values you supply to
  `SignedTransaction` and `SignedLogic`. The package has no accounts and no
  fee-per-byte estimation.
- It does not talk to a node, a wallet daemon or an indexer. Sending a
  transaction or fetching suggested parameters is left to the caller.

## Running the tests

    pip install "algotxn[test]"
    pytest