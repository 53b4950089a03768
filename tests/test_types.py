import os

import pytest

from algotxn.types import Address

RECEIVER = "2FMLYJHYQWRHMFKRHKTKX5UNB5DGO65U57O3YVLWUJWKRE4YYJYC2CWWBY"
OTHER = "DN7MBMCL5JQ3PFUQS7TMX5AH4EEKOBJVDUF4TCV6WERATKFLQF4MQUPZTA"


def test_zero_address_string():
    assert str(Address(bytes(32))) == "AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAY5HFKQ"


@pytest.mark.parametrize("text", [RECEIVER, OTHER])
def test_parse_and_format_round_trip(text):
    assert str(Address.from_string(text)) == text


def test_random_key_round_trip():
    address = Address(os.urandom(32))
    assert Address.from_string(str(address)) == address
    assert len(str(address)) == 58


def test_bad_checksum_rejected():
    tampered = "3" + RECEIVER[1:]
    with pytest.raises(ValueError):
        Address.from_string(tampered)


def test_bad_length_rejected():
    with pytest.raises(ValueError):
        Address.from_string(RECEIVER[:-1])


def test_bad_characters_rejected():
    with pytest.raises(ValueError):
        Address.from_string("1" * 58)


def test_wrong_key_length_rejected():
    with pytest.raises(ValueError):
        Address(bytes(31))


def test_equality_by_key():
    key = os.urandom(32)
    assert Address(key) == Address(bytearray(key))