import pytest

from votemarket.pubkey import (
    Pubkey,
    PubkeyError,
    b58decode,
    b58encode,
    create_program_address,
    deserialize_pubkey_vec,
    find_program_address,
    is_on_curve,
    serialize_pubkey_vec,
)

GAUGE_PROGRAM = "GaugesLJrnVjNNWLReiw3Q7xQhycSBRgeHGTMDUaX231"
LOCKER_PROGRAM = "LocktDzaV1W2Bm9DeZeiyz4J9zs4fRqNiYqQyracRXw"


def test_zero_bytes_encode_as_ones():
    assert b58encode(bytes(32)) == "11111111111111111111111111111111"


@pytest.mark.parametrize(
    "data", [b"", b"\x00\x00\x01", b"\xff" * 5, bytes(range(32)), b"\x00"]
)
def test_b58_round_trip(data):
    assert b58decode(b58encode(data)) == data


def test_b58decode_rejects_invalid_character():
    with pytest.raises(PubkeyError):
        b58decode("abc0")


def test_pubkey_string_round_trip():
    key = Pubkey.from_string(GAUGE_PROGRAM)
    assert str(key) == GAUGE_PROGRAM
    assert len(key.to_bytes()) == 32
    assert Pubkey(key.to_bytes()) == key
    assert bytes(key) == key.to_bytes()


def test_from_string_too_long():
    with pytest.raises(PubkeyError):
        Pubkey.from_string("1" * 45)


def test_from_string_wrong_size():
    with pytest.raises(PubkeyError):
        Pubkey.from_string("abc")


def test_constructor_rejects_short_bytes():
    with pytest.raises(PubkeyError):
        Pubkey(bytes(31))


def test_zero_and_identity_are_on_curve():
    assert is_on_curve(bytes(32)) is True
    assert is_on_curve(bytes([1]) + bytes(31)) is True


def test_base_point_is_on_curve():
    base = bytes.fromhex("58" + "66" * 31)
    assert is_on_curve(base) is True


def test_find_program_address_is_consistent():
    program = Pubkey.from_string(GAUGE_PROGRAM)
    owner = Pubkey.from_string(LOCKER_PROGRAM)
    seeds = [b"Escrow", owner]
    address, bump = find_program_address(seeds, program)
    assert 1 <= bump <= 255
    assert is_on_curve(bytes(address)) is False
    assert create_program_address([*seeds, bytes([bump])], program) == address


def test_find_program_address_takes_highest_bump():
    program = Pubkey.from_string(LOCKER_PROGRAM)
    seeds = [b"vote-delegate", Pubkey.from_string(GAUGE_PROGRAM)]
    _, bump = find_program_address(seeds, program)
    for higher in range(bump + 1, 256):
        with pytest.raises(PubkeyError):
            create_program_address([*seeds, bytes([higher])], program)


def test_seed_too_long():
    program = Pubkey.from_string(GAUGE_PROGRAM)
    with pytest.raises(PubkeyError):
        create_program_address([bytes(33)], program)


def test_too_many_seeds():
    program = Pubkey.from_string(GAUGE_PROGRAM)
    with pytest.raises(PubkeyError):
        find_program_address([b"a"] * 16, program)


def test_pubkey_vec_round_trip():
    keys = [Pubkey.from_string(GAUGE_PROGRAM), Pubkey.from_string(LOCKER_PROGRAM)]
    text = serialize_pubkey_vec(keys)
    assert text == f"[{GAUGE_PROGRAM},{LOCKER_PROGRAM}]"
    assert deserialize_pubkey_vec(text) == keys


def test_empty_pubkey_vec_cannot_be_read():
    with pytest.raises(PubkeyError):
        deserialize_pubkey_vec("[]")