import pytest

from votemarket.gauge_state import (
    PROGRAM_ID,
    EpochGauge,
    EpochGaugeVote,
    EpochGaugeVoter,
    Gauge,
    GaugeStateError,
    GaugeVote,
    GaugeVoter,
    Gaugemeister,
)
from votemarket.layout import DeserializeError
from votemarket.pubkey import Pubkey, create_program_address, is_on_curve

LOCKER = Pubkey.from_string("LocktDzaV1W2Bm9DeZeiyz4J9zs4fRqNiYqQyracRXw")


@pytest.mark.parametrize(
    "account_type", [Gaugemeister, Gauge, EpochGauge, EpochGaugeVoter, EpochGaugeVote]
)
def test_serialized_length_matches_len(account_type):
    assert len(account_type().try_serialize()) == 8 + account_type.LEN


def test_program_id_text():
    parsed = Pubkey.from_string("GaugesLJrnVjNNWLReiw3Q7xQhycSBRgeHGTMDUaX231")
    assert parsed == PROGRAM_ID


def test_epoch_gauge_discriminator_from_filter():
    assert EpochGauge.discriminator() == bytes(
        [0x53, 0xE5, 0x77, 0x85, 0x7E, 0xD1, 0x37, 0x6E]
    )


def test_voting_epoch_follows_current():
    assert Gaugemeister(current_rewards_epoch=0).voting_epoch() == 1


def test_voting_epoch_overflow():
    with pytest.raises(GaugeStateError):
        Gaugemeister(current_rewards_epoch=2**32 - 1).voting_epoch()


def test_gaugemeister_round_trip():
    meister = Gaugemeister(
        locker=LOCKER,
        bump=254,
        epoch_duration_seconds=604800,
        current_rewards_epoch=42,
        next_epoch_starts_at=2**40,
    )
    assert Gaugemeister.try_deserialize(meister.try_serialize()) == meister


@pytest.mark.parametrize(
    "value",
    [
        Gauge(gaugemeister=LOCKER, is_disabled=True),
        GaugeVoter(owner=LOCKER, total_weight=7, weight_change_seqno=9),
        GaugeVote(gauge=LOCKER, weight=2**32 - 1),
        EpochGaugeVoter(gauge_voter=LOCKER, voting_power=5, allocated_power=3),
    ],
)
def test_accounts_round_trip(value):
    assert type(value).try_deserialize(value.try_serialize()) == value


def test_account_types_are_not_confused():
    with pytest.raises(DeserializeError):
        GaugeVote.try_deserialize(GaugeVoter().try_serialize())


def test_epoch_gauge_vote_address():
    address, bump = EpochGaugeVote.find_program_address(LOCKER, 3)
    expected = create_program_address(
        [b"EpochGaugeVote", LOCKER, (3).to_bytes(4, "little"), bytes([bump])], PROGRAM_ID
    )
    assert address == expected
    assert is_on_curve(bytes(address)) is False