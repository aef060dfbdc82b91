import pytest

from votemarket.locked_voter_state import PROGRAM_ID, Escrow, Locker, LockerParams
from votemarket.pubkey import Pubkey

DELEGATE = Pubkey.from_string("GaugesLJrnVjNNWLReiw3Q7xQhycSBRgeHGTMDUaX231")


def _params(max_duration=1000, multiplier=10):
    return LockerParams(max_stake_vote_multiplier=multiplier, max_stake_duration=max_duration)


def _escrow(amount=100, start=10, end=2000):
    return Escrow(amount=amount, escrow_started_at=start, escrow_ends_at=end)


@pytest.mark.parametrize("account_type", [Escrow, Locker])
def test_serialized_length_matches_len(account_type):
    assert len(account_type().try_serialize()) == 8 + account_type.LEN


def test_vote_delegate_sits_at_filter_offset():
    encoded = Escrow(vote_delegate=DELEGATE, owner=PROGRAM_ID).try_serialize()
    assert encoded[129:161] == bytes(DELEGATE)


def test_locker_round_trip_with_params():
    locker = Locker(
        base=DELEGATE,
        bump=1,
        locked_supply=2**63,
        params=LockerParams(True, 10, 1, 2, 3),
    )
    assert Locker.try_deserialize(locker.try_serialize()) == locker


def test_escrow_round_trip_with_negative_times():
    escrow = Escrow(escrow_started_at=-5, escrow_ends_at=2**63 - 1, amount=7)
    assert Escrow.try_deserialize(escrow.try_serialize()) == escrow


def test_zero_now_is_invalid():
    assert _params().calculate_voter_power(_escrow(), 0) is None


def test_unstarted_escrow_has_no_power():
    assert _params().calculate_voter_power(_escrow(start=0), 100) == 0


@pytest.mark.parametrize("now", [5, 2000, 3000])
def test_no_power_outside_lockup(now):
    assert _params().calculate_voter_power(_escrow(), now) == 0


def test_power_declines_linearly():
    assert _params().calculate_voter_power(_escrow(), 1500) == 500


def test_power_is_clamped_to_max_duration():
    escrow = _escrow()
    params = _params()
    assert params.calculate_voter_power(escrow, 11) == escrow.amount * params.max_stake_vote_multiplier


def test_power_never_increases_over_time():
    escrow = _escrow()
    params = _params()
    powers = [params.calculate_voter_power(escrow, now) for now in range(10, 2001, 37)]
    assert powers == sorted(powers, reverse=True)


def test_zero_max_duration_gives_none():
    assert _params(max_duration=0).calculate_voter_power(_escrow(), 100) is None


def test_multiplier_overflow_gives_none():
    escrow = _escrow(amount=2**64 - 1)
    assert _params(multiplier=2).calculate_voter_power(escrow, 100) is None


def test_voting_power_at_time_uses_locker_params():
    escrow = _escrow()
    params = _params()
    assert escrow.voting_power_at_time(params, 1500) == params.calculate_voter_power(escrow, 1500)