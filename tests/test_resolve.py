import pytest

from votemarket.gauge_state import EpochGaugeVote
from votemarket.pubkey import is_on_curve, Pubkey
from votemarket.resolve import (
    StepKind,
    VoteCreateStep,
    get_delegate,
    get_epoch_gauge,
    get_epoch_gauge_vote,
    get_epoch_gauge_voter,
    get_escrow_address_for_owner,
    get_gauge_vote,
    get_gauge_voter,
    get_vote_buy,
    resolve_vote_keys,
)

GAUGEMEISTER = Pubkey(bytes([11]) * 32)
LOCKER = Pubkey(bytes([12]) * 32)
PROGRAM = Pubkey(bytes([13]) * 32)
ESCROW = Pubkey(bytes([14]) * 32)
GAUGE = Pubkey(bytes([15]) * 32)
CONFIG = Pubkey(bytes([16]) * 32)


def test_epoch_gauge_vote_matches_state_helper():
    gauge_vote = get_gauge_vote(get_gauge_voter(ESCROW, GAUGEMEISTER), GAUGE)
    expected, _ = EpochGaugeVote.find_program_address(gauge_vote, 7)
    assert get_epoch_gauge_vote(gauge_vote, 7) == expected


def test_resolve_vote_keys_composes():
    keys = resolve_vote_keys(ESCROW, GAUGE, 3, GAUGEMEISTER)
    gauge_voter = get_gauge_voter(ESCROW, GAUGEMEISTER)
    assert keys.gauge_voter == gauge_voter
    assert keys.gauge_vote == get_gauge_vote(gauge_voter, GAUGE)
    assert keys.epoch_gauge_voter == get_epoch_gauge_voter(gauge_voter, 3)
    assert keys.epoch_gauge_vote == get_epoch_gauge_vote(keys.gauge_vote, 3)
    assert keys.epoch_gauge == get_epoch_gauge(GAUGE, 3)


def test_all_keys_order_and_off_curve():
    keys = resolve_vote_keys(ESCROW, GAUGE, 3, GAUGEMEISTER)
    all_keys = keys.get_all_keys()
    assert all_keys == [
        keys.gauge_voter,
        keys.gauge_vote,
        keys.epoch_gauge_voter,
        keys.epoch_gauge_vote,
        keys.epoch_gauge,
    ]
    assert len(set(all_keys)) == 5
    assert not any(is_on_curve(bytes(key)) for key in all_keys)


def test_epoch_changes_addresses():
    assert get_epoch_gauge(GAUGE, 1) != get_epoch_gauge(GAUGE, 2)
    assert get_vote_buy(CONFIG, GAUGE, 1, PROGRAM) != get_vote_buy(CONFIG, GAUGE, 2, PROGRAM)


def test_escrow_depends_on_locker_and_owner():
    owner = Pubkey(bytes([17]) * 32)
    first = get_escrow_address_for_owner(owner, LOCKER)
    assert first == get_escrow_address_for_owner(owner, LOCKER)
    assert first != get_escrow_address_for_owner(owner, GAUGEMEISTER)
    assert first != get_escrow_address_for_owner(ESCROW, LOCKER)


def test_delegate_depends_on_program():
    assert get_delegate(CONFIG, PROGRAM) != get_delegate(CONFIG, GAUGEMEISTER)
    assert not is_on_curve(bytes(get_delegate(CONFIG, PROGRAM)))


def test_missing_steps_skip_epoch_gauge_vote():
    keys = resolve_vote_keys(ESCROW, GAUGE, 3, GAUGEMEISTER)
    steps = keys.missing_prepare_vote_steps([None, object(), None, None, None])
    assert steps == [
        VoteCreateStep(StepKind.GAUGE_VOTER, keys.gauge_voter),
        VoteCreateStep(StepKind.EPOCH_GAUGE_VOTER, keys.epoch_gauge_voter),
        VoteCreateStep(StepKind.EPOCH_GAUGE, keys.epoch_gauge),
    ]


def test_no_missing_steps():
    keys = resolve_vote_keys(ESCROW, GAUGE, 3, GAUGEMEISTER)
    assert keys.missing_prepare_vote_steps([object()] * 5) == []


def test_missing_steps_length_mismatch():
    keys = resolve_vote_keys(ESCROW, GAUGE, 3, GAUGEMEISTER)
    with pytest.raises(ValueError):
        keys.missing_prepare_vote_steps([None, None])