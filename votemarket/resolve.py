"""Derivation of the addresses involved in gauge voting."""

import enum
from dataclasses import dataclass
from typing import List, Optional, Sequence

from . import gauge_state, locked_voter_state
from .pubkey import Pubkey, find_program_address


def _epoch_bytes(epoch: int) -> bytes:
    return epoch.to_bytes(4, "little")


def get_escrow_address_for_owner(owner: Pubkey, locker: Pubkey) -> Pubkey:
    return find_program_address([b"Escrow", locker, owner], locked_voter_state.PROGRAM_ID)[0]


def get_epoch_gauge(gauge: Pubkey, epoch: int) -> Pubkey:
    return find_program_address(
        [b"EpochGauge", gauge, _epoch_bytes(epoch)], gauge_state.PROGRAM_ID
    )[0]


def get_gauge_voter(escrow: Pubkey, gaugemeister: Pubkey) -> Pubkey:
    return find_program_address(
        [b"GaugeVoter", gaugemeister, escrow], gauge_state.PROGRAM_ID
    )[0]


def get_gauge_vote(gauge_voter: Pubkey, gauge: Pubkey) -> Pubkey:
    return find_program_address([b"GaugeVote", gauge_voter, gauge], gauge_state.PROGRAM_ID)[0]


def get_epoch_gauge_vote(gauge_vote: Pubkey, epoch: int) -> Pubkey:
    return find_program_address(
        [b"EpochGaugeVote", gauge_vote, _epoch_bytes(epoch)], gauge_state.PROGRAM_ID
    )[0]


def get_epoch_gauge_voter(gauge_voter: Pubkey, epoch: int) -> Pubkey:
    return find_program_address(
        [b"EpochGaugeVoter", gauge_voter, _epoch_bytes(epoch)], gauge_state.PROGRAM_ID
    )[0]


def get_delegate(config: Pubkey, vote_market_program: Pubkey) -> Pubkey:
    return find_program_address([b"vote-delegate", config], vote_market_program)[0]


def get_vote_buy(config: Pubkey, gauge: Pubkey, epoch: int, vote_market_program: Pubkey) -> Pubkey:
    return find_program_address(
        [b"vote-buy", _epoch_bytes(epoch), config, gauge], vote_market_program
    )[0]


class StepKind(enum.Enum):
    GAUGE_VOTER = "gauge_voter"
    GAUGE_VOTE = "gauge_vote"
    EPOCH_GAUGE_VOTER = "epoch_gauge_voter"
    EPOCH_GAUGE = "epoch_gauge"


@dataclass(frozen=True)
class VoteCreateStep:
    """An account that must be created before voting."""

    kind: StepKind
    key: Pubkey


@dataclass(frozen=True)
class VoteKeys:
    """The addresses of one escrow's vote on one gauge in one epoch."""

    gauge_voter: Pubkey
    gauge_vote: Pubkey
    epoch_gauge_voter: Pubkey
    epoch_gauge_vote: Pubkey
    epoch_gauge: Pubkey

    def get_all_keys(self) -> List[Pubkey]:
        return [
            self.gauge_voter,
            self.gauge_vote,
            self.epoch_gauge_voter,
            self.epoch_gauge_vote,
            self.epoch_gauge,
        ]

    def missing_prepare_vote_steps(self, accounts: Sequence[Optional[object]]) -> List[VoteCreateStep]:
        """Steps for the keys whose fetched account is None.

        accounts lines up with get_all_keys(); the epoch gauge vote is never a
        step, since it can only be made once the vote amount is set.
        """
        kinds = [
            StepKind.GAUGE_VOTER,
            StepKind.GAUGE_VOTE,
            StepKind.EPOCH_GAUGE_VOTER,
            None,
            StepKind.EPOCH_GAUGE,
        ]
        keys = self.get_all_keys()
        if len(accounts) != len(keys):
            raise ValueError(f"expected {len(keys)} accounts, got {len(accounts)}")
        return [
            VoteCreateStep(kind, key)
            for kind, key, account in zip(kinds, keys, accounts)
            if account is None and kind is not None
        ]


def resolve_vote_keys(escrow: Pubkey, gauge: Pubkey, epoch: int, gaugemeister: Pubkey) -> VoteKeys:
    gauge_voter = get_gauge_voter(escrow, gaugemeister)
    gauge_vote = get_gauge_vote(gauge_voter, gauge)
    return VoteKeys(
        gauge_voter=gauge_voter,
        gauge_vote=gauge_vote,
        epoch_gauge_voter=get_epoch_gauge_voter(gauge_voter, epoch),
        epoch_gauge_vote=get_epoch_gauge_vote(gauge_vote, epoch),
        epoch_gauge=get_epoch_gauge(gauge, epoch),
    )