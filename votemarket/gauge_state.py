"""Account layouts of the gauge program."""

from dataclasses import dataclass
from typing import Tuple

from .layout import U8, U32, U64, AnchorAccount
from .pubkey import DEFAULT_PUBKEY, PUBKEY_BYTES, Pubkey, find_program_address

PROGRAM_ID = Pubkey.from_string("GaugesLJrnVjNNWLReiw3Q7xQhycSBRgeHGTMDUaX231")

_U32_MAX = 2**32 - 1


class GaugeStateError(Exception):
    """Raised when gauge state arithmetic fails."""


@dataclass
class Gaugemeister(AnchorAccount):
    """Manages the gauges of a rewarder."""

    LEN = PUBKEY_BYTES + 1 + PUBKEY_BYTES * 4 + 4 + 4 + 8 + PUBKEY_BYTES * 2

    base: Pubkey = DEFAULT_PUBKEY
    bump: U8 = 0
    rewarder: Pubkey = DEFAULT_PUBKEY
    operator: Pubkey = DEFAULT_PUBKEY
    locker: Pubkey = DEFAULT_PUBKEY
    foreman: Pubkey = DEFAULT_PUBKEY
    epoch_duration_seconds: U32 = 0
    current_rewards_epoch: U32 = 0
    next_epoch_starts_at: U64 = 0
    locker_token_mint: Pubkey = DEFAULT_PUBKEY
    locker_governor: Pubkey = DEFAULT_PUBKEY

    def voting_epoch(self) -> int:
        """The epoch after the current rewards epoch."""
        epoch = self.current_rewards_epoch + 1
        if epoch > _U32_MAX:
            raise GaugeStateError("Overflow when incrementing epoch")
        return epoch


@dataclass
class Gauge(AnchorAccount):
    """Determines the rewards share of one quarry."""

    LEN = PUBKEY_BYTES * 2 + 1

    gaugemeister: Pubkey = DEFAULT_PUBKEY
    quarry: Pubkey = DEFAULT_PUBKEY
    is_disabled: bool = False


@dataclass
class EpochGauge(AnchorAccount):
    """The power voted for a gauge in one epoch."""

    LEN = PUBKEY_BYTES + 4 + 8

    gauge: Pubkey = DEFAULT_PUBKEY
    voting_epoch: U32 = 0
    total_power: U64 = 0


@dataclass
class GaugeVoter(AnchorAccount):
    """An escrow that can vote on gauges."""

    gaugemeister: Pubkey = DEFAULT_PUBKEY
    escrow: Pubkey = DEFAULT_PUBKEY
    owner: Pubkey = DEFAULT_PUBKEY
    total_weight: U32 = 0
    weight_change_seqno: U64 = 0


@dataclass
class GaugeVote(AnchorAccount):
    """A voter's weight for one gauge."""

    gauge_voter: Pubkey = DEFAULT_PUBKEY
    gauge: Pubkey = DEFAULT_PUBKEY
    weight: U32 = 0


@dataclass
class EpochGaugeVoter(AnchorAccount):
    """A voter's committed power for one epoch."""

    LEN = PUBKEY_BYTES + 4 + 8 * 3

    gauge_voter: Pubkey = DEFAULT_PUBKEY
    voting_epoch: U32 = 0
    weight_change_seqno: U64 = 0
    voting_power: U64 = 0
    allocated_power: U64 = 0


@dataclass
class EpochGaugeVote(AnchorAccount):
    """A voter's committed power for one gauge in one epoch."""

    LEN = 8

    allocated_power: U64 = 0

    @classmethod
    def find_program_address(cls, gauge_vote: Pubkey, voting_epoch: int) -> Tuple[Pubkey, int]:
        """Address of the vote for a gauge vote and voting epoch."""
        return find_program_address(
            [b"EpochGaugeVote", gauge_vote, voting_epoch.to_bytes(4, "little")],
            PROGRAM_ID,
        )