"""Account layouts of the locked voter program and voting power."""

from dataclasses import dataclass, field
from typing import Optional

from .layout import I64, U8, U64, AnchorAccount
from .pubkey import DEFAULT_PUBKEY, PUBKEY_BYTES, Pubkey

PROGRAM_ID = Pubkey.from_string("LocktDzaV1W2Bm9DeZeiyz4J9zs4fRqNiYqQyracRXw")

_U64_MAX = 2**64 - 1
_I64_MAX = 2**63 - 1


@dataclass
class LockerParams:
    """Mutable parameters of a locker."""

    LEN = 1 + 1 + 8 + 8 + 8

    whitelist_enabled: bool = False
    max_stake_vote_multiplier: U8 = 0
    min_stake_duration: U64 = 0
    max_stake_duration: U64 = 0
    proposal_activation_min_votes: U64 = 0

    def calculate_voter_power(self, escrow: "Escrow", now: int) -> Optional[int]:
        """Voting power of an escrow at a time, or None when it cannot be computed."""
        if now == 0:
            return None
        if escrow.escrow_started_at == 0:
            return 0
        if now < escrow.escrow_started_at or now >= escrow.escrow_ends_at:
            return 0
        until_expiry = escrow.escrow_ends_at - now
        if until_expiry > _I64_MAX:
            return None
        relevant = min(until_expiry, self.max_stake_duration)
        power_if_max_lockup = escrow.amount * self.max_stake_vote_multiplier
        if power_if_max_lockup > _U64_MAX:
            return None
        if self.max_stake_duration == 0:
            return None
        power = power_if_max_lockup * relevant // self.max_stake_duration
        return power if power <= _U64_MAX else None


@dataclass
class Escrow(AnchorAccount):
    """Tokens locked on behalf of a user."""

    LEN = PUBKEY_BYTES * 2 + 1 + PUBKEY_BYTES + 8 + 8 + 8 + PUBKEY_BYTES

    locker: Pubkey = DEFAULT_PUBKEY
    owner: Pubkey = DEFAULT_PUBKEY
    bump: U8 = 0
    tokens: Pubkey = DEFAULT_PUBKEY
    amount: U64 = 0
    escrow_started_at: I64 = 0
    escrow_ends_at: I64 = 0
    vote_delegate: Pubkey = DEFAULT_PUBKEY

    def voting_power_at_time(self, locker: LockerParams, timestamp: int) -> Optional[int]:
        return locker.calculate_voter_power(self, timestamp)


@dataclass
class Locker(AnchorAccount):
    """A group of escrows."""

    LEN = PUBKEY_BYTES + 1 + PUBKEY_BYTES + 8 + PUBKEY_BYTES + LockerParams.LEN

    base: Pubkey = DEFAULT_PUBKEY
    bump: U8 = 0
    token_mint: Pubkey = DEFAULT_PUBKEY
    locked_supply: U64 = 0
    governor: Pubkey = DEFAULT_PUBKEY
    params: LockerParams = field(default_factory=LockerParams)