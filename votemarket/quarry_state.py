"""Account layouts of the quarry mine program."""

from dataclasses import dataclass

from .layout import I64, U8, U16, U64, U128, AnchorAccount
from .pubkey import DEFAULT_PUBKEY, Pubkey

PROGRAM_ID = Pubkey.from_string("4MMZH3ih1aSty2nx4MC3kSR94Zb55XsXnqb5jfEcyHWQ")
SECONDS_PER_YEAR = 86_400 * 365


@dataclass
class Rewarder(AnchorAccount):
    """Controls token reward distribution to all quarries."""

    LEN = 32 + 1 + 32 + 32 + 2 + 8 + 8 + 32 + 32 + 32 + 8 + 32 + 1

    base: Pubkey = DEFAULT_PUBKEY
    bump: U8 = 0
    authority: Pubkey = DEFAULT_PUBKEY
    pending_authority: Pubkey = DEFAULT_PUBKEY
    num_quarries: U16 = 0
    annual_rewards_rate: U64 = 0
    total_rewards_shares: U64 = 0
    mint_wrapper: Pubkey = DEFAULT_PUBKEY
    rewards_token_mint: Pubkey = DEFAULT_PUBKEY
    claim_fee_token_account: Pubkey = DEFAULT_PUBKEY
    max_claim_fee_millibps: U64 = 0
    pause_authority: Pubkey = DEFAULT_PUBKEY
    is_paused: bool = False


@dataclass
class Quarry(AnchorAccount):
    """A pool that distributes tokens to its miners."""

    LEN = 32 + 32 + 1 + 2 + 1 + 8 + 8 + 16 + 8 + 8 + 8 + 8

    rewarder: Pubkey = DEFAULT_PUBKEY
    token_mint_key: Pubkey = DEFAULT_PUBKEY
    bump: U8 = 0
    index: U16 = 0
    token_mint_decimals: U8 = 0
    famine_ts: I64 = 0
    last_update_ts: I64 = 0
    rewards_per_token_stored: U128 = 0
    annual_rewards_rate: U64 = 0
    rewards_share: U64 = 0
    total_tokens_deposited: U64 = 0
    num_miners: U64 = 0