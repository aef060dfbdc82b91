"""Instructions of the gauge and locked voter programs built by hand."""

from dataclasses import dataclass, field
from typing import List, Sequence

from . import gauge_state, locked_voter_state
from .layout import sighash
from .pubkey import Pubkey, find_program_address
from .resolve import StepKind, VoteCreateStep, VoteKeys

SYSTEM_PROGRAM_ID = Pubkey.from_string("11111111111111111111111111111111")


@dataclass(frozen=True)
class AccountMeta:
    """An account an instruction touches, and how it touches it."""

    pubkey: Pubkey
    is_signer: bool
    is_writable: bool

    @classmethod
    def writable(cls, pubkey: Pubkey, is_signer: bool = False) -> "AccountMeta":
        return cls(pubkey=pubkey, is_signer=is_signer, is_writable=True)

    @classmethod
    def readonly(cls, pubkey: Pubkey, is_signer: bool = False) -> "AccountMeta":
        return cls(pubkey=pubkey, is_signer=is_signer, is_writable=False)


@dataclass(frozen=True)
class Instruction:
    """A program call: the program, its accounts and its data."""

    program_id: Pubkey
    accounts: List[AccountMeta] = field(default_factory=list)
    data: bytes = b""


def _epoch_bytes(epoch: int) -> bytes:
    return epoch.to_bytes(4, "little")


def create_epoch_gauge_instruction(gauge: Pubkey, epoch: int, payer: Pubkey) -> Instruction:
    """Create the epoch gauge of a gauge for an epoch, paid by payer."""
    epoch_gauge, bump = find_program_address(
        [b"EpochGauge", gauge, _epoch_bytes(epoch)], gauge_state.PROGRAM_ID
    )
    return Instruction(
        program_id=gauge_state.PROGRAM_ID,
        accounts=[
            AccountMeta.writable(gauge),
            AccountMeta.writable(epoch_gauge),
            AccountMeta.writable(payer, True),
            AccountMeta.readonly(SYSTEM_PROGRAM_ID),
        ],
        data=sighash("create_epoch_gauge") + bytes([bump]) + _epoch_bytes(epoch),
    )


def set_vote_delegate_instruction(escrow: Pubkey, delegate: Pubkey, owner: Pubkey) -> Instruction:
    """Let delegate vote on behalf of the escrow of owner."""
    return Instruction(
        program_id=locked_voter_state.PROGRAM_ID,
        accounts=[
            AccountMeta.writable(escrow),
            AccountMeta.readonly(owner, True),
        ],
        data=sighash("set_vote_delegate") + bytes(delegate),
    )


def create_gauge_voter_instruction(
    gauge_voter: Pubkey, gaugemeister: Pubkey, escrow: Pubkey, payer: Pubkey
) -> Instruction:
    return Instruction(
        program_id=gauge_state.PROGRAM_ID,
        accounts=[
            AccountMeta.writable(gauge_voter),
            AccountMeta.readonly(gaugemeister),
            AccountMeta.readonly(escrow),
            AccountMeta.writable(payer, True),
            AccountMeta.readonly(SYSTEM_PROGRAM_ID),
        ],
        data=sighash("create_gauge_voter_v2"),
    )


def create_gauge_vote_instruction(
    gauge_vote: Pubkey, gauge_voter: Pubkey, gauge: Pubkey, payer: Pubkey
) -> Instruction:
    return Instruction(
        program_id=gauge_state.PROGRAM_ID,
        accounts=[
            AccountMeta.writable(gauge_vote),
            AccountMeta.readonly(gauge_voter),
            AccountMeta.readonly(gauge),
            AccountMeta.writable(payer, True),
            AccountMeta.readonly(SYSTEM_PROGRAM_ID),
        ],
        data=sighash("create_gauge_vote_v2"),
    )


def reset_epoch_gauge_voter_instruction(
    gaugemeister: Pubkey,
    locker: Pubkey,
    escrow: Pubkey,
    gauge_voter: Pubkey,
    epoch_gauge_voter: Pubkey,
) -> Instruction:
    return Instruction(
        program_id=gauge_state.PROGRAM_ID,
        accounts=[
            AccountMeta.readonly(gaugemeister),
            AccountMeta.readonly(locker),
            AccountMeta.readonly(escrow),
            AccountMeta.readonly(gauge_voter),
            AccountMeta.writable(epoch_gauge_voter),
        ],
        data=sighash("reset_epoch_gauge_voter"),
    )


def trigger_next_epoch_instruction(gaugemeister: Pubkey) -> Instruction:
    return Instruction(
        program_id=gauge_state.PROGRAM_ID,
        accounts=[AccountMeta.writable(gaugemeister)],
        data=sighash("trigger_next_epoch"),
    )


def gauge_revert_vote_instruction(
    gaugemeister: Pubkey,
    gauge: Pubkey,
    vote_keys: VoteKeys,
    escrow: Pubkey,
    delegate: Pubkey,
) -> Instruction:
    """Withdraw the committed vote of an escrow on a gauge."""
    return Instruction(
        program_id=gauge_state.PROGRAM_ID,
        accounts=[
            AccountMeta.readonly(gaugemeister),
            AccountMeta.readonly(gauge),
            AccountMeta.readonly(vote_keys.gauge_voter),
            AccountMeta.readonly(vote_keys.gauge_vote),
            AccountMeta.writable(vote_keys.epoch_gauge),
            AccountMeta.writable(vote_keys.epoch_gauge_voter),
            AccountMeta.writable(escrow),
            AccountMeta.readonly(delegate, True),
            AccountMeta.writable(vote_keys.epoch_gauge_vote, True),
        ],
        data=sighash("gauge_revert_vote"),
    )


def prepare_vote_instructions(
    vote_keys: VoteKeys,
    steps: Sequence[VoteCreateStep],
    gaugemeister: Pubkey,
    escrow: Pubkey,
    gauge: Pubkey,
    epoch: int,
    payer: Pubkey,
) -> List[Instruction]:
    """One instruction per creation step, in step order.

    Epoch gauge voter steps produce nothing; that account is made after voting.
    """
    instructions = []
    for step in steps:
        if step.kind is StepKind.GAUGE_VOTER:
            instructions.append(
                create_gauge_voter_instruction(step.key, gaugemeister, escrow, payer)
            )
        elif step.kind is StepKind.GAUGE_VOTE:
            instructions.append(
                create_gauge_vote_instruction(step.key, vote_keys.gauge_voter, gauge, payer)
            )
        elif step.kind is StepKind.EPOCH_GAUGE:
            instructions.append(create_epoch_gauge_instruction(gauge, epoch, payer))
    return instructions