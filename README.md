# votemarket

A library for the on-chain state behind a gauge vote market: account layouts
with their 8-byte discriminators, program-address derivation, vote-weight
calculation, hand-built instructions, a small JSON-RPC client, and helpers for
rewriting account fixture files and an `Anchor.toml`.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `votemarket.pubkey`: the `Pubkey` type (`Pubkey.from_string`,
  `Pubkey.to_bytes`, `str()` gives base58), `b58encode`, `b58decode`,
  `is_on_curve`, `create_program_address`, `find_program_address` (bumps tried
  from 255 down), and the bracketed, comma separated list form
  `serialize_pubkey_vec` / `deserialize_pubkey_vec`. Bad input raises
  `PubkeyError`.
- `votemarket.layout`: `AnchorAccount`, the base for dataclass accounts.
  `deserialize`/`serialize` handle the body alone; `try_deserialize`/
  `try_serialize` add and check the discriminator (`DeserializeError` on a
  mismatch or short data). Also `account_discriminator(name)` and
  `sighash(name)`.
- `votemarket.gauge_state`: `Gaugemeister` (with `voting_epoch()`, raising
  `GaugeStateError` on overflow), `Gauge`, `EpochGauge`, `GaugeVoter`,
  `GaugeVote`, `EpochGaugeVoter`, `EpochGaugeVote` (with
  `EpochGaugeVote.find_program_address`), and `PROGRAM_ID`.
- `votemarket.locked_voter_state`: `Escrow`, `Locker`, `LockerParams` and
  `PROGRAM_ID`. `LockerParams.calculate_voter_power(escrow, now)` and
  `Escrow.voting_power_at_time(locker, timestamp)` return the voting power, or
  `None` when it cannot be computed.
- `votemarket.quarry_state`: `Rewarder`, `Quarry`, `PROGRAM_ID`,
  `SECONDS_PER_YEAR`.
- `votemarket.resolve`: `get_escrow_address_for_owner`, `get_gauge_voter`,
  `get_gauge_vote`, `get_epoch_gauge`, `get_epoch_gauge_voter`,
  `get_epoch_gauge_vote`, `get_delegate`, `get_vote_buy` and
  `resolve_vote_keys`, which returns `VoteKeys`.
  `VoteKeys.missing_prepare_vote_steps(accounts)` turns fetched accounts
  (`None` where missing) into `VoteCreateStep`s of kind `StepKind`.
- `votemarket.instructions`: `Instruction` and `AccountMeta` plus builders:
  `create_epoch_gauge_instruction`, `set_vote_delegate_instruction`,
  `create_gauge_voter_instruction`, `create_gauge_vote_instruction`,
  `reset_epoch_gauge_voter_instruction`, `trigger_next_epoch_instruction`,
  `gauge_revert_vote_instruction` and `prepare_vote_instructions`.
- `votemarket.lookup_table`: `get_lookup_tables()` returns the fixed
  `AddressLookupTableAccount`.
- `votemarket.data`: `EpochData`, `GaugeInfo`, `VoteInfo` with JSON
  conversion, and `load_vote_infos` / `dump_vote_infos`.
- `votemarket.weights`: `calculate_weights(data)` spreads delegated votes
  over gauges in proportion to their payments.
- `votemarket.parallel_sh`: `render_parallel_sh` builds the text of a bash
  script running vote execution for many escrow owners, five at a time;
  `create_parallel_sh` writes it as `parallel_<timestamp>.sh`, mode 755.
- `votemarket.rpc`: `RpcClient` (`call`, `get_multiple_accounts`),
  `retry_rpc(operation, attempts=3, delay=0.1)` and `get_priority_fee`, which
  asks a Helius RPC for a medium fee estimate (defaulting to the `RPC_URL`
  environment variable) and returns `0.0` for any other RPC.
- `votemarket.gauges`: `get_relevant_gauges(path)` reads a JSON array of
  gauge addresses.
- `votemarket.account`: `AccountRoot` and `AccountInfo` read and write
  account snapshot JSON files; `process_account` loads one, rewrites its data
  and address and writes it out, recording an `AddressInfo`.
- `votemarket.toml_update`: `update_anchor_toml` and `update_anchor_toml_text`
  replace the `[[test.validator.account]]` entries of an `Anchor.toml`.
- `votemarket.errors`: `AccountGenError`, `InvalidCwdError`,
  `InvalidAccountDataError`, `VoteMarketManagerError`,
  `AddressNotFoundError`, `PriorityFeeNotInResultError`,
  `SimulationFailedError`, `DatabaseConnectionError`.

## Example

```python
from votemarket.pubkey import Pubkey
from votemarket.resolve import get_escrow_address_for_owner, resolve_vote_keys

owner = Pubkey(bytes([1]) * 32)
locker = Pubkey(bytes([2]) * 32)
gaugemeister = Pubkey(bytes([3]) * 32)
gauge = Pubkey(bytes([4]) * 32)

escrow = get_escrow_address_for_owner(owner, locker)
keys = resolve_vote_keys(escrow, gauge, 42, gaugemeister)
for key in keys.get_all_keys():
    print(key)
```

Weights for an epoch:

```python
from votemarket.data import EpochData
from votemarket.weights import calculate_weights

with open("epoch.json") as handle:
    data = EpochData.from_json(handle.read())
for info in calculate_weights(data):
    print(info.gauge, info.weight, info.votes)
```

## What it does not do

The package has no command-line tool. It builds instructions but does not sign,
simulate or send transactions, and it has no client for the vote market
program's own instructions (voting, committing votes, claiming payments,
refunds, configuration). It keeps no database.