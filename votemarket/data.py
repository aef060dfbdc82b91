"""Epoch summaries and vote weights exchanged as JSON files."""

import json
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from .pubkey import Pubkey, deserialize_pubkey_vec, serialize_pubkey_vec


@dataclass
class GaugeInfo:
    """What was paid for a gauge and the votes it holds."""

    gauge: Pubkey
    payment: float
    votes: int

    @classmethod
    def from_dict(cls, raw: dict) -> "GaugeInfo":
        return cls(
            gauge=Pubkey.from_string(raw["gauge"]),
            payment=float(raw["payment"]),
            votes=int(raw["votes"]),
        )

    def to_dict(self) -> dict:
        return {"gauge": str(self.gauge), "payment": float(self.payment), "votes": self.votes}


@dataclass
class VoteInfo:
    """The weight and votes to give a gauge."""

    gauge: Pubkey
    votes: int
    weight: int

    @classmethod
    def from_dict(cls, raw: dict) -> "VoteInfo":
        return cls(
            gauge=Pubkey.from_string(raw["gauge"]),
            votes=int(raw["votes"]),
            weight=int(raw["weight"]),
        )

    def to_dict(self) -> dict:
        return {"gauge": str(self.gauge), "votes": self.votes, "weight": self.weight}


@dataclass
class EpochData:
    """Summary of one epoch of the vote market."""

    config: Pubkey
    epoch: int
    total_votes: int
    direct_votes: int
    delegated_votes: int
    total_vote_buy_value: float
    gauges: List[GaugeInfo] = field(default_factory=list)
    prices: Dict[str, float] = field(default_factory=dict)
    sbr_per_epoch: int = 0
    escrow_owners: List[Pubkey] = field(default_factory=list)
    usd_per_vote: float = 0.0

    @classmethod
    def from_dict(cls, raw: dict) -> "EpochData":
        return cls(
            config=Pubkey.from_string(raw["config"]),
            epoch=int(raw["epoch"]),
            total_votes=int(raw["total_votes"]),
            direct_votes=int(raw["direct_votes"]),
            delegated_votes=int(raw["delegated_votes"]),
            total_vote_buy_value=float(raw["total_vote_buy_value"]),
            gauges=[GaugeInfo.from_dict(item) for item in raw["gauges"]],
            prices={str(key): float(value) for key, value in raw["prices"].items()},
            sbr_per_epoch=int(raw["sbr_per_epoch"]),
            escrow_owners=deserialize_pubkey_vec(raw["escrow_owners"]),
            usd_per_vote=float(raw["usd_per_vote"]),
        )

    def to_dict(self) -> dict:
        return {
            "config": str(self.config),
            "epoch": self.epoch,
            "total_votes": self.total_votes,
            "direct_votes": self.direct_votes,
            "delegated_votes": self.delegated_votes,
            "total_vote_buy_value": float(self.total_vote_buy_value),
            "gauges": [gauge.to_dict() for gauge in self.gauges],
            "prices": {key: float(value) for key, value in self.prices.items()},
            "sbr_per_epoch": self.sbr_per_epoch,
            "escrow_owners": serialize_pubkey_vec(self.escrow_owners),
            "usd_per_vote": float(self.usd_per_vote),
        }

    @classmethod
    def from_json(cls, text: str) -> "EpochData":
        return cls.from_dict(json.loads(text))

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


def load_vote_infos(text: str) -> List[VoteInfo]:
    """Read a JSON array of vote infos."""
    return [VoteInfo.from_dict(item) for item in json.loads(text)]


def dump_vote_infos(infos: Iterable[VoteInfo]) -> str:
    """Write vote infos as a JSON array."""
    return json.dumps([info.to_dict() for info in infos])