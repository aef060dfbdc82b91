"""The list of gauges the vote market manager acts on."""

import json
from pathlib import Path
from typing import List, Union

from .pubkey import Pubkey

DEFAULT_GAUGES_PATH = Path("off-chain/vote-market-manager/info/gauges.json")


def get_relevant_gauges(path: Union[str, Path] = DEFAULT_GAUGES_PATH) -> List[Pubkey]:
    """Read a JSON array of base58 gauge addresses."""
    with open(path, encoding="utf-8") as handle:
        raw = json.load(handle)
    if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
        raise ValueError("gauges file must hold an array of strings")
    return [Pubkey.from_string(item) for item in raw]