"""Rewrite the validator account list of an Anchor.toml document."""

from collections.abc import Mapping, MutableSequence
from dataclasses import dataclass
from typing import Iterable, Optional

import tomlkit
from tomlkit.items import AoT

from .pubkey import Pubkey


@dataclass(frozen=True)
class AddressInfo:
    """An account file name and the address it is loaded at."""

    name: str
    pubkey: Pubkey

    @property
    def filename(self) -> str:
        return f"./test-accounts/{self.name}.json"


def _next_table(value, name: str) -> Optional[object]:
    if isinstance(value, Mapping):
        return value.get(name)
    return None


def update_anchor_toml(document, update_info: Iterable[AddressInfo]) -> bool:
    """Replace test.validator.account with entries for update_info.

    Returns False, leaving the document alone, when there is no account array.
    Raises KeyError when test or test.validator is missing.
    """
    test = _next_table(document, "test")
    if test is None:
        raise KeyError("test")
    validator = _next_table(test, "validator")
    if validator is None:
        raise KeyError("test.validator")
    accounts = _next_table(validator, "account")
    if accounts is None:
        print("Could not find an existing account array")
        return False
    if not isinstance(accounts, MutableSequence):
        return False
    accounts.clear()
    for info in update_info:
        entry = tomlkit.table() if isinstance(accounts, AoT) else {}
        entry["address"] = str(info.pubkey)
        entry["filename"] = info.filename
        accounts.append(entry)
    return True


def update_anchor_toml_text(text: str, update_info: Iterable[AddressInfo]) -> str:
    """Parse TOML text, update its account array and render it again."""
    document = tomlkit.parse(text)
    update_anchor_toml(document, update_info)
    return tomlkit.dumps(document)