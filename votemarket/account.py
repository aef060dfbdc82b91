"""Account snapshots stored as JSON files, and rewriting them for tests."""

import base64
import binascii
import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Type, TypeVar, Union

from .errors import InvalidAccountDataError
from .layout import AnchorAccount, DeserializeError
from .pubkey import Pubkey
from .toml_update import AddressInfo

DEFAULT_SOURCE_DIR = Path("external-state/account-gen/test-accounts")
DEFAULT_OUTPUT_DIR = Path("test-accounts")

T = TypeVar("T", bound=AnchorAccount)
PathLike = Union[str, Path]


def _required(raw: dict, key: str, kind: type):
    if key not in raw:
        raise ValueError(f"missing field `{key}`")
    value = raw[key]
    if kind is int and isinstance(value, bool):
        raise ValueError(f"field `{key}` must be an integer")
    if not isinstance(value, kind):
        raise ValueError(f"field `{key}` must be of type {kind.__name__}")
    return value


@dataclass
class AccountInfo:
    """The account part of a snapshot."""

    lamports: int
    data: List[str] = field(default_factory=list)
    owner: str = ""
    executable: bool = False
    rent_epoch: int = 0
    space: int = 0

    @classmethod
    def from_dict(cls, raw) -> "AccountInfo":
        if not isinstance(raw, dict):
            raise ValueError("account must be an object")
        data = _required(raw, "data", list)
        if not all(isinstance(item, str) for item in data):
            raise ValueError("field `data` must hold strings")
        return cls(
            lamports=_required(raw, "lamports", int),
            data=list(data),
            owner=_required(raw, "owner", str),
            executable=_required(raw, "executable", bool),
            rent_epoch=_required(raw, "rentEpoch", int),
            space=_required(raw, "space", int),
        )

    def to_dict(self) -> dict:
        return {
            "lamports": self.lamports,
            "data": list(self.data),
            "owner": self.owner,
            "executable": self.executable,
            "rentEpoch": self.rent_epoch,
            "space": self.space,
        }


@dataclass(frozen=True)
class AccountRoot:
    """An account snapshot: its address and its contents."""

    pubkey: Pubkey
    account: AccountInfo

    @classmethod
    def from_string(cls, text: str) -> "AccountRoot":
        """Parse a snapshot from JSON text; raises ValueError when malformed."""
        raw = json.loads(text)
        if not isinstance(raw, dict):
            raise ValueError("account snapshot must be an object")
        pubkey = Pubkey.from_string(_required(raw, "pubkey", str))
        if "account" not in raw:
            raise ValueError("missing field `account`")
        return cls(pubkey=pubkey, account=AccountInfo.from_dict(raw["account"]))

    def to_json(self) -> str:
        return json.dumps(
            {"pubkey": str(self.pubkey), "account": self.account.to_dict()},
            separators=(",", ":"),
        )

    def get_account_data(self, account_type: Type[T]) -> T:
        """Decode the base64 account data as account_type."""
        if not self.account.data:
            raise InvalidAccountDataError()
        try:
            raw = base64.b64decode(self.account.data[0], validate=True)
            return account_type.try_deserialize(raw)
        except (binascii.Error, DeserializeError) as exc:
            raise InvalidAccountDataError() from exc

    def update_account_data(self, account_data: AnchorAccount) -> "AccountRoot":
        """A copy holding account_data, base64 encoded."""
        encoded = base64.b64encode(account_data.try_serialize()).decode("ascii")
        account = replace(self.account, data=[encoded, "base64"])
        return AccountRoot(pubkey=self.pubkey, account=account)

    def update_pubkey(self, pubkey: Pubkey) -> "AccountRoot":
        """A copy at another address."""
        return AccountRoot(pubkey=pubkey, account=replace(self.account))

    def write_account_file(
        self, account_name: str, directory: PathLike = DEFAULT_OUTPUT_DIR
    ) -> Path:
        """Write the snapshot to <directory>/<account_name>.json."""
        target_dir = Path(directory)
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / f"{account_name}.json"
        path.write_text(self.to_json())
        return path


def get_account_file(account_name: str, source_dir: PathLike = DEFAULT_SOURCE_DIR) -> str:
    """Read the stored snapshot of an account."""
    return (Path(source_dir) / f"{account_name}.json").read_text()


def process_account(
    account_type: Type[T],
    account_name: str,
    new_address: Optional[Pubkey] = None,
    data_update: Optional[Callable[[T], T]] = None,
    accounts_to_update: Optional[List[AddressInfo]] = None,
    file_suffix: str = "",
    source_dir: PathLike = DEFAULT_SOURCE_DIR,
    output_dir: PathLike = DEFAULT_OUTPUT_DIR,
) -> Tuple[T, AccountRoot]:
    """Load a snapshot, update its data and address, and write it out.

    Returns the updated account data and the snapshot as it was loaded.
    """
    account = AccountRoot.from_string(get_account_file(account_name, source_dir))
    address = new_address if new_address is not None else account.pubkey
    file_name = f"{account_name}{file_suffix}"
    if accounts_to_update is not None:
        accounts_to_update.append(AddressInfo(name=file_name, pubkey=address))
    account_data = account.get_account_data(account_type)
    if data_update is not None:
        account_data = data_update(account_data)
    updated = account.update_account_data(account_data).update_pubkey(address)
    updated.write_account_file(file_name, output_dir)
    return account_data, account