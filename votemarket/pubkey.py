"""Ed25519 public keys, their base58 text form and program-derived addresses."""

import hashlib
from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
PUBKEY_BYTES = 32
MAX_BASE58_LEN = 44
MAX_SEEDS = 16
MAX_SEED_LEN = 32

_INDEX = {char: value for value, char in enumerate(ALPHABET)}
_PDA_MARKER = b"ProgramDerivedAddress"
_P = 2**255 - 19
_D = (-121665 * pow(121666, _P - 2, _P)) % _P
_Y_MASK = (1 << 255) - 1


class PubkeyError(ValueError):
    """Raised for malformed keys, bad seeds or underivable addresses."""


class _OnCurveError(PubkeyError):
    """The derived address lies on the ed25519 curve."""


def b58encode(data) -> str:
    """Encode bytes as base58 text."""
    raw = bytes(data)
    number = int.from_bytes(raw, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(ALPHABET[remainder])
    padding = len(raw) - len(raw.lstrip(b"\0"))
    return "1" * padding + "".join(reversed(digits))


def b58decode(text: str) -> bytes:
    """Decode base58 text into bytes."""
    number = 0
    for char in text:
        try:
            number = number * 58 + _INDEX[char]
        except KeyError:
            raise PubkeyError(f"invalid base58 character {char!r}") from None
    padding = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    return b"\0" * padding + body


@dataclass(frozen=True, order=True)
class Pubkey:
    """A 32-byte account address."""

    key: bytes

    def __post_init__(self):
        if not isinstance(self.key, (bytes, bytearray, memoryview)):
            raise TypeError("a pubkey is built from bytes")
        raw = bytes(self.key)
        if len(raw) != PUBKEY_BYTES:
            raise PubkeyError(f"a pubkey holds {PUBKEY_BYTES} bytes, got {len(raw)}")
        object.__setattr__(self, "key", raw)

    @classmethod
    def from_string(cls, text: str) -> "Pubkey":
        """Parse the base58 form of a key."""
        if len(text) > MAX_BASE58_LEN:
            raise PubkeyError("string is too long to be a pubkey")
        return cls(b58decode(text))

    def to_bytes(self) -> bytes:
        return self.key

    def __bytes__(self) -> bytes:
        return self.key

    def __str__(self) -> str:
        return b58encode(self.key)

    def __repr__(self) -> str:
        return f"Pubkey('{self}')"


DEFAULT_PUBKEY = Pubkey(bytes(PUBKEY_BYTES))

Seed = Union[bytes, bytearray, memoryview, Pubkey]


def is_on_curve(data) -> bool:
    """Tell whether 32 bytes decompress to a point on the ed25519 curve."""
    raw = bytes(data)
    if len(raw) != PUBKEY_BYTES:
        raise PubkeyError(f"a curve point holds {PUBKEY_BYTES} bytes")
    y = (int.from_bytes(raw, "little") & _Y_MASK) % _P
    y2 = y * y % _P
    u = (y2 - 1) % _P
    v = (_D * y2 + 1) % _P
    if v == 0:
        return u == 0
    x2 = u * pow(v, _P - 2, _P) % _P
    return x2 == 0 or pow(x2, (_P - 1) // 2, _P) == 1


def create_program_address(seeds: Iterable[Seed], program_id: Pubkey) -> Pubkey:
    """Derive an off-curve address from seeds and a program id."""
    raw_seeds = [bytes(seed) for seed in seeds]
    if len(raw_seeds) > MAX_SEEDS:
        raise PubkeyError("max seed length exceeded")
    if any(len(seed) > MAX_SEED_LEN for seed in raw_seeds):
        raise PubkeyError("max seed length exceeded")
    digest = hashlib.sha256(b"".join(raw_seeds) + bytes(program_id) + _PDA_MARKER).digest()
    if is_on_curve(digest):
        raise _OnCurveError("invalid seeds, address must fall off the curve")
    return Pubkey(digest)


def find_program_address(seeds: Iterable[Seed], program_id: Pubkey) -> Tuple[Pubkey, int]:
    """Find the address and bump seed, trying bumps from 255 downwards."""
    base = [bytes(seed) for seed in seeds]
    for bump in range(255, 0, -1):
        try:
            return create_program_address([*base, bytes([bump])], program_id), bump
        except _OnCurveError:
            continue
    raise PubkeyError("unable to find a viable program address bump seed")


def serialize_pubkey_vec(pubkeys: Iterable[Pubkey]) -> str:
    """Write keys as one bracketed, comma separated string."""
    return "[" + ",".join(str(key) for key in pubkeys) + "]"


def deserialize_pubkey_vec(text: str) -> List[Pubkey]:
    """Read keys written by serialize_pubkey_vec."""
    return [Pubkey.from_string(part) for part in text.strip("[]").split(",")]