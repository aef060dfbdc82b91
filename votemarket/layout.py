"""Borsh encoding of Anchor accounts, with their 8-byte discriminators."""

import hashlib
import inspect
import operator
from dataclasses import fields, is_dataclass
from functools import lru_cache
from typing import Annotated, Tuple, get_args, get_origin

from .pubkey import PUBKEY_BYTES, Pubkey

DISCRIMINATOR_SIZE = 8

U8 = Annotated[int, "u8"]
U16 = Annotated[int, "u16"]
U32 = Annotated[int, "u32"]
U64 = Annotated[int, "u64"]
I64 = Annotated[int, "i64"]
U128 = Annotated[int, "u128"]

_INT_KINDS = {
    "u8": (1, False),
    "u16": (2, False),
    "u32": (4, False),
    "u64": (8, False),
    "i64": (8, True),
    "u128": (16, False),
}

_KNOWN_HINTS = {
    "bool": bool,
    "Pubkey": Pubkey,
    "U8": U8,
    "U16": U16,
    "U32": U32,
    "U64": U64,
    "I64": I64,
    "U128": U128,
}


class DeserializeError(ValueError):
    """Raised when bytes do not hold the expected account."""


def account_discriminator(name: str) -> bytes:
    """The first 8 bytes of sha256("account:<name>")."""
    return hashlib.sha256(f"account:{name}".encode()).digest()[:DISCRIMINATOR_SIZE]


def sighash(name: str) -> bytes:
    """The first 8 bytes of sha256("global:<name>"), an instruction tag."""
    return hashlib.sha256(f"global:{name}".encode()).digest()[:DISCRIMINATOR_SIZE]


def _resolve_hint(cls, hint):
    """Turn a field annotation, possibly written as text, into its type."""
    if not isinstance(hint, str):
        return hint
    if hint in _KNOWN_HINTS:
        return _KNOWN_HINTS[hint]
    module = inspect.getmodule(cls)
    namespace = vars(module) if module is not None else {}
    try:
        return namespace[hint]
    except KeyError:
        raise TypeError(f"cannot resolve field type {hint!r} of {cls.__name__}") from None


@lru_cache(maxsize=None)
def _layout(cls) -> Tuple[Tuple[str, object], ...]:
    return tuple((field.name, _resolve_hint(cls, field.type)) for field in fields(cls))


def _encode(hint, value, out: list) -> None:
    if get_origin(hint) is Annotated:
        size, signed = _INT_KINDS[get_args(hint)[1]]
        out.append(operator.index(value).to_bytes(size, "little", signed=signed))
    elif hint is bool:
        out.append(b"\x01" if value else b"\x00")
    elif hint is Pubkey:
        out.append(bytes(value))
    elif is_dataclass(hint):
        for name, field_hint in _layout(hint):
            _encode(field_hint, getattr(value, name), out)
    else:
        raise TypeError(f"no encoding for {hint!r}")


def _take(data: bytes, offset: int, size: int) -> Tuple[bytes, int]:
    end = offset + size
    if end > len(data):
        raise DeserializeError("unexpected end of account data")
    return data[offset:end], end


def _decode(hint, data: bytes, offset: int):
    if get_origin(hint) is Annotated:
        size, signed = _INT_KINDS[get_args(hint)[1]]
        chunk, offset = _take(data, offset, size)
        return int.from_bytes(chunk, "little", signed=signed), offset
    if hint is bool:
        chunk, offset = _take(data, offset, 1)
        if chunk[0] > 1:
            raise DeserializeError(f"invalid bool value {chunk[0]}")
        return chunk[0] == 1, offset
    if hint is Pubkey:
        chunk, offset = _take(data, offset, PUBKEY_BYTES)
        return Pubkey(chunk), offset
    if is_dataclass(hint):
        values = {}
        for name, field_hint in _layout(hint):
            values[name], offset = _decode(field_hint, data, offset)
        return hint(**values), offset
    raise TypeError(f"no decoding for {hint!r}")


class AnchorAccount:
    """Base for dataclass accounts stored with an Anchor discriminator."""

    @classmethod
    def discriminator(cls) -> bytes:
        return account_discriminator(cls.__name__)

    @classmethod
    def deserialize(cls, data):
        """Decode the account body, without a discriminator."""
        value, _ = _decode(cls, bytes(data), 0)
        return value

    @classmethod
    def try_deserialize(cls, data):
        """Check the discriminator, then decode the body that follows it."""
        raw = bytes(data)
        if len(raw) < DISCRIMINATOR_SIZE:
            raise DeserializeError("account discriminator not found")
        if raw[:DISCRIMINATOR_SIZE] != cls.discriminator():
            raise DeserializeError("account discriminator did not match")
        return cls.deserialize(raw[DISCRIMINATOR_SIZE:])

    def serialize(self) -> bytes:
        """Encode the account body, without a discriminator."""
        out: list = []
        _encode(type(self), self, out)
        return b"".join(out)

    def try_serialize(self) -> bytes:
        """Encode the discriminator followed by the body."""
        return self.discriminator() + self.serialize()