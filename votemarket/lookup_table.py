"""The address lookup table used when sending transactions."""

from dataclasses import dataclass
from typing import List, Tuple

from .pubkey import Pubkey


@dataclass(frozen=True)
class AddressLookupTableAccount:
    """A lookup table and the addresses it holds."""

    key: Pubkey
    addresses: Tuple[Pubkey, ...]


_TABLE_KEY = "2g665Tvq8ut8j37co89iEhroGVAUwB4JEeVjjYyWsZL4"
_TABLE_ADDRESSES = (
    "28ZDtf6d2wsYhBvabTxUHTRT6MDxqjmqR7RMCp348tyU",
    "HQNBakKUm5sWqDwMeB36LFYFWEoBEgTGAUKnVgH3PN8H",
    "F72CPZ7vumQ6Z7e5ncWxkNunzcL79xkjTaiNCvZoL7Uc",
    "D57N2M1EYqUwF2QxCJQj3XSg9BtMD4JPmptpsGJVmAos",
    "11111111111111111111111111111111",
    "3V7SVqXAMGzezRfe3LGhELZFNMCH2jVsu5TmT8CawK5y",
    "EKHp9HU7sB4yuqbRKyoqzP7oPEH7MW7DZoJdvNfKTHYQ",
    "AgCkK3zJ4CbZBvuWXw2x2pcsxwEii8TqWBFFwLKELNud",
    "HUnHaG1PqzMYwnDfcbEAbix5M2AE4iTy5AH7te8gZyVk",
    "HYGoKrboNUbVD8TYpa55MrP9CvGkp4S8yTKhZYqchpGT",
    "GNBdu5RX15eVNN3wuBB8QNcX5vSsV127ej42E1wp7qXQ",
    "24Xh6EsfWce1ujFVJAQM7gmNYdhtZ4p87SHsoidvg8ep",
    "r2kmAcRQhnZXFrwGmqj2AmtLNvLAZdtBFrcPbpr4AH8",
    "HhdzfMuVFGMGFzrvenFEwHdTkRnJq5st3srDodNmTE5e",
    "3xC4eW6xhW3Gpb4T5sCKFe73ay2K4aUUfxL57XFdguJx",
    "8KB4w2eftXshAjxpzbMUrin5wtpb3Pve3a2jk7idLVga",
    "3Ndwet7MZXnoP7DaKQ79MF7BiyW8rdo2A5Dc3mjRVqyf",
    "Fq3rKWysysRYcCMWo1KGJLhHXLLBBrFyAV8HWJqSAHNq",
    "21LhNJdUgeZQKETE78bNsmXU9fdsnjH6QRMuFPpRTq2X",
)


def get_lookup_tables() -> List[AddressLookupTableAccount]:
    """The lookup tables to compile transactions against."""
    return [
        AddressLookupTableAccount(
            key=Pubkey.from_string(_TABLE_KEY),
            addresses=tuple(Pubkey.from_string(text) for text in _TABLE_ADDRESSES),
        )
    ]