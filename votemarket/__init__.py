"""Account layouts, address derivation, vote weights and instruction builders for a gauge vote market."""

__version__ = "0.1.0"