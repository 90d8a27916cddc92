import os
from dataclasses import dataclass


def env_flag(name: str) -> bool:
    """True when the environment variable is set to 1/true/yes."""
    return os.environ.get(name, "").lower() in {"1", "true", "yes"}


def env_word_width() -> int:
    raw = os.environ.get("ZDEX_WORD_WIDTH", "64")
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"ZDEX_WORD_WIDTH must be a positive integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"ZDEX_WORD_WIDTH must be a positive integer, got {raw!r}")
    return value


DEFAULT_WORD_WIDTH = env_word_width()


@dataclass
class ZdexConfig:
    """
    Configuration for z-index construction and storage-key export.
    """
    # Width in bits of the unsigned words produced by `to_key`.
    word_width: int = DEFAULT_WORD_WIDTH
    # Reject mixed dimension types in `z_index_iter`.
    require_homogeneous: bool = True
