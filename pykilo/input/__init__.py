"""Input-layer public API for key decoding.

``read_key`` turns raw terminal bytes into the string key tokens defined in
``keys``; everything above this layer only ever sees those tokens.
"""

from . import keys
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "keys",
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
]
