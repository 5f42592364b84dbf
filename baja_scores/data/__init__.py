"""Dataset loading."""

from .loader import DEFAULT_DATA_PATH, freeze, load_dataset

__all__ = [
    "DEFAULT_DATA_PATH",
    "freeze",
    "load_dataset",
]
