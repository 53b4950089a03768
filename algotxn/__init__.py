"""Build, encode, group and link Algorand transactions."""

__version__ = "0.1.0"

__all__ = [
    "app_builder",
    "auction",
    "builder",
    "encoding",
    "error",
    "signed",
    "transaction",
    "tx_group",
    "types",
    "url",
]