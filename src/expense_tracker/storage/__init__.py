"""
Storage Package

Persistence for expense records: the PSV record codec and the expense store
built on top of it.
"""

from .codec import FORMAT_VERSION, decode, encode
from .datastore import ExpenseStore

__all__ = [
    "FORMAT_VERSION",
    "ExpenseStore",
    "decode",
    "encode",
]
