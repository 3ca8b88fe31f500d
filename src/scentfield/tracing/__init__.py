"""Tracing infrastructure for recording and replaying field evolution.

Usage:
    from scentfield.tracing import InMemoryHistoryStore, TickRecord

    store = InMemoryHistoryStore(max_ticks=200)
    pipeline = SignalPipeline(signals, geometry, emitters, history=store)
"""

from scentfield.tracing.memory import InMemoryHistoryStore
from scentfield.tracing.models import TickRecord
from scentfield.tracing.protocol import HistoryStore

__all__ = [
    "HistoryStore",
    "InMemoryHistoryStore",
    "TickRecord",
]
