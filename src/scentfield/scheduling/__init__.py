"""Per-tick field phases and the pipeline that sequences them."""

from scentfield.scheduling.phases import degrade_signals, diffuse_signals, emit_signals
from scentfield.scheduling.pipeline import SignalPipeline

__all__ = [
    # Phases
    "emit_signals",
    "diffuse_signals",
    "degrade_signals",
    # Pipeline
    "SignalPipeline",
]
