"""Analyzer backends."""

from kannot.proc.backends.recorded import RecordedBackend
from kannot.proc.backends.stub import StubBackend

__all__ = ["RecordedBackend", "StubBackend"]
