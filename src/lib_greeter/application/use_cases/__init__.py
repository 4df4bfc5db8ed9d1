"""Application use cases built on the greeter domain."""

from __future__ import annotations

from .demo import DemoReport, run_demo
from .lifecycle import GreeterLifecycle

__all__ = ["DemoReport", "GreeterLifecycle", "run_demo"]
