"""End-to-end pipeline wiring."""

from .orchestrator import Orchestrator

__all__ = ["Orchestrator"]
