"""Application orchestration layer.

- ShellOrchestrator: wires UI and lifecycle events to the coordination core
- MigrationOrchestrator: one-shot legacy data migration gating list loading
"""

from .migration import MigrationOrchestrator
from .orchestrator import ShellOrchestrator

__all__ = ["MigrationOrchestrator", "ShellOrchestrator"]
