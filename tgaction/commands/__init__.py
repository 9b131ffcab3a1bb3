"""CLI command implementations."""

from tgaction.commands.run_action import ActionOrchestrator, ActionPhase, cmd_run_action

__all__ = ["ActionOrchestrator", "ActionPhase", "cmd_run_action"]
