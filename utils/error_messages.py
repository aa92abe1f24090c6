"""
Clear, actionable error message formatting.

All error messages follow the pattern:
  ERROR: [What failed]
    Reason: [Why it failed]
    Action: [What user should do]
    Location: [Where the problem is]
"""

from pathlib import Path
from typing import Optional


def format_error(
    what_failed: str,
    reason: str,
    action: str,
    location: Optional[Path] = None,
    details: Optional[str] = None
) -> str:
    """
    Format a clear, actionable error message.

    Args:
        what_failed: What operation failed (e.g., "Could not set up logging")
        reason: Why it failed (e.g., "Permission denied")
        action: What user should do (e.g., "Pick a writable log folder")
        location: Where the problem occurred (file path, directory, etc.)
        details: Optional additional details

    Returns:
        Formatted error message
    """
    lines = [f"ERROR: {what_failed}"]
    lines.append(f"  Reason: {reason}")
    lines.append(f"  Action: {action}")

    if location:
        lines.append(f"  Location: {location}")

    if details:
        lines.append(f"  Details: {details}")

    return "\n".join(lines)


def format_unhandled_fault_error(error: BaseException, scenario: Optional[str] = None) -> str:
    """Format a fault that escaped a scenario's handlers."""
    where = f" in scenario '{scenario}'" if scenario else ""
    return format_error(
        what_failed=f"Unhandled fault{where}",
        reason=f"{type(error).__name__}: {error}",
        action="The scenario caught the wrong error family. See the log for the traceback."
    )


def format_logging_error(log_folder: Path, error: BaseException) -> str:
    """Format a failure to set up the log folder."""
    return format_error(
        what_failed="Could not set up logging",
        reason=str(error),
        action="Choose a writable log_folder in config.json or run with --no-log",
        location=log_folder
    )


def format_unknown_scenario_error(name: str, known) -> str:
    """Format an --only name that matches no scenario."""
    return format_error(
        what_failed=f"Unknown scenario: {name}",
        reason="No scenario is registered under that name",
        action="Run with --list to see the available scenarios",
        details=", ".join(known)
    )
