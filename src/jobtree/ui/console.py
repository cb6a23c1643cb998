"""Console output formatting utilities for jobtree."""

from __future__ import annotations

import sys
import threading
from typing import Iterable, Optional

from ..fs import FileSystemComponent
from ..model import JobImpl, walk_jobs


class Console:
    """Centralized console output formatting."""

    def __init__(self, debug: bool = False):
        """
        Initialize console formatter.

        Args:
            debug: If True, show detailed output including stack traces
        """
        self.debug = debug

    def print_header(self, title: str) -> None:
        """Print a section header."""
        print(f"\n{title}")
        print("-" * len(title))

    def print_run_output(self, title: str, output: str) -> None:
        """Print the text returned by a run()/stop() call under a header."""
        self.print_header(title)
        print(output)

    def print_job_statuses(self, impl: JobImpl) -> None:
        """Print every node of a job tree with its status, indented by depth."""
        print("\nSTATUS")
        for depth, node in walk_jobs(impl):
            label = f"job {node.id}" if hasattr(node, "id") else "group"
            print(f"{'  ' * (depth + 1)}{label}: {node.status().value.upper()}")

    def print_tree(self, component: FileSystemComponent, depth: int = 0) -> None:
        """Print a filesystem tree with the size of every entry."""
        children = getattr(component, "children", None)
        suffix = "/" if children is not None else ""
        print(f"{'  ' * depth}{component.name()}{suffix} ({component.calculate_size()})")
        for child in children or ():
            self.print_tree(child, depth + 1)

    def print_total(self, total: int) -> None:
        print(f"TOTAL: {total}")

    def print_types(self, kinds: Iterable[str]) -> None:
        """Print registered component kinds."""
        print("Available types: " + ", ".join(kinds))

    def print_error(
        self,
        title: str,
        message: str,
        details: Optional[list[str]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        """
        Print structured error message.

        Args:
            title: Error title
            message: Main error message
            details: Optional list of detail lines
            suggestion: Optional suggestion for user
        """
        print(f"\nERROR: {title}", file=sys.stderr)
        print(f"{message}", file=sys.stderr)
        if details:
            for detail in details:
                print(f"  {detail}", file=sys.stderr)
        if suggestion:
            print(f"\n{suggestion}", file=sys.stderr)

    def print_exception(self, exc: Exception) -> None:
        """Print exception, with full traceback only in debug mode."""
        if self.debug:
            import traceback
            traceback.print_exception(type(exc), exc, exc.__traceback__)
        else:
            print(f"Error: {exc}", file=sys.stderr)

    def print_info(self, message: str) -> None:
        """Print informational message."""
        print(message)

    def print_debug(self, message: str) -> None:
        """Print debug message (only if debug mode enabled)."""
        if self.debug:
            print(f"[DEBUG] {message}", file=sys.stderr)


# Process-wide console, created on first use (or installed by the CLI)
_console: Optional[Console] = None
_console_lock = threading.Lock()


def get_console() -> Console:
    """Get the global console instance, creating it exactly once."""
    global _console
    if _console is None:
        with _console_lock:
            if _console is None:
                _console = Console()
    return _console


def set_console(console: Console) -> None:
    """Set the global console instance."""
    global _console
    with _console_lock:
        _console = console
