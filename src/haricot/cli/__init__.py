"""CLI for haricot.

This module provides a Typer-based CLI for summarizing HAR files,
counting entries and extracting bodies.

Requires the 'cli' optional dependency: pip install haricot[cli]
"""

from __future__ import annotations
