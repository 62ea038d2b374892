"""Mini README: Core package initializer for the Pennywise finance assistant.

This module exposes convenience imports so screens, the CLI and tests can
reach shared helpers without knowing the package layout. Domain code lives
in the ``finance``, ``session`` and ``assistant`` subpackages; the
``interface`` subpackage wires them into the web dashboard.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
