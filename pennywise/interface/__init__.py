"""Mini README: Interactive interfaces for Pennywise.

Exports the FastAPI application factory behind the browser dashboard.
Other front ends should live alongside this module and reuse the same
injected ledger and session objects.
"""

from .web_app import create_application

__all__ = ["create_application"]
