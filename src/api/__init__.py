"""HTTP API for the MCP catalog."""

from src.api.app import create_app, run

__all__ = ["create_app", "run"]
