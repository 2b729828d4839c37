"""HTTP API for the song catalog."""

from songlib.presentation.api.app import API_VERSION, create_app
from songlib.presentation.api.upstream_app import create_upstream_app

__all__ = [
    "API_VERSION",
    "create_app",
    "create_upstream_app",
]
