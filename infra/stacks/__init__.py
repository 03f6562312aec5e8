"""
Stack-level wiring of components into the backend and frontend declarations.
"""

from infra.stacks.backend import BackendOutputs, deploy_backend
from infra.stacks.frontend import FrontendOutputs, deploy_frontend

__all__ = [
    "BackendOutputs",
    "deploy_backend",
    "FrontendOutputs",
    "deploy_frontend",
]
