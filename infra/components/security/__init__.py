"""
Security components for IAM.

Components:
- IamRolesComponent: Execution role for the backend Lambda functions
"""

from infra.components.security.iam_roles import IamRolesComponent, IamRoleOutputs

__all__ = [
    "IamRolesComponent",
    "IamRoleOutputs",
]
