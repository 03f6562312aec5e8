"""
Compute components.

Components:
- LambdaFunctionsComponent: One Lambda function per catalog entry
"""

from infra.components.compute.lambda_functions import LambdaFunctionsComponent, LambdaOutputs

__all__ = [
    "LambdaFunctionsComponent",
    "LambdaOutputs",
]
