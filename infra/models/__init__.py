"""
Schemas for structured stack configuration values.
"""

from infra.models.lambda_function import (
    LambdaFunctionCatalog,
    LambdaFunctionSpec,
    parse_lambda_functions,
)

__all__ = [
    "LambdaFunctionCatalog",
    "LambdaFunctionSpec",
    "parse_lambda_functions",
]
