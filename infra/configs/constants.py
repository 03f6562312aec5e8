"""
Infrastructure constants for serverless-site.

Contains default tags, Lambda defaults, and CloudFront managed policy IDs.
"""

from typing import Final

PROJECT_NAME: Final[str] = "serverless-site"

# Deployment targets selectable via the `deploy_target` config key
DEPLOY_TARGETS: Final[tuple[str, ...]] = ("all", "backend", "frontend")

# Methods accepted in a route key ("<METHOD> /<path>")
ROUTE_METHODS: Final[tuple[str, ...]] = (
    "ANY",
    "GET",
    "POST",
    "PUT",
    "PATCH",
    "DELETE",
    "HEAD",
    "OPTIONS",
)

# Lambda configuration
LAMBDA_DEFAULTS: Final[dict[str, int | str]] = {
    "runtime": "python3.12",
    "memory_mb": 128,
    "timeout_seconds": 3,
    "integration_method": "POST",
    "log_retention_days": 14,
}

# AWS limit on Lambda function names
LAMBDA_FUNCTION_NAME_MAX_LENGTH: Final[int] = 64

# Managed policy attached to the shared Lambda execution role
LAMBDA_BASIC_EXECUTION_POLICY_ARN: Final[str] = (
    "arn:aws:iam::aws:policy/service-role/AWSLambdaBasicExecutionRole"
)

# API Gateway integration settings
API_PAYLOAD_FORMAT_VERSION: Final[str] = "2.0"
API_STAGE_NAME: Final[str] = "$default"

# Path prefix proxied by CloudFront to the backend
API_PATH_PATTERN: Final[str] = "/api/*"

# CloudFront origin identifiers
S3_ORIGIN_ID: Final[str] = "s3-frontend"
API_ORIGIN_ID: Final[str] = "api-backend"

# AWS managed CloudFront policies (stable IDs across accounts)
CACHE_POLICY_IDS: Final[dict[str, str]] = {
    "caching_optimized": "658327ea-f89d-4fab-a63d-7e88639e58f6",
    "caching_disabled": "4135ea2d-6df8-44a3-9df3-4b5a84be39ad",
}
ORIGIN_REQUEST_POLICY_IDS: Final[dict[str, str]] = {
    # Forwards all viewer headers, cookies and query strings except Host;
    # API Gateway rejects requests carrying the CloudFront Host header
    "all_viewer_except_host_header": "b689b0a8-53d0-40ab-baf2-68738e2966ac",
}

READ_ONLY_METHODS: Final[list[str]] = ["GET", "HEAD"]
ALL_METHODS: Final[list[str]] = ["GET", "HEAD", "OPTIONS", "PUT", "POST", "PATCH", "DELETE"]

PRICE_CLASS_DEFAULT: Final[str] = "PriceClass_100"  # US, Canada, Europe only

# Default tags applied to all resources
DEFAULT_TAGS: Final[dict[str, str]] = {
    "Project": PROJECT_NAME,
    "ManagedBy": "pulumi",
}

# S3 bucket name suffixes
S3_BUCKET_SUFFIXES: Final[dict[str, str]] = {
    "frontend": "frontend",
}
