"""
Pulumi component resources for serverless-site infrastructure.

Each submodule provides reusable ComponentResource classes:
- security: Lambda execution role
- compute: Lambda functions fanned out from the descriptor catalog
- storage: Private frontend bucket
- edge: API Gateway HTTP API, CloudFront distribution
"""
