"""
Pulumi infrastructure-as-code for serverless-site.

This package defines AWS infrastructure including:
- Lambda functions fanned out from a map of function descriptors
- API Gateway HTTP API with one route per function
- Private S3 bucket for frontend assets
- CloudFront distribution serving the bucket and proxying /api/* to the API
"""
