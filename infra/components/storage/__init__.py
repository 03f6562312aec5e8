"""
Storage components.

Components:
- S3BucketsComponent: Private frontend bucket served through CloudFront
"""

from infra.components.storage.s3_buckets import S3BucketsComponent, S3BucketOutputs

__all__ = [
    "S3BucketsComponent",
    "S3BucketOutputs",
]
