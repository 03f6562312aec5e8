"""
S3 Buckets Component for Frontend Assets.

Frontend Bucket: Static HTML/JS/CSS for the web app.
- Access: CloudFront ONLY, via Origin Access Control (SigV4-signed requests).
- Direct S3 URL -> DENIED. There is no website endpoint and no public policy.
- Features: Encryption (AES256), BucketOwnerEnforced (ACLs disabled),
  PublicAccessBlock with all four flags set in every environment.

The bucket policy granting CloudFront read access lives in the CloudFront
component, since it must reference the distribution ARN.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from infra.configs.constants import S3_BUCKET_SUFFIXES
from infra.utils.naming import ResourceNamer
from infra.utils.tags import create_tags


@dataclass
class S3BucketOutputs:
    """Output values from S3 buckets component."""
    frontend_bucket_name: pulumi.Output[str]
    frontend_bucket_arn: pulumi.Output[str]
    frontend_bucket_domain: pulumi.Output[str]


class S3BucketsComponent(pulumi.ComponentResource):
    """
    Private S3 bucket for the frontend static assets.

    Served exclusively through CloudFront.
    """

    def __init__(
        self,
        name: str,
        namer: ResourceNamer,
        force_destroy: bool = False,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:storage:S3Buckets", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)
        bucket_name = namer.bucket_name(S3_BUCKET_SUFFIXES["frontend"])

        # Frontend bucket (static assets)
        self.frontend_bucket = aws.s3.Bucket(
            f"{name}-frontend",
            bucket=bucket_name,
            force_destroy=force_destroy,
            tags=create_tags(namer.environment, bucket_name, project=namer.project),
            opts=child_opts,
        )

        self.encryption = aws.s3.BucketServerSideEncryptionConfiguration(
            f"{name}-frontend-encryption",
            bucket=self.frontend_bucket.id,
            rules=[aws.s3.BucketServerSideEncryptionConfigurationRuleArgs(
                apply_server_side_encryption_by_default=aws.s3.BucketServerSideEncryptionConfigurationRuleApplyServerSideEncryptionByDefaultArgs(
                    sse_algorithm="AES256",
                ),
            )],
            opts=child_opts,
        )

        self.ownership_controls = aws.s3.BucketOwnershipControls(
            f"{name}-frontend-ownership",
            bucket=self.frontend_bucket.id,
            rule=aws.s3.BucketOwnershipControlsRuleArgs(
                object_ownership="BucketOwnerEnforced",
            ),
            opts=child_opts,
        )

        # Block public access on frontend bucket
        self.public_access_block = aws.s3.BucketPublicAccessBlock(
            f"{name}-frontend-public-block",
            bucket=self.frontend_bucket.id,
            block_public_acls=True,
            block_public_policy=True,
            ignore_public_acls=True,
            restrict_public_buckets=True,
            opts=child_opts,
        )

        self.register_outputs({
            "frontend_bucket_name": self.frontend_bucket.bucket,
            "frontend_bucket_arn": self.frontend_bucket.arn,
            "frontend_bucket_domain": self.frontend_bucket.bucket_regional_domain_name,
        })

    def get_outputs(self) -> S3BucketOutputs:
        """Get S3 bucket output values."""
        return S3BucketOutputs(
            frontend_bucket_name=self.frontend_bucket.bucket,
            frontend_bucket_arn=self.frontend_bucket.arn,
            frontend_bucket_domain=self.frontend_bucket.bucket_regional_domain_name,
        )
