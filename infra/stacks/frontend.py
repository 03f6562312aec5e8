"""
Frontend declaration: private S3 bucket behind a CloudFront distribution.

The distribution proxies /api/* to the backend's domain name, which comes
either from the backend deployed in the same stack or from stack config.
"""

from dataclasses import dataclass

import pulumi

from infra.components.edge.cloudfront import CloudFrontComponent
from infra.components.storage.s3_buckets import S3BucketsComponent
from infra.configs.base import EnvironmentConfig
from infra.utils.naming import ResourceNamer, normalize_domain


@dataclass
class FrontendOutputs:
    """Handles returned by deploy_frontend()."""
    frontend_bucket: pulumi.Output[str]
    distribution_id: pulumi.Output[str]
    distribution_domain: pulumi.Output[str]
    s3_buckets: S3BucketsComponent
    cloudfront: CloudFrontComponent

    def exports(self) -> dict[str, pulumi.Output[str]]:
        """Stack exports for the frontend."""
        return {
            "frontend_bucket": self.frontend_bucket,
            "distribution_id": self.distribution_id,
            "distribution_domain": self.distribution_domain,
        }


def deploy_frontend(
    config: EnvironmentConfig,
    namer: ResourceNamer,
    backend_domain_name: pulumi.Input[str],
) -> FrontendOutputs:
    """
    Declare the static-site delivery layer.

    Args:
        config: Validated environment configuration
        namer: ResourceNamer for the stack
        backend_domain_name: API domain proxied under /api/*

    Returns:
        FrontendOutputs with bucket name and distribution identifiers
    """
    base_name = namer.name("frontend")

    s3_buckets = S3BucketsComponent(
        name=base_name,
        namer=namer,
        force_destroy=not config.is_production,
    )
    s3_outputs = s3_buckets.get_outputs()

    cloudfront = CloudFrontComponent(
        name=base_name,
        namer=namer,
        frontend_bucket_name=s3_outputs.frontend_bucket_name,
        frontend_bucket_arn=s3_outputs.frontend_bucket_arn,
        frontend_bucket_domain=s3_outputs.frontend_bucket_domain,
        api_domain_name=pulumi.Output.from_input(backend_domain_name).apply(normalize_domain),
        price_class=config.price_class,
        spa_fallback=config.spa_fallback,
    )
    cf_outputs = cloudfront.get_outputs()

    return FrontendOutputs(
        frontend_bucket=s3_outputs.frontend_bucket_name,
        distribution_id=cf_outputs.distribution_id,
        distribution_domain=cf_outputs.distribution_domain,
        s3_buckets=s3_buckets,
        cloudfront=cloudfront,
    )
