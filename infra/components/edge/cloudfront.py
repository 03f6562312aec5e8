"""
CloudFront CDN Component for Frontend Distribution.

Architectural Strategy: "Single Domain / Unified Frontend"
1. The Problem: A frontend on S3 and a backend on API Gateway usually live on
   two domains, which drags CORS into every request.
2. The Solution: Use CloudFront as the global router/proxy.
   - https://<distribution>/      -> S3 (Frontend Assets)
   - https://<distribution>/api/* -> API Gateway (Lambda backend)

Key Components:
1. Origins (Sources of Truth):
   - S3 Origin: Static HTML/JS/CSS. Secured via OAC (Origin Access Control):
     CloudFront signs every origin request with SigV4, and the bucket policy
     only accepts s3:GetObject from this exact distribution's ARN.
   - API Origin: The HTTP API's execute-api domain, HTTPS only.

2. Behavior Rules (The Router):
   - /api/*: Ordered behavior, evaluated before the default. Caching disabled,
     every method allowed, all viewer headers (except Host), cookies and
     query strings forwarded.
   - Default (*): Read-only methods, managed CachingOptimized policy.

3. Optional SPA fallback: 403/404 from S3 become index.html with 200 so a
   client-side router can take over. Custom error responses apply to the
   whole distribution, including /api/*, so it is off by default.
"""

import json
from dataclasses import dataclass, field

import pulumi
import pulumi_aws as aws

from infra.configs.constants import (
    ALL_METHODS,
    API_ORIGIN_ID,
    API_PATH_PATTERN,
    CACHE_POLICY_IDS,
    ORIGIN_REQUEST_POLICY_IDS,
    PRICE_CLASS_DEFAULT,
    READ_ONLY_METHODS,
    S3_ORIGIN_ID,
)
from infra.utils.naming import ResourceNamer
from infra.utils.tags import create_tags


@dataclass(frozen=True)
class CacheBehaviorSpec:
    """Path-scoped policy set applied by the distribution."""
    path_pattern: str
    target_origin_id: str
    cache_policy_id: str
    allowed_methods: list[str] = field(default_factory=lambda: list(READ_ONLY_METHODS))
    cached_methods: list[str] = field(default_factory=lambda: list(READ_ONLY_METHODS))
    origin_request_policy_id: str | None = None
    compress: bool = True


@dataclass
class CloudFrontOutputs:
    """Output values from CloudFront component."""
    distribution_id: pulumi.Output[str]
    distribution_arn: pulumi.Output[str]
    distribution_domain: pulumi.Output[str]


def build_cache_behaviors() -> tuple[CacheBehaviorSpec, list[CacheBehaviorSpec]]:
    """
    Build the default behavior and the ordered behaviors.

    Returns:
        (default behavior for static assets, [API proxy behavior])
    """
    default = CacheBehaviorSpec(
        path_pattern="*",
        target_origin_id=S3_ORIGIN_ID,
        cache_policy_id=CACHE_POLICY_IDS["caching_optimized"],
    )
    api = CacheBehaviorSpec(
        path_pattern=API_PATH_PATTERN,
        target_origin_id=API_ORIGIN_ID,
        cache_policy_id=CACHE_POLICY_IDS["caching_disabled"],
        allowed_methods=list(ALL_METHODS),
        origin_request_policy_id=ORIGIN_REQUEST_POLICY_IDS["all_viewer_except_host_header"],
    )
    return default, [api]


def build_bucket_policy(bucket_arn: str, distribution_arn: str) -> str:
    """
    Bucket policy allowing reads only from one CloudFront distribution.

    Args:
        bucket_arn: Frontend bucket ARN
        distribution_arn: ARN of the distribution allowed to read

    Returns:
        Policy document as JSON
    """
    return json.dumps({
        "Version": "2012-10-17",
        "Statement": [{
            "Sid": "AllowCloudFrontServicePrincipal",
            "Effect": "Allow",
            "Principal": {"Service": "cloudfront.amazonaws.com"},
            "Action": "s3:GetObject",
            "Resource": f"{bucket_arn}/*",
            "Condition": {"StringEquals": {"AWS:SourceArn": distribution_arn}},
        }],
    })


class CloudFrontComponent(pulumi.ComponentResource):
    """
    CloudFront distribution for frontend static assets and the API proxy.

    Uses Origin Access Control to securely serve content from S3.
    """

    def __init__(
        self,
        name: str,
        namer: ResourceNamer,
        frontend_bucket_name: pulumi.Input[str],
        frontend_bucket_arn: pulumi.Input[str],
        frontend_bucket_domain: pulumi.Input[str],
        api_domain_name: pulumi.Input[str],
        price_class: str = PRICE_CLASS_DEFAULT,
        spa_fallback: bool = False,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:edge:CloudFront", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)
        distribution_name = namer.name("distribution")

        # Origin Access Control
        self.oac = aws.cloudfront.OriginAccessControl(
            f"{name}-oac",
            name=namer.name("oac"),
            description=f"OAC for {distribution_name} frontend bucket",
            origin_access_control_origin_type="s3",
            signing_behavior="always",
            signing_protocol="sigv4",
            opts=child_opts,
        )

        self.default_behavior, self.ordered_behaviors = build_cache_behaviors()

        custom_error_responses = []
        if spa_fallback:
            custom_error_responses = [
                aws.cloudfront.DistributionCustomErrorResponseArgs(
                    error_code=code,
                    response_code=200,
                    response_page_path="/index.html",
                )
                for code in (403, 404)
            ]

        # CloudFront Distribution
        self.distribution = aws.cloudfront.Distribution(
            f"{name}-distribution",
            comment=distribution_name,
            enabled=True,
            is_ipv6_enabled=True,
            default_root_object="index.html",
            price_class=price_class,
            origins=[
                aws.cloudfront.DistributionOriginArgs(
                    domain_name=frontend_bucket_domain,
                    origin_id=S3_ORIGIN_ID,
                    origin_access_control_id=self.oac.id,
                ),
                aws.cloudfront.DistributionOriginArgs(
                    domain_name=api_domain_name,
                    origin_id=API_ORIGIN_ID,
                    custom_origin_config=aws.cloudfront.DistributionOriginCustomOriginConfigArgs(
                        http_port=80,
                        https_port=443,
                        origin_protocol_policy="https-only",
                        origin_ssl_protocols=["TLSv1.2"],
                    ),
                ),
            ],
            ordered_cache_behaviors=[
                aws.cloudfront.DistributionOrderedCacheBehaviorArgs(
                    path_pattern=behavior.path_pattern,
                    target_origin_id=behavior.target_origin_id,
                    viewer_protocol_policy="redirect-to-https",
                    allowed_methods=behavior.allowed_methods,
                    cached_methods=behavior.cached_methods,
                    cache_policy_id=behavior.cache_policy_id,
                    origin_request_policy_id=behavior.origin_request_policy_id,
                    compress=behavior.compress,
                )
                for behavior in self.ordered_behaviors
            ],
            default_cache_behavior=aws.cloudfront.DistributionDefaultCacheBehaviorArgs(
                target_origin_id=self.default_behavior.target_origin_id,
                viewer_protocol_policy="redirect-to-https",
                allowed_methods=self.default_behavior.allowed_methods,
                cached_methods=self.default_behavior.cached_methods,
                cache_policy_id=self.default_behavior.cache_policy_id,
                compress=self.default_behavior.compress,
            ),
            custom_error_responses=custom_error_responses,
            restrictions=aws.cloudfront.DistributionRestrictionsArgs(
                geo_restriction=aws.cloudfront.DistributionRestrictionsGeoRestrictionArgs(
                    restriction_type="none",
                ),
            ),
            viewer_certificate=aws.cloudfront.DistributionViewerCertificateArgs(
                cloudfront_default_certificate=True,
            ),
            tags=create_tags(namer.environment, distribution_name, project=namer.project),
            opts=child_opts,
        )

        # S3 bucket policy for CloudFront access, pinned to this distribution
        self.bucket_policy = aws.s3.BucketPolicy(
            f"{name}-bucket-policy",
            bucket=frontend_bucket_name,
            policy=pulumi.Output.all(
                frontend_bucket_arn,
                self.distribution.arn,
            ).apply(lambda args: build_bucket_policy(args[0], args[1])),
            opts=child_opts,
        )

        self.register_outputs({
            "distribution_id": self.distribution.id,
            "distribution_arn": self.distribution.arn,
            "distribution_domain": self.distribution.domain_name,
        })

    def get_outputs(self) -> CloudFrontOutputs:
        """Get CloudFront output values."""
        return CloudFrontOutputs(
            distribution_id=self.distribution.id,
            distribution_arn=self.distribution.arn,
            distribution_domain=self.distribution.domain_name,
        )
