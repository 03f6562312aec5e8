"""
Resource naming conventions for consistent AWS resource names.

Follows pattern: {project}-{environment}-{resource}
"""

from dataclasses import dataclass


@dataclass
class ResourceNamer:
    """
    Generates consistent resource names for AWS resources.

    Attributes:
        project: Project identifier
        environment: Deployment environment (dev, staging, prod)
    """
    project: str
    environment: str

    def name(self, resource: str) -> str:
        """
        Generate a resource name.

        Args:
            resource: Resource identifier (e.g., 'api', 'lambda-role')

        Returns:
            Formatted resource name
        """
        if not resource:
            return f"{self.project}-{self.environment}"
        return f"{self.project}-{self.environment}-{resource}"

    def bucket_name(self, suffix: str) -> str:
        """
        Generate an S3 bucket name (must be globally unique).

        Args:
            suffix: Bucket suffix (e.g., 'frontend')

        Returns:
            Lowercase bucket name
        """
        return f"{self.project}-{self.environment}-{suffix}".lower()

    def function_name(self, logical_name: str) -> str:
        """Lambda function name for a catalog entry."""
        return self.name(logical_name)

    def log_group_name(self, logical_name: str) -> str:
        """CloudWatch log group Lambda writes to for a catalog entry."""
        return f"/aws/lambda/{self.function_name(logical_name)}"


def normalize_domain(endpoint: str) -> str:
    """
    Reduce an endpoint URL to a bare domain name.

    API Gateway reports endpoints as 'https://abc123.execute-api.<region>.amazonaws.com';
    CloudFront origins want 'abc123.execute-api.<region>.amazonaws.com'.

    Args:
        endpoint: URL or domain, with or without scheme and trailing slash

    Returns:
        Domain name without scheme or trailing slash
    """
    domain = endpoint.strip()
    for scheme in ("https://", "http://"):
        if domain.lower().startswith(scheme):
            domain = domain[len(scheme):]
            break
    return domain.rstrip("/")
