"""
Tag factory for AWS resources.

Every taggable resource carries Project, ManagedBy, Environment and Name,
so renaming the environment re-tags the whole stack on the next update.
"""

from infra.configs.constants import DEFAULT_TAGS


def create_tags(
    environment: str,
    resource_name: str,
    project: str | None = None,
    **extra_tags: str,
) -> dict[str, str]:
    """
    Create a standard tag set for an AWS resource.

    Args:
        environment: Deployment environment
        resource_name: Name of the resource
        project: Overrides the default Project tag
        **extra_tags: Additional tags to include (e.g. Function="hello")

    Returns:
        Dictionary of tags
    """
    tags = {
        **DEFAULT_TAGS,
        "Environment": environment,
        "Name": resource_name,
    }
    if project:
        tags["Project"] = project
    tags.update(extra_tags)
    return tags
