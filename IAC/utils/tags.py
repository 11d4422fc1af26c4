"""
Tag factory for AWS resources.

Every resource carries the project defaults plus its environment and Name.
"""

from IAC.configs.constants import DEFAULT_TAGS


def create_tags(
    environment: str,
    resource_name: str,
    **extra_tags: str,
) -> dict[str, str]:
    """
    Create a standard tag set for an AWS resource.

    Args:
        environment: Deployment environment
        resource_name: Value of the Name tag
        **extra_tags: Additional tags to include; these win over the defaults

    Returns:
        Dictionary of tags
    """
    return merge_tags(
        DEFAULT_TAGS,
        {"Environment": environment, "Name": resource_name},
        extra_tags,
    )


def merge_tags(
    base_tags: dict[str, str],
    *additional_tags: dict[str, str],
) -> dict[str, str]:
    """
    Merge tag dictionaries left to right without mutating any of them.

    Args:
        base_tags: Base tag dictionary
        *additional_tags: Additional tag dictionaries to merge

    Returns:
        Merged tag dictionary
    """
    result = dict(base_tags)
    for tags in additional_tags:
        result.update(tags)
    return result
