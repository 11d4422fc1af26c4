"""
Resource naming conventions for consistent Pulumi resource names.

Follows pattern: {project}-{environment}-{resource}
"""

from dataclasses import dataclass


@dataclass
class ResourceNamer:
    """
    Generates consistent logical names for stack resources.

    Attributes:
        project: Project identifier
        environment: Deployment environment (dev, staging, prod)
    """
    project: str
    environment: str

    @property
    def prefix(self) -> str:
        """Name prefix shared by every resource in the stack."""
        return f"{self.project}-{self.environment}"

    def name(self, resource: str) -> str:
        """
        Generate a resource name.

        Args:
            resource: Resource identifier (e.g., 'web-sg', 'instance')

        Returns:
            Formatted resource name, or the bare prefix for an empty identifier
        """
        if not resource:
            return self.prefix
        return f"{self.prefix}-{resource}"
