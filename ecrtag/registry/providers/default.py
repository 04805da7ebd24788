"""
Default provider for container registry.
"""

__all__ = ["Default"]


from .amazon_elastic_container_registry import AmazonElasticContainerRegistry


class Default(AmazonElasticContainerRegistry):
    pass
