"""Storage components: ECR repository for the Lambda image."""

from IAC.components.storage.ecr_repository import EcrRepositoryComponent, EcrRepositoryOutputs

__all__ = ["EcrRepositoryComponent", "EcrRepositoryOutputs"]
