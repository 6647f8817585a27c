"""Security components: IAM roles and Secrets Manager."""

from IAC.components.security.iam_roles import IamRoleOutputs, IamRolesComponent
from IAC.components.security.secrets_manager import SecretsManagerComponent, SecretsOutputs

__all__ = [
    "IamRolesComponent",
    "IamRoleOutputs",
    "SecretsManagerComponent",
    "SecretsOutputs",
]
