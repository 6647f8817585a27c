"""
Pulumi component resources for story generator infrastructure.

Each submodule provides reusable ComponentResource classes:
- compute: story Lambda function
- storage: ECR repository
- edge: HTTP API Gateway
- security: IAM roles, Secrets Manager
"""
