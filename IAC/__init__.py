"""
Pulumi infrastructure-as-code for the story generator.

This package defines AWS infrastructure including:
- ECR repository for the Lambda container image
- Secrets Manager secret for Langfuse keys
- IAM execution role with Bedrock access
- Lambda function running the story handler
- HTTP API Gateway routing POST /story to the Lambda
"""
