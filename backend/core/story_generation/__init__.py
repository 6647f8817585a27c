"""
Story generation Lambda module.

API Gateway-triggered Lambda that turns a topic/style/length request into a
structured story via Bedrock.

Dependencies: pydantic, python-dotenv, boto3, backend.application.services
System role: Serverless story endpoint
"""
