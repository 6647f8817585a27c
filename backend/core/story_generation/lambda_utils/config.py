"""
Secrets management utilities for Lambda.
"""

import json
import logging
import os

import boto3

logger = logging.getLogger(__name__)

PLACEHOLDER_VALUE = "PLACEHOLDER_SET_VIA_CLI"


def configure_secrets() -> None:
    """
    Fetch Langfuse keys from Secrets Manager and export them to the environment.

    Runs only when LANGFUSE_SECRETS_ARN is set and the keys are not already
    present. Must run before application settings are first loaded.
    """
    secret_arn = os.getenv("LANGFUSE_SECRETS_ARN")
    if not secret_arn:
        return
    if os.getenv("LANGFUSE_PUBLIC_KEY") and os.getenv("LANGFUSE_SECRET_KEY"):
        logger.debug("configure_secrets - Langfuse keys already set, skipping")
        return

    client = boto3.session.Session().client("secretsmanager")
    try:
        response = client.get_secret_value(SecretId=secret_arn)
    except Exception as e:  # pylint: disable=broad-except
        # Prompt registry stays inactive without keys
        logger.error("configure_secrets - Failed to fetch Langfuse secret: %s", e)
        return

    if "SecretString" not in response:
        logger.warning("configure_secrets - Langfuse secret has no SecretString")
        return

    secret = json.loads(response["SecretString"])
    public_key = secret.get("public_key")
    secret_key = secret.get("secret_key")

    if not public_key or not secret_key or PLACEHOLDER_VALUE in (public_key, secret_key):
        logger.warning("configure_secrets - Langfuse keys are missing or placeholder")
        return

    os.environ["LANGFUSE_PUBLIC_KEY"] = public_key
    os.environ["LANGFUSE_SECRET_KEY"] = secret_key
    logger.info("configure_secrets - Set Langfuse keys from secret")
