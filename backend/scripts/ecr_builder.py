"""
ECR image builder for the story Lambda.

Usage:
    python -m backend.scripts.ecr_builder build --environment dev
    python -m backend.scripts.ecr_builder push --environment dev --tag v3
    python -m backend.scripts.ecr_builder build-and-push --environment prod

Builds the root Dockerfile, logs Docker into ECR with a boto3 authorization
token, and pushes to the repository exported by the Pulumi stack as
`ecr_repository_url`. The printed image tag is what the stack's `image_tag`
config should point at.

Dependencies: boto3, docker CLI, pulumi CLI
System role: CI/CD helper for Lambda container deployments
"""

import argparse
import base64
import json
import logging
import subprocess
import sys
from pathlib import Path

import boto3

logger = logging.getLogger(__name__)

IMAGE_NAME = "story-generator-lambda"
ECR_OUTPUT_KEY = "ecr_repository_url"


class ECRBuilder:
    """Build and push the story Lambda image to ECR."""

    def __init__(self, environment: str, image_tag: str = "latest") -> None:
        """
        Initialize builder.

        Args:
            environment: Pulumi stack name (dev, staging, prod)
            image_tag: Tag applied to the pushed image

        Raises:
            FileNotFoundError: Dockerfile missing from the project root
        """
        self.environment = environment
        self.image_tag = image_tag

        self.project_root = Path(__file__).parent.parent.parent
        self.dockerfile = self.project_root / "Dockerfile"
        self.image_local = f"{IMAGE_NAME}:{image_tag}"

        if not self.dockerfile.exists():
            raise FileNotFoundError(f"Dockerfile not found: {self.dockerfile}")

    def build_image(self) -> bool:
        """
        Build the Lambda image locally for linux/amd64.

        Returns:
            bool: True if successful
        """
        logger.info("build_image - Building %s", self.image_local)
        try:
            subprocess.run(
                [
                    "docker", "build",
                    "--provenance=false",
                    "--platform=linux/amd64",
                    "-t", self.image_local,
                    "-f", str(self.dockerfile),
                    str(self.project_root),
                ],
                check=True,
                capture_output=True,
                text=True,
            )
        except subprocess.CalledProcessError as e:
            logger.error("build_image - Build failed: %s", e.stderr)
            return False
        except FileNotFoundError:
            logger.error("build_image - Docker CLI not found")
            return False

        logger.info("build_image - Image built")
        return True

    def get_ecr_repository_url(self) -> str | None:
        """
        Read the ECR repository URL from the Pulumi stack outputs.

        Returns:
            str: Repository URL, or None if unavailable
        """
        try:
            result = subprocess.run(
                ["pulumi", "stack", "output", "-s", self.environment, "--json"],
                check=True,
                capture_output=True,
                text=True,
                cwd=str(self.project_root),
            )
            outputs = json.loads(result.stdout)
        except subprocess.CalledProcessError as e:
            logger.error("get_ecr_repository_url - Pulumi failed: %s", e.stderr)
            return None
        except json.JSONDecodeError:
            logger.error("get_ecr_repository_url - Could not parse Pulumi outputs")
            return None
        except FileNotFoundError:
            logger.error("get_ecr_repository_url - Pulumi CLI not found")
            return None

        ecr_url = outputs.get(ECR_OUTPUT_KEY)
        if not ecr_url:
            logger.error(
                "get_ecr_repository_url - %s missing from stack %s outputs",
                ECR_OUTPUT_KEY, self.environment,
            )
            return None
        return ecr_url

    def authenticate_with_ecr(self, ecr_url: str) -> bool:
        """
        Log Docker into the registry that hosts ecr_url.

        Args:
            ecr_url: <account>.dkr.ecr.<region>.amazonaws.com/<repo>

        Returns:
            bool: True if successful
        """
        registry = ecr_url.split("/", 1)[0]
        parts = registry.split(".")
        if len(parts) < 6 or parts[1:3] != ["dkr", "ecr"]:
            logger.error("authenticate_with_ecr - Invalid ECR URL: %s", ecr_url)
            return False
        region = parts[3]

        client = boto3.client("ecr", region_name=region)
        auth = client.get_authorization_token()["authorizationData"][0]
        username, password = base64.b64decode(auth["authorizationToken"]).decode().split(":", 1)

        try:
            subprocess.run(
                ["docker", "login", "--username", username, "--password-stdin", registry],
                input=password,
                check=True,
                capture_output=True,
                text=True,
            )
        except subprocess.CalledProcessError as e:
            logger.error("authenticate_with_ecr - Docker login failed: %s", e.stderr)
            return False

        logger.info("authenticate_with_ecr - Logged in to %s", registry)
        return True

    def push_image(self, ecr_url: str) -> str | None:
        """
        Tag and push the local image.

        Args:
            ecr_url: ECR repository URL

        Returns:
            str: Pushed image URI, or None if failed
        """
        image_uri = f"{ecr_url}:{self.image_tag}"
        try:
            subprocess.run(
                ["docker", "tag", self.image_local, image_uri],
                check=True,
                capture_output=True,
                text=True,
            )
            subprocess.run(
                ["docker", "push", image_uri],
                check=True,
                capture_output=True,
                text=True,
            )
        except subprocess.CalledProcessError as e:
            logger.error("push_image - Push failed: %s", e.stderr)
            return None

        logger.info("push_image - Pushed %s", image_uri)
        return image_uri

    def push(self) -> str | None:
        """Authenticate and push an already built image."""
        ecr_url = self.get_ecr_repository_url()
        if not ecr_url or not self.authenticate_with_ecr(ecr_url):
            return None
        return self.push_image(ecr_url)

    def build_and_push(self) -> str | None:
        """
        Build and push the image in one operation.

        Returns:
            str: Pushed image URI, or None if any step failed
        """
        if not self.build_image():
            return None
        return self.push()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(prog="python -m backend.scripts.ecr_builder")
    parser.add_argument("command", choices=["build", "push", "build-and-push"])
    parser.add_argument("--environment", required=True, help="Pulumi stack name")
    parser.add_argument("--tag", default="latest", help="Image tag to push")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    builder = ECRBuilder(args.environment, image_tag=args.tag)
    if args.command == "build":
        return 0 if builder.build_image() else 1
    if args.command == "push":
        return 0 if builder.push() else 1
    return 0 if builder.build_and_push() else 1


if __name__ == "__main__":
    sys.exit(main())
