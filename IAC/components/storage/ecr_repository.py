"""
ECR Repository Component for the story Lambda container image.

Integration Flow:
  1. Build the image: docker build -t story-generator-lambda:latest .
  2. Authenticate with ECR: aws ecr get-login-password | docker login
  3. Push the image: docker push <ECR_URL>:<tag>
  4. StoryLambdaComponent receives repository_url + ":" + tag as its image URI

Key Features:
- scan_on_push=True: Every image is scanned for CVEs on upload.
- Lifecycle Policy: keep only the last 5 images.
- Encryption: Images encrypted at rest (AES256).
- Tag mutability: MUTABLE (allows overwriting 'latest' on each push).
"""

import json
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from IAC.utils.tags import create_tags

LIFECYCLE_KEEP_IMAGES = 5


@dataclass
class EcrRepositoryOutputs:
    """Output values from ECR repository component."""
    repository_url: pulumi.Output[str]
    repository_arn: pulumi.Output[str]
    repository_name: pulumi.Output[str]


class EcrRepositoryComponent(pulumi.ComponentResource):
    """
    ECR repository holding the story Lambda image.

    Enables image scanning and lifecycle management, and lets the Lambda
    service pull from the private repository.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:storage:EcrRepository", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.repository = aws.ecr.Repository(
            f"{name}-lambda-repo",
            name=f"{name}-story-lambda",
            image_scanning_configuration=aws.ecr.RepositoryImageScanningConfigurationArgs(
                scan_on_push=True,
            ),
            image_tag_mutability="MUTABLE",
            encryption_configurations=[
                aws.ecr.RepositoryEncryptionConfigurationArgs(
                    encryption_type="AES256",
                ),
            ],
            force_delete=environment != "prod",
            tags=create_tags(environment, f"{name}-lambda-repo"),
            opts=child_opts,
        )

        aws.ecr.LifecyclePolicy(
            f"{name}-lambda-lifecycle",
            repository=self.repository.name,
            policy=json.dumps({
                "rules": [{
                    "rulePriority": 1,
                    "description": f"Keep last {LIFECYCLE_KEEP_IMAGES} images",
                    "selection": {
                        "tagStatus": "any",
                        "countType": "imageCountMoreThan",
                        "countNumber": LIFECYCLE_KEEP_IMAGES,
                    },
                    "action": {"type": "expire"},
                }],
            }),
            opts=child_opts,
        )

        # Allow the Lambda service to pull images
        aws.ecr.RepositoryPolicy(
            f"{name}-lambda-repo-policy",
            repository=self.repository.name,
            policy=json.dumps({
                "Version": "2012-10-17",
                "Statement": [
                    {
                        "Sid": "LambdaECRImageRetrievalPolicy",
                        "Effect": "Allow",
                        "Principal": {"Service": "lambda.amazonaws.com"},
                        "Action": [
                            "ecr:BatchGetImage",
                            "ecr:GetDownloadUrlForLayer",
                        ],
                    },
                ],
            }),
            opts=child_opts,
        )

        self.register_outputs({
            "repository_url": self.repository.repository_url,
            "repository_arn": self.repository.arn,
            "repository_name": self.repository.name,
        })

    def get_outputs(self) -> EcrRepositoryOutputs:
        """Get ECR repository output values."""
        return EcrRepositoryOutputs(
            repository_url=self.repository.repository_url,
            repository_arn=self.repository.arn,
            repository_name=self.repository.name,
        )
