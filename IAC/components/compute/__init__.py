"""Compute components: story Lambda function."""

from IAC.components.compute.story_lambda import LambdaOutputs, StoryLambdaComponent

__all__ = ["StoryLambdaComponent", "LambdaOutputs"]
