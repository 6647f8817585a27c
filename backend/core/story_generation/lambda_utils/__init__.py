"""Helpers for the story Lambda handler."""
