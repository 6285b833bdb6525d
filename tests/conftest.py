"""Pytest fixtures for CDK construct tests."""

from collections.abc import Callable
from typing import Any

import aws_cdk as cdk
import pytest
from aws_cdk import aws_kms as kms


@pytest.fixture
def app() -> cdk.App:
  """Create a CDK App for testing."""
  return cdk.App()


@pytest.fixture
def stack(app: cdk.App) -> cdk.Stack:
  """Create a CDK Stack with a concrete account and region for testing."""
  return cdk.Stack(
    app,
    "TestStack",
    env=cdk.Environment(account="123456789012", region="us-east-1"),
  )


@pytest.fixture
def import_key(stack: cdk.Stack) -> Callable[[str, str], kms.IKey]:
  """Import a KMS key by ID in the test stack's account and region."""

  def _import(id: str, key_id: str) -> kms.IKey:
    return kms.Key.from_key_arn(
      stack,
      id,
      stack.format_arn(service="kms", resource="key", resource_name=key_id),
    )

  return _import


@pytest.fixture
def key_arn() -> Callable[[str], dict[str, Any]]:
  """Resolved ARN of a key imported with the import_key fixture."""

  def _arn(key_id: str) -> dict[str, Any]:
    return {
      "Fn::Join": [
        "",
        [
          "arn:",
          {"Ref": "AWS::Partition"},
          f":kms:us-east-1:123456789012:key/{key_id}",
        ],
      ]
    }

  return _arn
