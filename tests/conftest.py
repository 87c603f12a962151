"""Pytest fixtures for CDK construct tests."""

from pathlib import Path
from typing import Any

import aws_cdk as cdk
import pytest

ACCOUNT = "234567890123"
REGION = "us-east-1"
WEBSITE_FOLDER = Path(__file__).parent / "fixtures" / "my-website"

# Cached hosted zone lookup, as `cdk synth` would store it in cdk.context.json
ZONE_CONTEXT = {
  f"hosted-zone:account={ACCOUNT}:domainName=example.com:region={REGION}": {
    "Id": "/hostedzone/Z0000000EXAMPLE",
    "Name": "example.com.",
  },
}


@pytest.fixture
def website_folder() -> Path:
  """Local folder of static assets to deploy."""
  return WEBSITE_FOLDER


@pytest.fixture
def zone_context() -> dict[str, Any]:
  """Context holding the cached example.com hosted zone lookup."""
  return dict(ZONE_CONTEXT)


@pytest.fixture
def app(zone_context: dict[str, Any]) -> cdk.App:
  """Create a CDK App for testing."""
  return cdk.App(context=zone_context)


@pytest.fixture
def stack(app: cdk.App) -> cdk.Stack:
  """Create a CDK Stack for testing (explicit env, needed for zone lookups)."""
  return cdk.Stack(
    app,
    "TargetStack",
    env=cdk.Environment(account=ACCOUNT, region=REGION),
  )
