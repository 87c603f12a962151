#!/usr/bin/env python3
"""CDK application entry point for static website infrastructure."""

import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk
import boto3

from cloudfront_deploy.config import Config, SiteConfig
from cloudfront_deploy.stacks import BasicSiteStack, CloudFrontSiteStack


def get_account_id() -> str:
  """Get AWS account ID from current credentials."""
  sts = boto3.client("sts")
  return str(sts.get_caller_identity()["Account"])


def add_site_stack(app: cdk.App, site: SiteConfig, account_id: str) -> cdk.Stack:
  """Create the stack matching the site's kind."""
  env = cdk.Environment(account=account_id, region=site.region)
  if site.kind == "cloudfront":
    return CloudFrontSiteStack(
      app,
      f"CloudFrontSite-{site.name}",
      site_config=site,
      env=env,
      description=f"CloudFront static website {site.name}",
    )
  return BasicSiteStack(
    app,
    f"BasicSite-{site.name}",
    site_config=site,
    env=env,
    description=f"S3 static website {site.name}",
  )


def main() -> None:
  """Create CDK app with a stack for each configured site."""
  app = cdk.App()

  # Load configuration
  config_path = app.node.try_get_context("config") or "sites.yaml"
  config = Config.from_yaml(Path(config_path))

  # Hosted zone lookups need an explicit account
  account_id = get_account_id()

  for site in config.sites:
    add_site_stack(app, site, account_id)

  app.synth()


if __name__ == "__main__":
  main()
