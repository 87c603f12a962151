"""CDK stacks wrapping a single static website."""

from typing import Any

import aws_cdk as cdk
from constructs import Construct

from ..cdk_constructs import BasicSiteConstruct, CloudFrontSiteConstruct
from ..config import SiteConfig
from ..options import CdnSiteOptions, SiteOptions


def _tag_site(stack: cdk.Stack, site_config: SiteConfig) -> None:
  cdk.Tags.of(stack).add("Project", "static-sites")
  cdk.Tags.of(stack).add("Site", site_config.name)
  if site_config.owner:
    cdk.Tags.of(stack).add("Owner", site_config.owner)


class BasicSiteStack(cdk.Stack):
  """Stack for a public S3 website."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    site_config: SiteConfig,
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, **kwargs)

    if not isinstance(site_config.options, SiteOptions):
      raise TypeError(f"Site {site_config.name} is not a basic site")

    self.site = BasicSiteConstruct(self, "Site", options=site_config.options)
    _tag_site(self, site_config)


class CloudFrontSiteStack(cdk.Stack):
  """Stack for a CloudFront-fronted website."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    site_config: SiteConfig,
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, **kwargs)

    if not isinstance(site_config.options, CdnSiteOptions):
      raise TypeError(f"Site {site_config.name} is not a CloudFront site")

    self.site = CloudFrontSiteConstruct(self, "Site", options=site_config.options)
    _tag_site(self, site_config)
