"""Configuration loader for multi-site deployments."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from aws_cdk import RemovalPolicy

from .options import CdnSiteOptions, SiteOptions

SITE_KINDS = ("basic", "cloudfront")


@dataclass
class SiteConfig:
  """Configuration for a single static site."""

  name: str
  kind: str  # "basic" or "cloudfront"
  options: SiteOptions | CdnSiteOptions
  owner: str | None = None
  region: str = "us-east-1"


@dataclass
class Config:
  """Multi-site configuration."""

  sites: list[SiteConfig] = field(default_factory=list)

  @classmethod
  def from_yaml(cls, path: Path | str = "sites.yaml") -> "Config":
    """Load configuration from YAML file.

    Relative asset folders are resolved against the file's directory.
    """
    path = Path(path)
    with open(path) as f:
      data = yaml.safe_load(f) or {}

    defaults = data.get("defaults", {})
    sites: list[SiteConfig] = []

    for site_data in data.get("sites", []):
      # Merge defaults with site-specific config
      merged = {**defaults, **site_data}

      kind = merged.get("kind", "basic")
      if kind not in SITE_KINDS:
        raise ValueError(f"Unknown site kind {kind!r} for site {merged.get('name')!r}")

      asset_folder = path.parent / merged["asset_folder"]
      removal_policy = parse_removal_policy(merged.get("removal_policy", "retain"))

      options: SiteOptions | CdnSiteOptions
      if kind == "basic":
        options = SiteOptions(
          asset_folder=asset_folder,
          index_document=merged.get("index_document", "index.html"),
          error_document=merged.get("error_document"),
          domain_name=merged.get("domain_name"),
          sub_domain_name=merged.get("sub_domain_name"),
          encrypt_at_rest=merged.get("encrypt_at_rest", False),
          removal_policy=removal_policy,
        )
      else:
        options = CdnSiteOptions(
          asset_folder=asset_folder,
          index_document=merged.get("index_document", "index.html"),
          dns_zone_domain=merged["dns_zone_domain"],
          domain_name=merged["domain_name"],
          error_document=merged.get("error_document"),
          encrypt_at_rest=merged.get("encrypt_at_rest", False),
          hosted_zone_id=merged.get("hosted_zone_id"),
          invalidate_on_deploy=merged.get("invalidate_on_deploy", True),
          ipv6_record=merged.get("ipv6_record", False),
          removal_policy=removal_policy,
        )

      sites.append(
        SiteConfig(
          name=merged["name"],
          kind=kind,
          options=options,
          owner=merged.get("owner"),
          region=merged.get("region", "us-east-1"),
        )
      )

    return cls(sites=sites)


def parse_removal_policy(value: Any) -> RemovalPolicy:
  """Convert a removal policy string to the enum, defaulting to RETAIN."""
  return {
    "retain": RemovalPolicy.RETAIN,
    "destroy": RemovalPolicy.DESTROY,
    "snapshot": RemovalPolicy.SNAPSHOT,
  }.get(str(value).lower(), RemovalPolicy.RETAIN)
