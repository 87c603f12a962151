"""Option records accepted by the site constructs."""

from dataclasses import dataclass
from pathlib import Path

from aws_cdk import RemovalPolicy


@dataclass(frozen=True)
class SiteOptions:
  """Options for a public S3 website."""

  asset_folder: str | Path
  index_document: str
  error_document: str | None = None
  domain_name: str | None = None  # Bucket is named after the domain
  sub_domain_name: str | None = None  # Redirects to domain_name
  encrypt_at_rest: bool = False
  removal_policy: RemovalPolicy = RemovalPolicy.RETAIN


@dataclass(frozen=True)
class CdnSiteOptions:
  """Options for a private S3 bucket served through CloudFront."""

  asset_folder: str | Path
  index_document: str
  dns_zone_domain: str
  domain_name: str
  error_document: str | None = None
  encrypt_at_rest: bool = False
  hosted_zone_id: str | None = None  # Skip the zone lookup
  invalidate_on_deploy: bool = True
  ipv6_record: bool = False
  removal_policy: RemovalPolicy = RemovalPolicy.RETAIN
