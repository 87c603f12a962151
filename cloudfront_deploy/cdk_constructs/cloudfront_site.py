"""Composite construct for a CloudFront-fronted static website."""

from aws_cdk import Annotations, CfnOutput
from constructs import Construct

from ..options import CdnSiteOptions
from .content import SiteContent
from .distribution import CloudFrontDistribution
from .dns import DnsRecords
from .storage import OriginBucket


def in_zone(domain_name: str, zone_name: str) -> bool:
  """Return True if domain_name is zone_name or one of its sub-domains."""
  domain = domain_name.rstrip(".").lower()
  zone = zone_name.rstrip(".").lower()
  return domain == zone or domain.endswith(f".{zone}")


class CloudFrontSiteConstruct(Construct):
  """Static website on a custom domain behind CloudFront.

  Creates:
  - Private S3 bucket for static content
  - Upload of the local asset folder into the bucket
  - CloudFront distribution with an origin access identity and HTTPS
  - ACM certificate (DNS validated against the hosted zone)
  - Route 53 alias record for the domain
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    options: CdnSiteOptions,
  ) -> None:
    super().__init__(scope, id)

    self.options = options

    if not in_zone(options.domain_name, options.dns_zone_domain):
      Annotations.of(self).add_warning_v2(
        "cloudfront-deploy:domainOutsideZone",
        f"{options.domain_name} is not inside hosted zone {options.dns_zone_domain}",
      )

    self.origin = OriginBucket(
      self,
      "Origin",
      encrypt_at_rest=options.encrypt_at_rest,
      removal_policy=options.removal_policy,
    )
    self.bucket = self.origin.bucket

    # Existing hosted zone (lookup or import)
    self.dns = DnsRecords(
      self,
      "Dns",
      zone_name=options.dns_zone_domain,
      hosted_zone_id=options.hosted_zone_id,
    )

    # Certificate (DNS validated in the same zone)
    self.certificate = self.dns.create_certificate(options.domain_name)

    self.distribution = CloudFrontDistribution(
      self,
      "Distribution",
      bucket=self.bucket,
      certificate=self.certificate,
      domain_name=options.domain_name,
      index_document=options.index_document,
      error_document=options.error_document,
    )

    self.dns.create_cloudfront_records(
      distribution=self.distribution.distribution,
      record_name=options.domain_name,
      include_aaaa=options.ipv6_record,
    )

    self.content = SiteContent(
      self,
      "Content",
      asset_folder=options.asset_folder,
      bucket=self.bucket,
      distribution=(
        self.distribution.distribution if options.invalidate_on_deploy else None
      ),
    )

    # Outputs
    CfnOutput(
      self,
      "BucketName",
      value=self.bucket.bucket_name,
      description="S3 bucket name",
    )
    CfnOutput(
      self,
      "DistributionId",
      value=self.distribution.distribution.distribution_id,
      description="CloudFront distribution ID",
    )
    CfnOutput(
      self,
      "DistributionDomainName",
      value=self.distribution.distribution.distribution_domain_name,
      description="CloudFront distribution domain name",
    )
    CfnOutput(
      self,
      "SiteUrl",
      value=f"https://{options.domain_name}",
      description="Site URL",
    )
