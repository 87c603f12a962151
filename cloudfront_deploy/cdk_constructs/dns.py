"""Route 53 DNS constructs."""

from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_route53 as route53
from aws_cdk import aws_route53_targets as targets
from constructs import Construct


class DnsRecords(Construct):
  """Existing Route 53 hosted zone with the site's certificate and records."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    zone_name: str,
    hosted_zone_id: str | None = None,
  ) -> None:
    super().__init__(scope, id)

    self.zone_name = zone_name

    if hosted_zone_id:
      self.hosted_zone = route53.HostedZone.from_hosted_zone_attributes(
        self,
        "HostedZone",
        hosted_zone_id=hosted_zone_id,
        zone_name=zone_name,
      )
    else:
      # Context lookup, needs an explicit account and region on the stack
      self.hosted_zone = route53.HostedZone.from_lookup(
        self,
        "HostedZone",
        domain_name=zone_name,
      )

  def create_certificate(self, domain_name: str) -> acm.ICertificate:
    """Request an ACM certificate validated by records in this zone.

    CloudFront only accepts certificates from us-east-1, so the stack
    must be deployed there.
    """
    self.certificate = acm.Certificate(
      self,
      "Certificate",
      domain_name=domain_name,
      validation=acm.CertificateValidation.from_dns(self.hosted_zone),
    )
    return self.certificate

  def create_cloudfront_records(
    self,
    distribution: cloudfront.IDistribution,
    record_name: str,
    include_aaaa: bool = False,
  ) -> None:
    """Create alias records pointing record_name at the distribution."""
    target = route53.RecordTarget.from_alias(targets.CloudFrontTarget(distribution))

    self.a_record = route53.ARecord(
      self,
      "AliasRecord",
      zone=self.hosted_zone,
      record_name=record_name,
      target=target,
    )

    if include_aaaa:
      self.aaaa_record = route53.AaaaRecord(
        self,
        "AliasAAAARecord",
        zone=self.hosted_zone,
        record_name=record_name,
        target=target,
      )
