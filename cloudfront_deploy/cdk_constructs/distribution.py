"""CloudFront distribution in front of a private S3 bucket."""

from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_s3 as s3
from constructs import Construct


class CloudFrontDistribution(Construct):
  """CloudFront distribution reading from S3 through an origin access identity.

  The bucket stays private: only the identity created here is granted
  read and list access on it.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    certificate: acm.ICertificate,
    domain_name: str,
    index_document: str,
    error_document: str | None = None,
  ) -> None:
    super().__init__(scope, id)

    self.origin_access_identity = cloudfront.OriginAccessIdentity(
      self,
      "OriginAccessIdentity",
      comment=f"Origin access identity for {domain_name}",
    )
    # The origin below adds its own s3:GetObject statement for the same
    # identity; this grant adds bucket listing on top of it.
    bucket.grant_read(self.origin_access_identity)

    error_responses = None
    if error_document:
      error_responses = [
        cloudfront.ErrorResponse(
          http_status=status,
          response_http_status=404,
          response_page_path=f"/{error_document.lstrip('/')}",
        )
        for status in (403, 404)
      ]

    self.distribution = cloudfront.Distribution(
      self,
      "Distribution",
      default_behavior=cloudfront.BehaviorOptions(
        origin=origins.S3BucketOrigin.with_origin_access_identity(
          bucket,
          origin_access_identity=self.origin_access_identity,
        ),
        viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
        allowed_methods=cloudfront.AllowedMethods.ALLOW_GET_HEAD,
        cached_methods=cloudfront.CachedMethods.CACHE_GET_HEAD,
      ),
      domain_names=[domain_name],
      certificate=certificate,
      default_root_object=index_document,
      error_responses=error_responses,
      enable_ipv6=True,
      http_version=cloudfront.HttpVersion.HTTP2,
      minimum_protocol_version=cloudfront.SecurityPolicyProtocol.TLS_V1_2_2021,
    )
