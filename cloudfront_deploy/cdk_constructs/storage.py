"""S3 buckets for static website content."""

from aws_cdk import RemovalPolicy
from aws_cdk import aws_s3 as s3
from constructs import Construct


def _encryption(encrypt_at_rest: bool) -> s3.BucketEncryption | None:
  return s3.BucketEncryption.S3_MANAGED if encrypt_at_rest else None


class WebsiteBucket(Construct):
  """S3 bucket configured for public static website hosting."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    index_document: str,
    error_document: str | None = None,
    bucket_name: str | None = None,
    encrypt_at_rest: bool = False,
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
  ) -> None:
    super().__init__(scope, id)

    self.bucket = s3.Bucket(
      self,
      "Bucket",
      bucket_name=bucket_name,
      website_index_document=index_document,
      website_error_document=error_document,
      encryption=_encryption(encrypt_at_rest),
      public_read_access=True,
      block_public_access=s3.BlockPublicAccess(
        block_public_acls=False,
        ignore_public_acls=False,
        block_public_policy=False,
        restrict_public_buckets=False,
      ),
      removal_policy=removal_policy,
      auto_delete_objects=removal_policy == RemovalPolicy.DESTROY,
    )


class RedirectBucket(Construct):
  """S3 website bucket that redirects every request to another host."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket_name: str,
    redirect_host: str,
    protocol: s3.RedirectProtocol = s3.RedirectProtocol.HTTP,
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
  ) -> None:
    super().__init__(scope, id)

    self.bucket = s3.Bucket(
      self,
      "Bucket",
      bucket_name=bucket_name,
      website_redirect=s3.RedirectTarget(
        host_name=redirect_host,
        protocol=protocol,
      ),
      removal_policy=removal_policy,
      auto_delete_objects=removal_policy == RemovalPolicy.DESTROY,
    )


class OriginBucket(Construct):
  """Private S3 bucket, readable only through a CloudFront origin."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    encrypt_at_rest: bool = False,
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
  ) -> None:
    super().__init__(scope, id)

    self.bucket = s3.Bucket(
      self,
      "Bucket",
      encryption=_encryption(encrypt_at_rest),
      block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
      removal_policy=removal_policy,
      auto_delete_objects=removal_policy == RemovalPolicy.DESTROY,
    )
