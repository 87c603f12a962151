"""Composite construct for a public S3 website."""

from aws_cdk import Annotations, CfnOutput
from constructs import Construct

from ..options import SiteOptions
from .content import SiteContent
from .storage import RedirectBucket, WebsiteBucket


class BasicSiteConstruct(Construct):
  """Static website served straight from an S3 website endpoint.

  Creates:
  - S3 bucket with website hosting and public read access
  - Upload of the local asset folder into the bucket
  - (Optional) S3 bucket redirecting a sub-domain to the main domain
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    options: SiteOptions,
  ) -> None:
    super().__init__(scope, id)

    self.options = options

    # Bucket name must match the domain for S3 website hosting on a custom domain
    self.website = WebsiteBucket(
      self,
      "Website",
      index_document=options.index_document,
      error_document=options.error_document,
      bucket_name=options.domain_name,
      encrypt_at_rest=options.encrypt_at_rest,
      removal_policy=options.removal_policy,
    )
    self.bucket = self.website.bucket

    self.content = SiteContent(
      self,
      "Content",
      asset_folder=options.asset_folder,
      bucket=self.bucket,
    )

    self.redirect: RedirectBucket | None = None
    if options.sub_domain_name and options.domain_name:
      self.redirect = RedirectBucket(
        self,
        "SubDomainRedirect",
        bucket_name=options.sub_domain_name,
        redirect_host=options.domain_name,
        removal_policy=options.removal_policy,
      )
    elif options.sub_domain_name:
      Annotations.of(self).add_warning_v2(
        "cloudfront-deploy:subDomainWithoutDomain",
        f"sub_domain_name {options.sub_domain_name} ignored: domain_name is not set",
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
      "WebsiteUrl",
      value=self.bucket.bucket_website_url,
      description="S3 website endpoint",
    )
