"""Upload of local site assets into the site bucket."""

from pathlib import Path

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_s3 as s3
from aws_cdk import aws_s3_deployment as s3_deploy
from constructs import Construct


class SiteContent(Construct):
  """Deploys the contents of a local folder to an S3 bucket.

  When a distribution is given, the uploaded paths are invalidated
  after every deployment.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    asset_folder: str | Path,
    bucket: s3.IBucket,
    distribution: cloudfront.IDistribution | None = None,
  ) -> None:
    super().__init__(scope, id)

    self.deployment = s3_deploy.BucketDeployment(
      self,
      "Deployment",
      sources=[s3_deploy.Source.asset(str(asset_folder))],
      destination_bucket=bucket,
      distribution=distribution,
      distribution_paths=["/*"] if distribution is not None else None,
    )
