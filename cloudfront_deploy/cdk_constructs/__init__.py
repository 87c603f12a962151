"""CDK constructs for static website infrastructure."""

from .basic_site import BasicSiteConstruct
from .cloudfront_site import CloudFrontSiteConstruct
from .content import SiteContent
from .distribution import CloudFrontDistribution
from .dns import DnsRecords
from .storage import OriginBucket, RedirectBucket, WebsiteBucket

__all__ = [
  "BasicSiteConstruct",
  "CloudFrontDistribution",
  "CloudFrontSiteConstruct",
  "DnsRecords",
  "OriginBucket",
  "RedirectBucket",
  "SiteContent",
  "WebsiteBucket",
]
