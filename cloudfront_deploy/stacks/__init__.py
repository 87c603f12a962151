"""CDK stacks for static website infrastructure."""

from .site_stack import BasicSiteStack, CloudFrontSiteStack

__all__ = ["BasicSiteStack", "CloudFrontSiteStack"]
