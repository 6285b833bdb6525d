"""CDK stacks for Route 53 hosted zones."""

from .zone_stack import HostedZoneStack

__all__ = ["HostedZoneStack"]
