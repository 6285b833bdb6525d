#!/usr/bin/env python3
"""CDK application entry point for Route 53 hosted zones."""

import logging
import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk
import boto3

from route53_zones.config import Config
from route53_zones.stacks import HostedZoneStack


def get_account_id() -> str:
  """Get AWS account ID from current credentials."""
  sts = boto3.client("sts")
  return str(sts.get_caller_identity()["Account"])


def stack_name_for(domain: str) -> str:
  """Stack name for a zone, e.g. HostedZone-example-com."""
  return f"HostedZone-{domain.rstrip('.').replace('.', '-')}"


def main() -> None:
  """Create CDK app with a stack for each configured hosted zone."""
  logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
  app = cdk.App()

  # Load configuration
  config_path = app.node.try_get_context("config") or "zones.yaml"
  config = Config.from_yaml(Path(config_path))
  logging.info("Loaded %d zone(s) from %s", len(config.zones), config_path)

  # Get account ID from credentials
  account_id = get_account_id()

  for zone in config.zones:
    stack_name = stack_name_for(zone.domain)
    logging.debug("Defining stack %s for %s", stack_name, zone.domain)
    HostedZoneStack(
      app,
      stack_name,
      zone_config=zone,
      env=cdk.Environment(
        account=account_id,
        region=zone.region,
      ),
      description=f"Route 53 hosted zone for {zone.domain}",
    )

  app.synth()


if __name__ == "__main__":
  main()
