#!/usr/bin/env python3
"""Print the name servers of a deployed hosted zone stack."""

import argparse
import json
import logging
import sys

import boto3  # type: ignore[import-not-found]
from botocore.exceptions import ClientError  # type: ignore[import-not-found]


def get_stack_outputs(stack_name: str, region: str = "us-east-1") -> dict[str, str]:
  """Retrieve the CloudFormation outputs of a stack.

  Args:
    stack_name: The CDK stack name (e.g., 'HostedZone-example-com')
    region: AWS region

  Returns:
    Dictionary of output key to output value
  """
  cloudformation = boto3.client("cloudformation", region_name=region)
  response = cloudformation.describe_stacks(StackName=stack_name)
  outputs = response["Stacks"][0].get("Outputs", [])
  logging.debug("Stack %s has %d output(s)", stack_name, len(outputs))
  return {o["OutputKey"]: o["OutputValue"] for o in outputs}


def main() -> None:
  """Main entry point."""
  parser = argparse.ArgumentParser(
    description="Print the name servers of a hosted zone to set at the registrar"
  )
  parser.add_argument(
    "domain",
    help="Zone domain (e.g., example.com)",
  )
  parser.add_argument(
    "--region",
    default="us-east-1",
    help="AWS region (default: us-east-1)",
  )
  parser.add_argument(
    "--format",
    choices=["lines", "json"],
    default="lines",
    help="Output format (default: lines)",
  )
  parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

  args = parser.parse_args()
  logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

  stack_name = f"HostedZone-{args.domain.rstrip('.').replace('.', '-')}"
  try:
    outputs = get_stack_outputs(stack_name, args.region)
  except ClientError as e:
    print(f"Error describing stack {stack_name}: {e}", file=sys.stderr)
    sys.exit(1)

  name_servers = [ns for ns in outputs.get("NameServers", "").split(",") if ns]
  if not name_servers:
    print(f"Stack {stack_name} has no NameServers output", file=sys.stderr)
    sys.exit(1)

  if args.format == "json":
    print(json.dumps({"HostedZoneId": outputs.get("HostedZoneId"), "NameServers": name_servers}, indent=2))
  else:
    for name_server in name_servers:
      print(name_server)


if __name__ == "__main__":
  main()
