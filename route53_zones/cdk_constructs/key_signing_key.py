"""DNSSEC key signing keys for Route 53 hosted zones."""

import re
from collections.abc import Mapping
from dataclasses import dataclass

from aws_cdk import aws_kms as kms
from aws_cdk import aws_route53 as route53
from constructs import Construct

from route53_zones.errors import (
  KEY_NAME_INVALID_CHARACTERS,
  KEY_NAME_TOO_LONG,
  KEY_NAME_TOO_SHORT,
  TOO_MANY_KEY_SIGNING_KEYS,
  KeySigningKeyError,
)

MAX_KEY_SIGNING_KEYS = 2
MIN_NAME_LENGTH = 3
MAX_NAME_LENGTH = 128

_NAME_PATTERN = re.compile(r"[A-Za-z0-9_]+")


@dataclass(frozen=True)
class KeySigningKeyConfig:
  """Configuration for a single key signing key.

  The master key must be an asymmetric ECC_NIST_P256 KMS key in us-east-1
  that Route 53 is allowed to use for signing.
  """

  master_key: kms.IKey
  active: bool = True


def validate_key_signing_key_name(name: str) -> None:
  """Raise KeySigningKeyError if the name is not a valid key signing key name."""
  if len(name) < MIN_NAME_LENGTH:
    raise KeySigningKeyError(KEY_NAME_TOO_SHORT)
  if len(name) > MAX_NAME_LENGTH:
    raise KeySigningKeyError(KEY_NAME_TOO_LONG)
  if not _NAME_PATTERN.fullmatch(name):
    raise KeySigningKeyError(KEY_NAME_INVALID_CHARACTERS)


def validate_key_signing_keys(keys: Mapping[str, KeySigningKeyConfig]) -> None:
  """Check the key count first, then every key name."""
  if len(keys) > MAX_KEY_SIGNING_KEYS:
    raise KeySigningKeyError(TOO_MANY_KEY_SIGNING_KEYS)
  for name in keys:
    validate_key_signing_key_name(name)


def add_key_signing_keys(
  scope: Construct,
  hosted_zone_id: str,
  keys: Mapping[str, KeySigningKeyConfig],
) -> tuple[list[route53.CfnKeySigningKey], route53.CfnDNSSEC | None]:
  """Create key signing keys and enable DNSSEC once all of them exist.

  The keys must already have passed validate_key_signing_keys. Returns the
  key signing key resources and the DNSSEC resource, which is None when no
  keys are configured.
  """
  key_signing_keys = [
    route53.CfnKeySigningKey(
      scope,
      f"{name}KeySigningKey",
      hosted_zone_id=hosted_zone_id,
      key_management_service_arn=config.master_key.key_arn,
      name=name,
      status="ACTIVE" if config.active else "INACTIVE",
    )
    for name, config in keys.items()
  ]

  if not key_signing_keys:
    return key_signing_keys, None

  dnssec = route53.CfnDNSSEC(scope, "DNSSEC", hosted_zone_id=hosted_zone_id)
  for key_signing_key in key_signing_keys:
    dnssec.node.add_dependency(key_signing_key)

  return key_signing_keys, dnssec
