"""CDK constructs for Route 53 hosted zones."""

from .hosted_zone import (
  HostedZone,
  ImportedHostedZone,
  PrivateHostedZone,
  PublicHostedZone,
)
from .key_signing_key import (
  KeySigningKeyConfig,
  validate_key_signing_key_name,
  validate_key_signing_keys,
)

__all__ = [
  "HostedZone",
  "ImportedHostedZone",
  "KeySigningKeyConfig",
  "PrivateHostedZone",
  "PublicHostedZone",
  "validate_key_signing_key_name",
  "validate_key_signing_keys",
]
