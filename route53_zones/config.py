"""Configuration loader for hosted zone management."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from route53_zones.errors import HostedZoneConfigError


@dataclass
class KeySigningKeySpec:
  """A DNSSEC key signing key backed by an existing KMS key."""

  name: str
  kms_key_arn: str
  active: bool = True


@dataclass
class ZoneConfig:
  """Configuration for a single public hosted zone."""

  domain: str
  comment: str | None = None
  caa_amazon: bool = False
  delegation_account_ids: list[str] = field(default_factory=list)
  delegation_role_name: str | None = None
  key_signing_keys: list[KeySigningKeySpec] = field(default_factory=list)
  query_logs_log_group_arn: str | None = None
  tags: dict[str, str] = field(default_factory=dict)
  region: str = "us-east-1"


def _parse_key_signing_key(data: dict[str, Any]) -> KeySigningKeySpec:
  return KeySigningKeySpec(
    name=str(data["name"]),
    kms_key_arn=data["kms_key_arn"],
    active=data.get("active", True),
  )


def _parse_account_id(value: str | int) -> str:
  # Unquoted IDs with a leading zero are read as octal or lose the zero
  account_id = str(value)
  if len(account_id) != 12 or not account_id.isdigit():
    raise HostedZoneConfigError(
      f"Invalid AWS account ID {value!r}: expected 12 digits, quote IDs in YAML"
    )
  return account_id


@dataclass
class Config:
  """Multi-zone configuration."""

  zones: list[ZoneConfig] = field(default_factory=list)

  @classmethod
  def from_yaml(cls, path: Path | str = "zones.yaml") -> "Config":
    """Load configuration from YAML file."""
    with open(path) as f:
      data = yaml.safe_load(f) or {}

    defaults = data.get("defaults", {})
    zones: list[ZoneConfig] = []

    for zone_data in data.get("zones", []):
      # Merge defaults with zone-specific config; tags merge key by key
      merged = {**defaults, **zone_data}
      tags = {**defaults.get("tags", {}), **zone_data.get("tags", {})}

      # YAML reads unquoted account IDs as integers
      account_ids = merged.get("delegation_account_ids", [])
      if isinstance(account_ids, (str, int)):
        account_ids = [account_ids]

      zones.append(
        ZoneConfig(
          domain=merged["domain"],
          comment=merged.get("comment"),
          caa_amazon=merged.get("caa_amazon", False),
          delegation_account_ids=[_parse_account_id(a) for a in account_ids],
          delegation_role_name=merged.get("delegation_role_name"),
          key_signing_keys=[
            _parse_key_signing_key(k) for k in merged.get("key_signing_keys", [])
          ],
          query_logs_log_group_arn=merged.get("query_logs_log_group_arn"),
          tags={str(k): str(v) for k, v in tags.items()},
          region=merged.get("region", "us-east-1"),
        )
      )

    return cls(zones=zones)
