"""Tests for the configuration loader."""

import tempfile
from pathlib import Path

import pytest

from route53_zones.config import Config, KeySigningKeySpec, ZoneConfig
from route53_zones.errors import HostedZoneConfigError


def _load(yaml_content: str) -> Config:
  with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
    f.write(yaml_content)
    f.flush()

    return Config.from_yaml(Path(f.name))


class TestZoneConfig:
  """Test ZoneConfig dataclass."""

  def test_default_values(self) -> None:
    """Verify default values are set correctly."""
    config = ZoneConfig(domain="example.com")

    assert config.domain == "example.com"
    assert config.comment is None
    assert config.caa_amazon is False
    assert config.delegation_account_ids == []
    assert config.delegation_role_name is None
    assert config.key_signing_keys == []
    assert config.query_logs_log_group_arn is None
    assert config.tags == {}
    assert config.region == "us-east-1"


class TestConfigFromYaml:
  """Test Config.from_yaml loading."""

  def test_load_simple_config(self) -> None:
    """Test loading a simple configuration."""
    config = _load(
      """
zones:
  - domain: example.com
"""
    )

    assert len(config.zones) == 1
    assert config.zones[0].domain == "example.com"

  def test_empty_file(self) -> None:
    """Test an empty file yields no zones."""
    assert _load("").zones == []

  def test_load_with_defaults(self) -> None:
    """Test loading configuration with defaults."""
    config = _load(
      """
defaults:
  region: us-west-2
  caa_amazon: true
  tags:
    Team: dns

zones:
  - domain: example.com
    tags:
      Owner: alice
"""
    )

    zone = config.zones[0]
    assert zone.region == "us-west-2"
    assert zone.caa_amazon is True
    assert zone.tags == {"Team": "dns", "Owner": "alice"}

  def test_zone_overrides_defaults(self) -> None:
    """Test that zone-specific config overrides defaults."""
    config = _load(
      """
defaults:
  caa_amazon: true

zones:
  - domain: example.com
    caa_amazon: false
"""
    )

    assert config.zones[0].caa_amazon is False

  def test_load_multiple_zones(self) -> None:
    """Test loading multiple zones."""
    config = _load(
      """
zones:
  - domain: zone1.com
  - domain: zone2.com
"""
    )

    assert [z.domain for z in config.zones] == ["zone1.com", "zone2.com"]

  def test_delegation_account_ids_are_strings(self) -> None:
    """Test account IDs read as integers are converted to strings."""
    config = _load(
      """
zones:
  - domain: example.com
    delegation_account_ids:
      - 223456789012
      - "323456789012"
    delegation_role_name: delegation-role
"""
    )

    assert config.zones[0].delegation_account_ids == ["223456789012", "323456789012"]
    assert config.zones[0].delegation_role_name == "delegation-role"

  def test_single_delegation_account_id(self) -> None:
    """Test a scalar account ID is accepted."""
    config = _load(
      """
zones:
  - domain: example.com
    delegation_account_ids: 223456789012
"""
    )

    assert config.zones[0].delegation_account_ids == ["223456789012"]

  def test_key_signing_keys(self) -> None:
    """Test key signing keys are loaded."""
    config = _load(
      """
zones:
  - domain: example.com
    key_signing_keys:
      - name: primary
        kms_key_arn: arn:aws:kms:us-east-1:123456789012:key/abc
      - name: standby
        kms_key_arn: arn:aws:kms:us-east-1:123456789012:key/def
        active: false
"""
    )

    assert config.zones[0].key_signing_keys == [
      KeySigningKeySpec(
        name="primary",
        kms_key_arn="arn:aws:kms:us-east-1:123456789012:key/abc",
      ),
      KeySigningKeySpec(
        name="standby",
        kms_key_arn="arn:aws:kms:us-east-1:123456789012:key/def",
        active=False,
      ),
    ]

  def test_unquoted_account_id_with_leading_zero(self) -> None:
    """Test an unquoted ID that YAML reads as octal is rejected."""
    with pytest.raises(HostedZoneConfigError, match="quote IDs in YAML"):
      _load(
        """
zones:
  - domain: example.com
    delegation_account_ids:
      - 012345670123
"""
      )

  def test_quoted_account_id_with_leading_zero(self) -> None:
    """Test a quoted ID keeps its leading zero."""
    config = _load(
      """
zones:
  - domain: example.com
    delegation_account_ids:
      - "012345670123"
"""
    )

    assert config.zones[0].delegation_account_ids == ["012345670123"]

  def test_missing_domain(self) -> None:
    """Test a zone without a domain is rejected."""
    with pytest.raises(KeyError):
      _load(
        """
zones:
  - comment: no domain
"""
      )
