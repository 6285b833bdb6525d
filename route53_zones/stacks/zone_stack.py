"""CDK stack for a single public hosted zone."""

from typing import Any

import aws_cdk as cdk
from aws_cdk import aws_iam as iam
from aws_cdk import aws_kms as kms
from constructs import Construct

from route53_zones.cdk_constructs import KeySigningKeyConfig, PublicHostedZone
from route53_zones.config import ZoneConfig
from route53_zones.errors import KeySigningKeyError


def _delegation_principal(account_ids: list[str]) -> iam.IPrincipal | None:
  principals = [iam.AccountPrincipal(account_id) for account_id in account_ids]
  if not principals:
    return None
  if len(principals) == 1:
    return principals[0]
  return iam.CompositePrincipal(*principals)


class HostedZoneStack(cdk.Stack):
  """Stack for a single public hosted zone."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    zone_config: ZoneConfig,
    **kwargs: Any,
  ) -> None:
    names = [spec.name for spec in zone_config.key_signing_keys]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
      raise KeySigningKeyError(
        f"Duplicate key signing key names for {zone_config.domain}: "
        + ", ".join(duplicates)
      )

    super().__init__(scope, id, **kwargs)

    key_signing_keys = {
      spec.name: KeySigningKeyConfig(
        master_key=kms.Key.from_key_arn(self, f"{spec.name}MasterKey", spec.kms_key_arn),
        active=spec.active,
      )
      for spec in zone_config.key_signing_keys
    }

    self.zone = PublicHostedZone(
      self,
      "HostedZone",
      zone_name=zone_config.domain,
      comment=zone_config.comment,
      query_logs_log_group_arn=zone_config.query_logs_log_group_arn,
      caa_amazon=zone_config.caa_amazon,
      cross_account_zone_delegation_principal=_delegation_principal(
        zone_config.delegation_account_ids
      ),
      cross_account_zone_delegation_role_name=zone_config.delegation_role_name,
      key_signing_keys=key_signing_keys,
    )

    cdk.CfnOutput(
      self,
      "NameServers",
      value=cdk.Fn.join(",", self.zone.hosted_zone_name_servers),
      description=f"Name servers for {zone_config.domain}",
    )
    cdk.CfnOutput(self, "HostedZoneId", value=self.zone.hosted_zone_id)

    # Tag resources with zone info
    for key, value in zone_config.tags.items():
      cdk.Tags.of(self).add(key, value)
    cdk.Tags.of(self).add("Project", "route53-zones")
    cdk.Tags.of(self).add("Domain", zone_config.domain)
