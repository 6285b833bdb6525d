"""Route 53 hosted zone constructs."""

from collections.abc import Mapping, Sequence

from aws_cdk import Duration, Stack
from aws_cdk import aws_ec2 as ec2
from aws_cdk import aws_iam as iam
from aws_cdk import aws_route53 as route53
from constructs import Construct

from route53_zones.errors import (
  ROLE_NAME_WITHOUT_PRINCIPAL,
  HostedZoneConfigError,
  HostedZoneImportError,
)

from .key_signing_key import (
  KeySigningKeyConfig,
  add_key_signing_keys,
  validate_key_signing_keys,
)

AMAZON_CAA_VALUE = '0 issue "amazon.com"'
CAA_AMAZON_TTL = Duration.minutes(30)
DELEGATION_TTL = Duration.days(2)


def _hosted_zone_arn(scope: Construct, hosted_zone_id: str) -> str:
  # Hosted zones are global, so the ARN carries no region or account.
  return Stack.of(scope).format_arn(
    service="route53",
    region="",
    account="",
    resource="hostedzone",
    resource_name=hosted_zone_id,
  )


def _normalize_zone_name(zone_name: str) -> str:
  return zone_name.removesuffix(".")


class ImportedHostedZone(Construct):
  """A hosted zone defined outside of this app."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    hosted_zone_id: str,
    zone_name: str | None = None,
  ) -> None:
    super().__init__(scope, id)

    self.hosted_zone_id = hosted_zone_id
    self.hosted_zone_arn = _hosted_zone_arn(self, hosted_zone_id)
    self._zone_name = _normalize_zone_name(zone_name) if zone_name else None

  @property
  def zone_name(self) -> str:
    if self._zone_name is None:
      raise HostedZoneImportError(
        "zone_name",
        "use HostedZone.from_hosted_zone_attributes() to import with a zone name",
      )
    return self._zone_name


class HostedZone(Construct):
  """Route 53 hosted zone.

  The zone is emitted as the construct's default child, so its logical ID is
  derived from the construct's own path.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    zone_name: str,
    comment: str | None = None,
    query_logs_log_group_arn: str | None = None,
    vpcs: Sequence[ec2.IVpc] | None = None,
  ) -> None:
    super().__init__(scope, id)

    self.zone_name = _normalize_zone_name(zone_name)
    self._vpcs: list[route53.CfnHostedZone.VPCProperty] = []

    self._resource = route53.CfnHostedZone(
      self,
      "Resource",
      name=f"{self.zone_name}.",
      hosted_zone_config=(
        route53.CfnHostedZone.HostedZoneConfigProperty(comment=comment)
        if comment
        else None
      ),
      query_logging_config=(
        route53.CfnHostedZone.QueryLoggingConfigProperty(
          cloud_watch_logs_log_group_arn=query_logs_log_group_arn,
        )
        if query_logs_log_group_arn
        else None
      ),
    )

    self.hosted_zone_id = self._resource.ref
    self.hosted_zone_arn = _hosted_zone_arn(self, self.hosted_zone_id)

    for vpc in vpcs or []:
      self.add_vpc(vpc)

  @property
  def hosted_zone_name_servers(self) -> list[str] | None:
    """Name servers assigned by Route 53 (resolved at deploy time)."""
    return self._resource.attr_name_servers

  def add_vpc(self, vpc: ec2.IVpc) -> None:
    """Associate a VPC with this zone."""
    self._vpcs.append(
      route53.CfnHostedZone.VPCProperty(
        vpc_id=vpc.vpc_id,
        vpc_region=Stack.of(vpc).region,
      )
    )
    self._resource.vpcs = list(self._vpcs)

  @staticmethod
  def from_hosted_zone_id(
    scope: Construct, id: str, hosted_zone_id: str
  ) -> ImportedHostedZone:
    """Import a hosted zone by ID only; its zone name stays unknown."""
    return ImportedHostedZone(scope, id, hosted_zone_id=hosted_zone_id)

  @staticmethod
  def from_hosted_zone_attributes(
    scope: Construct,
    id: str,
    *,
    hosted_zone_id: str,
    zone_name: str,
  ) -> ImportedHostedZone:
    """Import a hosted zone by ID and zone name."""
    return ImportedHostedZone(
      scope,
      id,
      hosted_zone_id=hosted_zone_id,
      zone_name=zone_name,
    )


class PublicHostedZone(HostedZone):
  """Internet-facing hosted zone with optional delegation role and DNSSEC.

  All properties are validated before anything is added to the construct
  tree, so an invalid zone never leaves partial resources behind.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    zone_name: str,
    comment: str | None = None,
    query_logs_log_group_arn: str | None = None,
    caa_amazon: bool = False,
    cross_account_zone_delegation_principal: iam.IPrincipal | None = None,
    cross_account_zone_delegation_role_name: str | None = None,
    key_signing_keys: Mapping[str, KeySigningKeyConfig] | None = None,
  ) -> None:
    if (
      cross_account_zone_delegation_role_name
      and not cross_account_zone_delegation_principal
    ):
      raise HostedZoneConfigError(ROLE_NAME_WITHOUT_PRINCIPAL)
    key_signing_keys = dict(key_signing_keys or {})
    validate_key_signing_keys(key_signing_keys)

    super().__init__(
      scope,
      id,
      zone_name=zone_name,
      comment=comment,
      query_logs_log_group_arn=query_logs_log_group_arn,
    )

    self.cross_account_zone_delegation_role: iam.Role | None = None
    if cross_account_zone_delegation_principal:
      self.cross_account_zone_delegation_role = iam.Role(
        self,
        "CrossAccountZoneDelegationRole",
        role_name=cross_account_zone_delegation_role_name,
        assumed_by=cross_account_zone_delegation_principal,
        inline_policies={
          "delegation": iam.PolicyDocument(
            statements=[
              iam.PolicyStatement(
                actions=["route53:ChangeResourceRecordSets"],
                resources=[self.hosted_zone_arn],
              ),
              iam.PolicyStatement(
                actions=["route53:ListHostedZonesByName"],
                resources=["*"],
              ),
            ]
          )
        },
      )

    self.key_signing_keys, self.dnssec = add_key_signing_keys(
      self, self.hosted_zone_id, key_signing_keys
    )

    if caa_amazon:
      route53.CfnRecordSet(
        self,
        "CaaAmazon",
        hosted_zone_id=self.hosted_zone_id,
        name=f"{self.zone_name}.",
        type="CAA",
        ttl=str(int(CAA_AMAZON_TTL.to_seconds())),
        resource_records=[AMAZON_CAA_VALUE],
      )

  def add_vpc(self, vpc: ec2.IVpc) -> None:
    raise HostedZoneConfigError("Cannot associate public hosted zones with a VPC")

  def add_delegation(
    self,
    delegate: "PublicHostedZone",
    ttl: Duration = DELEGATION_TTL,
  ) -> route53.CfnRecordSet:
    """Delegate a child zone to its own name servers with an NS record."""
    return route53.CfnRecordSet(
      self,
      f"{delegate.node.id}Delegation",
      hosted_zone_id=self.hosted_zone_id,
      name=f"{delegate.zone_name}.",
      type="NS",
      ttl=str(int(ttl.to_seconds())),
      resource_records=delegate.hosted_zone_name_servers,
    )


class PrivateHostedZone(HostedZone):
  """Hosted zone that is only resolvable from the associated VPCs."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    zone_name: str,
    vpc: ec2.IVpc,
    comment: str | None = None,
    query_logs_log_group_arn: str | None = None,
  ) -> None:
    super().__init__(
      scope,
      id,
      zone_name=zone_name,
      comment=comment,
      query_logs_log_group_arn=query_logs_log_group_arn,
      vpcs=[vpc],
    )

  @property
  def hosted_zone_name_servers(self) -> list[str] | None:
    # Route 53 does not expose name servers for private zones.
    return None
