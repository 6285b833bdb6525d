"""Exceptions raised while building hosted zone constructs."""

ROLE_NAME_WITHOUT_PRINCIPAL = (
  "crossAccountZoneDelegationRoleName property is not supported without "
  "crossAccountZoneDelegationPrincipal"
)
TOO_MANY_KEY_SIGNING_KEYS = "At most 2 key signing keys can be created."
KEY_NAME_TOO_SHORT = "Key signing key name must be at least 3 characters."
KEY_NAME_TOO_LONG = "Key signing key name must not be longer than 128 characters."
KEY_NAME_INVALID_CHARACTERS = (
  "Key signing key name can contain only numbers, letters and underscores (_)."
)


class HostedZoneError(ValueError):
  """Base exception for all route53-zones errors.

  Catch this to handle any error originating from this package.
  """


class HostedZoneConfigError(HostedZoneError):
  """The properties passed to a hosted zone construct are invalid.

  Raised before any resource is added to the construct tree.
  """


class KeySigningKeyError(HostedZoneConfigError):
  """A key signing key configuration is invalid."""


class HostedZoneImportError(HostedZoneError):
  """The requested attribute is not known for an imported hosted zone.

  Attributes:
    attribute: Name of the attribute that was read.
  """

  def __init__(self, attribute: str, hint: str = "") -> None:
    self.attribute = attribute
    message = f"{attribute} is not available on an imported hosted zone"
    super().__init__(f"{message}: {hint}" if hint else message)
