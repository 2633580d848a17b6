"""Client-side names for credentials stored in a credential-management service."""

from credname.features.naming import (
    CredentialName,
    CredentialNameError,
    IncompleteCredentialNameError,
    InvalidArgumentError,
    ServiceInstanceCredentialName,
    ServiceInstanceCredentialNameBuilder,
    SimpleCredentialName,
    join_segments,
)

__all__ = [
    "CredentialName",
    "CredentialNameError",
    "IncompleteCredentialNameError",
    "InvalidArgumentError",
    "ServiceInstanceCredentialName",
    "ServiceInstanceCredentialNameBuilder",
    "SimpleCredentialName",
    "join_segments",
]
