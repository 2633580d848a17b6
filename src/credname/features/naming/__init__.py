# Path: `src/credname/features/naming/__init__.py`
# Summary: Export credential naming domain symbols.
# Why: Provide a stable import surface for the CLI and tests.

from .domain.credential_name import (
    SEGMENT_SEPARATOR,
    CredentialName,
    SimpleCredentialName,
    join_segments,
    require_segment,
)
from .domain.errors import (
    CredentialNameError,
    IncompleteCredentialNameError,
    InvalidArgumentError,
)
from .domain.service_instance import (
    TYPE_DISCRIMINATOR,
    ServiceInstanceCredentialName,
    ServiceInstanceCredentialNameBuilder,
)

__all__ = [
    "SEGMENT_SEPARATOR",
    "TYPE_DISCRIMINATOR",
    "CredentialName",
    "CredentialNameError",
    "IncompleteCredentialNameError",
    "InvalidArgumentError",
    "ServiceInstanceCredentialName",
    "ServiceInstanceCredentialNameBuilder",
    "SimpleCredentialName",
    "join_segments",
    "require_segment",
]
