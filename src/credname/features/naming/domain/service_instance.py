"""
Summary: Service instance binding credential names and their fluent builder.
Why: Address broker-managed binding credentials as /c/broker/offering/binding/credential.
"""

from dataclasses import dataclass
from typing import ClassVar, Final, final

from credname.platform.logging import logger

from .credential_name import join_segments, require_segment
from .errors import IncompleteCredentialNameError

TYPE_DISCRIMINATOR: Final[str] = "c"


@final
@dataclass(frozen=True, slots=True, kw_only=True, repr=False)
class ServiceInstanceCredentialName:
    """The client-provided name of a service instance binding credential.

    The name consists of four segments: service broker name, service
    offering name, service binding GUID and credential name. Combined, the
    full name has the form
    ``/c/service-broker-name/service-offering-name/binding-GUID/credential-name``.

    Clients normally use :meth:`builder`; direct keyword construction requires
    all four segments at once.
    """

    TYPE_DISCRIMINATOR: ClassVar[str] = TYPE_DISCRIMINATOR

    service_broker_name: str
    service_offering_name: str
    service_binding_id: str
    credential_name: str

    def __post_init__(self) -> None:
        _ = require_segment(self.service_broker_name, "service_broker_name")
        _ = require_segment(self.service_offering_name, "service_offering_name")
        _ = require_segment(self.service_binding_id, "service_binding_id")
        _ = require_segment(self.credential_name, "credential_name")

    @staticmethod
    def builder() -> "ServiceInstanceCredentialNameBuilder":
        """Create a builder for the four required name segments."""
        return ServiceInstanceCredentialNameBuilder()

    @property
    def segments(self) -> tuple[str, ...]:
        """Ordered segments, starting with the ``c`` discriminator."""
        return (
            TYPE_DISCRIMINATOR,
            self.service_broker_name,
            self.service_offering_name,
            self.service_binding_id,
            self.credential_name,
        )

    @property
    def name(self) -> str:
        """Canonical ``/c/...`` form of the name."""
        return join_segments(self.segments)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"ServiceInstanceCredentialName(segments={list(self.segments)!r})"


@final
class ServiceInstanceCredentialNameBuilder:
    """Fluent builder for :class:`ServiceInstanceCredentialName`.

    Setters may be called in any order and each returns the builder itself.
    """

    _FIELDS: ClassVar[tuple[str, ...]] = (
        "service_broker_name",
        "service_offering_name",
        "service_binding_id",
        "credential_name",
    )

    def __init__(self) -> None:
        self._service_broker_name: str | None = None
        self._service_offering_name: str | None = None
        self._service_binding_id: str | None = None
        self._credential_name: str | None = None

    def service_broker_name(self, service_broker_name: str) -> "ServiceInstanceCredentialNameBuilder":
        """Set the service broker name segment.

        This is usually a human-readable name, unique among the service
        brokers of the platform.

        Raises:
            InvalidArgumentError: If ``service_broker_name`` is ``None``.
        """
        self._service_broker_name = require_segment(service_broker_name, "service_broker_name")
        return self

    def service_offering_name(
        self, service_offering_name: str
    ) -> "ServiceInstanceCredentialNameBuilder":
        """Set the service offering name segment (unique within the broker).

        Raises:
            InvalidArgumentError: If ``service_offering_name`` is ``None``.
        """
        self._service_offering_name = require_segment(
            service_offering_name, "service_offering_name"
        )
        return self

    def service_binding_id(self, service_binding_id: str) -> "ServiceInstanceCredentialNameBuilder":
        """Set the service binding ID segment.

        The platform generates this GUID when a service instance is bound to
        an application.

        Raises:
            InvalidArgumentError: If ``service_binding_id`` is ``None``.
        """
        self._service_binding_id = require_segment(service_binding_id, "service_binding_id")
        return self

    def credential_name(self, credential_name: str) -> "ServiceInstanceCredentialNameBuilder":
        """Set the credential name segment of the full name.

        Raises:
            InvalidArgumentError: If ``credential_name`` is ``None``.
        """
        self._credential_name = require_segment(credential_name, "credential_name")
        return self

    def missing_fields(self) -> tuple[str, ...]:
        """Names of the segments that have not been set yet."""
        return tuple(name for name in self._FIELDS if getattr(self, f"_{name}") is None)

    def build(self) -> ServiceInstanceCredentialName:
        """Create the credential name from the staged segments.

        Returns:
            ServiceInstanceCredentialName: Immutable name value.

        Raises:
            IncompleteCredentialNameError: If any segment was never set.
        """
        missing = self.missing_fields()
        if missing:
            logger.warning(
                "Credential name is missing segments: %s",
                ", ".join(missing),
                extra={"naming_event": "naming.build.incomplete", "missing_fields": missing},
            )
            raise IncompleteCredentialNameError("ServiceInstanceCredentialName", missing)

        assert self._service_broker_name is not None
        assert self._service_offering_name is not None
        assert self._service_binding_id is not None
        assert self._credential_name is not None

        result = ServiceInstanceCredentialName(
            service_broker_name=self._service_broker_name,
            service_offering_name=self._service_offering_name,
            service_binding_id=self._service_binding_id,
            credential_name=self._credential_name,
        )
        logger.debug(
            "Built credential name %s",
            result.name,
            extra={"naming_event": "naming.build.success", "credential_name": result.name},
        )
        return result
