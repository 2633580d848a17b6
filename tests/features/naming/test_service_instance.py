"""
Summary: Tests for service instance credential names and their builder.
Why: Pin segment order, null handling, chaining, and completeness checks.
"""

import dataclasses
import itertools
import logging

import pytest

from credname.features.naming import (
    CredentialName,
    IncompleteCredentialNameError,
    InvalidArgumentError,
    ServiceInstanceCredentialName,
    ServiceInstanceCredentialNameBuilder,
)


def _full_builder() -> ServiceInstanceCredentialNameBuilder:
    return (
        ServiceInstanceCredentialName.builder()
        .service_broker_name("broker1")
        .service_offering_name("mysql")
        .service_binding_id("abc-123")
        .credential_name("password")
    )


def test_build_orders_segments_behind_discriminator() -> None:
    name = _full_builder().build()

    assert name.segments == ("c", "broker1", "mysql", "abc-123", "password")
    assert name.name == "/c/broker1/mysql/abc-123/password"
    assert str(name) == "/c/broker1/mysql/abc-123/password"


def test_repr_lists_segments() -> None:
    name = _full_builder().build()

    assert repr(name) == (
        "ServiceInstanceCredentialName(segments=['c', 'broker1', 'mysql', 'abc-123', 'password'])"
    )


def test_builder_returns_new_instance_each_time() -> None:
    first = ServiceInstanceCredentialName.builder()
    second = ServiceInstanceCredentialName.builder()

    assert isinstance(first, ServiceInstanceCredentialNameBuilder)
    assert first is not second


@pytest.mark.parametrize(
    "setter",
    ["service_broker_name", "service_offering_name", "service_binding_id", "credential_name"],
)
def test_setters_return_same_builder(setter: str) -> None:
    builder = ServiceInstanceCredentialName.builder()

    assert getattr(builder, setter)("value") is builder


@pytest.mark.parametrize(
    "setter",
    ["service_broker_name", "service_offering_name", "service_binding_id", "credential_name"],
)
def test_setter_rejects_none(setter: str) -> None:
    builder = ServiceInstanceCredentialName.builder()

    with pytest.raises(InvalidArgumentError) as exc_info:
        getattr(builder, setter)(None)

    assert exc_info.value.argument_name == setter
    assert str(exc_info.value) == f"{setter} must not be None"


def test_failed_setter_keeps_other_fields() -> None:
    builder = _full_builder()

    with pytest.raises(InvalidArgumentError):
        _ = builder.service_binding_id(None)  # pyright: ignore[reportArgumentType]

    assert builder.build().segments == ("c", "broker1", "mysql", "abc-123", "password")


def test_call_order_does_not_matter() -> None:
    calls = [
        ("service_broker_name", "broker1"),
        ("service_offering_name", "mysql"),
        ("service_binding_id", "abc-123"),
        ("credential_name", "password"),
    ]
    expected = _full_builder().build()

    for permutation in itertools.permutations(calls):
        builder = ServiceInstanceCredentialName.builder()
        for setter, value in permutation:
            _ = getattr(builder, setter)(value)
        assert builder.build() == expected


def test_equal_inputs_build_equal_values() -> None:
    first = _full_builder().build()
    second = _full_builder().build()

    assert first == second
    assert hash(first) == hash(second)
    assert first is not second


def test_different_inputs_build_different_values() -> None:
    other = _full_builder().credential_name("username").build()

    assert other != _full_builder().build()
    assert other.segments[-1] == "username"


def test_later_setter_call_overrides_earlier_value() -> None:
    name = _full_builder().service_broker_name("broker2").build()

    assert name.service_broker_name == "broker2"


def test_empty_segment_is_accepted() -> None:
    name = _full_builder().credential_name("").build()

    assert name.name == "/c/broker1/mysql/abc-123/"


def test_build_without_credential_name_raises() -> None:
    builder = (
        ServiceInstanceCredentialName.builder()
        .service_broker_name("broker1")
        .service_offering_name("mysql")
        .service_binding_id("abc-123")
    )

    with pytest.raises(IncompleteCredentialNameError) as exc_info:
        _ = builder.build()

    assert exc_info.value.missing_fields == ("credential_name",)
    assert "credential_name" in str(exc_info.value)


def test_build_on_empty_builder_reports_every_field() -> None:
    builder = ServiceInstanceCredentialName.builder()

    assert builder.missing_fields() == (
        "service_broker_name",
        "service_offering_name",
        "service_binding_id",
        "credential_name",
    )
    with pytest.raises(IncompleteCredentialNameError) as exc_info:
        _ = builder.build()

    assert len(exc_info.value.missing_fields) == 4


def test_incomplete_build_logs_warning(caplog: pytest.LogCaptureFixture) -> None:
    builder = ServiceInstanceCredentialName.builder().service_broker_name("broker1")

    with caplog.at_level(logging.WARNING, logger="credname"):
        with pytest.raises(IncompleteCredentialNameError):
            _ = builder.build()

    records = [r for r in caplog.records if getattr(r, "naming_event", None) == "naming.build.incomplete"]
    assert len(records) == 1


def test_successful_build_logs_debug_event(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="credname"):
        _ = _full_builder().build()

    events = [getattr(r, "naming_event", None) for r in caplog.records]
    assert "naming.build.success" in events


def test_value_is_immutable() -> None:
    name = _full_builder().build()

    with pytest.raises(dataclasses.FrozenInstanceError):
        name.credential_name = "other"  # pyright: ignore[reportAttributeAccessIssue]


def test_direct_construction_matches_builder() -> None:
    name = ServiceInstanceCredentialName(
        service_broker_name="broker1",
        service_offering_name="mysql",
        service_binding_id="abc-123",
        credential_name="password",
    )

    assert name == _full_builder().build()


def test_direct_construction_rejects_none() -> None:
    with pytest.raises(InvalidArgumentError) as exc_info:
        _ = ServiceInstanceCredentialName(
            service_broker_name="broker1",
            service_offering_name=None,  # pyright: ignore[reportArgumentType]
            service_binding_id="abc-123",
            credential_name="password",
        )

    assert exc_info.value.argument_name == "service_offering_name"


def test_satisfies_credential_name_protocol() -> None:
    assert isinstance(_full_builder().build(), CredentialName)


def test_invalid_argument_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        _ = ServiceInstanceCredentialName.builder().credential_name(None)  # pyright: ignore[reportArgumentType]
