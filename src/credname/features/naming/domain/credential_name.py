"""
Summary: Shared composite-name contract and canonical segment joining.
Why: Give every credential name variant one path format without a base class.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, final, runtime_checkable

from .errors import InvalidArgumentError

SEGMENT_SEPARATOR: str = "/"


def join_segments(segments: Sequence[str]) -> str:
    """Join name segments into the canonical ``/a/b/c`` path form.

    Args:
        segments: Ordered segments, discriminator included when the variant has one.

    Returns:
        str: Segments joined by ``/`` behind a leading ``/``.
    """
    return SEGMENT_SEPARATOR + SEGMENT_SEPARATOR.join(segments)


def require_segment(value: str | None, argument_name: str) -> str:
    """Return ``value`` unchanged, rejecting ``None``.

    Raises:
        InvalidArgumentError: If ``value`` is ``None``.
    """
    if value is None:
        raise InvalidArgumentError(argument_name)
    return value


@runtime_checkable
class CredentialName(Protocol):
    """Anything that can be addressed as a credential name."""

    @property
    def segments(self) -> tuple[str, ...]: ...

    @property
    def name(self) -> str: ...


@final
@dataclass(frozen=True, slots=True, init=False, repr=False)
class SimpleCredentialName:
    """A credential name made of arbitrary caller-supplied segments.

    ``SimpleCredentialName("deploy", "db", "password").name`` is
    ``/deploy/db/password``.
    """

    segments: tuple[str, ...]

    def __init__(self, *segments: str) -> None:
        if not segments:
            raise InvalidArgumentError("segments")
        checked = tuple(
            require_segment(segment, f"segments[{index}]")
            for index, segment in enumerate(segments)
        )
        object.__setattr__(self, "segments", checked)

    @property
    def name(self) -> str:
        return join_segments(self.segments)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"SimpleCredentialName(segments={list(self.segments)!r})"
