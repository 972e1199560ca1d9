"""Protocols for the host collaborators around the light pipeline."""

from collections.abc import Iterable, Sequence
from typing import Any, Protocol


class LightEntity(Protocol):
    """
    An entity (character, creature) that carries items.

    Items may be mappings or objects; they are read through
    ``lumenr.core.host.items.get_path``.
    """

    name: str
    is_owner: bool

    @property
    def items(self) -> Iterable[Any]:
        """Items in the host's iteration order."""
        ...

    def active_tokens(self) -> Sequence[Any]:
        """On-scene representations that should receive the light state."""
        ...


class TokenSink(Protocol):
    """
    Applies an effective light profile to one on-scene token.

    Implementations decide how the value is rendered; ``light_data`` has the
    shape of ``LightProfile.to_light_data()``.
    """

    def update_light(self, token: Any, light_data: dict[str, Any]) -> None:
        """Apply light data to a token."""
        ...
