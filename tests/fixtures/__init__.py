"""Builders and test doubles shared across lumenr tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from lumenr.core.light.models import AnimationSpec, LightProfile

RU_TORCH_DESCRIPTION = (
    "<p>Источник света<br>"
    "Дальность освещения (футы).<br>"
    "Яркий: 20<br>"
    "Тусклый: 40<br>"
    "Цвет: #ff8800<br>"
    "Анимация: факел<br>"
    "Скорость: 5<br>"
    "Интенсивность: 5</p>"
)

EN_TORCH_DESCRIPTION = (
    "<p>Source of light<br>"
    "Bright: 20<br>"
    "Dim: 40<br>"
    "Color: #ff8800<br>"
    "Animation: torch<br>"
    "Speed: 5<br>"
    "Intensity: 5</p>"
)


def make_profile(
    dim: int,
    bright: int | None = None,
    angle: int = 360,
    color: str | None = None,
    alpha: float = 0.0,
    animation: str | None = None,
    speed: int = 5,
    intensity: int = 5,
) -> LightProfile:
    """Build a LightProfile with compact defaults."""
    return LightProfile(
        bright=bright if bright is not None else dim // 2,
        dim=dim,
        angle=angle,
        color=color,
        alpha=alpha,
        animation=AnimationSpec(type=animation, speed=speed, intensity=intensity),
    )


def make_item(description: str | None, equipped: bool = True, name: str = "Item") -> dict:
    """Build a host item record as exported JSON."""
    system: dict[str, Any] = {"equipped": equipped}
    if description is not None:
        system["description"] = {"value": description}
    return {"name": name, "system": system}


def ru_light(dim: int, color: str = "#ffffff", animation: str | None = None) -> str:
    """Russian-grammar description with the given dim radius."""
    lines = ["Источник света", f"Тусклый: {dim}", f"Цвет: {color}"]
    if animation:
        lines.append(f"Анимация: {animation}")
    return "<p>" + "<br>".join(lines) + "</p>"


@dataclass
class FakeEntity:
    """Entity double satisfying the LightEntity protocol."""

    name: str
    items: list[Any] = field(default_factory=list)
    tokens: list[Any] = field(default_factory=lambda: ["token-1"])
    is_owner: bool = True

    def active_tokens(self) -> list[Any]:
        return list(self.tokens)


class RecordingSink:
    """TokenSink double that records every update."""

    def __init__(self, fail_on: set[Any] | None = None) -> None:
        self.updates: list[tuple[Any, dict[str, Any]]] = []
        self.fail_on = fail_on or set()

    def update_light(self, token: Any, light_data: dict[str, Any]) -> None:
        if token in self.fail_on:
            raise RuntimeError(f"token {token} rejected the update")
        self.updates.append((token, light_data))
