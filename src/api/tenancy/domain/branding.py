"""Tenant theme colors and branding helpers."""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any

from shared_kernel.middleware.tenant_context import ThemeColors

DEFAULT_THEME_COLORS = ThemeColors(
    primary="#C6AA88",
    secondary="#14B8A6",
    accent="#06B6D4",
)

_HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")


def is_valid_hex_color(color: object) -> bool:
    return isinstance(color, str) and bool(_HEX_COLOR.match(color))


def _pick(value: object, default: str) -> str:
    return value if is_valid_hex_color(value) else default  # type: ignore[return-value]


def theme_colors_from_config(theme_config: Mapping[str, Any] | None) -> ThemeColors:
    """Read ``theme_config.accent.{primary,secondary,tertiary}``.

    Missing, empty or malformed colors fall back to the platform defaults
    one by one.
    """
    accent = theme_config.get("accent") if isinstance(theme_config, Mapping) else None
    if not isinstance(accent, Mapping):
        return DEFAULT_THEME_COLORS

    return ThemeColors(
        primary=_pick(accent.get("primary"), DEFAULT_THEME_COLORS.primary),
        secondary=_pick(accent.get("secondary"), DEFAULT_THEME_COLORS.secondary),
        accent=_pick(accent.get("tertiary"), DEFAULT_THEME_COLORS.accent),
    )


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def hex_to_hsl(color: str) -> str:
    """Convert ``#RRGGBB`` to the ``"h s% l%"`` form used by CSS variables.

    Example:
        >>> hex_to_hsl("#3b82f6")
        '217 91% 60%'
    """
    value = color.lstrip("#")
    r, g, b = (int(value[i:i + 2], 16) / 255 for i in (0, 2, 4))

    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2
    hue = saturation = 0.0

    if high != low:
        delta = high - low
        saturation = delta / (2 - high - low) if lightness > 0.5 else delta / (high + low)
        if high == r:
            hue = ((g - b) / delta + (6 if g < b else 0)) / 6
        elif high == g:
            hue = ((b - r) / delta + 2) / 6
        else:
            hue = ((r - g) / delta + 4) / 6

    return (
        f"{_round_half_up(hue * 360)} "
        f"{_round_half_up(saturation * 100)}% "
        f"{_round_half_up(lightness * 100)}%"
    )


def css_variables(colors: ThemeColors) -> dict[str, str]:
    """CSS custom properties for a tenant theme."""
    return {
        "--brand-primary": hex_to_hsl(colors.primary),
        "--brand-secondary": hex_to_hsl(colors.secondary),
        "--brand-accent": hex_to_hsl(colors.accent),
    }
