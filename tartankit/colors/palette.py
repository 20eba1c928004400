"""
Palette registry: loads the tartan yarn palette from YAML at startup,
validates it, and exposes a read-only query API.

The registry is a module-level singleton; call get_palette() to obtain it.
The palette is loaded and validated once at import time. Nothing writes to
the registry after startup, so it is safe to share across threads.

Entry order is significant: find_closest_color() scans entries in file order
and keeps the first color at the minimum distance.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Optional, cast

import yaml

from .conversion import InvalidHex, hex_to_rgb, rgb_to_lab
from .delta_e import delta_e2000, has_minimum_contrast
from .types import RGB, ColorCategory, TartanColor

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"

# Rendering-adjacent fallback for codes that are not in the palette.
NEUTRAL_GREY = RGB(128, 128, 128)


class UnknownColorCode(KeyError):
    """Raised when a color code is not present in the palette."""


class PaletteRegistry:
    """
    Read-only registry of tartan yarn colors.

    ``colors`` maps uppercase code → TartanColor in file order and is wrapped
    in MappingProxyType after loading.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_palette() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR, filename: str = "palette.yaml") -> None:
        self._path = data_dir / filename
        self.name: str
        self.colors: MappingProxyType[str, TartanColor]
        self._load()

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self) -> dict[str, Any]:
        try:
            with open(self._path) as f:
                return cast(dict[str, Any], yaml.safe_load(f))
        except FileNotFoundError:
            raise FileNotFoundError(f"Palette data file not found: {self._path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse palette data file {self._path}: {exc}") from exc

    def _load(self) -> None:
        data = self._load_yaml()
        errors: list[str] = []
        result: dict[str, TartanColor] = {}

        for index, entry in enumerate(data.get("entries") or []):
            raw_code = str(entry.get("code", ""))
            code = raw_code.upper()
            prefix = f"palette entry #{index} ({raw_code!r})"
            if not code.isalpha():
                errors.append(f"{prefix}: code must be letters only")
                continue
            if code in result:
                errors.append(f"{prefix}: duplicate code {code!r}")
                continue
            try:
                category = ColorCategory(entry.get("category"))
            except ValueError:
                errors.append(f"{prefix}: unknown category {entry.get('category')!r}")
                continue
            try:
                rgb = hex_to_rgb(entry.get("hex", ""))
            except InvalidHex as exc:
                errors.append(f"{prefix}: {exc}")
                continue
            result[code] = TartanColor(
                code=code,
                name=str(entry.get("name", code)).strip(),
                hex=entry["hex"],
                rgb=rgb,
                lab=rgb_to_lab(rgb),
                category=category,
            )

        if not result and not errors:
            errors.append("palette has no entries")
        if errors:
            raise ValueError(
                f"Palette validation failed for {self._path}:\n"
                + "\n".join(f"  • {e}" for e in errors)
            )

        self.name = str(data.get("name", "")).strip()
        self.colors = MappingProxyType(result)
        logger.debug("Loaded %d palette colors from %s", len(result), self._path)

    # ── Query API ──────────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self.colors)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.upper() in self.colors

    def codes(self) -> list[str]:
        """Return all codes in registry order."""
        return list(self.colors)

    def get(self, code: str) -> Optional[TartanColor]:
        """Return the color for ``code`` (case-insensitive), or None."""
        return self.colors.get(code.upper())

    def require(self, code: str) -> TartanColor:
        """Return the color for ``code`` (case-insensitive).

        Raises UnknownColorCode if the code is not in the palette.
        """
        try:
            return self.colors[code.upper()]
        except KeyError:
            raise UnknownColorCode(f"Unknown color code: {code!r}") from None

    def by_category(self, category: ColorCategory) -> list[TartanColor]:
        return [c for c in self.colors.values() if c.category == category]

    def find_closest(self, hex_value: str) -> TartanColor:
        """Return the palette color nearest to ``hex_value`` by CIEDE2000.

        Ties keep the earlier registry entry.
        """
        lab = rgb_to_lab(hex_to_rgb(hex_value))
        closest: Optional[TartanColor] = None
        min_distance = float("inf")
        for color in self.colors.values():
            distance = delta_e2000(lab, color.lab)
            if distance < min_distance:
                min_distance = distance
                closest = color
        assert closest is not None  # registry is never empty
        return closest

    def contrasting(self, color: TartanColor, min_contrast: float = 25.0) -> list[TartanColor]:
        """Return every other palette color at least ``min_contrast`` away."""
        return [
            c
            for c in self.colors.values()
            if c.code != color.code and has_minimum_contrast(color, c, min_contrast)
        ]


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Initialized eagerly at import time so there is no lazy-init race condition
# in concurrent contexts.

_palette: PaletteRegistry = PaletteRegistry()

DEFAULT_PALETTE_NAME: str = _palette.name


def get_palette() -> PaletteRegistry:
    """Return the module-level palette singleton."""
    return _palette


def get_color(code: str) -> Optional[TartanColor]:
    """Look up a palette color by code (case-insensitive); None when absent."""
    return _palette.get(code)


def require_color(code: str) -> TartanColor:
    """Look up a palette color by code; raise UnknownColorCode when absent."""
    return _palette.require(code)


def get_colors_by_category(category: ColorCategory) -> list[TartanColor]:
    return _palette.by_category(category)


def find_closest_color(hex_value: str) -> TartanColor:
    """Nearest palette color to ``hex_value`` (see PaletteRegistry.find_closest)."""
    return _palette.find_closest(hex_value)


def get_contrasting_colors(color: TartanColor, min_contrast: float = 25.0) -> list[TartanColor]:
    return _palette.contrasting(color, min_contrast)


def resolve_rgb(code: str) -> RGB:
    """RGB for ``code``, falling back to neutral grey for unknown codes.

    Used by callers that turn resolved thread colors into pixels, where a
    missing yarn should render visibly neutral rather than fail.
    """
    color = _palette.get(code)
    return color.rgb if color is not None else NEUTRAL_GREY
