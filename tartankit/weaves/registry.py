"""
Weave registry: loads the weave table from YAML at startup, validates each
loom draft, and exposes a read-only query API.

The registry is a module-level singleton; call get_weave_registry() to obtain
it. The table is loaded and validated once at import time. Nothing writes to
the registry after startup.

Draft invariants checked at load:
  - every WeaveType has exactly one entry
  - the tie-up is square and sized treadles × shafts
  - threading values lie in 1..shafts, treadling values in 1..treadles
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, cast

import yaml

from .types import WeavePattern, WeaveType

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"


class WeaveRegistry:
    """
    Read-only registry of weave structures keyed by WeaveType.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_weave_registry() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR, filename: str = "weaves.yaml") -> None:
        self._path = data_dir / filename
        self.patterns: MappingProxyType[WeaveType, WeavePattern]
        self._load()
        self._validate()

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self) -> dict[str, Any]:
        try:
            with open(self._path) as f:
                return cast(dict[str, Any], yaml.safe_load(f))
        except FileNotFoundError:
            raise FileNotFoundError(f"Weave data file not found: {self._path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse weave data file {self._path}: {exc}") from exc

    def _load(self) -> None:
        data = self._load_yaml()
        result: dict[WeaveType, WeavePattern] = {}
        for entry in data["entries"]:
            wt = WeaveType(entry["id"])
            if wt in result:
                raise ValueError(f"Duplicate weave entry {wt.value!r} in {self._path}")
            result[wt] = WeavePattern(
                type=wt,
                name=entry["name"],
                description=entry.get("description", "").strip(),
                threading=tuple(int(s) for s in entry["threading"]),
                tie_up=tuple(tuple(bool(v) for v in row) for row in entry["tie_up"]),
                treadling=tuple(int(t) for t in entry["treadling"]),
                shafts=int(entry["shafts"]),
                treadles=int(entry["treadles"]),
            )
        self.patterns = MappingProxyType(result)
        logger.debug("Loaded %d weave structures from %s", len(result), self._path)

    # ── Validation ─────────────────────────────────────────────────────────────

    def _validate(self) -> None:
        """
        Raises ValueError listing all problems found if any draft is
        malformed or a WeaveType has no entry.
        """
        errors: list[str] = []
        for wt in WeaveType:
            if wt not in self.patterns:
                errors.append(f"weave type {wt.value!r}: no entry in weave table")
        for wt, pattern in self.patterns.items():
            self._check_draft(wt, pattern, errors)
        if errors:
            raise ValueError(
                "Weave registry validation failed:\n" + "\n".join(f"  • {e}" for e in errors)
            )

    @staticmethod
    def _check_draft(wt: WeaveType, p: WeavePattern, errors: list[str]) -> None:
        prefix = f"weave {wt.value!r}"
        if p.shafts != p.treadles:
            errors.append(
                f"{prefix}: tie-up must be square, got {p.treadles} treadles × {p.shafts} shafts"
            )
        if len(p.tie_up) != p.treadles:
            errors.append(f"{prefix}: tie-up has {len(p.tie_up)} rows, expected {p.treadles}")
        for i, row in enumerate(p.tie_up):
            if len(row) != p.shafts:
                errors.append(
                    f"{prefix}: tie-up row {i + 1} has {len(row)} columns, expected {p.shafts}"
                )
        if not p.threading:
            errors.append(f"{prefix}: threading is empty")
        if not p.treadling:
            errors.append(f"{prefix}: treadling is empty")
        for shaft in p.threading:
            if not 1 <= shaft <= p.shafts:
                errors.append(f"{prefix}: threading references shaft {shaft} of {p.shafts}")
        for treadle in p.treadling:
            if not 1 <= treadle <= p.treadles:
                errors.append(
                    f"{prefix}: treadling references treadle {treadle} of {p.treadles}"
                )

    # ── Query API ──────────────────────────────────────────────────────────────

    def get(self, weave_type: WeaveType | str) -> WeavePattern:
        """Return the pattern for ``weave_type`` (enum member or its string value).

        Raises KeyError for names that are not a WeaveType value. Validation
        guarantees every WeaveType has an entry after construction.
        """
        try:
            return self.patterns[WeaveType(weave_type)]
        except ValueError:
            raise KeyError(f"Unknown weave type: {weave_type!r}") from None

    def types(self) -> list[WeaveType]:
        return list(self.patterns)


# ── Module-level singleton ─────────────────────────────────────────────────────

_registry: WeaveRegistry = WeaveRegistry()


def get_weave_registry() -> WeaveRegistry:
    """Return the module-level weave registry singleton."""
    return _registry


def get_weave_pattern(weave_type: WeaveType | str) -> WeavePattern:
    return _registry.get(weave_type)
