"""
Runtime settings for vlspec.

Defines SpecSettings, a frozen dataclass carrying the options that shape new
documents and their serialization. The builders in vlspec.cell never read settings;
only the fluent builder and the CLI do.

Precedence
- env (VLSPEC_*) > TOML (./vlspec.toml or [tool.vlspec] in ./pyproject.toml) > defaults.

Notes
- Unparseable values are ignored and the lower-precedence value is kept.
- A TOML file that exists but cannot be parsed raises ConfigError.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from .core.constants import VEGA_LITE_SCHEMA_URL

__all__ = [
    "ConfigError",
    "SpecSettings",
]


class ConfigError(Exception):
    """Raised when a settings file is unreadable or malformed."""


def _bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    if isinstance(v, str):
        return v.strip().lower() in {"1", "true", "t", "yes", "y", "on"}
    return False


@dataclass(frozen=True)
class SpecSettings:
    """
    Settings for document creation and JSON output.

    Attributes:
        schema_url (str): Value of "$schema" seeded into new documents.
        indent (int | None): Indentation for pretty JSON output; None prints one line.
        canonical (bool): If True, serialize with sorted keys and compact separators
            (indent is ignored).

    Examples:
        >>> SpecSettings(indent=4)  # doctest: +ELLIPSIS
        SpecSettings(...)
    """

    schema_url: str = VEGA_LITE_SCHEMA_URL
    indent: int | None = 2
    canonical: bool = False

    @classmethod
    def _apply_mapping(cls, base: SpecSettings, cfg: dict[str, Any] | None) -> SpecSettings:
        """Apply a loose config mapping onto `base`, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        if "schema_url" in cfg and isinstance(cfg["schema_url"], str):
            s = replace(s, schema_url=cfg["schema_url"])

        if "indent" in cfg:
            raw = cfg["indent"]
            if isinstance(raw, str) and raw.strip().lower() in {"none", "null", ""}:
                s = replace(s, indent=None)
            else:
                try:
                    s = replace(s, indent=int(raw))
                except (TypeError, ValueError):
                    pass

        if "canonical" in cfg:
            s = replace(s, canonical=_bool(cfg["canonical"]))

        return s

    @classmethod
    def from_env(cls, base: SpecSettings | None = None, prefix: str = "VLSPEC_") -> SpecSettings:
        """
        Build settings from environment variables. Precedence is env > base (if given) > defaults.

        Recognized variables:
            - VLSPEC_SCHEMA_URL
            - VLSPEC_INDENT (integer, or "none" for single-line output)
            - VLSPEC_CANONICAL (1/0/true/false/yes/no/on/off)
        """
        s = base or cls()
        mapping: dict[str, Any] = {}
        for key in ("schema_url", "indent", "canonical"):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v
        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> SpecSettings:
        """
        Build settings from a TOML file.

        Search order when `path` is None:
            1) ./vlspec.toml (either a [vlspec] table or top-level keys)
            2) ./pyproject.toml under [tool.vlspec]

        Returns defaults if no file is present.

        Raises:
            ConfigError: If a candidate file exists but is not valid TOML.
        """
        s = cls()

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "vlspec.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            try:
                with p.open("rb") as fh:
                    data = tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError) as e:
                raise ConfigError(f"cannot read settings from {p}: {e}") from e
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("vlspec") if isinstance(tool, dict) else None
            elif isinstance(data.get("vlspec"), dict):
                cfg = data["vlspec"]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> SpecSettings:
        """Load settings applying precedence: environment > TOML > defaults."""
        s = cls.from_toml(path)
        return cls.from_env(base=s)
