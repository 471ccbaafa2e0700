"""
Generator options.

The environment mirrors the long-standing knobs of the guides build:

  WARNINGS=1   check anchors and links of every generated page
  ALL=1        regenerate every guide, not only the stale ones
  ONLY=a,b     only guides whose file name starts with one of the prefixes
  EDGE=1       mark the pages as edge (development branch) guides

Command line flags take precedence over the environment.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_SITE_TITLE = "Guides"


def _flag(environ, name: str) -> bool:
    return environ.get(name, "") == "1"


def parse_only(value: str | None) -> list[str]:
    if not value:
        return []
    return [prefix.strip() for prefix in value.split(",") if prefix.strip()]


@dataclass
class GeneratorOptions:
    guides_dir: Path = field(default_factory=Path.cwd)
    warnings: bool = False
    all: bool = False
    only: list[str] = field(default_factory=list)
    edge: bool = False
    numbered: bool = False
    strict: bool = False
    site_title: str = DEFAULT_SITE_TITLE

    @property
    def source_dir(self) -> Path:
        return self.guides_dir / "source"

    @property
    def output_dir(self) -> Path:
        return self.guides_dir / "output"

    @property
    def assets_dir(self) -> Path:
        return self.guides_dir / "assets"

    @classmethod
    def from_env(cls, environ=None, guides_dir: Path | None = None) -> "GeneratorOptions":
        environ = os.environ if environ is None else environ
        return cls(
            guides_dir=Path(guides_dir).resolve() if guides_dir else Path.cwd(),
            warnings=_flag(environ, "WARNINGS"),
            all=_flag(environ, "ALL"),
            only=parse_only(environ.get("ONLY")),
            edge=_flag(environ, "EDGE"),
        )
