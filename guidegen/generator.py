"""
Guide generation.

Guides are taken from ``<guides_dir>/source`` and the resulting HTML goes into
``<guides_dir>/output``. Assets under ``<guides_dir>/assets`` are copied to the
output directory as part of the run.

A guide is a Markdown file whose prologue (everything up to a line reading
``endprologue.``) becomes the page header; the rest is indexed into the
chapters sidebar and rendered into the main column. With warnings on, every
generated page goes through the link checker and the findings are printed.
"""

import shutil
from pathlib import Path

from . import link_checker
from .config import GeneratorOptions
from .diagnostics import Diagnostic
from .indexer import index_headings
from .layout import render_page, render_sidebar
from .render import extract_title, md_to_html, split_prologue

GUIDE_SUFFIX = ".md"


class Generator:
    def __init__(self, options: GeneratorOptions):
        self.options = options
        self.source_dir = options.source_dir
        self.output_dir = options.output_dir
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def generate(self) -> dict[str, list[Diagnostic]]:
        """Generate the stale guides and copy assets.

        Returns the diagnostics of every guide that was generated, keyed by
        output file name.
        """
        report = self.generate_guides()
        self.copy_assets()
        return report

    def generate_guides(self) -> dict[str, list[Diagnostic]]:
        report: dict[str, list[Diagnostic]] = {}
        for guide in self.guides_to_generate():
            diagnostics = self.generate_guide(guide)
            if diagnostics is not None:
                report[self.output_name(guide)] = diagnostics
        return report

    def guides_to_generate(self) -> list[Path]:
        guides = [
            path
            for path in sorted(self.source_dir.glob(f"*{GUIDE_SUFFIX}"))
            if not path.name.startswith("_")  # partials
        ]
        if not self.options.only:
            return guides
        return [g for g in guides if any(g.name.startswith(prefix) for prefix in self.options.only)]

    @staticmethod
    def output_name(guide: Path) -> str:
        return guide.stem + ".html"

    def is_stale(self, source: Path, output: Path) -> bool:
        return (
            self.options.all
            or not output.exists()
            or output.stat().st_mtime < source.stat().st_mtime
        )

    def copy_assets(self) -> None:
        if self.options.assets_dir.is_dir():
            shutil.copytree(self.options.assets_dir, self.output_dir, dirs_exist_ok=True)

    def generate_guide(self, guide: Path) -> list[Diagnostic] | None:
        """Write one guide; ``None`` when its output is up to date."""
        output = self.output_dir / self.output_name(guide)
        if not self.is_stale(guide, output):
            return None

        print(f"Generating {output.name}")
        page, diagnostics = self.render_guide(guide.read_text(encoding="utf-8"))
        output.write_text(page, encoding="utf-8")

        for diagnostic in diagnostics:
            print(f"*** {diagnostic}")
        return diagnostics

    def render_guide(self, md_text: str) -> tuple[str, list[Diagnostic]]:
        header, body = split_prologue(md_text)
        page_title = f"{self.options.site_title}: {extract_title(header or body)}"

        index = index_headings(body, warnings=self.options.warnings, numbered=self.options.numbered)
        page = render_page(
            page_title=page_title,
            header_section=md_to_html(header),
            index_section=render_sidebar(index.tree),
            body=md_to_html(index.body),
            edge=self.options.edge,
        )

        diagnostics = list(index.diagnostics)
        if self.options.warnings:
            diagnostics.extend(link_checker.check(page))
        return page, diagnostics
