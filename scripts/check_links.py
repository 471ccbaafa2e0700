"""Verify the anchors and links of every generated guide in an output directory.

Usage: python scripts/check_links.py [HTML_DIR]   (default: ./output)
"""
import re
import sys
from pathlib import Path

from guidegen import link_checker

html_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd() / "output"
if not html_dir.is_dir():
    print(f"No such directory: {html_dir}")
    sys.exit(1)

# Collect anchors per file, and the in-page problems while at it
pages = {f.name: f.read_text(encoding="utf-8") for f in sorted(html_dir.glob("*.html"))}
scans = {name: link_checker.scan(html) for name, html in pages.items()}
anchors_by_file = {name: scanner.anchors for name, scanner in scans.items()}
in_page = {name: link_checker.diagnose(scanner) for name, scanner in scans.items()}

# Check every anchored href that points at another page
total = 0
broken = []
for src_file, content in pages.items():
    links = re.findall(r'href="([^"#]+\.html)#([^"]+)"', content)
    for target_file, anchor in links:
        total += 1
        if anchor not in anchors_by_file.get(target_file, {}):
            broken.append((src_file, target_file, anchor))

problems = sum(len(diagnostics) for diagnostics in in_page.values())
print(f"Pages checked: {len(pages)}")
print(f"  In-page problems:   {problems}")
print(f"  Cross-page links:   {total}")
print(f"  Broken cross-page:  {len(broken)}")

for name, diagnostics in in_page.items():
    for diagnostic in diagnostics:
        print(f"  [{name}] {diagnostic}")

for src, tgt, anchor in broken:
    guess = link_checker.suggest(anchor, anchors_by_file.get(tgt, {}))
    hint = f", perhaps you meant #{guess}" if guess else ""
    print(f"  [{src}] -> {tgt}#{anchor}{hint}")

if problems or broken:
    sys.exit(1)
print("\nAll anchors and links resolve correctly.")
