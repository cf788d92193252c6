#!/usr/bin/env python3
"""
CLI entry point for the statute annotation pipeline.

Pipeline
--------
1. **Rendered HTML → annotated HTML**: brackets, article references, links,
   number/conjunction styles and defined-term tooltips are added to a
   statute rendered by the upstream e-Gov renderer.
2. **Commentary** (optional): an article-by-article commentary text file is
   attached under the matching articles.

Usage
-----
    # One statute, with commentary:
    python convert.py --file input_docs/patent.html --commentary chikujo/chikujo_patent.txt

    # All HTML files in input_docs/:
    python convert.py

Outputs ``output_html/<stem>.html`` and ``output_html/<stem>.json`` (title,
article tokens and the defined terms that were found).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from annotator import StatuteAnnotator

INPUT_DIR = Path("input_docs")
OUTPUT_DIR = Path("output_html")


def annotate_file(
    file_path: Path,
    commentary_path: Path | None = None,
    output_dir: Path = OUTPUT_DIR,
) -> Path:
    """Annotate one rendered statute and write the HTML + JSON sidecar.

    Returns the path to the generated .html file.
    """
    print(f"Processing: {file_path}")
    html = file_path.read_text(encoding="utf-8")
    commentary = None
    if commentary_path is not None:
        commentary = commentary_path.read_text(encoding="utf-8")

    result = StatuteAnnotator().annotate(html, commentary)

    output_dir.mkdir(parents=True, exist_ok=True)
    html_path = output_dir / (file_path.stem + ".html")
    html_path.write_text(result.markup, encoding="utf-8")
    print(f"  [1/2] HTML → {html_path}")

    json_path = output_dir / (file_path.stem + ".json")
    with open(json_path, "w", encoding="utf-8") as f:
        json.dump(result.to_dict(), f, ensure_ascii=False, indent=2)
    print(f"  [2/2] JSON → {json_path}")

    return html_path


def main() -> None:
    ap = argparse.ArgumentParser(
        description="Annotate a rendered Japanese statute with article links, "
                    "bracket styles and defined-term tooltips."
    )
    ap.add_argument(
        "--file",
        type=str,
        default=None,
        help="Path to a single rendered statute (HTML). "
             "If omitted, all .html files in input_docs/ are processed.",
    )
    ap.add_argument(
        "--commentary",
        type=str,
        default=None,
        help="Article-by-article commentary text to attach (single file only).",
    )
    ap.add_argument(
        "--output-dir",
        type=str,
        default=str(OUTPUT_DIR),
        help=f"Directory for the annotated output (default: {OUTPUT_DIR}).",
    )
    ap.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log per-pass details.",
    )

    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    output_dir = Path(args.output_dir)

    commentary_path = None
    if args.commentary:
        commentary_path = Path(args.commentary)
        if not commentary_path.exists():
            print(f"Error: file not found: {commentary_path}", file=sys.stderr)
            sys.exit(1)

    if args.file:
        path = Path(args.file)
        if not path.exists():
            print(f"Error: file not found: {path}", file=sys.stderr)
            sys.exit(1)
        annotate_file(path, commentary_path, output_dir)
    else:
        if commentary_path is not None:
            print("Error: --commentary requires --file", file=sys.stderr)
            sys.exit(1)
        html_files = sorted(INPUT_DIR.glob("*.html"))
        if not html_files:
            print(f"No .html files found in {INPUT_DIR}/", file=sys.stderr)
            sys.exit(1)
        for path in html_files:
            annotate_file(path, output_dir=output_dir)

    print("Done.")


if __name__ == "__main__":
    main()
