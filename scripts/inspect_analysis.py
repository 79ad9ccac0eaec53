"""Inspect how an analysis text splits into sections, categories, and badges."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

import httpx

from legaloutline.formatter import build_sections
from legaloutline.presentation import is_long_section
from legaloutline.schemas import Section


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect section categories and risk badges of an analysis.")
    parser.add_argument("--url", help="URL returning plain analysis text")
    parser.add_argument("--file", help="Local analysis text file path")
    parser.add_argument("--preamble", action="store_true", help="Keep text before the first header")
    args = parser.parse_args()

    if not args.url and not args.file:
        parser.error("Provide --url or --file")

    text = load_text(url=args.url, file_path=args.file)
    sections = build_sections(text, include_preamble=args.preamble)

    print("Sections:")
    for index, section in enumerate(sections):
        flags = []
        if section.has_risk:
            flags.append("risk")
        if is_long_section(section):
            flags.append("long")
        suffix = f" [{', '.join(flags)}]" if flags else ""
        print(f"{index}: {'#' * section.level} {section.title} ({section.category.value}){suffix}")

    categories, kinds, badges = collect_stats(sections)

    print("\nCategories:")
    for name, count in categories.most_common():
        print(f"{name}: {count}")

    print("\nBlocks:")
    for name, count in kinds.most_common():
        print(f"{name}: {count}")

    print("\nRisk badges:")
    for name, count in badges.most_common():
        print(f"{name}: {count}")


def load_text(*, url: str | None, file_path: str | None) -> str:
    if url:
        response = httpx.get(url, follow_redirects=True, timeout=15.0)
        response.raise_for_status()
        return response.text

    path = Path(file_path or "")
    if not path.is_file():
        raise FileNotFoundError(f"Analysis file not found: {path}")
    return path.read_text(encoding="utf-8")


def collect_stats(sections: list[Section]) -> tuple[Counter, Counter, Counter]:
    categories = Counter()
    kinds = Counter()
    badges = Counter()

    for section in sections:
        categories[section.category.value] += 1
        for block in section.blocks:
            kinds[block.kind] += 1
            if block.risk_badge is not None:
                badges[block.risk_badge.value] += 1
    return categories, kinds, badges


if __name__ == "__main__":
    main()
