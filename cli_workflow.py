#!/usr/bin/env python3
"""
CLI for adding and inspecting squiggly markup annotations.

Provides command-line interface for annotating PDF files.
"""
import argparse
import logging
import os
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

import fitz  # PyMuPDF
from pydantic import ValidationError

from config.settings import get_settings
from core.schemas import SquigglyRequest
from services.markup_service import MarkupAnnotationService
from utils.image_utils import render_pdf_page_to_png
from utils.pdf_values import parse_components, parse_rect_arg


def squiggle_cli(args) -> int:
    """Add a squiggly annotation and optionally render a preview."""
    settings = get_settings()

    print("=" * 60)
    print(f"Annotating: {args.input}")
    print("=" * 60)

    if not os.path.exists(args.input):
        print(f"❌ Error: File not found: {args.input}")
        return 1

    try:
        request = SquigglyRequest(
            page_number=args.page,
            search_text=args.text,
            rects=[parse_rect_arg(r) for r in args.rect or []],
            color=parse_components(args.color) if args.color else settings.get_default_color(),
            opacity=args.opacity,
            border_width=args.border_width
        )
    except (ValidationError, ValueError) as e:
        print(f"❌ Invalid request: {e}")
        return 2

    service = MarkupAnnotationService(settings)
    try:
        xref = service.add_squiggly(args.input, args.output, request)
    except ValueError as e:
        print(f"❌ {e}")
        return 1

    print(f"✓ Squiggly annotation added (xref {xref})")
    print(f"✓ Saved: {args.output}")

    if args.preview:
        width, height = render_pdf_page_to_png(
            args.output, args.page, args.preview, target_dpi=settings.preview_dpi
        )
        print(f"✓ Preview: {args.preview} ({width}x{height})")

    return 0


def inspect_cli(args) -> int:
    """List markup annotations of a page."""
    if not os.path.exists(args.input):
        print(f"❌ Error: File not found: {args.input}")
        return 1

    service = MarkupAnnotationService()
    doc = fitz.open(args.input)
    try:
        if args.page < 1 or args.page > doc.page_count:
            print(f"❌ Page {args.page} out of range (1-{doc.page_count})")
            return 1
        infos = service.list_markup_annotations(doc, args.page)
    finally:
        doc.close()

    if not infos:
        print("No markup annotations found.")
        return 0

    print(f"\nFound {len(infos)} markup annotations on page {args.page}:")
    print("-" * 80)
    print(f"{'Xref':<6} {'Subtype':<10} {'Quads':<6} {'AP':<4} {'Rect'}")
    print("-" * 80)
    for info in infos:
        rect = ' '.join(f"{v:.1f}" for v in info.rect)
        ap = 'yes' if info.has_normal_appearance else 'no'
        print(f"{info.xref:<6} {info.subtype:<10} {info.quad_count:<6} {ap:<4} [{rect}]")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Squiggly markup annotations for PDF files"
    )
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    squiggle_parser = subparsers.add_parser('squiggle', help='Add a squiggly annotation')
    squiggle_parser.add_argument('input', help='Input PDF')
    squiggle_parser.add_argument('output', help='Output PDF')
    squiggle_parser.add_argument('--page', type=int, default=1, help='1-indexed page number')
    squiggle_parser.add_argument('--text', help='Text to mark (all matches on the page)')
    squiggle_parser.add_argument('--rect', action='append',
                                 help='Region x0,y0,x1,y1 in page coordinates (repeatable)')
    squiggle_parser.add_argument('--color', help='Colour components, e.g. 1,0,0')
    squiggle_parser.add_argument('--opacity', type=float, default=1.0, help='Constant opacity 0-1')
    squiggle_parser.add_argument('--border-width', type=float, default=None, help='Border width')
    squiggle_parser.add_argument('--preview', help='Write a PNG preview of the page')

    inspect_parser = subparsers.add_parser('inspect', help='List markup annotations')
    inspect_parser.add_argument('input', help='Input PDF')
    inspect_parser.add_argument('--page', type=int, default=1, help='1-indexed page number')

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, get_settings().log_level.upper(), logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    if args.command == 'squiggle':
        return squiggle_cli(args)
    elif args.command == 'inspect':
        return inspect_cli(args)

    parser.print_help()
    return 1


if __name__ == '__main__':
    sys.exit(main())
