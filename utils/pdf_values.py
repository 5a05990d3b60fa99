"""
Parsing helpers for raw PDF values and command-line arguments.

PyMuPDF returns dictionary entries as source text (e.g. "[0 0 1 [3 2]]");
these helpers turn such text into Python values.
"""
import re
from typing import List, Optional, Tuple

# Brackets or numbers (PDF numbers have no exponent)
_ARRAY_TOKEN = re.compile(r'\[|\]|[-+]?(?:\d+\.?\d*|\.\d+)')


def parse_pdf_array(text: str) -> Optional[list]:
    """
    Parse a PDF array of numbers, possibly nested.

    Args:
        text: Array source text, e.g. "[0 0 1 [3 2]]"

    Returns:
        Nested list of floats, or None if text is not an array
    """
    text = (text or '').strip()
    if not text.startswith('['):
        return None

    stack: List[list] = []
    result = None
    for token in _ARRAY_TOKEN.findall(text):
        if token == '[':
            stack.append([])
        elif token == ']':
            if not stack:
                break
            finished = stack.pop()
            if stack:
                stack[-1].append(finished)
            else:
                result = finished
                break
        elif stack:
            stack[-1].append(float(token))
    return result


def parse_pdf_number(text: str) -> Optional[float]:
    """Parse a PDF number, returning None for anything else."""
    try:
        return float((text or '').strip())
    except ValueError:
        return None


def parse_components(text: str) -> List[float]:
    """
    Parse a comma separated list of numbers, e.g. "1,0,0".

    Raises:
        ValueError: If a part is not a number
    """
    return [float(part) for part in text.split(',') if part.strip()]


def parse_rect_arg(text: str) -> Tuple[float, float, float, float]:
    """
    Parse "x0,y0,x1,y1" into a rectangle tuple.

    Raises:
        ValueError: If there are not exactly four numbers
    """
    values = parse_components(text)
    if len(values) != 4:
        raise ValueError(f"Rectangle needs 4 numbers (x0,y0,x1,y1), got '{text}'")
    return tuple(values)
