"""
Two-line text fitting for cheque fields.
Finds the largest font size at which a phrase fits the first line region,
or splits it at a word boundary across two line regions.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from reportlab.pdfbase import pdfmetrics
from reportlab.lib.units import mm

from .language_support import process_arabic_text

_LOGGER = logging.getLogger(__name__)

# Constants
MIN_FONT_SIZE = 8
DEFAULT_FONT_SIZE = 12
FONT_SIZE_STEP = 0.5

# measure(text, font_name, font_size) -> (width, height) in region units
TextMeasurer = Callable[[str, str, float], Tuple[float, float]]


@dataclass(frozen=True)
class FitRegion:
    """Available space for one line of text, in millimetres."""

    width: float
    height: float


@dataclass(frozen=True)
class FitResult:
    """
    Lines to draw and the font size to draw them at.

    ``success`` is False when the text had to be split at the midpoint at the
    minimum font size and may overflow its regions.
    """

    lines: Tuple[str, ...]
    font_size: float
    success: bool


def get_font_line_height(font_name, font_size):
    """
    Calculate the height of a line from the font's ascent and descent.

    :param font_name: Name of a registered ReportLab font
    :param font_size: Size of the font in points
    :return: Line height in points
    """
    ascent, descent = pdfmetrics.getAscentDescent(font_name, font_size)
    return ascent - descent  # descent is negative


class ReportLabTextMeasurer:
    """
    Measures text with ReportLab font metrics.

    Arabic text is shaped before measuring since connected letter forms
    differ in width from the isolated ones.
    """

    def __init__(self, unit=mm):
        # Points per region unit; millimetres by default
        self.unit = unit

    def __call__(self, text, font_name, font_size):
        display_text = process_arabic_text(text)
        width = pdfmetrics.stringWidth(display_text, font_name, font_size)
        height = get_font_line_height(font_name, font_size)
        return width / self.unit, height / self.unit


def text_fits(text, region, measure, font_name, font_size):
    """
    Check whether text drawn at font_size fits inside region.

    :return: True if both the width and the height fit
    """
    width, height = measure(text, font_name, font_size)
    return width <= region.width and height <= region.height


def split_words(text):
    """Split on spaces, dropping empty entries. Word order is kept as is."""
    return [word for word in text.split(" ") if word]


def iter_font_sizes(min_font_size, max_font_size, step=FONT_SIZE_STEP):
    """Yield font sizes from max_font_size down to min_font_size."""
    index = 0
    font_size = max_font_size
    while font_size >= min_font_size:
        yield font_size
        index += 1
        font_size = max_font_size - index * step


def find_first_split(words, line1, line2, measure, font_name, font_size):
    """
    Try split points left to right and return the first that fits both lines.

    :return: (line1_text, line2_text) or None
    """
    for i in range(1, len(words)):
        first = " ".join(words[:i])
        second = " ".join(words[i:])
        if text_fits(first, line1, measure, font_name, font_size) and text_fits(
            second, line2, measure, font_name, font_size
        ):
            return first, second
    return None


def force_split(words):
    """Split roughly in half; a single word ends up alone on the first line."""
    mid_point = max(len(words) // 2, 1)
    return " ".join(words[:mid_point]), " ".join(words[mid_point:])


def fit_text(
    text,
    line1,
    line2,
    font_name,
    min_font_size=MIN_FONT_SIZE,
    max_font_size=DEFAULT_FONT_SIZE,
    is_rtl=False,
    measure: Optional[TextMeasurer] = None,
):
    """
    Fit text into one or two line regions, shrinking the font as needed.

    Order of attempts:
    1. Empty text: one empty line at max_font_size.
    2. The whole text on line1 at max_font_size.
    3. For each size from max_font_size down in 0.5 steps, the first word
       split (left to right) where both halves fit their regions.
    4. Midpoint split at min_font_size, reported with success=False.

    :param text: Phrase to fit
    :param line1: FitRegion of the first line
    :param line2: FitRegion of the second line
    :param font_name: Font used for measuring
    :param min_font_size: Smallest font size to try
    :param max_font_size: Largest font size to try
    :param is_rtl: Right-to-left text; only affects how the lines are drawn
    :param measure: TextMeasurer (default: ReportLab metrics in mm)
    :return: FitResult
    """
    if measure is None:
        measure = ReportLabTextMeasurer()

    if not text or not text.strip():
        return FitResult(("",), max_font_size, True)

    if text_fits(text, line1, measure, font_name, max_font_size):
        _LOGGER.debug(f"Text fits on one line at {max_font_size}pt")
        return FitResult((text,), max_font_size, True)

    words = split_words(text)

    for font_size in iter_font_sizes(min_font_size, max_font_size):
        split = find_first_split(words, line1, line2, measure, font_name, font_size)
        if split is not None:
            _LOGGER.debug(
                f"  Font size {font_size}pt: split after {len(split[0].split(' '))} words - FITS"
            )
            return FitResult(split, font_size, True)
        _LOGGER.debug(f"  Font size {font_size}pt: no split fits - TOO LARGE")

    forced = force_split(words)
    _LOGGER.warning(
        f"Text does not fit at {min_font_size}pt ({len(words)} words, rtl={is_rtl}); "
        f"forcing a split that may overflow"
    )
    return FitResult(forced, min_font_size, False)


class TextFitter:
    """Fits amount phrases with a fixed measurer."""

    def __init__(self, measure: Optional[TextMeasurer] = None):
        self.measure = measure if measure is not None else ReportLabTextMeasurer()

    def fit(
        self,
        text,
        line1,
        line2,
        font_name,
        min_font_size=MIN_FONT_SIZE,
        max_font_size=DEFAULT_FONT_SIZE,
        is_rtl=False,
    ):
        return fit_text(
            text,
            line1,
            line2,
            font_name,
            min_font_size=min_font_size,
            max_font_size=max_font_size,
            is_rtl=is_rtl,
            measure=self.measure,
        )
