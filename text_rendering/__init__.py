"""
Text rendering utilities package.
Arabic shaping and two-line text fitting for cheque fields.
"""

from .language_support import contains_arabic, process_arabic_text
from .text_fitting import (
    MIN_FONT_SIZE,
    DEFAULT_FONT_SIZE,
    FONT_SIZE_STEP,
    FitRegion,
    FitResult,
    ReportLabTextMeasurer,
    TextFitter,
    fit_text,
    get_font_line_height,
)

__all__ = [
    # Language support
    'contains_arabic',
    'process_arabic_text',
    # Text fitting
    'MIN_FONT_SIZE',
    'DEFAULT_FONT_SIZE',
    'FONT_SIZE_STEP',
    'FitRegion',
    'FitResult',
    'ReportLabTextMeasurer',
    'TextFitter',
    'fit_text',
    'get_font_line_height',
]
