"""
Arabic script support for cheque rendering.
Detects Arabic text and shapes it for drawing with ReportLab, which has no
shaping engine of its own.
"""

import re
import logging

import arabic_reshaper
from bidi.algorithm import get_display

_LOGGER = logging.getLogger(__name__)

# U+0600-U+06FF: Arabic
# U+0750-U+077F: Arabic Supplement
# U+08A0-U+08FF: Arabic Extended-A
# U+FB50-U+FDFF: Arabic Presentation Forms-A
# U+FE70-U+FEFF: Arabic Presentation Forms-B
ARABIC_PATTERN = re.compile(
    r"[\u0600-\u06FF\u0750-\u077F\u08A0-\u08FF\uFB50-\uFDFF\uFE70-\uFEFF]"
)


def contains_arabic(text):
    """
    Check if text contains Arabic characters.

    :param text: Text to check
    :return: True if text contains Arabic characters
    """
    return bool(ARABIC_PATTERN.search(text or ""))


def process_arabic_text(text):
    """
    Shape Arabic text and reorder it into visual order for display.

    The logical word order of the input is not touched; only the glyph
    sequence handed to the canvas is reordered.

    :param text: Text potentially containing Arabic
    :return: Processed text ready for drawing
    """
    if not contains_arabic(text):
        return text

    try:
        # Connect letters into their positional forms
        reshaped_text = arabic_reshaper.reshape(text)
        return get_display(reshaped_text)
    except Exception as e:
        _LOGGER.warning(f"Failed to process Arabic text: {e}")
        return text
