"""
Font Manager for cheque rendering

Resolves the font family names stored in cheque templates ("Arial",
"Traditional Arabic", ...) to fonts registered with ReportLab. Fonts are
looked up among already registered fonts, system fonts, the local fonts
directory and, for Arabic, downloaded from Google Fonts as a last resort.
"""

import os
import platform
import logging

import requests
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfbase import pdfmetrics

_LOGGER = logging.getLogger(__name__)

FALLBACK_FONT = "Helvetica"

# Google Fonts with good Arabic support (Open Source)
ARABIC_FONTS = {
    "Amiri": {
        "url": "https://github.com/google/fonts/raw/main/ofl/amiri/Amiri-Regular.ttf",
        "filename": "Amiri-Regular.ttf",
        "description": "Traditional Arabic typeface with excellent support",
    },
    "Cairo": {
        "url": "https://github.com/google/fonts/raw/main/ofl/cairo/Cairo-Regular.ttf",
        "filename": "Cairo-Regular.ttf",
        "description": "Modern Arabic sans-serif font",
    },
}

# System font locations by platform
SYSTEM_FONT_PATHS = {
    "windows": ["C:/Windows/Fonts", os.path.expandvars("%WINDIR%/Fonts")],
    "linux": ["/usr/share/fonts/truetype", "/usr/local/share/fonts", "~/.fonts"],
    "darwin": ["/Library/Fonts", "/System/Library/Fonts", "~/Library/Fonts"],  # macOS
}

# Font files for the family names templates commonly use, with metric
# compatible substitutes
FAMILY_FILES = {
    "arial": ["arial.ttf", "Arial.ttf", "LiberationSans-Regular.ttf", "DejaVuSans.ttf"],
    "times new roman": ["times.ttf", "Times.ttf", "LiberationSerif-Regular.ttf"],
    "traditional arabic": ["trado.ttf", "Amiri-Regular.ttf", "arial.ttf", "DejaVuSans.ttf"],
    "tahoma": ["tahoma.ttf", "Tahoma.ttf", "DejaVuSans.ttf"],
}

# System fonts that support Arabic
SYSTEM_ARABIC_FONTS = [
    "arial.ttf",
    "Arial.ttf",
    "tahoma.ttf",
    "Tahoma.ttf",
    "DejaVuSans.ttf",
    "LiberationSans-Regular.ttf",
]

_RESOLVED_FONTS = {}


def get_fonts_directory():
    """Directory for downloaded fonts, created if missing."""
    fonts_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), "fonts")
    os.makedirs(fonts_dir, exist_ok=True)
    return fonts_dir


def is_font_registered(font_name):
    """
    Check whether ReportLab can use a font name (registered or one of the
    standard PDF fonts).
    """
    try:
        pdfmetrics.getFont(font_name)
        return True
    except Exception as e:
        _LOGGER.debug(f"Font '{font_name}' is not available: {e}")
        return False


def find_system_font(font_list, font_type="font"):
    """
    Find the first of the given font files in the system font directories.

    :param font_list: List of font filenames to search for
    :param font_type: Type of font for logging purposes
    :return: Path to font file or None if not found
    """
    system = platform.system().lower()
    search_paths = SYSTEM_FONT_PATHS.get(system)
    if search_paths is None:
        _LOGGER.warning(f"Unknown platform: {system}")
        return None

    search_paths = [os.path.expanduser(p) for p in search_paths]
    search_paths.append(get_fonts_directory())

    for font_name in font_list:
        for search_path in search_paths:
            if not os.path.isdir(search_path):
                continue

            font_path = os.path.join(search_path, font_name)
            if os.path.exists(font_path):
                _LOGGER.info(f"Found {font_type} font: {font_path}")
                return font_path

            # Check subdirectories (for Linux)
            for root, dirs, files in os.walk(search_path):
                if font_name in files:
                    font_path = os.path.join(root, font_name)
                    _LOGGER.info(f"Found {font_type} font: {font_path}")
                    return font_path

    _LOGGER.debug(f"No {font_type} font found among {font_list}")
    return None


def download_font(font_name, fonts_dir=None):
    """
    Download an Arabic font from Google Fonts.

    :param font_name: Key of ARABIC_FONTS
    :param fonts_dir: Directory to save fonts (default: ./fonts)
    :return: Path to downloaded font file or None if failed
    """
    if fonts_dir is None:
        fonts_dir = get_fonts_directory()

    if font_name not in ARABIC_FONTS:
        _LOGGER.error(f"Unknown font: {font_name}. Available fonts: {list(ARABIC_FONTS.keys())}")
        return None

    font_info = ARABIC_FONTS[font_name]
    font_path = os.path.join(fonts_dir, font_info["filename"])
    if os.path.exists(font_path):
        return font_path

    try:
        _LOGGER.info(f"Downloading {font_name} font from Google Fonts: {font_info['url']}")
        response = requests.get(font_info["url"], timeout=30)
        response.raise_for_status()
        with open(font_path, "wb") as f:
            f.write(response.content)
        _LOGGER.info(f"✓ Successfully downloaded: {font_path}")
        return font_path
    except requests.RequestException as e:
        _LOGGER.error(f"Failed to download font {font_name}: {e}")
        return None


def register_font_file(font_name, font_path):
    """
    Register a TrueType font file with ReportLab.

    :return: Registered font name or None if failed
    """
    try:
        pdfmetrics.registerFont(TTFont(font_name, font_path))
        _LOGGER.info(f"✓ Registered font '{font_name}' from: {font_path}")
        return font_name
    except Exception as e:
        _LOGGER.error(f"Failed to register font {font_path}: {e}")
        return None


def _candidate_files(family, arabic):
    key = family.strip().lower()
    candidates = list(FAMILY_FILES.get(key, []))
    compact = key.replace(" ", "")
    candidates += [f"{compact}.ttf", f"{family.replace(' ', '')}.ttf"]
    if arabic:
        candidates += SYSTEM_ARABIC_FONTS
        candidates += [info["filename"] for info in ARABIC_FONTS.values()]
    return candidates


def resolve_font(family, arabic=False, allow_download=True):
    """
    Get a ReportLab font name for a template font family.

    Strategies, in order:
    1. The family is already usable by ReportLab
    2. A matching or substitute font file on the system / in ./fonts
    3. For Arabic, a font downloaded from Google Fonts
    4. Helvetica (Arabic will not render correctly)

    :param family: Family name from the template
    :param arabic: The font must cover Arabic script
    :param allow_download: Allow downloading an Arabic font
    :return: Font name suitable for canvas drawing and measuring
    """
    cache_key = (family, arabic)
    if cache_key in _RESOLVED_FONTS:
        return _RESOLVED_FONTS[cache_key]

    font_name = None
    if family and is_font_registered(family):
        font_name = family

    if font_name is None and family:
        font_path = find_system_font(_candidate_files(family, arabic), family)
        if font_path:
            font_name = register_font_file(family, font_path)

    if font_name is None and arabic and allow_download:
        font_path = download_font("Amiri")
        if font_path:
            font_name = register_font_file(family or "Amiri", font_path)

    if font_name is None:
        _LOGGER.warning(
            f"Could not resolve font '{family}'. Using {FALLBACK_FONT} as fallback"
            + (". Arabic text will appear as boxes." if arabic else "")
        )
        font_name = FALLBACK_FONT

    _RESOLVED_FONTS[cache_key] = font_name
    return font_name
