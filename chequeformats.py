"""
Cheque template model and the built-in Algerian cheque layout.
All positions and sizes are in millimetres from the top-left corner.
"""

import uuid
from dataclasses import dataclass, field
from typing import Dict, Optional

from text_rendering import FitRegion, MIN_FONT_SIZE, DEFAULT_FONT_SIZE

# Field identifiers, in drawing order
AMOUNT_NUMERIC = "AmountNumeric"
AMOUNT_WORDS_L1 = "AmountWordsL1"
AMOUNT_WORDS_L2 = "AmountWordsL2"
BENEFICIARY = "Beneficiary"
PLACE = "Place"
DATE = "Date"

FIELD_IDS = [AMOUNT_NUMERIC, AMOUNT_WORDS_L1, AMOUNT_WORDS_L2, BENEFICIARY, PLACE, DATE]

default_cheque_size = (160, 80)  # Algerian cheque (width, height) in mm


@dataclass(frozen=True)
class FieldRect:
    x: float
    y: float
    w: float
    h: float
    alignment: str = "Left"

    def region(self):
        """Available space of this field for text fitting."""
        return FitRegion(self.w, self.h)

    def offset(self, dx, dy):
        return FieldRect(self.x + dx, self.y + dy, self.w, self.h, self.alignment)


@dataclass
class FontSettings:
    latin_family: str = "Arial"
    arabic_family: str = "Traditional Arabic"
    min_size: float = MIN_FONT_SIZE
    max_size: float = DEFAULT_FONT_SIZE


@dataclass
class ChequeTemplate:
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    template_name: str = "Default"
    cheque_size_mm: tuple = default_cheque_size
    global_offset_mm: tuple = (0, 0)
    fields: Dict[str, FieldRect] = field(default_factory=dict)
    fonts: FontSettings = field(default_factory=FontSettings)

    def get_field(self, field_id) -> Optional[FieldRect]:
        return self.fields.get(field_id)

    def placed_field(self, field_id) -> Optional[FieldRect]:
        """Field rectangle shifted by the template's global offset."""
        rect = self.get_field(field_id)
        if rect is None:
            return None
        return rect.offset(*self.global_offset_mm)


def get_default_template():
    """Built-in layout used when no saved template is available."""
    return ChequeTemplate(
        id="default",
        template_name="Algerian Cheque – Default",
        cheque_size_mm=default_cheque_size,
        global_offset_mm=(0, 0),
        fields={
            AMOUNT_NUMERIC: FieldRect(124, 8, 32, 8, "Right"),
            AMOUNT_WORDS_L1: FieldRect(50, 20, 106, 7),
            BENEFICIARY: FieldRect(38, 30, 118, 8),
            AMOUNT_WORDS_L2: FieldRect(10, 38, 80, 7),
            PLACE: FieldRect(96, 50, 34, 7),
            DATE: FieldRect(132, 50, 24, 7),
        },
        fonts=FontSettings(),
    )
