"""
Amount-in-words generation for Algerian dinars.
French, Arabic and English numeral grammars behind a common converter.
"""

from .amount import split_amount, to_decimal
from .language import Language
from .converter_factory import AmountConverter, create_converter, convert_amount

__all__ = [
    # Amounts
    'split_amount',
    'to_decimal',
    # Languages
    'Language',
    # Converters
    'AmountConverter',
    'create_converter',
    'convert_amount',
]
