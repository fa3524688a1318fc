"""
Selects the amount-in-words converter for a language.
"""

from dataclasses import dataclass
from typing import Callable

from . import arabic, english, french
from .language import Language


@dataclass(frozen=True)
class AmountConverter:
    language: Language
    convert: Callable[[object], str]
    number_to_words: Callable[[int], str]
    is_rtl: bool


_CONVERTERS = {
    language: AmountConverter(
        language=language,
        convert=module.convert_amount,
        number_to_words=module.number_to_words,
        is_rtl=module.IS_RTL,
    )
    for language, module in (
        (Language.FRENCH, french),
        (Language.ARABIC, arabic),
        (Language.ENGLISH, english),
    )
}


def create_converter(language=Language.FRENCH):
    """
    Get the converter for a language. Unknown languages fall back to French.

    :param language: Language member, code ("ar") or name ("Arabic")
    :return: AmountConverter
    """
    return _CONVERTERS[Language.from_tag(language)]


def convert_amount(amount, language=Language.FRENCH):
    """Spell an amount in the given language."""
    return create_converter(language).convert(amount)
