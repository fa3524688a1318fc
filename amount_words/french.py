"""
French amount-in-words for Algerian dinars.

Follows the usual cheque spelling: "et" joins a trailing "un" (and "onze"
after "soixante"), hyphens join everything else below one hundred, and
"cent" / "quatre-vingt" only take their plural "s" when they end the
number.
"""

from .amount import split_amount

IS_RTL = False

ZERO_PHRASE = "zéro dinar"
CONJUNCTION = " et "

UNITS = ["", "un", "deux", "trois", "quatre", "cinq", "six", "sept", "huit", "neuf"]

TEENS = [
    "dix", "onze", "douze", "treize", "quatorze",
    "quinze", "seize", "dix-sept", "dix-huit", "dix-neuf",
]

# 70-79 and 90-99 are built on the 60 and 80 bases plus a teen
TENS = [
    "", "dix", "vingt", "trente", "quarante",
    "cinquante", "soixante", "soixante", "quatre-vingt", "quatre-vingt",
]


def dinar_word(dinars):
    return "dinar" if dinars == 1 else "dinars"


def centime_word(centimes):
    return "centime" if centimes == 1 else "centimes"


def _below_hundred(n, multiplies_mille=False):
    if n < 10:
        return UNITS[n]

    tens, units = divmod(n, 10)
    if tens == 1:
        return TEENS[units]

    if tens in (7, 9):
        if tens == 7 and units == 1:
            return "soixante et onze"
        return f"{TENS[tens]}-{TEENS[units]}"

    if units == 0:
        if tens == 8 and not multiplies_mille:
            return "quatre-vingts"
        return TENS[tens]

    if units == 1 and tens != 8:
        return f"{TENS[tens]} et un"
    return f"{TENS[tens]}-{UNITS[units]}"


def _convert(n, multiplies_mille=False):
    parts = []

    if n >= 1_000_000:
        millions, n = divmod(n, 1_000_000)
        if millions == 1:
            parts.append("un million")
        else:
            parts.append(f"{_convert(millions)} millions")

    if n >= 1000:
        thousands, n = divmod(n, 1000)
        if thousands == 1:
            parts.append("mille")
        else:
            # "mille" is invariable and freezes a preceding cent / quatre-vingt
            parts.append(f"{_convert(thousands, multiplies_mille=True)} mille")

    if n >= 100:
        hundreds, n = divmod(n, 100)
        word = "cent" if hundreds == 1 else f"{UNITS[hundreds]} cent"
        if hundreds > 1 and n == 0 and not multiplies_mille:
            word += "s"
        parts.append(word)

    if n > 0:
        parts.append(_below_hundred(n, multiplies_mille))

    return " ".join(parts)


def number_to_words(n):
    """
    Spell an integer in French.

    :param n: Integer to spell
    :return: Number in words, e.g. "quatre-vingt-un" for 81
    """
    if n == 0:
        return "zéro"
    if n < 0:
        return "moins " + number_to_words(-n)
    return _convert(n)


def convert_amount(amount):
    """
    Spell an amount in dinars and centimes.

    :param amount: Non-negative amount
    :return: e.g. "mille deux cent trente-quatre dinars et cinquante-six centimes"
    """
    dinars, centimes = split_amount(amount)
    if dinars == 0 and centimes == 0:
        return ZERO_PHRASE

    parts = []
    if dinars > 0:
        parts.append(f"{number_to_words(dinars)} {dinar_word(dinars)}")
    if centimes > 0:
        parts.append(f"{number_to_words(centimes)} {centime_word(centimes)}")
    return CONJUNCTION.join(parts)
