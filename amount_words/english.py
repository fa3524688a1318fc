"""
English amount-in-words for Algerian dinars.
"""

from .amount import split_amount

IS_RTL = False

ZERO_PHRASE = "zero Algerian dinars"
CONJUNCTION = " and "

UNITS = ["", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine"]

TEENS = [
    "ten", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
]

TENS = ["", "ten", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety"]

SCALES = [
    (1_000_000_000, "billion"),
    (1_000_000, "million"),
    (1000, "thousand"),
]


def dinar_word(dinars):
    return "Algerian dinar" if dinars == 1 else "Algerian dinars"


def centime_word(centimes):
    return "centime" if centimes == 1 else "centimes"


def number_to_words(n):
    """
    Spell an integer in English.

    :param n: Integer to spell
    :return: Number in words, e.g. "one thousand two hundred thirty-four"
    """
    if n == 0:
        return "zero"
    if n < 0:
        return "minus " + number_to_words(-n)

    parts = []

    for scale, name in SCALES:
        if n >= scale:
            count, n = divmod(n, scale)
            parts.append(f"{number_to_words(count)} {name}")

    if n >= 100:
        hundreds, n = divmod(n, 100)
        parts.append(f"{UNITS[hundreds]} hundred")

    if 10 <= n < 20:
        parts.append(TEENS[n - 10])
    elif n >= 20:
        tens, units = divmod(n, 10)
        parts.append(f"{TENS[tens]}-{UNITS[units]}" if units else TENS[tens])
    elif n > 0:
        parts.append(UNITS[n])

    return " ".join(parts)


def convert_amount(amount):
    """
    Spell an amount in dinars and centimes.

    :param amount: Non-negative amount
    :return: e.g. "one Algerian dinar and five centimes"
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
