"""
Arabic amount-in-words for Algerian dinars.

Groups are joined with the conjunction "و" attached to the following word.
Thousands and millions use the singular, the dual, the counted plural
(3 to 10) or the singular accusative after larger numbers.
"""

from .amount import split_amount

IS_RTL = True

ZERO_PHRASE = "صفر دينار"
CONJUNCTION = " و"

UNITS = ["", "واحد", "اثنان", "ثلاثة", "أربعة", "خمسة", "ستة", "سبعة", "ثمانية", "تسعة"]

TEENS = [
    "عشرة", "أحد عشر", "اثنا عشر", "ثلاثة عشر", "أربعة عشر",
    "خمسة عشر", "ستة عشر", "سبعة عشر", "ثمانية عشر", "تسعة عشر",
]

TENS = ["", "عشرة", "عشرون", "ثلاثون", "أربعون", "خمسون", "ستون", "سبعون", "ثمانون", "تسعون"]

HUNDREDS = [
    "", "مائة", "مائتان", "ثلاثمائة", "أربعمائة",
    "خمسمائة", "ستمائة", "سبعمائة", "ثمانمائة", "تسعمائة",
]

# (singular, dual, counted plural, after 11 and more)
THOUSAND_FORMS = ("ألف", "ألفان", "آلاف", "ألف")
MILLION_FORMS = ("مليون", "مليونان", "ملايين", "مليون")

DINAR_FORMS = ("دينار جزائري", "ديناران جزائريان", "دنانير جزائرية", "دينارًا جزائريًا")
CENTIME_FORMS = ("سنتيم", "سنتيمان", "سنتيمات", "سنتيمًا")


def agreement_form(n, forms):
    """
    Pick the noun form agreeing with a count.

    :param n: Count preceding the noun
    :param forms: (singular, dual, plural for 3-10, form for 11 and more)
    :return: Noun form
    """
    if n == 1:
        return forms[0]
    if n == 2:
        return forms[1]
    if 3 <= n <= 10:
        return forms[2]
    return forms[3]


def dinar_word(dinars):
    return agreement_form(dinars, DINAR_FORMS)


def centime_word(centimes):
    return agreement_form(centimes, CENTIME_FORMS)


def _hundreds_and_below(n):
    parts = []

    if n >= 100:
        hundreds, n = divmod(n, 100)
        parts.append(HUNDREDS[hundreds])

    if 10 <= n < 20:
        parts.append(TEENS[n - 10])
    elif n >= 20:
        tens, units = divmod(n, 10)
        if units > 0:
            parts.append(f"{UNITS[units]}{CONJUNCTION}{TENS[tens]}")
        else:
            parts.append(TENS[tens])
    elif n > 0:
        parts.append(UNITS[n])

    return CONJUNCTION.join(parts)


def _group(count, forms, count_to_words):
    if count in (1, 2):
        return agreement_form(count, forms)
    return f"{count_to_words(count)} {agreement_form(count, forms)}"


def number_to_words(n):
    """
    Spell an integer in Arabic.

    :param n: Integer to spell
    :return: Number in words, e.g. "ألف ومائتان وأربعة وثلاثون" for 1234
    """
    if n == 0:
        return "صفر"
    if n < 0:
        return "سالب " + number_to_words(-n)

    parts = []

    if n >= 1_000_000:
        millions, n = divmod(n, 1_000_000)
        parts.append(_group(millions, MILLION_FORMS, number_to_words))

    if n >= 1000:
        thousands, n = divmod(n, 1000)
        parts.append(_group(thousands, THOUSAND_FORMS, _hundreds_and_below))

    if n > 0:
        parts.append(_hundreds_and_below(n))

    return CONJUNCTION.join(parts)


def convert_amount(amount):
    """
    Spell an amount in dinars and centimes.

    :param amount: Non-negative amount
    :return: Amount in words, logical (not visual) order
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
