"""
Monetary amount helpers for Algerian dinars.
Splits an amount into whole dinars and centimes.
"""

from decimal import Decimal, ROUND_FLOOR, ROUND_HALF_EVEN

CENTIMES_PER_DINAR = 100


def to_decimal(amount):
    """
    Convert an amount to an exact Decimal.

    Floats are converted through their shortest repr so that 1234.56
    stays 1234.56 instead of its binary approximation.

    :param amount: Decimal, int, float or numeric string
    :return: Decimal value
    """
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, float):
        return Decimal(repr(amount))
    if isinstance(amount, str):
        return Decimal(amount.strip().replace(" ", "").replace(",", "."))
    return Decimal(amount)


def split_amount(amount):
    """
    Split an amount into (dinars, centimes).

    Centimes are rounded half-to-even. A rounding carry to 100 centimes is
    folded into the dinars, so 99.995 gives (100, 0).

    :param amount: Non-negative amount (Decimal, int, float or string)
    :return: Tuple (dinars, centimes) with centimes in [0, 99]
    """
    value = to_decimal(amount)
    dinars = int(value.to_integral_value(rounding=ROUND_FLOOR))
    fraction = (value - dinars) * CENTIMES_PER_DINAR
    centimes = int(fraction.to_integral_value(rounding=ROUND_HALF_EVEN))

    if centimes >= CENTIMES_PER_DINAR:
        dinars += centimes // CENTIMES_PER_DINAR
        centimes %= CENTIMES_PER_DINAR

    return dinars, centimes
