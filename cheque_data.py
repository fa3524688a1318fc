"""
User-entered cheque contents.
"""

import datetime
from dataclasses import dataclass, field
from decimal import Decimal

from amount_words import Language, convert_amount, split_amount, to_decimal


@dataclass
class ChequeData:
    amount: Decimal = Decimal("0")
    beneficiary: str = ""
    place: str = ""
    date: datetime.date = field(default_factory=datetime.date.today)
    language: Language = Language.FRENCH

    def __post_init__(self):
        self.amount = to_decimal(self.amount)
        self.language = Language.from_tag(self.language)

    def get_amount_parts(self):
        """(dinars, centimes) of the amount."""
        return split_amount(self.amount)

    @property
    def formatted_amount(self):
        """Amount with French digit grouping, e.g. "1 234,50 DA"."""
        text = f"{self.amount:,.2f}".replace(",", " ").replace(".", ",")
        return f"{text} DA"

    @property
    def formatted_date(self):
        return self.date.strftime("%d/%m/%Y")

    @property
    def amount_in_words(self):
        return convert_amount(self.amount, self.language)

    def is_printable(self):
        """A cheque needs a positive amount and a beneficiary."""
        return self.amount > 0 and bool(self.beneficiary.strip())
