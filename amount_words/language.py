"""
Languages supported for amount-in-words conversion.
"""

from enum import Enum


class Language(Enum):
    FRENCH = "fr"
    ARABIC = "ar"
    ENGLISH = "en"

    @property
    def is_rtl(self):
        """Arabic is written right-to-left, the others left-to-right."""
        return self is Language.ARABIC

    @classmethod
    def from_tag(cls, tag):
        """
        Resolve a language from a code ("ar") or a name ("Arabic").
        Unknown or empty tags resolve to French.

        :param tag: Language, language code or name
        :return: Language member
        """
        if isinstance(tag, cls):
            return tag
        if not tag:
            return cls.FRENCH

        key = str(tag).strip().lower()
        for language in cls:
            if key in (language.value, language.name.lower()):
                return language
        return cls.FRENCH
