"""
Fragment Library

Binds the pure fragment functions to one locale so screen parsers can ask
for "a decimal number" without passing separators around.
"""

from typing import Optional

from ..config import LocaleConfig
from . import numbers, temporal, text, vocabulary


class FragmentLibrary:
    """
    Locale-bound access to every fragment.

    Usage:
        lib = FragmentLibrary(LocaleConfig(thousand_separators=('.',)))
        pattern = '(?P<count>' + lib.decimal_number() + ')'
    """

    def __init__(self, locale: Optional[LocaleConfig] = None):
        self.locale = locale or LocaleConfig()

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    def thousand_separator(self) -> str:
        return numbers.thousand_separator(self.locale.thousand_separators)

    def comma_separator(self) -> str:
        return numbers.comma_separator(self.locale.decimal_separators)

    def decimal_number(self) -> str:
        return numbers.decimal_number(self.locale.thousand_separators)

    def floating_double(self) -> str:
        return numbers.floating_double(
            self.locale.thousand_separators, self.locale.decimal_separators
        )

    def unsigned_double(self) -> str:
        return numbers.unsigned_double(
            self.locale.thousand_separators, self.locale.decimal_separators
        )

    def points_per_day(self) -> str:
        return numbers.points_per_day(
            self.locale.thousand_separators, self.locale.decimal_separators
        )

    # Building, research and total points all print as whole numbers
    building_points = decimal_number
    research_points = decimal_number
    total_points = decimal_number

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def bracket_string(self) -> str:
        return text.bracket_string()

    def user_name(self) -> str:
        return text.user_name()

    def low_user_name(self) -> str:
        return text.low_user_name()

    def user_title(self) -> str:
        return text.user_title()

    def user_rank(self) -> str:
        return text.user_rank()

    def government_form(self) -> str:
        return text.government_form()

    def text(self) -> str:
        return text.text()

    def single_line_text(self) -> str:
        return text.single_line_text()

    def single_line_text3(self) -> str:
        return text.single_line_text3()

    # ------------------------------------------------------------------
    # Time
    # ------------------------------------------------------------------

    def date(self) -> str:
        return temporal.date()

    def datetime(self) -> str:
        return temporal.datetime_()

    def mixed_duration(self) -> str:
        return temporal.mixed_duration()

    def mixed_time(self) -> str:
        return temporal.mixed_time()

    # ------------------------------------------------------------------
    # Vocabulary
    # ------------------------------------------------------------------

    def kolo_types(self) -> str:
        return vocabulary.kolo_types()

    def object_types(self) -> str:
        return vocabulary.object_types()

    def planet_types(self) -> str:
        return vocabulary.planet_types()

    def kolo_coords(self) -> str:
        return vocabulary.kolo_coords()

    def ship_actions(self) -> str:
        return vocabulary.ship_actions()

    def ship_texts(self) -> str:
        return vocabulary.ship_texts()

    def areas(self) -> str:
        return vocabulary.areas()

    def defence(self) -> str:
        return vocabulary.defence()

    def resource(self) -> str:
        return vocabulary.resource()

    def ship_name(self) -> str:
        return vocabulary.ship_name()

    def building_name(self) -> str:
        return vocabulary.building_name()

    def yard_type(self) -> str:
        return vocabulary.yard_type()

    def yard_name(self) -> str:
        return vocabulary.yard_name()

    def planetary_problems(self) -> str:
        return vocabulary.planetary_problems(self.mixed_duration())

    def ship_capabilities(self) -> str:
        return vocabulary.ship_capabilities()
