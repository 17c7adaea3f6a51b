"""Headless state for the single-screen converter form.

Holds what the screen shows (input text, the two selected units and the
result line) and exposes one method per user action.
"""

from measures_converter.config import DEFAULT_FROM_UNIT, DEFAULT_TO_UNIT
from measures_converter.converter import all_units, convert_text, get_to_units


class ConverterSession:
    def __init__(self, from_unit: str = DEFAULT_FROM_UNIT, to_unit: str = DEFAULT_TO_UNIT):
        self.input_text = ""
        self.from_unit = from_unit
        self.to_unit = to_unit
        self.result = ""

    def from_unit_options(self) -> list:
        return all_units()

    def to_unit_options(self) -> list:
        return get_to_units(self.from_unit)

    def select_from_unit(self, unit: str) -> None:
        """Change the source unit; the target resets to the first valid option."""
        self.from_unit = unit
        options = self.to_unit_options()
        self.to_unit = options[0] if options else ""

    def select_to_unit(self, unit: str) -> None:
        self.to_unit = unit

    def convert(self, text: str = None) -> str:
        """Run the conversion for the current input and store the result line."""
        if text is not None:
            self.input_text = text
        self.result = convert_text(self.input_text, self.from_unit, self.to_unit).message()
        return self.result
