# -*- coding: utf-8 -*-

from logging import getLogger
from typing import Tuple

from .sentence import BaseSentence, NMEAError
from .values import Date, Time, decode_sixbit, parse_coordinate, parse_date, parse_time

logger = getLogger(__name__)


class TypeMismatchError(NMEAError):

    def __init__(self, expected: tuple, actual: str):
        super().__init__(f"Sentence type mismatch: expected {'/'.join(expected)}, got `{actual}`")
        self.expected = expected
        self.actual = actual
        self.sentence = None


class FieldParseError(NMEAError):

    def __init__(self, name: str, index: int, value: str or None, reason: str):
        if value is None:
            super().__init__(f"Field {index} ({name}): {reason}")
        else:
            super().__init__(f"Field {index} ({name}) `{value}`: {reason}")
        self.name = name
        self.index = index
        self.value = value
        self.reason = reason
        self.sentence = None


class FieldCountError(FieldParseError):
    pass


class FieldParser(object):
    """
    Typed accessors over the data fields of a single sentence

    Accessors never raise. The first failure is recorded and every later
    accessor still returns a default value, so a decoder can build its
    record in one go and report the first problem with finish().
    """

    def __init__(self, sentence: BaseSentence):
        self.s = sentence
        self._err = None

    def _record(self, error: NMEAError):
        if self._err is None:
            logger.debug(f"{self.s.prefix}: {error}")
            self._err = error

    def fail(self, index: int, name: str, value: str or None, reason: str) -> None:
        """Record a decoder level problem with a field"""
        self._record(FieldParseError(name, index, value, reason))

    def err(self) -> NMEAError or None:
        """First error recorded by any accessor, or None"""
        return self._err

    def finish(self, record: BaseSentence) -> BaseSentence:
        """Return record, or raise the first error with the partial record attached"""
        if self._err is not None:
            self._err.sentence = record
            raise self._err
        return record

    def assert_type(self, *expected: str) -> None:
        if self.s.type not in expected:
            self._record(TypeMismatchError(expected, self.s.type))

    def assert_field_count(self, minimum: int) -> None:
        if len(self.s.fields) < minimum:
            self._record(FieldCountError("field count", len(self.s.fields), None,
                                         f"expected at least {minimum} fields"))

    def has(self, index: int) -> bool:
        """Whether the optional field at index is present on the wire"""
        return 0 <= index < len(self.s.fields)

    def string(self, index: int, name: str) -> str:
        """Raw field text. Fails only if the field is missing."""
        if not self.has(index):
            self.fail(index, name, None, "index out of range")
            return ""
        return self.s.fields[index]

    def list_string(self, start: int, name: str) -> Tuple[str, ...]:
        """All fields from start to the end of the sentence, possibly none"""
        if start < 0 or start > len(self.s.fields):
            self.fail(start, name, None, "index out of range")
            return ()
        return self.s.fields[start:]

    def enum_string(self, index: int, name: str, *options: str) -> str:
        """Field text that must be one of options. Empty means not provided."""
        value = self.string(index, name)
        if value != "" and value not in options:
            self.fail(index, name, value, f"not one of {', '.join(options)}")
            return ""
        return value

    def integer(self, index: int, name: str) -> int:
        """Decimal integer. Empty means not provided and reads as 0."""
        value = self.string(index, name)
        if value == "":
            return 0
        try:
            return int(value, 10)
        except ValueError:
            self.fail(index, name, value, "not an integer")
            return 0

    def number(self, index: int, name: str) -> float:
        """Decimal number. Empty means not provided and reads as 0.0."""
        value = self.string(index, name)
        if value == "":
            return 0.0
        try:
            return float(value)
        except ValueError:
            self.fail(index, name, value, "not a number")
            return 0.0

    def time(self, index: int, name: str) -> Time:
        """hhmmss[.sss]. Empty reads as an invalid Time."""
        value = self.string(index, name)
        try:
            return parse_time(value)
        except ValueError as e:
            self.fail(index, name, value, str(e))
            return Time()

    def date(self, index: int, name: str) -> Date:
        """ddmmyy. Empty reads as an invalid Date."""
        value = self.string(index, name)
        try:
            return parse_date(value)
        except ValueError as e:
            self.fail(index, name, value, str(e))
            return Date()

    def latitude(self, index: int, hemisphere_index: int, name: str) -> float:
        value = self.string(index, name)
        hemisphere = self.string(hemisphere_index, name)
        try:
            return parse_coordinate(value, hemisphere, "NS")
        except ValueError as e:
            self.fail(index, name, f"{value},{hemisphere}", str(e))
            return 0.0

    def longitude(self, index: int, hemisphere_index: int, name: str) -> float:
        value = self.string(index, name)
        hemisphere = self.string(hemisphere_index, name)
        try:
            return parse_coordinate(value, hemisphere, "EW")
        except ValueError as e:
            self.fail(index, name, f"{value},{hemisphere}", str(e))
            return 0.0

    def sixbit_armour(self, index: int, fill_bits: int, name: str) -> bytes:
        """AIS payload as one byte per bit. Empty payload reads as no bits."""
        value = self.string(index, name)
        try:
            return decode_sixbit(value, fill_bits)
        except ValueError as e:
            self.fail(index, name, value, str(e))
            return b""
