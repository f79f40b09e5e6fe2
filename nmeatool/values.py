# -*- coding: utf-8 -*-

import datetime
from dataclasses import dataclass
from re import match


@dataclass(frozen=True)
class Time(object):
    """UTC time of day, invalid if the field was left empty"""

    valid: bool = False
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0

    def to_time(self) -> datetime.time:
        return datetime.time(self.hour, self.minute, min(self.second, 59), self.millisecond * 1000)

    def __str__(self):
        return "%02d:%02d:%02d.%03d" % (self.hour, self.minute, self.second, self.millisecond)


@dataclass(frozen=True)
class Date(object):
    """Calendar date with two-digit year, invalid if the field was left empty"""

    valid: bool = False
    day: int = 0
    month: int = 0
    year: int = 0

    def to_date(self) -> datetime.date:
        # Years 80-99 are 19xx
        century = 1900 if self.year >= 80 else 2000
        return datetime.date(century + self.year, self.month, self.day)

    def __str__(self):
        return "%02d/%02d/%02d" % (self.day, self.month, self.year)


def parse_time(value: str) -> Time:
    """
    Parse hhmmss or hhmmss.sss
    :return: invalid Time for an empty string
    :raises ValueError: on malformed or out of range values
    """
    if value == "":
        return Time()
    m = match(r"""^(\d{2})(\d{2})(\d{2})(\.\d*)?$""", value)
    if m is None:
        raise ValueError(f"Invalid time format `{value}`")
    hour, minute, second = int(m[1]), int(m[2]), int(m[3])
    millisecond = 0
    if m[4] is not None and len(m[4]) > 1:
        millisecond = int(round(float("0" + m[4]) * 1000))
        if millisecond == 1000:
            millisecond = 999
    # Second 60 is a leap second
    if hour > 23 or minute > 59 or second > 60:
        raise ValueError(f"Time out of range `{value}`")
    return Time(True, hour, minute, second, millisecond)


def parse_date(value: str) -> Date:
    """
    Parse ddmmyy
    :return: invalid Date for an empty string
    :raises ValueError: on malformed or out of range values
    """
    if value == "":
        return Date()
    m = match(r"""^(\d{2})(\d{2})(\d{2})$""", value)
    if m is None:
        raise ValueError(f"Invalid date format `{value}`")
    day, month, year = int(m[1]), int(m[2]), int(m[3])
    d = Date(True, day, month, year)
    try:
        d.to_date()
    except ValueError as e:
        raise ValueError(f"Date out of range `{value}`") from e
    return d


_coordinate_axes = {
    "N": (1.0, 90.0),
    "S": (-1.0, 90.0),
    "E": (1.0, 180.0),
    "W": (-1.0, 180.0)
}


def parse_coordinate(value: str, hemisphere: str, allowed: str) -> float:
    """
    Convert (D)DDMM.mmmm plus hemisphere letter to signed decimal degrees
    :param allowed: hemisphere letters valid for this axis, "NS" or "EW"
    :return: 0.0 if both value and hemisphere are empty
    :raises ValueError: on malformed or out of range values
    """
    if value == "" and hemisphere == "":
        return 0.0
    hemisphere = hemisphere.upper()
    if len(hemisphere) != 1 or hemisphere not in allowed:
        raise ValueError(f"Invalid hemisphere `{hemisphere}`, expected one of {allowed}")
    m = match(r"""^(\d{1,3})(\d{2}(?:\.\d*)?)$""", value)
    if m is None:
        raise ValueError(f"Invalid coordinate format `{value}`")
    degrees = int(m[1])
    minutes = float(m[2])
    sign, limit = _coordinate_axes[hemisphere]
    if minutes >= 60.0:
        raise ValueError(f"Coordinate minutes out of range `{value}`")
    decimal = degrees + minutes / 60.0
    if decimal > limit:
        raise ValueError(f"Coordinate out of range `{value}{hemisphere}`")
    return sign * decimal


def decode_sixbit(payload: str, fill_bits: int) -> bytes:
    """
    Unarmour an AIS six-bit ASCII payload into one byte (0 or 1) per bit
    :param fill_bits: number of padding bits to drop from the end (0-5)
    :raises ValueError: on invalid characters or fill bits
    """
    if not 0 <= fill_bits <= 5:
        raise ValueError(f"Invalid number of fill bits {fill_bits}")
    bit_count = len(payload) * 6 - fill_bits
    if bit_count < 0:
        raise ValueError("Fill bits exceed payload length")
    bits = bytearray()
    for c in payload:
        code = ord(c)
        if not (48 <= code <= 87 or 96 <= code <= 119):
            raise ValueError(f"Invalid six-bit character `{c}`")
        code -= 48
        if code > 40:
            code -= 8
        for k in range(5, -1, -1):
            bits.append((code >> k) & 1)
    return bytes(bits[:bit_count])
