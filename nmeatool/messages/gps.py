# -*- coding: utf-8 -*-

from dataclasses import dataclass
from typing import ClassVar, Tuple

from ..parser import FieldParser
from ..sentence import BaseSentence
from ..values import Date, Time

VALID = "A"
INVALID = "V"

# GGA fix quality
FIX_INVALID = "0"
FIX_GPS = "1"
FIX_DGPS = "2"
FIX_PPS = "3"
FIX_RTK = "4"
FIX_FRTK = "5"
FIX_ESTIMATED = "6"
FIX_MANUAL = "7"
FIX_SIMULATION = "8"

FIX_QUALITIES = (FIX_INVALID, FIX_GPS, FIX_DGPS, FIX_PPS, FIX_RTK, FIX_FRTK,
                 FIX_ESTIMATED, FIX_MANUAL, FIX_SIMULATION)

# GSA selection mode and fix type
AUTO = "A"
MANUAL = "M"
FIX_NONE = "1"
FIX_2D = "2"
FIX_3D = "3"

# GNS mode indicator characters, one per constellation
GNS_MODES = "NADPRFEMS"


def west_negative(value: float, direction: str) -> float:
    return -value if direction == "W" else value


def active_satellites(p: FieldParser) -> Tuple[str, ...]:
    prns = (p.string(i, "satellite in view") for i in range(2, 14))
    return tuple(prn for prn in prns if prn != "")


def satellite_info(p: FieldParser, field_count: int) -> Tuple["SatelliteInfo", ...]:
    # Up to four groups of four fields, a trailing signal id may follow
    info = tuple(
        SatelliteInfo(
            prn=p.integer(i, "satellite prn"),
            elevation=p.integer(i + 1, "elevation"),
            azimuth=p.integer(i + 2, "azimuth"),
            snr=p.integer(i + 3, "snr")
        )
        for i in range(3, min(field_count, 19) - 3, 4)
    )
    trailing = (field_count - 3) % 4
    if field_count > 3 and trailing > 1:
        p.fail(field_count - trailing, "satellite info", None,
               f"incomplete satellite group of {trailing} fields")
    return info


def mode_indicators(p: FieldParser, index: int) -> Tuple[str, ...]:
    mode = p.string(index, "mode")
    for c in mode:
        if c not in GNS_MODES:
            p.fail(index, "mode", mode, f"invalid mode indicator `{c}`")
            return ()
    return tuple(mode)


@dataclass(frozen=True)
class RMC(BaseSentence):
    """Recommended minimum specific GNSS data"""

    TYPE: ClassVar[str] = "RMC"

    time: Time
    validity: str
    latitude: float
    longitude: float
    speed: float  # knots
    course: float  # degrees true
    date: Date
    variation: float  # negative when west

    @classmethod
    def decode(cls, s: BaseSentence) -> "RMC":
        p = FieldParser(s)
        p.assert_type(cls.TYPE)
        return p.finish(cls(
            **s.base_args(),
            time=p.time(0, "time"),
            validity=p.enum_string(1, "validity", VALID, INVALID),
            latitude=p.latitude(2, 3, "latitude"),
            longitude=p.longitude(4, 5, "longitude"),
            speed=p.number(6, "speed"),
            course=p.number(7, "course"),
            date=p.date(8, "date"),
            variation=west_negative(p.number(9, "variation"),
                                    p.enum_string(10, "variation direction", "E", "W"))
        ))


@dataclass(frozen=True)
class GGA(BaseSentence):
    """Global positioning system fix data"""

    TYPE: ClassVar[str] = "GGA"

    time: Time
    latitude: float
    longitude: float
    fix_quality: str
    num_satellites: int
    hdop: float
    altitude: float  # metres above mean sea level
    separation: float  # geoid separation in metres
    dgps_age: float
    dgps_id: str

    @classmethod
    def decode(cls, s: BaseSentence) -> "GGA":
        p = FieldParser(s)
        p.assert_type(cls.TYPE)
        return p.finish(cls(
            **s.base_args(),
            time=p.time(0, "time"),
            latitude=p.latitude(1, 2, "latitude"),
            longitude=p.longitude(3, 4, "longitude"),
            fix_quality=p.enum_string(5, "fix quality", *FIX_QUALITIES),
            num_satellites=p.integer(6, "number of satellites"),
            hdop=p.number(7, "hdop"),
            altitude=p.number(8, "altitude"),
            separation=p.number(10, "separation"),
            dgps_age=p.number(12, "dgps age"),
            dgps_id=p.string(13, "dgps id")
        ))


@dataclass(frozen=True)
class GSA(BaseSentence):
    """GNSS DOP and active satellites"""

    TYPE: ClassVar[str] = "GSA"

    mode: str
    fix_type: str
    sv: Tuple[str, ...]
    pdop: float
    hdop: float
    vdop: float

    @classmethod
    def decode(cls, s: BaseSentence) -> "GSA":
        p = FieldParser(s)
        p.assert_type(cls.TYPE)
        p.assert_field_count(17)
        return p.finish(cls(
            **s.base_args(),
            mode=p.enum_string(0, "selection mode", AUTO, MANUAL),
            fix_type=p.enum_string(1, "fix type", FIX_NONE, FIX_2D, FIX_3D),
            sv=active_satellites(p),
            pdop=p.number(14, "pdop"),
            hdop=p.number(15, "hdop"),
            vdop=p.number(16, "vdop")
        ))


@dataclass(frozen=True)
class SatelliteInfo(object):
    prn: int
    elevation: int  # degrees
    azimuth: int  # degrees true
    snr: int  # dB


@dataclass(frozen=True)
class GSV(BaseSentence):
    """GNSS satellites in view, one of a series of up to nine sentences"""

    TYPE: ClassVar[str] = "GSV"

    total_messages: int
    message_number: int
    num_satellites: int
    info: Tuple[SatelliteInfo, ...]

    @classmethod
    def decode(cls, s: BaseSentence) -> "GSV":
        p = FieldParser(s)
        p.assert_type(cls.TYPE)
        return p.finish(cls(
            **s.base_args(),
            total_messages=p.integer(0, "total number of messages"),
            message_number=p.integer(1, "message number"),
            num_satellites=p.integer(2, "number of satellites in view"),
            info=satellite_info(p, len(s.fields))
        ))


@dataclass(frozen=True)
class GLL(BaseSentence):
    """Geographic position, latitude and longitude"""

    TYPE: ClassVar[str] = "GLL"

    latitude: float
    longitude: float
    time: Time
    validity: str

    @classmethod
    def decode(cls, s: BaseSentence) -> "GLL":
        p = FieldParser(s)
        p.assert_type(cls.TYPE)
        return p.finish(cls(
            **s.base_args(),
            latitude=p.latitude(0, 1, "latitude"),
            longitude=p.longitude(2, 3, "longitude"),
            time=p.time(4, "time"),
            validity=p.enum_string(5, "validity", VALID, INVALID)
        ))


@dataclass(frozen=True)
class VTG(BaseSentence):
    """Track made good and ground speed"""

    TYPE: ClassVar[str] = "VTG"

    true_track: float
    magnetic_track: float
    ground_speed_knots: float
    ground_speed_kph: float

    @classmethod
    def decode(cls, s: BaseSentence) -> "VTG":
        p = FieldParser(s)
        p.assert_type(cls.TYPE)
        return p.finish(cls(
            **s.base_args(),
            true_track=p.number(0, "true track"),
            magnetic_track=p.number(2, "magnetic track"),
            ground_speed_knots=p.number(4, "ground speed (knots)"),
            ground_speed_kph=p.number(6, "ground speed (km/h)")
        ))


@dataclass(frozen=True)
class ZDA(BaseSentence):
    """Time and date"""

    TYPE: ClassVar[str] = "ZDA"

    time: Time
    day: int
    month: int
    year: int
    offset_hours: int  # local zone offset from UTC
    offset_minutes: int

    @classmethod
    def decode(cls, s: BaseSentence) -> "ZDA":
        p = FieldParser(s)
        p.assert_type(cls.TYPE)
        return p.finish(cls(
            **s.base_args(),
            time=p.time(0, "time"),
            day=p.integer(1, "day"),
            month=p.integer(2, "month"),
            year=p.integer(3, "year"),
            offset_hours=p.integer(4, "offset (hours)"),
            offset_minutes=p.integer(5, "offset (minutes)")
        ))


@dataclass(frozen=True)
class GNS(BaseSentence):
    """GNSS fix data for combined constellations"""

    TYPE: ClassVar[str] = "GNS"

    time: Time
    latitude: float
    longitude: float
    mode: Tuple[str, ...]
    num_satellites: int
    hdop: float
    altitude: float
    separation: float
    dgps_age: float
    dgps_id: int

    @classmethod
    def decode(cls, s: BaseSentence) -> "GNS":
        p = FieldParser(s)
        p.assert_type(cls.TYPE)
        return p.finish(cls(
            **s.base_args(),
            time=p.time(0, "time"),
            latitude=p.latitude(1, 2, "latitude"),
            longitude=p.longitude(3, 4, "longitude"),
            mode=mode_indicators(p, 5),
            num_satellites=p.integer(6, "number of satellites"),
            hdop=p.number(7, "hdop"),
            altitude=p.number(8, "altitude"),
            separation=p.number(9, "separation"),
            dgps_age=p.number(10, "dgps age"),
            dgps_id=p.integer(11, "dgps id")
        ))
