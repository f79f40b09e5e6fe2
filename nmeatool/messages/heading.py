# -*- coding: utf-8 -*-

from dataclasses import dataclass
from typing import ClassVar

from ..parser import FieldParser
from ..sentence import BaseSentence

# THS heading status
AUTONOMOUS = "A"
ESTIMATED = "E"
MANUAL = "M"
SIMULATOR = "S"
INVALID = "V"


@dataclass(frozen=True)
class HDG(BaseSentence):
    """Magnetic heading, deviation and variation"""

    TYPE: ClassVar[str] = "HDG"

    heading: float
    deviation: float
    deviation_direction: str
    variation: float
    variation_direction: str

    @classmethod
    def decode(cls, s: BaseSentence) -> "HDG":
        p = FieldParser(s)
        p.assert_type(cls.TYPE)
        return p.finish(cls(
            **s.base_args(),
            heading=p.number(0, "heading"),
            deviation=p.number(1, "deviation"),
            deviation_direction=p.enum_string(2, "deviation direction", "E", "W"),
            variation=p.number(3, "variation"),
            variation_direction=p.enum_string(4, "variation direction", "E", "W")
        ))


@dataclass(frozen=True)
class HDT(BaseSentence):
    """True heading"""

    TYPE: ClassVar[str] = "HDT"

    heading: float
    true: bool

    @classmethod
    def decode(cls, s: BaseSentence) -> "HDT":
        p = FieldParser(s)
        p.assert_type(cls.TYPE)
        return p.finish(cls(
            **s.base_args(),
            heading=p.number(0, "heading"),
            true=p.enum_string(1, "true", "T") == "T"
        ))


@dataclass(frozen=True)
class THS(BaseSentence):
    """True heading and status"""

    TYPE: ClassVar[str] = "THS"

    heading: float
    status: str

    @classmethod
    def decode(cls, s: BaseSentence) -> "THS":
        p = FieldParser(s)
        p.assert_type(cls.TYPE)
        return p.finish(cls(
            **s.base_args(),
            heading=p.number(0, "heading"),
            status=p.enum_string(1, "status", AUTONOMOUS, ESTIMATED, MANUAL, SIMULATOR, INVALID)
        ))


@dataclass(frozen=True)
class ROT(BaseSentence):
    """Rate of turn"""

    TYPE: ClassVar[str] = "ROT"

    rate_of_turn: float  # degrees per minute, negative to port
    valid: bool

    @classmethod
    def decode(cls, s: BaseSentence) -> "ROT":
        p = FieldParser(s)
        p.assert_type(cls.TYPE)
        return p.finish(cls(
            **s.base_args(),
            rate_of_turn=p.number(0, "rate of turn"),
            valid=p.enum_string(1, "status valid", "A", "V") == "A"
        ))


@dataclass(frozen=True)
class VHW(BaseSentence):
    """Water speed and heading"""

    TYPE: ClassVar[str] = "VHW"

    true_heading: float
    magnetic_heading: float
    speed_through_water_knots: float
    speed_through_water_kph: float

    @classmethod
    def decode(cls, s: BaseSentence) -> "VHW":
        p = FieldParser(s)
        p.assert_type(cls.TYPE)
        return p.finish(cls(
            **s.base_args(),
            true_heading=p.number(0, "true heading"),
            magnetic_heading=p.number(2, "magnetic heading"),
            speed_through_water_knots=p.number(4, "speed through water (knots)"),
            speed_through_water_kph=p.number(6, "speed through water (km/h)")
        ))
