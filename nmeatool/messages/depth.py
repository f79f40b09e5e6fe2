# -*- coding: utf-8 -*-

from dataclasses import dataclass
from typing import ClassVar

from ..parser import FieldParser
from ..sentence import BaseSentence


@dataclass(frozen=True)
class DepthSentence(BaseSentence):
    """Depth in feet, metres and fathoms, each followed by its unit letter"""

    TYPE: ClassVar[str] = ""

    depth_feet: float
    feet: str
    depth_meters: float
    meters: str
    depth_fathoms: float
    fathoms: str

    @classmethod
    def decode(cls, s: BaseSentence) -> "DepthSentence":
        p = FieldParser(s)
        p.assert_type(cls.TYPE)
        return p.finish(cls(
            **s.base_args(),
            depth_feet=p.number(0, "depth (feet)"),
            feet=p.enum_string(1, "unit (feet)", "f"),
            depth_meters=p.number(2, "depth (meters)"),
            meters=p.enum_string(3, "unit (meters)", "M"),
            depth_fathoms=p.number(4, "depth (fathoms)"),
            fathoms=p.enum_string(5, "unit (fathoms)", "F")
        ))


@dataclass(frozen=True)
class DBT(DepthSentence):
    """Depth below transducer"""

    TYPE: ClassVar[str] = "DBT"


@dataclass(frozen=True)
class DBS(DepthSentence):
    """Depth below surface"""

    TYPE: ClassVar[str] = "DBS"


@dataclass(frozen=True)
class DBK(DepthSentence):
    """Depth below keel"""

    TYPE: ClassVar[str] = "DBK"


@dataclass(frozen=True)
class DPT(BaseSentence):
    """Depth of water"""

    TYPE: ClassVar[str] = "DPT"

    depth: float  # metres below transducer
    offset: float  # metres, positive for distance to waterline, negative to keel
    range_scale: float  # metres, 0.0 when not sent

    @classmethod
    def decode(cls, s: BaseSentence) -> "DPT":
        p = FieldParser(s)
        p.assert_type(cls.TYPE)
        return p.finish(cls(
            **s.base_args(),
            depth=p.number(0, "depth"),
            offset=p.number(1, "offset"),
            range_scale=p.number(2, "range scale") if p.has(2) else 0.0
        ))
