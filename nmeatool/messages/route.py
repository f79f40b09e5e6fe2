# -*- coding: utf-8 -*-

from dataclasses import dataclass
from typing import ClassVar, Tuple

from ..parser import FieldParser
from ..sentence import BaseSentence

COMPLETE_ROUTE = "c"
WORKING_ROUTE = "w"


@dataclass(frozen=True)
class WPL(BaseSentence):
    """Waypoint location"""

    TYPE: ClassVar[str] = "WPL"

    latitude: float
    longitude: float
    ident: str

    @classmethod
    def decode(cls, s: BaseSentence) -> "WPL":
        p = FieldParser(s)
        p.assert_type(cls.TYPE)
        return p.finish(cls(
            **s.base_args(),
            latitude=p.latitude(0, 1, "latitude"),
            longitude=p.longitude(2, 3, "longitude"),
            ident=p.string(4, "ident")
        ))


@dataclass(frozen=True)
class RTE(BaseSentence):
    """Route, waypoint identifiers of a route spread over several sentences"""

    TYPE: ClassVar[str] = "RTE"

    number_of_sentences: int
    sentence_number: int
    active_route_or_waypoint_list: str
    name: str
    idents: Tuple[str, ...]

    @classmethod
    def decode(cls, s: BaseSentence) -> "RTE":
        p = FieldParser(s)
        p.assert_type(cls.TYPE)
        return p.finish(cls(
            **s.base_args(),
            number_of_sentences=p.integer(0, "number of sentences"),
            sentence_number=p.integer(1, "sentence number"),
            active_route_or_waypoint_list=p.enum_string(
                2, "active route or waypoint list", COMPLETE_ROUTE, WORKING_ROUTE),
            name=p.string(3, "name or number"),
            idents=p.list_string(4, "ident of waypoints")
        ))
