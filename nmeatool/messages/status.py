# -*- coding: utf-8 -*-

from dataclasses import dataclass
from typing import ClassVar

from ..parser import FieldParser
from ..sentence import BaseSentence


@dataclass(frozen=True)
class HBT(BaseSentence):
    """Heartbeat supervision sentence"""

    TYPE: ClassVar[str] = "HBT"

    interval: float  # configured repeat interval in seconds
    status: str  # A is normal operation
    id: str  # sequential identifier 0-9

    @classmethod
    def decode(cls, s: BaseSentence) -> "HBT":
        p = FieldParser(s)
        p.assert_type(cls.TYPE)
        return p.finish(cls(
            **s.base_args(),
            interval=p.number(0, "interval"),
            status=p.enum_string(1, "status", "A", "V"),
            id=p.string(2, "id")
        ))
