# -*- coding: utf-8 -*-

from dataclasses import dataclass
from typing import ClassVar

from ..parser import FieldParser
from ..sentence import BaseSentence

ERROR_UNIT = "M"


@dataclass(frozen=True)
class PGRME(BaseSentence):
    """Garmin proprietary estimated position error, all in metres"""

    TYPE: ClassVar[str] = "GRME"

    horizontal: float
    vertical: float
    spherical: float

    @classmethod
    def decode(cls, s: BaseSentence) -> "PGRME":
        p = FieldParser(s)
        p.assert_type(cls.TYPE)
        horizontal = p.number(0, "horizontal error")
        p.enum_string(1, "horizontal error unit", ERROR_UNIT)
        vertical = p.number(2, "vertical error")
        p.enum_string(3, "vertical error unit", ERROR_UNIT)
        spherical = p.number(4, "spherical error")
        p.enum_string(5, "spherical error unit", ERROR_UNIT)
        return p.finish(cls(
            **s.base_args(),
            horizontal=horizontal,
            vertical=vertical,
            spherical=spherical
        ))
