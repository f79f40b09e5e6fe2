# -*- coding: utf-8 -*-

from dataclasses import dataclass
from typing import ClassVar, Tuple

from ..parser import FieldParser
from ..sentence import BaseSentence


@dataclass(frozen=True)
class VDMVDO(BaseSentence):
    """
    AIS VHF data-link message, received (VDM) or own vessel (VDO)

    Only the encapsulation is decoded. The payload is handed out as one
    byte per bit for an AIS message decoder to pick apart.
    """

    TYPES: ClassVar[Tuple[str, ...]] = ("VDM", "VDO")

    num_fragments: int
    fragment_number: int
    message_id: int  # sequential id tying fragments together, 0 if single
    channel: str  # radio channel A or B
    payload: bytes

    @property
    def own_vessel(self) -> bool:
        return self.type == "VDO"

    @classmethod
    def decode(cls, s: BaseSentence) -> "VDMVDO":
        p = FieldParser(s)
        p.assert_type(*cls.TYPES)
        return p.finish(cls(
            **s.base_args(),
            num_fragments=p.integer(0, "number of fragments"),
            fragment_number=p.integer(1, "fragment number"),
            message_id=p.integer(2, "sequence number"),
            channel=p.string(3, "channel id"),
            payload=p.sixbit_armour(4, p.integer(5, "number of fill bits"), "data")
        ))
