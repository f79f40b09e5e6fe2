# -*- coding: utf-8 -*-

from dataclasses import dataclass
from typing import ClassVar, Tuple

from ..parser import FieldParser
from ..sentence import BaseSentence
from ..values import Time

# ALF alert category
CATEGORY_A = "A"
CATEGORY_B = "B"
CATEGORY_C = "C"

# ALF alert priority
EMERGENCY_ALARM = "E"
ALARM = "A"
WARNING = "W"
CAUTION = "C"

# ALF alert state
ACTIVE_UNACKNOWLEDGED = "V"
ACTIVE_SILENCED = "S"
ACTIVE_ACKNOWLEDGED = "A"
ACTIVE_RESPONSIBILITY_TRANSFERRED = "O"
RECTIFIED_UNACKNOWLEDGED = "U"
NORMAL = "N"

# ALR condition and acknowledge state
THRESHOLD_EXCEEDED = "A"
THRESHOLD_NOT_EXCEEDED = "V"
ACKNOWLEDGED = "A"
UNACKNOWLEDGED = "V"

# ARC refused command
ACKNOWLEDGE = "A"
REQUEST_REPEAT = "Q"
RESPONSIBILITY_TRANSFER = "O"
SILENCE = "S"


@dataclass(frozen=True)
class AlertEntry(object):
    manufacturer_mnemonic_code: str  # empty for standardized alerts
    alert_identifier: int
    alert_instance: int
    revision_counter: int


def alert_entries(p: FieldParser, field_count: int) -> Tuple[AlertEntry, ...]:
    entries = tuple(
        AlertEntry(
            manufacturer_mnemonic_code=p.string(i, "manufacturer mnemonic code"),
            alert_identifier=p.integer(i + 1, "alert identifier"),
            alert_instance=p.integer(i + 2, "alert instance"),
            revision_counter=p.integer(i + 3, "revision counter")
        )
        for i in range(4, field_count - 3, 4)
    )
    trailing = (field_count - 4) % 4
    if field_count > 4 and trailing != 0:
        p.fail(field_count - trailing, "alert entry", None,
               f"incomplete alert entry of {trailing} fields")
    return entries


@dataclass(frozen=True)
class ALC(BaseSentence):
    """Cyclic alert list, one of a series of sentences"""

    TYPE: ClassVar[str] = "ALC"

    num_fragments: int
    fragment_number: int
    message_id: int
    entries_number: int
    entries: Tuple[AlertEntry, ...]

    @classmethod
    def decode(cls, s: BaseSentence) -> "ALC":
        p = FieldParser(s)
        p.assert_type(cls.TYPE)
        return p.finish(cls(
            **s.base_args(),
            num_fragments=p.integer(0, "number of fragments"),
            fragment_number=p.integer(1, "fragment number"),
            message_id=p.integer(2, "sequential message id"),
            entries_number=p.integer(3, "number of alert entries"),
            entries=alert_entries(p, len(s.fields))
        ))


@dataclass(frozen=True)
class ALF(BaseSentence):
    """Alert sentence"""

    TYPE: ClassVar[str] = "ALF"

    num_fragments: int
    fragment_number: int
    message_id: int
    time: Time  # time of last state change
    category: str
    priority: str
    state: str
    manufacturer_mnemonic_code: str
    alert_identifier: int
    alert_instance: int
    revision_counter: int
    escalation_counter: int
    text: str

    @classmethod
    def decode(cls, s: BaseSentence) -> "ALF":
        p = FieldParser(s)
        p.assert_type(cls.TYPE)
        return p.finish(cls(
            **s.base_args(),
            num_fragments=p.integer(0, "number of fragments"),
            fragment_number=p.integer(1, "fragment number"),
            message_id=p.integer(2, "sequential message id"),
            time=p.time(3, "time"),
            category=p.enum_string(4, "alert category", CATEGORY_A, CATEGORY_B, CATEGORY_C),
            priority=p.enum_string(5, "alert priority", EMERGENCY_ALARM, ALARM, WARNING, CAUTION),
            state=p.enum_string(6, "alert state", ACTIVE_UNACKNOWLEDGED, ACTIVE_SILENCED, ACTIVE_ACKNOWLEDGED,
                                ACTIVE_RESPONSIBILITY_TRANSFERRED, RECTIFIED_UNACKNOWLEDGED, NORMAL),
            manufacturer_mnemonic_code=p.string(7, "manufacturer mnemonic code"),
            alert_identifier=p.integer(8, "alert identifier"),
            alert_instance=p.integer(9, "alert instance"),
            revision_counter=p.integer(10, "revision counter"),
            escalation_counter=p.integer(11, "escalation counter"),
            text=p.string(12, "alert text")
        ))


@dataclass(frozen=True)
class ALR(BaseSentence):
    """Set alarm state"""

    TYPE: ClassVar[str] = "ALR"

    time: Time
    alarm_identifier: int
    condition: str
    state: str
    description: str

    @classmethod
    def decode(cls, s: BaseSentence) -> "ALR":
        p = FieldParser(s)
        p.assert_type(cls.TYPE)
        return p.finish(cls(
            **s.base_args(),
            time=p.time(0, "time"),
            alarm_identifier=p.integer(1, "unique alarm number"),
            condition=p.enum_string(2, "alarm condition", THRESHOLD_EXCEEDED, THRESHOLD_NOT_EXCEEDED),
            state=p.enum_string(3, "alarm state", ACKNOWLEDGED, UNACKNOWLEDGED),
            description=p.string(4, "description")
        ))


@dataclass(frozen=True)
class ARC(BaseSentence):
    """Alert command refused"""

    TYPE: ClassVar[str] = "ARC"

    time: Time
    manufacturer_mnemonic_code: str
    alert_identifier: int
    alert_instance: int
    command: str

    @classmethod
    def decode(cls, s: BaseSentence) -> "ARC":
        p = FieldParser(s)
        p.assert_type(cls.TYPE)
        return p.finish(cls(
            **s.base_args(),
            time=p.time(0, "time"),
            manufacturer_mnemonic_code=p.string(1, "manufacturer mnemonic code"),
            alert_identifier=p.integer(2, "alert identifier"),
            alert_instance=p.integer(3, "alert instance"),
            command=p.enum_string(4, "refused command", ACKNOWLEDGE, REQUEST_REPEAT,
                                  RESPONSIBILITY_TRANSFER, SILENCE)
        ))
