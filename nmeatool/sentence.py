# -*- coding: utf-8 -*-

from dataclasses import dataclass, fields as dataclass_fields, is_dataclass
from enum import Enum
from functools import reduce
from logging import getLogger
from typing import Tuple

from .values import Date, Time

logger = getLogger(__name__)

SENTENCE_START = "$"
SENTENCE_START_ENCAPSULATED = "!"
FIELD_SEP = ","
CHECKSUM_SEP = "*"


class NMEAError(Exception):
    pass


class FramingError(NMEAError):
    pass


class ChecksumError(NMEAError):

    def __init__(self, computed: str, declared: str):
        super().__init__(f"Sentence checksum mismatch [{computed} != {declared}]")
        self.computed = computed
        self.declared = declared


def xor_checksum(data: bytes or str) -> str:
    """XOR all bytes of the sentence body and render as two uppercase hex digits"""
    if type(data) is str:
        data = data.encode("ascii")
    return "%02X" % reduce(lambda x, y: x ^ y, data, 0)


def parse_prefix(prefix: str) -> (str, str):
    """Split the first field of a sentence into talker id and sentence type"""
    if prefix.startswith("P"):
        return "P", prefix[1:]
    if len(prefix) < 2:
        return prefix, ""
    return prefix[:2], prefix[2:]


@dataclass(frozen=True)
class BaseSentence(object):
    """
    Framed NMEA sentence with validated checksum

    Every decoded sentence type is a subclass carrying its own typed
    attributes on top of these.
    """

    talker: str
    type: str
    fields: Tuple[str, ...]
    checksum: str
    raw: str

    @property
    def prefix(self) -> str:
        return self.talker + self.type

    @property
    def marker(self) -> str:
        return self.raw[0]

    def base_args(self) -> dict:
        return {f.name: getattr(self, f.name) for f in dataclass_fields(BaseSentence)}

    def to_dict(self) -> dict:
        d = {
            "talker": self.talker,
            "type": self.type,
            "fields": list(self.fields),
            "checksum": self.checksum,
            "raw": self.raw
        }
        base_names = set(d.keys())
        for f in dataclass_fields(self):
            if f.name not in base_names:
                d[f.name] = _plain(getattr(self, f.name))
        return d

    def __str__(self):
        return self.raw


def _plain(value):
    # Projection of attribute values onto JSON-compatible types
    if isinstance(value, (Time, Date)):
        return str(value)
    if is_dataclass(value):
        return {f.name: _plain(getattr(value, f.name)) for f in dataclass_fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (tuple, list)):
        return [_plain(v) for v in value]
    if isinstance(value, bytes):
        return "".join(str(b) for b in value)
    return value


def parse_sentence(raw: bytes or str) -> BaseSentence:
    """
    Frame a raw NMEA sentence and verify its checksum
    :param raw: sentence text, optionally terminated by CR/LF
    :return: BaseSentence with talker, type and data fields split up
    """
    if type(raw) is bytes:
        try:
            raw = raw.decode("ascii")
        except UnicodeDecodeError as e:
            raise FramingError(f"Sentence is not ASCII: {raw!r}") from e

    if len(raw) == 0 or raw[0] not in (SENTENCE_START, SENTENCE_START_ENCAPSULATED):
        raise FramingError(f"Missing or misplaced start marker in `{raw.rstrip()}`")

    sum_sep_index = raw.find(CHECKSUM_SEP)
    if sum_sep_index == -1:
        raise FramingError(f"Missing checksum separator in `{raw.rstrip()}`")

    tail = raw[sum_sep_index + 1:].rstrip("\r\n")
    if len(tail) != 2 or not tail.isascii():
        raise FramingError(f"Malformed checksum `{tail}` in `{raw.rstrip()}`")
    declared = tail.upper()

    body = raw[1:sum_sep_index]
    try:
        computed = xor_checksum(body)
    except UnicodeEncodeError as e:
        raise FramingError(f"Sentence is not ASCII: `{raw.rstrip()}`") from e
    if computed != declared:
        raise ChecksumError(computed, declared)

    parsed = body.split(FIELD_SEP)
    talker, sentence_type = parse_prefix(parsed[0])
    return BaseSentence(
        talker=talker,
        type=sentence_type,
        fields=tuple(parsed[1:]),
        checksum=declared,
        raw=raw
    )
