# -*- coding: utf-8 -*-

from logging import getLogger
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Tuple

from . import messages
from .sentence import (BaseSentence, NMEAError, SENTENCE_START, SENTENCE_START_ENCAPSULATED,
                       parse_sentence)

logger = getLogger(__name__)

Decoder = Callable[[BaseSentence], BaseSentence]
Key = Tuple[str, str]

MARKERS = (SENTENCE_START, SENTENCE_START_ENCAPSULATED)


class UnsupportedSentenceError(NMEAError):

    def __init__(self, prefix: str, marker: str):
        super().__init__(f"Sentence prefix `{prefix}` not supported for `{marker}` sentences")
        self.prefix = prefix
        self.marker = marker


class Registry(object):
    """
    Immutable table of sentence decoders keyed by start marker and sentence type

    The same type code may be registered for both markers without the two
    ever colliding. Registering returns a new table and leaves this one as is.
    """

    def __init__(self, decoders: Mapping[Key, Decoder] = None):
        table = dict(decoders or {})
        for marker, _ in table:
            if marker not in MARKERS:
                raise ValueError(f"Invalid sentence start marker `{marker}`")
        self._decoders = MappingProxyType(table)

    def register(self, marker: str, sentence_type: str, decoder: Decoder) -> "Registry":
        return self.extend({(marker, sentence_type): decoder})

    def extend(self, decoders: Mapping[Key, Decoder]) -> "Registry":
        merged: Dict[Key, Decoder] = dict(self._decoders)
        merged.update(decoders)
        return Registry(merged)

    def lookup(self, marker: str, sentence_type: str) -> Decoder or None:
        return self._decoders.get((marker, sentence_type))

    def supported_types(self, marker: str = SENTENCE_START) -> List[str]:
        return sorted(t for m, t in self._decoders if m == marker)

    def decode(self, sentence: BaseSentence) -> BaseSentence:
        decoder = self.lookup(sentence.marker, sentence.type)
        if decoder is None:
            raise UnsupportedSentenceError(sentence.prefix, sentence.marker)
        logger.debug(f"Decoding {sentence.marker}{sentence.prefix} sentence")
        return decoder(sentence)

    def __contains__(self, key: Key):
        return key in self._decoders

    def __len__(self):
        return len(self._decoders)

    def __iter__(self):
        yield from self._decoders.keys()


def builtin_decoders() -> Dict[Key, Decoder]:
    decoders = {}
    for cls in messages.CONVENTIONAL:
        decoders[(SENTENCE_START, cls.TYPE)] = cls.decode
    for cls in messages.ENCAPSULATED:
        for sentence_type in cls.TYPES:
            decoders[(SENTENCE_START_ENCAPSULATED, sentence_type)] = cls.decode
    return decoders


DEFAULT_REGISTRY = Registry(builtin_decoders())


def decode(sentence: BaseSentence, registry: Registry = None) -> BaseSentence:
    """
    Dispatch a framed sentence to the decoder for its type
    :raises UnsupportedSentenceError: if no decoder is registered for marker and type
    :raises FieldParseError: first field that failed to decode, partial record attached
    """
    if registry is None:
        registry = DEFAULT_REGISTRY
    return registry.decode(sentence)


def parse(raw: bytes or str, registry: Registry = None) -> BaseSentence:
    """Frame, verify and decode a single NMEA sentence"""
    return decode(parse_sentence(raw), registry)
