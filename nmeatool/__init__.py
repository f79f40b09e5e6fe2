# -*- coding: utf-8 -*-

import logging

from . import messages
from . import parser
from . import registry
from . import sentence
from . import values

from .parser import FieldCountError, FieldParseError, FieldParser, TypeMismatchError
from .registry import DEFAULT_REGISTRY, Registry, UnsupportedSentenceError, decode, parse
from .sentence import BaseSentence, ChecksumError, FramingError, NMEAError, parse_prefix, parse_sentence

__all__ = [
    "messages",
    "parser",
    "registry",
    "sentence",
    "values",
    "BaseSentence",
    "ChecksumError",
    "DEFAULT_REGISTRY",
    "FieldCountError",
    "FieldParseError",
    "FieldParser",
    "FramingError",
    "NMEAError",
    "Registry",
    "TypeMismatchError",
    "UnsupportedSentenceError",
    "decode",
    "parse",
    "parse_prefix",
    "parse_sentence"
]

logger = logging.getLogger(__name__)
