# -*- coding: utf-8 -*-

from .base import run, list_commands

from . import decode
from . import stats

__all__ = [
    "run",
    "list_commands",
    "decode",
    "stats"
]
