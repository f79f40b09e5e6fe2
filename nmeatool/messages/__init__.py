# -*- coding: utf-8 -*-

from .ais import VDMVDO
from .alert import ALC, ALF, ALR, ARC, AlertEntry
from .depth import DBK, DBS, DBT, DPT
from .garmin import PGRME
from .gps import GGA, GLL, GNS, GSA, GSV, RMC, VTG, ZDA, SatelliteInfo
from .heading import HDG, HDT, ROT, THS, VHW
from .route import RTE, WPL
from .status import HBT

__all__ = [
    "ALC",
    "ALF",
    "ALR",
    "ARC",
    "AlertEntry",
    "DBK",
    "DBS",
    "DBT",
    "DPT",
    "GGA",
    "GLL",
    "GNS",
    "GSA",
    "GSV",
    "HBT",
    "HDG",
    "HDT",
    "PGRME",
    "RMC",
    "ROT",
    "RTE",
    "SatelliteInfo",
    "THS",
    "VDMVDO",
    "VHW",
    "VTG",
    "WPL",
    "ZDA"
]

# Decoders for sentences framed by "$"
CONVENTIONAL = (
    ALC, ALF, ALR, ARC,
    DBK, DBS, DBT, DPT,
    GGA, GLL, GNS, GSA, GSV, RMC, VTG, ZDA,
    HDG, HDT, ROT, THS, VHW,
    RTE, WPL,
    HBT,
    PGRME
)

# Decoders for sentences framed by "!"
ENCAPSULATED = (
    VDMVDO,
)
