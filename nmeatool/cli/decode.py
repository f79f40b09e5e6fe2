# -*- coding: utf-8 -*-

import datetime
import gpxpy
import gpxpy.gpx
from json import dump, dumps
from logging import getLogger
from os.path import abspath, isfile

from .base import CliCommand, add_input_arg, decode_lines, read_lines
from ..messages import RMC, WPL
from ..messages.gps import VALID

logger = getLogger(__name__)


class DecodeCommand(CliCommand):

    name = "decode"
    help = "decode NMEA sentences from a log file"

    @staticmethod
    def setup_args(parser) -> None:
        add_input_arg(parser)
        parser.add_argument("-j", "--json",
                            help="file name for JSON export",
                            type=abspath,
                            action="store")
        parser.add_argument("-g", "--gpx",
                            help="file name for GPX export of track and waypoints",
                            type=abspath,
                            action="store")
        parser.add_argument("-p", "--print",
                            help="print one JSON object per decoded sentence",
                            action="store_true")
        parser.add_argument("--strict",
                            help="fail if any line does not decode",
                            action="store_true")

    def run(self):
        if self.args.input is not None and not isfile(self.args.input):
            logger.critical(f"Input file `{self.args.input}` not found")
            return 10

        result = 0
        sentences = []
        failures = 0
        for _, sentence, error in decode_lines(read_lines(self.args.input)):
            if error is not None:
                failures += 1
                continue
            sentences.append(sentence)
            if self.args.print:
                print(dumps(sentence.to_dict()))

        logger.info(f"Decoded {len(sentences)} sentences, {failures} failed")

        if self.args.json:
            logger.info("Exporting JSON data to `%s`", self.args.json)
            result = max(write_json(sentences, self.args.json), result)

        if self.args.gpx:
            logger.info("Exporting GPX data to `%s`", self.args.gpx)
            result = max(write_gpx(sentences, self.args.gpx), result)

        if self.args.strict and failures > 0:
            logger.error(f"{failures} lines failed to decode")
            result = max(10, result)

        return result


def write_json(sentences: list, file_name: str) -> int:
    jlog = {
        "sentences": [s.to_dict() for s in sentences]
    }
    with open(file_name, "w") as f:
        dump(jlog, f, indent=4)
    return 0


def write_gpx(sentences: list, file_name: str) -> int:
    fixes = [s for s in sentences
             if isinstance(s, RMC) and s.validity == VALID and s.date.valid and s.time.valid]
    waypoints = [s for s in sentences if isinstance(s, WPL)]
    if len(fixes) == 0 and len(waypoints) == 0:
        logger.warning("No valid positions. Not writing empty GPX file")
        return 0

    gpx = gpxpy.gpx.GPX()

    for w in waypoints:
        gpx.waypoints.append(gpxpy.gpx.GPXWaypoint(
            latitude=w.latitude,
            longitude=w.longitude,
            name=w.ident
        ))

    if len(fixes) > 0:
        gpx_track = gpxpy.gpx.GPXTrack()
        gpx.tracks.append(gpx_track)
        gpx_segment = gpxpy.gpx.GPXTrackSegment()
        gpx_track.segments.append(gpx_segment)
        for fix in fixes:
            gpx_segment.points.append(gpxpy.gpx.GPXTrackPoint(
                time=datetime.datetime.combine(fix.date.to_date(), fix.time.to_time()),
                latitude=fix.latitude,
                longitude=fix.longitude
            ))

    with open(file_name, "w") as f:
        f.write(gpx.to_xml(version="1.1"))

    return 0
