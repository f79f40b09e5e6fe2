# -*- coding: utf-8 -*-

import pytest

from nmeatool import parse
from nmeatool.messages import (ALC, ALF, ALR, ARC, DBK, DBS, DBT, DPT, GGA, GLL, GNS, GSA, GSV, HBT, HDG, HDT, PGRME,
                               RMC, ROT, RTE, THS, VDMVDO, VHW, VTG, WPL, ZDA, AlertEntry, SatelliteInfo)
from nmeatool.parser import FieldCountError, FieldParseError, TypeMismatchError
from nmeatool.sentence import parse_sentence
from nmeatool.values import Date, Time


def test_rmc():
    s = parse("$GPRMC,220516,A,5133.82,N,00042.24,W,173.8,231.8,130694,004.2,W*70")
    assert type(s) is RMC
    assert s.time == Time(True, 22, 5, 16, 0)
    assert s.validity == "A"
    assert s.latitude == pytest.approx(51.563667, abs=1E-5)
    assert s.longitude == pytest.approx(-0.704, abs=1E-5)
    assert s.speed == 173.8
    assert s.course == 231.8
    assert s.date == Date(True, 13, 6, 94)
    assert s.variation == -4.2, "Westerly variation is negative"

    s = parse("$GPRMC,220516,A,5133.82,N,00042.24,W,173.8,231.8,130694,004.2,E*62")
    assert s.variation == 4.2, "Easterly variation is positive"


def test_rmc_without_fix():
    s = parse("$GPRMC,,V,,,,,,,,,*31")
    assert s.validity == "V"
    assert not s.time.valid
    assert not s.date.valid
    assert s.latitude == 0.0
    assert s.variation == 0.0


def test_rmc_errors():
    with pytest.raises(FieldParseError) as e:
        parse("$GPRMC,220516,X,5133.82,N,00042.24,W,abc,231.8,130694,004.2,W*2A")
    assert e.value.name == "validity", "First broken field is reported, not the second"
    assert e.value.value == "X"
    partial = e.value.sentence
    assert type(partial) is RMC, "Partially decoded record is available"
    assert partial.validity == ""
    assert partial.speed == 0.0
    assert partial.course == 231.8

    with pytest.raises(FieldParseError) as e:
        parse("$GPRMC,220516,A,5133.82,N,00042.24,W,abc,231.8,130694,004.2,W*33")
    assert e.value.name == "speed"

    with pytest.raises(FieldParseError) as e:
        parse("$GPRMC,250516,A,5133.82,N,00042.24,W,173.8,231.8,130694,004.2,W*77")
    assert e.value.name == "time"

    with pytest.raises(FieldParseError) as e:
        parse("$GPRMC,220516,A,5133.82,N,00042.24,W,173.8,231.8,320694,004.2,W*73")
    assert e.value.name == "date"

    with pytest.raises(FieldParseError) as e:
        parse("$GPRMC,220516,A,5133.82,N,00042.24,W*2F")
    assert e.value.index == 6, "Truncated sentence reports first missing field"


def test_gga():
    s = parse("$GPGGA,034225.077,3356.4650,S,15124.5567,E,1,03,9.7,-25.0,M,21.0,M,,0000*51")
    assert type(s) is GGA
    assert s.time == Time(True, 3, 42, 25, 77)
    assert s.latitude == pytest.approx(-33.941083, abs=1E-5)
    assert s.longitude == pytest.approx(151.409278, abs=1E-5)
    assert s.fix_quality == "1"
    assert s.num_satellites == 3
    assert s.hdop == 9.7
    assert s.altitude == -25.0
    assert s.separation == 21.0
    assert s.dgps_age == 0.0
    assert s.dgps_id == "0000"

    with pytest.raises(FieldParseError) as e:
        parse("$GPGGA,034225.077,3356.4650,S,15124.5567,E,9,03,9.7,-25.0,M,21.0,M,,0000*59")
    assert e.value.name == "fix quality"


def test_gsa():
    s = parse("$GPGSA,A,3,22,19,18,27,14,03,,,,,,,3.1,2.0,2.4*36")
    assert type(s) is GSA
    assert s.mode == "A"
    assert s.fix_type == "3"
    assert s.sv == ("22", "19", "18", "27", "14", "03"), "Empty satellite slots are skipped"
    assert s.pdop == 3.1
    assert s.hdop == 2.0
    assert s.vdop == 2.4

    with pytest.raises(FieldCountError):
        parse("$GPGSA,A,3,22,19*38")


def test_gsv():
    s = parse("$GPGSV,3,1,11,09,76,148,32,05,55,242,29,17,33,054,30,14,27,314,24*71")
    assert type(s) is GSV
    assert s.total_messages == 3
    assert s.message_number == 1
    assert s.num_satellites == 11
    assert len(s.info) == 4
    assert s.info[0] == SatelliteInfo(prn=9, elevation=76, azimuth=148, snr=32)
    assert s.info[3] == SatelliteInfo(prn=14, elevation=27, azimuth=314, snr=24)

    s = parse("$GPGSV,1,1,03,09,76,148,32,05,55,242,29,17,33,054,*43")
    assert len(s.info) == 3
    assert s.info[2].snr == 0, "Satellite without SNR"

    s = parse("$GNGSV,3,1,11,09,76,148,32,05,55,242,29,17,33,054,30,14,27,314,24,1*72")
    assert len(s.info) == 4, "Trailing signal id is not a satellite"

    with pytest.raises(FieldParseError) as e:
        parse("$GPGSV,1,1,03,09,76,148,32,05,55,242,29,17,33*72")
    assert e.value.name == "satellite info", "Incomplete satellite group is reported"
    assert e.value.index == 11
    assert len(e.value.sentence.info) == 2


def test_gll():
    s = parse("$GPGLL,3926.7952,N,12000.5947,W,022732,A,A*58")
    assert type(s) is GLL
    assert s.latitude == pytest.approx(39.446587, abs=1E-5)
    assert s.longitude == pytest.approx(-120.009912, abs=1E-5)
    assert s.time == Time(True, 2, 27, 32, 0)
    assert s.validity == "A"

    with pytest.raises(FieldParseError) as e:
        parse("$GPGLL,3926.7952,E,12000.5947,W,022732,A*3E")
    assert e.value.name == "latitude", "Latitude must be north or south"

    with pytest.raises(FieldParseError) as e:
        parse("$GPGLL,9126.7952,N,12000.5947,W,022732,A*37")
    assert e.value.name == "latitude", "Latitude out of range"


def test_vtg():
    s = parse("$GPVTG,45.5,T,67.5,M,30.45,N,97.5,K*77")
    assert type(s) is VTG
    assert s.true_track == 45.5
    assert s.magnetic_track == 67.5
    assert s.ground_speed_knots == 30.45
    assert s.ground_speed_kph == 97.5


def test_zda():
    s = parse("$GPZDA,172809.456,12,07,1996,00,00*57")
    assert type(s) is ZDA
    assert s.time == Time(True, 17, 28, 9, 456)
    assert (s.day, s.month, s.year) == (12, 7, 1996)
    assert (s.offset_hours, s.offset_minutes) == (0, 0)

    s = parse("$GPZDA,172809.456,12,07,1996,-05,00*7F")
    assert s.offset_hours == -5


def test_gns():
    s = parse("$GNGNS,014035.00,4332.69262,S,17235.48549,E,RR,13,0.9,25.63,11.24,,*70")
    assert type(s) is GNS
    assert s.time == Time(True, 1, 40, 35, 0)
    assert s.latitude == pytest.approx(-43.544877, abs=1E-5)
    assert s.longitude == pytest.approx(172.591425, abs=1E-5)
    assert s.mode == ("R", "R")
    assert s.num_satellites == 13
    assert s.hdop == 0.9
    assert s.altitude == 25.63
    assert s.separation == 11.24
    assert s.dgps_age == 0.0
    assert s.dgps_id == 0

    with pytest.raises(FieldParseError) as e:
        parse("$GNGNS,014035.00,4332.69262,S,17235.48549,E,RX,13,0.9,25.63,11.24,,*7A")
    assert e.value.name == "mode"


def test_depth_sentences():
    s = parse("$SDDBT,12.1,f,3.7,M,2.0,F*32")
    assert type(s) is DBT
    assert s.talker == "SD"
    assert s.depth_feet == 12.1
    assert s.feet == "f"
    assert s.depth_meters == 3.7
    assert s.meters == "M"
    assert s.depth_fathoms == 2.0
    assert s.fathoms == "F"

    assert type(parse("$SDDBS,12.1,f,3.7,M,2.0,F*35")) is DBS
    assert type(parse("$SDDBK,12.1,f,3.7,M,2.0,F*2D")) is DBK

    s = parse("$GPDPT,2.80,-0.30,100.0*70")
    assert type(s) is DPT
    assert (s.depth, s.offset, s.range_scale) == (2.8, -0.3, 100.0)

    s = parse("$SDDPT,0.5,0.5*57")
    assert s.range_scale == 0.0, "Range scale is optional"


def test_heading_sentences():
    s = parse("$HEHDT,274.07,T*19")
    assert type(s) is HDT
    assert s.heading == 274.07
    assert s.true

    assert not parse("$HEHDT,274.07,*4D").true

    s = parse("$HEHDG,98.3,0.0,E,12.6,W*51")
    assert type(s) is HDG
    assert s.heading == 98.3
    assert s.deviation_direction == "E"
    assert s.variation == 12.6
    assert s.variation_direction == "W"

    s = parse("$HEROT,-3.9,A*0C")
    assert type(s) is ROT
    assert s.rate_of_turn == -3.9
    assert s.valid

    s = parse("$INTHS,338.01,A*1E")
    assert type(s) is THS
    assert s.heading == 338.01
    assert s.status == "A"

    s = parse("$IIVHW,10.1,T,20.2,M,30.3,N,40.4,K*55")
    assert type(s) is VHW
    assert s.true_heading == 10.1
    assert s.magnetic_heading == 20.2
    assert s.speed_through_water_knots == 30.3
    assert s.speed_through_water_kph == 40.4


def test_route_sentences():
    s = parse("$IIWPL,5503.4530,N,01037.2742,E,411*6F")
    assert type(s) is WPL
    assert s.latitude == pytest.approx(55.057550, abs=1E-5)
    assert s.longitude == pytest.approx(10.621237, abs=1E-5)
    assert s.ident == "411"

    s = parse("$GPRTE,2,1,c,0,W3IWI,DRIVWY,32CEDR,32-29,32BKLD,32-I95,32-US1,BW-32,BW-198*69")
    assert type(s) is RTE
    assert s.number_of_sentences == 2
    assert s.sentence_number == 1
    assert s.active_route_or_waypoint_list == "c"
    assert s.name == "0"
    assert s.idents == ("W3IWI", "DRIVWY", "32CEDR", "32-29", "32BKLD", "32-I95", "32-US1", "BW-32", "BW-198")


def test_alc():
    s = parse("$IIALC,02,01,03,02,FEB,01,02,03,,3016,1,7*0F")
    assert type(s) is ALC
    assert s.num_fragments == 2
    assert s.fragment_number == 1
    assert s.message_id == 3
    assert s.entries_number == 2
    assert s.entries == (
        AlertEntry(manufacturer_mnemonic_code="FEB", alert_identifier=1, alert_instance=2, revision_counter=3),
        AlertEntry(manufacturer_mnemonic_code="", alert_identifier=3016, alert_instance=1, revision_counter=7)
    )

    assert len(parse("$IIALC,02,01,03,01,FEB,01,02,03*0E").entries) == 1

    with pytest.raises(FieldParseError) as e:
        parse("$IIALC,02,01,03,01,FEB,01*0F")
    assert e.value.name == "alert entry", "Incomplete alert entry is reported"
    assert e.value.index == 4


def test_alf():
    s = parse("$VRALF,1,1,1,220516.00,B,A,S,SAL,001,1,2,0,My alarm*15")
    assert type(s) is ALF
    assert (s.num_fragments, s.fragment_number, s.message_id) == (1, 1, 1)
    assert s.time == Time(True, 22, 5, 16, 0)
    assert s.category == "B"
    assert s.priority == "A"
    assert s.state == "S"
    assert s.manufacturer_mnemonic_code == "SAL"
    assert s.alert_identifier == 1
    assert s.alert_instance == 1
    assert s.revision_counter == 2
    assert s.escalation_counter == 0
    assert s.text == "My alarm"

    with pytest.raises(FieldParseError) as e:
        parse("$VRALF,1,1,1,220516.00,D,A,S,SAL,001,1,2,0,My alarm*13")
    assert e.value.name == "alert category"


def test_alr():
    s = parse("$RAALR,220516,001,A,V,Bilge pump alarm1*5B")
    assert type(s) is ALR
    assert s.time == Time(True, 22, 5, 16, 0)
    assert s.alarm_identifier == 1
    assert s.condition == "A"
    assert s.state == "V"
    assert s.description == "Bilge pump alarm1"


def test_arc():
    s = parse("$RAARC,220516,TCK,002,1,A*73")
    assert type(s) is ARC
    assert s.manufacturer_mnemonic_code == "TCK"
    assert s.alert_identifier == 2
    assert s.alert_instance == 1
    assert s.command == "A"

    with pytest.raises(FieldParseError) as e:
        parse("$RAARC,220516,TCK,002,1,X*6A")
    assert e.value.name == "refused command"


def test_hbt():
    s = parse("$AIHBT,30.0,A,3*15")
    assert type(s) is HBT
    assert s.interval == 30.0
    assert s.status == "A"
    assert s.id == "3"


def test_pgrme():
    s = parse("$PGRME,3.3,M,4.9,M,6.0,M*25")
    assert type(s) is PGRME
    assert s.talker == "P"
    assert s.type == "GRME"
    assert s.prefix == "PGRME"
    assert (s.horizontal, s.vertical, s.spherical) == (3.3, 4.9, 6.0)

    with pytest.raises(FieldParseError) as e:
        parse("$PGRME,3.3,M,4.9,X,6.0,M*30")
    assert e.value.name == "vertical error unit"


def test_vdm_vdo():
    s = parse("!AIVDM,1,1,,A,13aGmP0P00PD;88MD5MTDww@2<0L,0*23")
    assert type(s) is VDMVDO
    assert s.num_fragments == 1
    assert s.fragment_number == 1
    assert s.message_id == 0
    assert s.channel == "A"
    assert len(s.payload) == 168
    assert s.payload[:6] == bytes([0, 0, 0, 0, 0, 1])
    assert not s.own_vessel

    s = parse("!AIVDO,1,1,,B,13aGmP0P00PD;88MD5MTDww@2<0L,0*22")
    assert s.own_vessel
    assert s.channel == "B"

    with pytest.raises(FieldParseError) as e:
        parse("!AIVDM,1,1,,A,13aGmP0P00PD;88MD5MTDww@2<0L,7*24")
    assert e.value.name == "data", "Too many fill bits"


def test_decoder_type_assertion():
    with pytest.raises(TypeMismatchError) as e:
        RMC.decode(parse_sentence("$GPGLL,3926.7952,N,12000.5947,W,022732,A,A*58"))
    assert e.value.expected == ("RMC",)
    assert e.value.actual == "GLL"
    assert type(e.value.sentence) is RMC


def test_decoded_sentence_base_capabilities():
    raw = "$GPRMC,220516,A,5133.82,N,00042.24,W,173.8,231.8,130694,004.2,W*70"
    for s in (parse(raw), parse("$SDDBT,12.1,f,3.7,M,2.0,F*32"), parse("$PGRME,3.3,M,4.9,M,6.0,M*25")):
        d = s.to_dict()
        for key in ("talker", "type", "fields", "checksum", "raw"):
            assert key in d, "Base keys are present for every sentence type"
        assert d["talker"] == s.talker
        assert d["type"] == s.type
        assert d["raw"] == s.raw == str(s)

    d = parse(raw).to_dict()
    assert d["time"] == "22:05:16.000"
    assert d["date"] == "13/06/94"
    assert d["variation"] == -4.2
    assert d["validity"] == "A"

    d = parse("$GPGSV,3,1,11,09,76,148,32,05,55,242,29,17,33,054,30,14,27,314,24*71").to_dict()
    assert d["info"][0] == {"prn": 9, "elevation": 76, "azimuth": 148, "snr": 32}

    d = parse("!AIVDM,1,1,,A,13aGmP0P00PD;88MD5MTDww@2<0L,0*23").to_dict()
    assert d["payload"].startswith("000001")


def test_decoded_sentence_is_immutable():
    s = parse("$SDDBT,12.1,f,3.7,M,2.0,F*32")
    with pytest.raises(AttributeError):
        s.depth_feet = 1.0
