import pytest

from weather_relay.units import (
    DistanceUnit,
    DurationUnit,
    PressureUnit,
    SpeedUnit,
    TemperatureUnit,
    format_number,
    format_percent,
)


def test_temperature_conversions_from_celsius():
    assert TemperatureUnit.C.convert_unit(21.5) == 21.5
    assert TemperatureUnit.F.convert_unit(20) == pytest.approx(68.0)
    assert TemperatureUnit.F.convert_unit(-40) == pytest.approx(-40.0)
    assert TemperatureUnit.K.convert_unit(0) == pytest.approx(273.15)


def test_temperature_text_uses_preferred_unit():
    assert TemperatureUnit.F.get_value_text(20, 0) == "68°F"
    assert TemperatureUnit.F.get_short_value_text(20) == "68°"
    assert TemperatureUnit.C.get_value_text(21.46) == "21.5°C"
    assert TemperatureUnit.C.get_short_value_text(21.46) == "21°"


def test_distance_and_speed_conversions():
    assert DistanceUnit.KM.convert_unit(10000) == pytest.approx(10.0)
    assert DistanceUnit.MI.convert_unit(1609.344) == pytest.approx(1.0)
    assert DistanceUnit.FT.convert_unit(0.3048) == pytest.approx(1.0)
    assert DistanceUnit.KM.get_value_text(10000) == "10 km"
    assert SpeedUnit.KPH.convert_unit(10) == pytest.approx(36.0)
    assert SpeedUnit.KN.convert_unit(1852 / 3600) == pytest.approx(1.0)
    assert SpeedUnit.KPH.get_value_text(10) == "36 km/h"


def test_pressure_conversions_from_millibars():
    assert PressureUnit.HPA.convert_unit(1013.25) == pytest.approx(1013.25)
    assert PressureUnit.ATM.convert_unit(1013.25) == pytest.approx(1.0)
    assert PressureUnit.INHG.convert_unit(1013.25) == pytest.approx(29.92, abs=0.01)
    assert PressureUnit.INHG.get_value_text(1013.25) == "29.92 inHg"
    assert PressureUnit.MB.get_value_text(1013.25) == "1013.3 mb"


def test_duration_is_identity_in_hours():
    assert DurationUnit.H.convert_unit(6.5) == 6.5
    assert DurationUnit.H.get_value_text(6.5) == "6.5 h"


def test_from_id_is_case_insensitive_and_rejects_unknown_ids():
    assert TemperatureUnit.from_id("F") is TemperatureUnit.F
    assert PressureUnit.from_id("inhg") is PressureUnit.INHG
    with pytest.raises(ValueError):
        DistanceUnit.from_id("furlong")


def test_number_and_percent_formatting():
    assert format_number(12.0, 1) == "12"
    assert format_number(-0.2, 0) == "0"
    assert format_number(2.346, 2) == "2.35"
    assert format_percent(75.4) == "75%"
    assert format_percent(0.5) == "1%"


def test_rounding_follows_decimal_text_not_binary_float():
    assert format_number(1.005, 2) == "1.01"
    assert format_number(0.125, 2) == "0.13"
    assert format_number(-2.5, 0) == "-3"
    assert TemperatureUnit.C.get_value_text(21.25) == "21.3°C"
