"""Tests for handing mappings to a device transport."""

import pytest

from padsmith.exceptions import TransportError, UnknownDeviceFamilyError, UnknownKeyError
from padsmith.models import Button, LedColor, LedSettings
from padsmith.services import apply_led_settings, program_device


class FakeTransport:
    """In-memory MacropadTransport."""

    def __init__(self, product_id=0x8840, fail_with=None):
        self._product_id = product_id
        self.fail_with = fail_with
        self.programmed = []
        self.leds = []

    @property
    def product_id(self):
        return self._product_id

    def program(self, macropad):
        if self.fail_with:
            raise self.fail_with
        self.programmed.append(macropad)

    def set_led(self, mode, layer, color):
        if self.fail_with:
            raise self.fail_with
        self.leds.append((mode, layer, color))


class TestProgramDevice:
    """Test program_device."""

    @pytest.mark.unit
    def test_programs_valid_mapping(self, mapped_macropad):
        transport = FakeTransport()
        report = program_device(transport, mapped_macropad)

        assert transport.programmed == [mapped_macropad]
        assert report.family.label == "0x8840/0x8842"

    @pytest.mark.unit
    def test_invalid_mapping_never_sent(self, default_macropad):
        default_macropad.layers[0].buttons[0][0] = Button(delay=0, mapping="foobar")
        transport = FakeTransport()

        with pytest.raises(UnknownKeyError):
            program_device(transport, default_macropad)
        assert transport.programmed == []

    @pytest.mark.unit
    def test_unknown_product_id(self, default_macropad):
        transport = FakeTransport(product_id=0x1234)
        with pytest.raises(UnknownDeviceFamilyError):
            program_device(transport, default_macropad)
        assert transport.programmed == []

    @pytest.mark.unit
    def test_single_layer_warnings_returned(self, default_macropad):
        default_macropad.layers[0].buttons[0][0] = Button(delay=20, mapping="a")
        transport = FakeTransport(product_id=0x8890)

        report = program_device(transport, default_macropad)

        assert report.has_warnings
        assert transport.programmed == [default_macropad]

    @pytest.mark.unit
    def test_transfer_failure_wrapped(self, default_macropad):
        transport = FakeTransport(fail_with=IOError("pipe error"))
        with pytest.raises(TransportError) as exc_info:
            program_device(transport, default_macropad)
        assert "pipe error" in str(exc_info.value)
        assert exc_info.value.operation == "programming"

    @pytest.mark.unit
    def test_transport_error_passes_through(self, default_macropad):
        error = TransportError("programming", "timeout")
        transport = FakeTransport(fail_with=error)
        with pytest.raises(TransportError) as exc_info:
            program_device(transport, default_macropad)
        assert exc_info.value is error


class TestApplyLedSettings:
    """Test apply_led_settings."""

    @pytest.mark.unit
    def test_sends_settings(self):
        transport = FakeTransport()
        apply_led_settings(transport, LedSettings(mode=2, layer=1, color=LedColor.RED))
        assert transport.leds == [(2, 1, LedColor.RED)]

    @pytest.mark.unit
    def test_failure_wrapped(self):
        transport = FakeTransport(fail_with=RuntimeError("stall"))
        with pytest.raises(TransportError) as exc_info:
            apply_led_settings(transport, LedSettings(mode=0, layer=1, color=LedColor.BLUE))
        assert exc_info.value.operation == "LED update"
