"""Tests for QR, PDF417 and MaxiCode commands."""

import pytest

from thermalpos.encoders.symbols import encode_maxicode, encode_pdf417, encode_qr
from thermalpos.errors import UnknownConfigurationKey, ValueOutOfRange
from thermalpos.models.settings import PDF417Settings, QRSettings

QR_MODEL_1 = b"\x1d\x28\x6b\x04\x00\x31\x41\x31\x00"
QR_MODEL_2 = b"\x1d\x28\x6b\x04\x00\x31\x41\x32\x00"
QR_PRINT = b"\x1d\x28\x6b\x03\x00\x31\x51\x30"


def qr_cell_size(n: int) -> bytes:
    return b"\x1d\x28\x6b\x03\x00\x31\x43" + bytes([n])


def qr_correction(n: int) -> bytes:
    return b"\x1d\x28\x6b\x03\x00\x31\x45" + bytes([n])


def store(symbol: int, payload: bytes) -> bytes:
    size = len(payload) + 3
    return b"\x1d\x28\x6b" + bytes([size % 256, size // 256, symbol, 0x50, 0x30]) + payload


class TestQR:
    """Tests for encode_qr."""

    def test_defaults(self):
        expected = QR_MODEL_2 + qr_cell_size(3) + qr_correction(0x31) + store(0x31, b"hello") + QR_PRINT
        assert encode_qr("hello") == expected

    def test_length_field(self):
        output = encode_qr("hello")
        idx = output.index(b"\x31\x50\x30")
        assert output[idx - 2 : idx] == bytes([8, 0])

    def test_long_payload_uses_high_byte(self):
        payload = "x" * 300
        output = encode_qr(payload)
        assert store(0x31, payload.encode()) in output
        assert b"\x1d\x28\x6b\x2f\x01\x31\x50\x30" in output

    def test_custom_settings(self):
        output = encode_qr("data", {"model": 1, "cellSize": 6, "correction": "h"})
        assert output == QR_MODEL_1 + qr_cell_size(6) + qr_correction(0x33) + store(0x31, b"data") + QR_PRINT

    def test_settings_model(self):
        output = encode_qr("data", QRSettings(cell_size="8", correction="L"))
        assert output.startswith(QR_MODEL_2 + qr_cell_size(8) + qr_correction(0x30))

    def test_unknown_model_uses_model_2(self):
        assert encode_qr("a", {"model": 7}).startswith(QR_MODEL_2)

    def test_bytes_payload(self):
        assert store(0x31, b"\x00\xff") in encode_qr(b"\x00\xff")

    def test_utf8_payload_length_counts_bytes(self):
        output = encode_qr("é")
        assert store(0x31, "é".encode()) in output

    @pytest.mark.parametrize("cell_size", ["0", "9", "large", "3.5"])
    def test_unknown_cell_size(self, cell_size):
        with pytest.raises(UnknownConfigurationKey, match="cell size"):
            encode_qr("data", {"cellSize": cell_size})

    def test_unknown_correction(self):
        with pytest.raises(UnknownConfigurationKey, match="error correction"):
            encode_qr("data", {"correction": "X"})

    def test_unknown_key_is_lookup_error(self):
        with pytest.raises(LookupError):
            encode_qr("data", {"correction": "medium"})


PDF417_PRINT = b"\x1d\x28\x6b\x03\x00\x30\x51\x30"


def pdf417_commands(correction=1, row_height=3, width=3, columns=0, truncated=False) -> bytes:
    return (
        b"\x1d\x28\x6b\x04\x00\x30\x45\x31"
        + bytes([correction])
        + b"\x1d\x28\x6b\x03\x00\x30\x44"
        + bytes([row_height])
        + b"\x1d\x28\x6b\x03\x00\x30\x43"
        + bytes([width])
        + b"\x1d\x28\x6b\x03\x00\x30\x41"
        + bytes([columns])
        + b"\x1d\x28\x6b\x03\x00\x30\x46"
        + bytes([1 if truncated else 0])
    )


class TestPDF417:
    """Tests for encode_pdf417."""

    def test_defaults(self):
        assert encode_pdf417("12345") == pdf417_commands() + store(0x30, b"12345") + PDF417_PRINT

    def test_parameters_are_emitted_verbatim_in_order(self):
        settings = {"correction": 40, "rowHeight": 8, "width": 2, "columns": 30, "truncated": True}
        expected = pdf417_commands(40, 8, 2, 30, True) + store(0x30, b"abc") + PDF417_PRINT
        assert encode_pdf417("abc", settings) == expected

    def test_settings_model(self):
        output = encode_pdf417("abc", PDF417Settings(row_height=2, columns=1))
        assert output.startswith(pdf417_commands(row_height=2, columns=1))

    @pytest.mark.parametrize(
        "settings",
        [
            {"correction": 0},
            {"correction": 41},
            {"rowHeight": 1},
            {"rowHeight": 9},
            {"width": 1},
            {"width": 9},
            {"columns": 31},
            {"columns": -1},
        ],
    )
    def test_out_of_range(self, settings):
        with pytest.raises(ValueOutOfRange):
            encode_pdf417("abc", settings)


MAXICODE_PRINT = b"\x1d\x28\x6b\x03\x00\x32\x51\x30"


def maxicode_mode(mode: int) -> bytes:
    return b"\x1d\x28\x6b\x03\x00\x32\x41" + bytes([0x30 + mode])


class TestMaxiCode:
    """Tests for encode_maxicode."""

    def test_default_mode(self):
        assert encode_maxicode("data") == maxicode_mode(4) + store(0x32, b"data") + MAXICODE_PRINT

    @pytest.mark.parametrize("mode", [2, 3, 4, 5, 6])
    def test_supported_modes(self, mode):
        assert encode_maxicode("data", {"mode": mode}).startswith(maxicode_mode(mode))

    @pytest.mark.parametrize("mode", [0, 1, 7, 99])
    def test_unsupported_modes_use_mode_4(self, mode):
        assert encode_maxicode("data", {"mode": mode}).startswith(maxicode_mode(4))
