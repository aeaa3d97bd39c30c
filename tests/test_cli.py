"""Tests for the thermalpos-render CLI."""

import argparse

import pytest
from PIL import Image

from thermalpos.cli.render import _override, main
from thermalpos.encoders.barcode import encode_barcode
from thermalpos.encoders.raster import encode_raster
from thermalpos.encoders.symbols import encode_maxicode, encode_pdf417, encode_qr
from thermalpos.errors import MalformedInput
from thermalpos.imaging import image_from_pil
from thermalpos.models.settings import QRSettings


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run each CLI test in an empty directory so no config file is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestRenderCLI:
    """Tests for main()."""

    def test_qr(self, tmp_path):
        output = tmp_path / "qr.bin"
        assert main(["-o", str(output), "qr", "hello", "--cell-size", "5"]) == 0
        assert output.read_bytes() == encode_qr("hello", {"cellSize": "5"})

    def test_pdf417(self, tmp_path):
        output = tmp_path / "pdf.bin"
        assert main(["-o", str(output), "pdf417", "abc", "--row-height", "4", "--truncated"]) == 0
        assert output.read_bytes() == encode_pdf417("abc", {"rowHeight": 4, "truncated": True})

    def test_maxicode(self, tmp_path):
        output = tmp_path / "maxi.bin"
        assert main(["-o", str(output), "maxicode", "abc", "--mode", "2"]) == 0
        assert output.read_bytes() == encode_maxicode("abc", {"mode": 2})

    def test_image(self, tmp_path):
        image = Image.new("RGBA", (4, 8), color=(0, 0, 0, 255))
        image.save(tmp_path / "logo.png")
        output = tmp_path / "logo.bin"

        assert main(["-o", str(output), "image", str(tmp_path / "logo.png"), "--dot-matrix"]) == 0
        assert output.read_bytes() == encode_raster(image_from_pil(image), {"dotMatrix": True})

    def test_config_defaults_are_used(self, tmp_path):
        (tmp_path / "profile.yaml").write_text("qr:\n  correction: H\n")
        output = tmp_path / "qr.bin"

        assert main(["-o", str(output), "-c", str(tmp_path / "profile.yaml"), "qr", "hi"]) == 0
        assert output.read_bytes() == encode_qr("hi", {"correction": "H"})

    def test_encoding_error_returns_1(self, tmp_path, capsys):
        output = tmp_path / "pdf.bin"
        assert main(["-o", str(output), "pdf417", "abc", "--correction", "99"]) == 1
        assert "PDF417 correction" in capsys.readouterr().err
        assert not output.exists()

    def test_unsupported_filetype_returns_1(self, tmp_path):
        assert main(["-o", str(tmp_path / "x.bin"), "image", "logo.bmp", "--filetype", "bmp"]) == 1

    def test_barcode(self, tmp_path):
        output = tmp_path / "barcode.bin"
        assert main(["-o", str(output), "barcode", "THERMAL-42", "--type", "73"]) == 0
        assert output.read_bytes() == encode_barcode("THERMAL-42", 73)

    def test_invalid_barcode_data_returns_1(self, tmp_path):
        output = tmp_path / "barcode.bin"
        assert main(["-o", str(output), "barcode", "not-digits", "--type", "2"]) == 1
        assert not output.exists()


class TestOverride:
    """Tests for merging CLI options into configured settings."""

    def test_options_are_validated(self):
        merged = _override(QRSettings(), argparse.Namespace(cell_size=4, model=None), "cell_size", "model")
        assert merged.cell_size == "4"
        assert merged.model == 2

    def test_invalid_option_raises(self):
        with pytest.raises(MalformedInput):
            _override(QRSettings(), argparse.Namespace(model="two"), "model")
