"""
Tests for the command line entry point.
"""
import pytest
from PIL import Image

from crush import __version__
from crush.cli import main


class TestMain:

    def test_success(self, png_file, tmp_path):
        out = tmp_path / "small.jpg"
        assert main([str(png_file), "-o", str(out), "-s", "50k"]) == 0
        assert out.read_bytes()[:2] == b"\xff\xd8"

    def test_long_options(self, png_file, tmp_path):
        out = tmp_path / "small.jpg"
        assert main([str(png_file), "--output", str(out), "--size-target", "1M"]) == 0
        assert out.exists()

    def test_default_output_name(self, png_file, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert main([str(png_file)]) == 0
        assert (tmp_path / "output.jpg").exists()

    def test_bad_size_target(self, png_file, tmp_path, caplog):
        out = tmp_path / "small.jpg"
        assert main([str(png_file), "-o", str(out), "-s", "lots"]) == 1
        assert not out.exists()
        assert "Invalid size target" in caplog.text
        assert any(r.name == "crush.cli" and r.levelname == "ERROR" for r in caplog.records)

    def test_missing_input(self, tmp_path):
        out = tmp_path / "small.jpg"
        assert main([str(tmp_path / "missing.png"), "-o", str(out)]) == 1
        assert not out.exists()

    def test_input_required(self):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 2

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_max_dimension_from_env(self, png_file, tmp_path, monkeypatch):
        monkeypatch.setenv("CRUSH_MAX_DIMENSION", "200")
        out = tmp_path / "small.jpg"
        assert main([str(png_file), "-o", str(out)]) == 0
        with Image.open(out) as result:
            assert result.size == (200, 150)

    def test_bad_env(self, png_file, tmp_path, monkeypatch):
        monkeypatch.setenv("CRUSH_MAX_DIMENSION", "huge")
        out = tmp_path / "small.jpg"
        assert main([str(png_file), "-o", str(out)]) == 1
        assert not out.exists()
