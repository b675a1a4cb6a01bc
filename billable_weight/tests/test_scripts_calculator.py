"""
Tests for the command-line calculator

Run with: pytest billable_weight/tests/ -v
"""

import polars as pl
import pytest

from billable_weight.data import DimDivisor
from billable_weight.scripts import calculator as calculator_script
from billable_weight.scripts.calculator import (
    calculate_single,
    format_billable_weight,
    main,
)


class TestSinglePackage:

    def test_default_package(self, capsys):
        main([])

        assert capsys.readouterr().out.strip() == "7 lb"

    def test_custom_package(self, capsys):
        # 40 x 30 x 20 = 24000 cu in / 139 -> 173
        main(["--width", "40", "--height", "30", "--length", "20", "--weight", "75"])

        assert capsys.readouterr().out.strip() == "173 lb"

    def test_invalid_package_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--width", "81"])

        assert exc.value.code == 1
        assert "Error: Invalid package width" in capsys.readouterr().out

    def test_unknown_divisor_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--divisor", "UPS"])

        assert exc.value.code == 1
        assert "Error: Unknown dim divisor 'UPS'" in capsys.readouterr().out

    def test_divisor_name_case_insensitive(self, capsys):
        main(["--divisor", "fedex"])

        assert capsys.readouterr().out.strip() == "7 lb"

    def test_output_requires_csv(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--output", str(tmp_path / "results.csv")])

        assert exc.value.code == 2
        assert "--output requires --csv" in capsys.readouterr().err
        assert not (tmp_path / "results.csv").exists()

    def test_keyboard_interrupt_cancels(self, monkeypatch, capsys):
        def interrupted(*args, **kwargs):
            raise KeyboardInterrupt

        monkeypatch.setattr(calculator_script, "calculate_single", interrupted)

        with pytest.raises(SystemExit) as exc:
            main([])

        assert exc.value.code == 1
        assert "Cancelled." in capsys.readouterr().out

    def test_calculate_single(self):
        assert calculate_single(9, 7, 15, 6, DimDivisor.FEDEX) == 7

    def test_format(self):
        assert format_billable_weight(7) == "7 lb"


class TestBatch:

    def test_keyboard_interrupt_cancels(self, tmp_path, monkeypatch, capsys):
        def interrupted(*args, **kwargs):
            raise KeyboardInterrupt

        monkeypatch.setattr(calculator_script, "run_batch", interrupted)

        with pytest.raises(SystemExit) as exc:
            main(["--csv", str(tmp_path / "packages.csv")])

        assert exc.value.code == 1
        assert "Cancelled." in capsys.readouterr().out

    def test_csv_to_output(self, tmp_path, capsys):
        source = tmp_path / "packages.csv"
        output = tmp_path / "results.csv"
        pl.DataFrame({
            "width_in": [9, 1],
            "height_in": [7, 1],
            "length_in": [15, 1],
            "weight_lbs": [6, 150],
        }).write_csv(source)

        main(["--csv", str(source), "--output", str(output)])

        result = pl.read_csv(output)
        assert result["billable_weight_lbs"].to_list() == [7, 150]
        assert "Loaded 2 packages" in capsys.readouterr().out

    def test_invalid_csv_exits(self, tmp_path, capsys):
        source = tmp_path / "packages.csv"
        pl.DataFrame({
            "width_in": [9],
            "height_in": [7],
            "length_in": [15],
            "weight_lbs": [200],
        }).write_csv(source)

        with pytest.raises(SystemExit) as exc:
            main(["--csv", str(source)])

        assert exc.value.code == 1
        assert "Error: Invalid package weight" in capsys.readouterr().out
