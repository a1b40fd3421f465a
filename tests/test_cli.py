import string
from pathlib import Path

import srsly
from typer.testing import CliRunner

from randstr.cli import app

runner = CliRunner()


def _lines(output: str) -> list[str]:
    return [line for line in output.splitlines() if line]


class TestGenerate:
    def test_generate_to_stdout(self) -> None:
        result = runner.invoke(
            app, ["generate", "--upper", "-l", "12", "-n", "3", "-s", "1"]
        )

        assert result.exit_code == 0
        values = _lines(result.stdout)
        assert len(values) == 3
        for value in values:
            assert len(value) == 12
            assert set(value) <= set(string.ascii_uppercase)

    def test_seed_is_reproducible(self) -> None:
        args = ["generate", "--all", "--must-digit", "-l", "10", "-s", "7"]
        first = runner.invoke(app, args)
        second = runner.invoke(app, args)

        assert first.exit_code == 0
        assert first.stdout == second.stdout

    def test_must_flags_apply(self) -> None:
        result = runner.invoke(
            app,
            [
                "generate",
                "--letter",
                "--must-digit",
                "--must-custom",
                "#",
                "-l",
                "4",
                "-n",
                "20",
            ],
        )

        assert result.exit_code == 0
        for value in _lines(result.stdout):
            assert "#" in value
            assert any(c.isdigit() for c in value)

    def test_no_alphabet_exits_1(self) -> None:
        result = runner.invoke(app, ["generate", "-l", "8"])

        assert result.exit_code == 1
        assert "No alphabet" in result.output

    def test_too_short_exits_1(self) -> None:
        result = runner.invoke(
            app, ["generate", "--must-upper", "--must-digit", "-l", "1"]
        )

        assert result.exit_code == 1
        assert "too short" in result.output

    def test_negative_length_rejected(self) -> None:
        result = runner.invoke(app, ["generate", "--digit", "-l", "-3"])

        assert result.exit_code != 0

    def test_empty_must_custom_rejected(self) -> None:
        result = runner.invoke(
            app, ["generate", "--digit", "-l", "3", "--must-custom", ""]
        )

        assert result.exit_code == 1
        assert "no characters" in result.output

    def test_non_ascii_custom_rejected(self, tmp_path: Path) -> None:
        saved = tmp_path / "saved.json"
        result = runner.invoke(
            app,
            [
                "generate",
                "--custom",
                "\u00e9t\u00e9",
                "-l",
                "3",
                "--save-config",
                str(saved),
            ],
        )

        assert result.exit_code == 1
        assert "ASCII" in result.output
        assert not saved.exists()

    def test_output_jsonl(self, tmp_path: Path) -> None:
        output = tmp_path / "out.jsonl"
        result = runner.invoke(
            app,
            ["generate", "--digit", "-l", "6", "-n", "4", "-o", str(output)],
        )

        assert result.exit_code == 0
        assert "Generated 4 strings" in result.stdout
        rows = list(srsly.read_jsonl(output))
        assert len(rows) == 4
        assert all(len(row["value"]) == 6 for row in rows)
        assert all(row["value"].isdigit() for row in rows)


class TestPresetsAndConfig:
    def test_preset(self) -> None:
        result = runner.invoke(
            app, ["generate", "--preset", "password", "-n", "2"]
        )

        assert result.exit_code == 0
        values = _lines(result.stdout)
        assert len(values) == 2
        assert all(len(v) == 16 for v in values)

    def test_preset_length_override(self) -> None:
        result = runner.invoke(app, ["generate", "-p", "pin", "-l", "4"])

        assert result.exit_code == 0
        assert _lines(result.stdout)[0].isdigit()
        assert len(_lines(result.stdout)[0]) == 4

    def test_unknown_preset(self) -> None:
        result = runner.invoke(app, ["generate", "--preset", "nope"])

        assert result.exit_code == 2

    def test_config_file(self, tmp_path: Path) -> None:
        config_path = tmp_path / "cfg.json"
        srsly.write_json(
            config_path, {"lower": True, "must_lower": True, "length": 9}
        )
        result = runner.invoke(
            app, ["generate", "--config", str(config_path), "-n", "3"]
        )

        assert result.exit_code == 0
        values = _lines(result.stdout)
        assert len(values) == 3
        for value in values:
            assert len(value) == 9
            assert set(value) <= set(string.ascii_lowercase)

    def test_invalid_config_file(self, tmp_path: Path) -> None:
        config_path = tmp_path / "cfg.json"
        srsly.write_json(config_path, {"digit": True, "length": True})
        result = runner.invoke(
            app, ["generate", "--config", str(config_path)]
        )

        assert result.exit_code == 1
        assert "bool is not allowed" in result.output

    def test_config_file_must_flag_enables_class(self, tmp_path: Path) -> None:
        config_path = tmp_path / "cfg.json"
        srsly.write_json(config_path, {"must_upper": True, "length": 5})
        result = runner.invoke(
            app, ["generate", "--config", str(config_path)]
        )

        assert result.exit_code == 0
        value = _lines(result.stdout)[0]
        assert len(value) == 5
        assert set(value) <= set(string.ascii_uppercase)

    def test_missing_config_file(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["generate", "--config", str(tmp_path / "missing.json")]
        )

        assert result.exit_code == 1
        assert "cannot read" in result.output

    def test_preset_and_config_conflict(self, tmp_path: Path) -> None:
        config_path = tmp_path / "cfg.json"
        srsly.write_json(config_path, {"digit": True, "length": 4})
        result = runner.invoke(
            app,
            ["generate", "-p", "pin", "--config", str(config_path)],
        )

        assert result.exit_code == 1
        assert "Cannot use both" in result.output

    def test_save_config(self, tmp_path: Path) -> None:
        saved = tmp_path / "saved.json"
        result = runner.invoke(
            app,
            [
                "generate",
                "--all",
                "--must-symbol",
                "-l",
                "5",
                "--save-config",
                str(saved),
            ],
        )

        assert result.exit_code == 0
        data = srsly.read_json(saved)
        assert data["letter"] is True
        assert data["must_symbol"] is True
        assert data["length"] == 5


class TestListing:
    def test_classes(self) -> None:
        result = runner.invoke(app, ["classes"])

        assert result.exit_code == 0
        assert "upper" in result.stdout
        assert "0123456789" in result.stdout
        assert len(_lines(result.stdout)) == 6

    def test_presets(self) -> None:
        result = runner.invoke(app, ["presets"])

        assert result.exit_code == 0
        for name in ("password", "alphanumeric", "pin", "token", "hex"):
            assert name in result.stdout


class TestLogging:
    def test_log_level_debug(self) -> None:
        result = runner.invoke(
            app, ["--log-level", "DEBUG", "generate", "--digit", "-l", "3"]
        )

        assert result.exit_code == 0

    def test_invalid_log_level(self) -> None:
        result = runner.invoke(
            app, ["--log-level", "LOUD", "generate", "--digit"]
        )

        assert result.exit_code == 2
