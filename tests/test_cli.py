"""Tests for the fzp-validator command line."""

from pathlib import Path

import pytest

from fzp_validator import __version__
from fzp_validator.cli import build_parser, main
from fzp_validator.config import CONFIG_ENV_VAR

from conftest import MISSING_MODULE_ID_FZP


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestHelp:
    def test_no_command_shows_help(self, capsys) -> None:
        assert main([]) == 0
        assert "validate" in capsys.readouterr().out

    def test_validate_without_target_shows_usage(self, capsys) -> None:
        assert main(["validate"]) == 0
        out = capsys.readouterr().out
        assert "--no-check-moduleid" in out
        assert "USAGE-SAMPLES" in out
        assert "fzp-validator validate -d file/dir" in out

    def test_version(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_short_flags(self) -> None:
        args = build_parser().parse_args(["validate", "-f", "x.fzp", "-nm", "-nD", "-nd", "-V"])
        assert args.file == "x.fzp"
        assert args.no_check_moduleid
        assert args.no_check_family
        assert args.no_check_description
        assert not args.no_check_title
        assert args.verbose


class TestValidateFile:
    def test_valid_file(self, write_fzp, capsys) -> None:
        assert main(["validate", "--file", str(write_fzp("a.fzp"))]) == 0
        assert capsys.readouterr().out == ""

    def test_invalid_file(self, write_fzp, capsys) -> None:
        path = write_fzp("b.fzp", MISSING_MODULE_ID_FZP)
        assert main(["validate", "--file", str(path)]) == 1
        assert capsys.readouterr().out.splitlines() == ["=> Missing moduleId", f"1 Errors @ {path}"]

    def test_disable_flag(self, write_fzp, capsys) -> None:
        path = write_fzp("b.fzp", MISSING_MODULE_ID_FZP)
        assert main(["validate", "-f", str(path), "--no-check-moduleid"]) == 0
        assert capsys.readouterr().out == ""

    def test_load_failure(self, write_fzp, capsys) -> None:
        path = write_fzp("broken.fzp", "<module")
        assert main(["validate", "-f", str(path)]) == 1
        out = capsys.readouterr().out
        assert out.startswith("validator failed @ ")
        assert "Errors @" not in out

    def test_missing_file(self, tmp_path: Path, capsys) -> None:
        assert main(["validate", "-f", str(tmp_path / "missing.fzp")]) == 1
        assert "not found" in capsys.readouterr().out

    def test_verbose(self, write_fzp, capsys) -> None:
        path = write_fzp("a.fzp")
        assert main(["validate", "-f", str(path), "-V"]) == 0
        out = capsys.readouterr().out
        assert f"fzp file '{path}' successful read" in out
        assert "fzp valid" in out


class TestValidateDirectory:
    def test_mixed_directory(self, tmp_path: Path, write_fzp, capsys) -> None:
        write_fzp("a.fzp")
        b = write_fzp("b.fzp", MISSING_MODULE_ID_FZP)
        write_fzp("c.txt", "ignored")

        assert main(["validate", "--dir", str(tmp_path)]) == 1
        out = capsys.readouterr().out
        assert f"1 Errors @ {b}" in out
        assert "a.fzp" not in out
        assert "c.txt" not in out

    def test_unknown_encoding_reported_not_raised(self, tmp_path: Path, write_fzp, capsys) -> None:
        write_fzp("a.fzp", '<?xml version="1.0" encoding="bogus-enc"?><module moduleId="m"/>')
        write_fzp("b.fzp", MISSING_MODULE_ID_FZP)

        assert main(["validate", "-d", str(tmp_path)]) == 1
        out = capsys.readouterr().out
        assert "validator failed @ Error parsing fzp file" in out
        assert "1 Errors @" in out

    def test_all_valid(self, tmp_path: Path, write_fzp) -> None:
        write_fzp("a.fzp")
        write_fzp("b.fzp")
        assert main(["validate", "-d", str(tmp_path)]) == 0

    def test_unreadable_directory(self, tmp_path: Path, capsys) -> None:
        missing = tmp_path / "missing"
        assert main(["validate", "-d", str(missing)]) == 1
        assert capsys.readouterr().out.strip() == f"validator failed @ read folder '{missing}'"

    def test_verbose_folder_message(self, tmp_path: Path, capsys) -> None:
        assert main(["validate", "-d", str(tmp_path), "--verbose"]) == 0
        assert f"read folder '{tmp_path}'" in capsys.readouterr().out


class TestConfigFile:
    def test_config_file_disables_check(self, tmp_path: Path, write_fzp) -> None:
        path = write_fzp("b.fzp", MISSING_MODULE_ID_FZP)
        config = tmp_path / "config.yaml"
        config.write_text("disabled_checks: [moduleid]\n", encoding="utf-8")
        assert main(["validate", "-f", str(path), "--config", str(config)]) == 0

    def test_config_from_environment(self, tmp_path: Path, write_fzp, monkeypatch) -> None:
        path = write_fzp("b.fzp", MISSING_MODULE_ID_FZP)
        config = tmp_path / "config.yaml"
        config.write_text("disabled_checks: [moduleid]\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config))
        assert main(["validate", "-f", str(path)]) == 0

    def test_strict_properties_flag(self, write_fzp) -> None:
        path = write_fzp(
            "p.fzp",
            "<module moduleId='m1'><title>LED</title>"
            "<properties><property name='color'/></properties></module>",
        )
        assert main(["validate", "-f", str(path)]) == 0
        assert main(["validate", "-f", str(path), "--strict-properties"]) == 1

    def test_invalid_config_file(self, tmp_path: Path, write_fzp, capsys) -> None:
        config = tmp_path / "config.yaml"
        config.write_text("disabled_checks: [author]\n", encoding="utf-8")
        assert main(["validate", "-f", str(write_fzp("a.fzp")), "--config", str(config)]) == 1
        assert "Invalid configuration" in capsys.readouterr().err
