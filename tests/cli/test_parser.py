"""
Tests for the xgo command-line interface.
"""

import shlex
from pathlib import Path

import pytest

from xgokit.cli.parser import CLI

IMPORT_PATH = "github.com/project-iris/iris"


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_creation(self):
        cli = CLI()
        assert cli.parser is not None

    def test_version_flag(self, capsys):
        cli = CLI()

        with pytest.raises(SystemExit) as exc_info:
            cli.run(["--version"])

        assert exc_info.value.code == 0
        assert "xgo" in capsys.readouterr().out

    def test_unknown_flag_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            CLI().run(["-jobs", "4", IMPORT_PATH])

        assert exc_info.value.code == 2


class TestArgumentParsing:
    """Test flag parsing."""

    def test_defaults_are_unset(self):
        args = CLI().parse_args([IMPORT_PATH])

        assert args.import_paths == [IMPORT_PATH]
        for name in ("go", "pkg", "out", "remote", "branch", "deps", "targets"):
            assert getattr(args, name) is None
        assert args.v is None
        assert args.race is None
        assert args.dry_run is False

    def test_go_style_flags(self):
        args = CLI().parse_args(
            [
                "-go", "1.4.2",
                "-pkg", "cmd/iris",
                "-out", "iris",
                "-remote", "https://example.com/iris.git",
                "-branch", "develop",
                "-deps", "https://example.com/gmp.tar.bz2",
                "-targets", "linux64,darwin64",
                "-v",
                "-race",
                IMPORT_PATH,
            ]
        )

        assert args.go == "1.4.2"
        assert args.pkg == "cmd/iris"
        assert args.out == "iris"
        assert args.remote == "https://example.com/iris.git"
        assert args.branch == "develop"
        assert args.deps == "https://example.com/gmp.tar.bz2"
        assert args.targets == "linux64,darwin64"
        assert args.v is True
        assert args.race is True

    def test_equals_syntax(self):
        args = CLI().parse_args(["-go=1.5", IMPORT_PATH])
        assert args.go == "1.5"

    def test_no_abbreviation(self):
        with pytest.raises(SystemExit):
            CLI().parse_args(["-bra", "master", IMPORT_PATH])


class TestRun:
    """Test the full launcher pipeline against a fake runtime."""

    def test_successful_build(self, fake_runtime, workdir, capsys):
        fake_runtime.add_image("karalabe/xgo-latest")

        result = CLI().run([IMPORT_PATH])

        assert result == 0
        assert fake_runtime.subcommands() == ["version", "images", "run"]
        run_cmd = fake_runtime.calls[-1]
        assert run_cmd[-2:] == ["karalabe/xgo-latest", IMPORT_PATH]
        assert f"{Path.cwd()}:/build" in run_cmd
        assert "LINUX64=true" in run_cmd
        assert "DARWIN386=true" in run_cmd
        out = capsys.readouterr().out
        assert "found." in out
        assert f"Cross compiling {IMPORT_PATH}..." in out

    def test_missing_image_is_pulled_before_build(self, fake_runtime, workdir):
        result = CLI().run(["-go", "1.4.2", IMPORT_PATH])

        assert result == 0
        assert fake_runtime.subcommands() == ["version", "images", "pull", "run"]
        assert fake_runtime.calls[2] == ["docker", "pull", "karalabe/xgo-1.4.2"]

    def test_flags_reach_container(self, fake_runtime, workdir):
        fake_runtime.add_image("karalabe/xgo-latest")

        CLI().run(
            ["-targets", "linux64,darwin64", "-v", "-out", "iris", IMPORT_PATH]
        )

        run_cmd = fake_runtime.calls[-1]
        assert "LINUX64=true" in run_cmd
        assert "LINUX386=false" in run_cmd
        assert "DARWIN64=true" in run_cmd
        assert "DARWIN386=false" in run_cmd
        assert "FLAG_V=true" in run_cmd
        assert "FLAG_RACE=false" in run_cmd
        assert "OUT=iris" in run_cmd

    def test_no_import_path(self, fake_runtime, workdir, capsys):
        result = CLI().run([])

        assert result == 1
        assert fake_runtime.calls == []
        assert "Usage: xgo [options] <go import path>" in capsys.readouterr().err

    def test_too_many_import_paths(self, fake_runtime, workdir):
        result = CLI().run([IMPORT_PATH, "github.com/other/pkg"])

        assert result == 1
        assert fake_runtime.calls == []

    def test_runtime_failure_stops_pipeline(self, fake_runtime, workdir, capsys):
        fake_runtime.fail("version")

        result = CLI().run([IMPORT_PATH])

        assert result == 1
        assert fake_runtime.subcommands() == ["version"]
        assert "Failed to check docker installation" in capsys.readouterr().err

    def test_image_query_failure(self, fake_runtime, workdir):
        fake_runtime.fail("images")

        assert CLI().run([IMPORT_PATH]) == 1
        assert fake_runtime.subcommands() == ["version", "images"]

    def test_pull_failure(self, fake_runtime, workdir, capsys):
        fake_runtime.fail("pull")

        result = CLI().run([IMPORT_PATH])

        assert result == 1
        assert "run" not in fake_runtime.subcommands()
        err = capsys.readouterr().err
        assert "Failed to pull docker image from the registry" in err

    def test_compilation_failure(self, fake_runtime, workdir, capsys):
        fake_runtime.add_image("karalabe/xgo-latest")
        fake_runtime.fail("run")

        result = CLI().run([IMPORT_PATH])

        assert result == 1
        assert "Failed to cross compile package" in capsys.readouterr().err

    def test_dry_run_prints_command(self, fake_runtime, workdir, capsys):
        fake_runtime.add_image("karalabe/xgo-latest")

        result = CLI().run(["--dry-run", "-targets", "linux64", IMPORT_PATH])

        assert result == 0
        assert fake_runtime.subcommands() == ["version", "images"]
        last_line = capsys.readouterr().out.strip().splitlines()[-1]
        cmd = shlex.split(last_line)
        assert cmd[:2] == ["docker", "run"]
        assert cmd[-1] == IMPORT_PATH

    def test_unknown_target_warning(self, fake_runtime, workdir, capsys):
        fake_runtime.add_image("karalabe/xgo-latest")

        result = CLI().run(["-targets", "linux64,freebsd64", IMPORT_PATH])

        assert result == 0
        assert "Ignoring unknown target 'freebsd64'" in capsys.readouterr().err
        assert "LINUX64=true" in fake_runtime.calls[-1]

    def test_empty_targets_still_builds(self, fake_runtime, workdir, capsys):
        fake_runtime.add_image("karalabe/xgo-latest")

        result = CLI().run(["-targets", "", IMPORT_PATH])

        assert result == 0
        assert "No known targets" in capsys.readouterr().err
        run_cmd = fake_runtime.calls[-1]
        assert "LINUX64=false" in run_cmd
        assert "DARWIN386=false" in run_cmd


class TestConfiguration:
    """Test configuration file handling in the CLI."""

    def test_config_defaults_applied(self, fake_runtime, workdir):
        (workdir / "xgo.yaml").write_text(
            "runtime: podman\n"
            "defaults:\n"
            "  go: '1.4.2'\n"
            "  race: true\n"
        )
        fake_runtime.add_image("karalabe/xgo-1.4.2")

        assert CLI().run([IMPORT_PATH]) == 0

        assert all(call[0] == "podman" for call in fake_runtime.calls)
        run_cmd = fake_runtime.calls[-1]
        assert "FLAG_RACE=true" in run_cmd
        assert run_cmd[-2] == "karalabe/xgo-1.4.2"

    def test_flags_override_config(self, fake_runtime, workdir):
        (workdir / "xgo.yaml").write_text("defaults:\n  go: '1.4.2'\n")
        fake_runtime.add_image("karalabe/xgo-1.5")

        CLI().run(["-go", "1.5", IMPORT_PATH])

        assert fake_runtime.calls[-1][-2] == "karalabe/xgo-1.5"

    def test_explicit_config_path(self, fake_runtime, workdir):
        config_file = workdir / "custom.yaml"
        config_file.write_text("image_prefix: example/xgo-\n")
        fake_runtime.add_image("example/xgo-latest")

        assert CLI().run(["--config", str(config_file), IMPORT_PATH]) == 0
        assert fake_runtime.calls[-1][-2] == "example/xgo-latest"

    def test_missing_explicit_config(self, fake_runtime, workdir):
        result = CLI().run(["--config", str(workdir / "nope.yaml"), IMPORT_PATH])

        assert result == 1
        assert fake_runtime.calls == []

    def test_invalid_config(self, fake_runtime, workdir):
        (workdir / "xgo.yaml").write_text("invalid: yaml: : :")

        assert CLI().run([IMPORT_PATH]) == 1
        assert fake_runtime.calls == []

    def test_unquoted_version_in_config(self, fake_runtime, workdir, capsys):
        (workdir / "xgo.yaml").write_text("defaults:\n  go: 1.10\n")

        assert CLI().run([IMPORT_PATH]) == 1
        assert fake_runtime.calls == []
        assert 'go: "1.10"' in capsys.readouterr().err
