"""
Unit tests for the CLI argument parser and command router.
"""

import logging
from unittest.mock import Mock

import pytest

from map_probe.cli import main
from map_probe.cli.argument_parser import create_cli_parser
from map_probe.cli.command_router import create_command_router
from map_probe.domain.container import ValueType
from map_probe.utilities.constants import (
    REPORT_FORMATS,
    DuplicatePolicy,
    IterationOrder,
    MissPolicy,
)


class TestArgumentParser:
    def test_policies_parse_to_enums(self):
        parser = create_cli_parser()
        args = parser.parse_args(
            ["missing-key", "--policy", "default-on-miss", "--value-type", "int"]
        )
        assert args.policy is MissPolicy.DEFAULT_ON_MISS
        assert args.value_type is ValueType.INT

        args = parser.parse_args(["duplicates", "--policy", "first-wins"])
        assert args.policy is DuplicatePolicy.FIRST_WINS
        assert args.pairs is None

        args = parser.parse_args(["iteration-stability", "--order", "randomized", "--passes", "3"])
        assert args.order is IterationOrder.RANDOMIZED
        assert args.passes == 3

    def test_policy_defaults_are_unset(self):
        args = create_cli_parser().parse_args(["missing-key"])
        assert args.policy is None
        assert args.key == "Batman"
        assert args.value_type is ValueType.STR

    def test_pairs_accumulate_in_order(self):
        args = create_cli_parser().parse_args(
            ["duplicates", "--pair", "K=A", "--pair", "K=B", "--pair", "J=C"]
        )
        assert args.pairs == [("K", "A"), ("K", "B"), ("J", "C")]

    def test_global_options(self):
        args = create_cli_parser().parse_args(["--profile", "go", "--seed", "4", "-v", "report"])
        assert args.profile == "go"
        assert args.seed == 4
        assert args.verbose
        assert args.output_format == "table"

    @pytest.mark.parametrize("output_format", REPORT_FORMATS)
    def test_report_formats(self, output_format):
        args = create_cli_parser().parse_args(["report", "--format", output_format])
        assert args.output_format == output_format

    def test_kind_is_required(self):
        with pytest.raises(SystemExit):
            create_cli_parser().parse_args(["key-eligibility"])

    @pytest.mark.parametrize(
        "argv",
        [
            ["missing-key", "--policy", "panic"],
            ["duplicates", "--policy", "merge"],
            ["duplicates", "--pair", "no-separator"],
            ["iteration-stability", "--passes", "many"],
            ["--profile", "rust", "report"],
        ],
    )
    def test_invalid_arguments_exit_2(self, argv):
        with pytest.raises(SystemExit) as exc_info:
            create_cli_parser().parse_args(argv)
        assert exc_info.value.code == 2


class TestCommandRouter:
    def test_routes_to_probe(self, python_probe, capsys):
        router = create_command_router(python_probe)
        args = create_cli_parser().parse_args(["key-eligibility", "--kind", "dict"])
        result = router.route_command(args)
        assert result.is_success()
        assert result.data == "rejected:unhashable"
        assert capsys.readouterr().out == "rejected:unhashable\n"

    def test_logs_result_with_metadata(self, go_probe, capsys, caplog):
        router = create_command_router(go_probe)
        args = create_cli_parser().parse_args(["missing-key"])
        with caplog.at_level(logging.DEBUG, logger="map_probe.cli.command_router"):
            router.route_command(args)
        assert capsys.readouterr().out == '""\n'
        assert "'status': 'success'" in caplog.text
        assert "'metadata': {'policy': 'default-on-miss'}" in caplog.text

    def test_unknown_command(self, python_probe):
        router = create_command_router(python_probe)
        with pytest.raises(ValueError, match="Unknown command"):
            router.route_command(Mock(command="teleport"))


class TestMain:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage: probe" in capsys.readouterr().out

    def test_verbose_logs_to_stderr(self, capsys):
        assert main(["-v", "iteration-stability"]) == 0
        captured = capsys.readouterr()
        assert captured.out == "stable\n"
        assert "DEBUG" in captured.err

    def test_bad_environment_reports_configuration_error(self, monkeypatch, capsys):
        monkeypatch.setenv("MAP_PROBE_PASSES", "lots")
        assert main(["iteration-stability"]) == 1
        assert capsys.readouterr().out == "invalid-configuration\n"

    def test_environment_profile(self, monkeypatch, capsys):
        monkeypatch.setenv("MAP_PROBE_PROFILE", "go")
        assert main(["missing-key"]) == 0
        assert capsys.readouterr().out == '""\n'

    def test_cli_profile_overrides_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("MAP_PROBE_PROFILE", "go")
        assert main(["--profile", "python", "missing-key"]) == 0
        assert capsys.readouterr().out == "not-found\n"

    def test_unexpected_error_exits_1(self, monkeypatch, capsys):
        def explode(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr("map_probe.cli.create_probe", explode)
        assert main(["report"]) == 1
        assert "Unexpected error: boom" in capsys.readouterr().err
