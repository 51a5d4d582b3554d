"""
End-to-end tests for the probe command line.

Drives ``main()`` with real argument lists and checks the printed tokens
and exit codes the CLI contract promises.
"""

import json

import pytest

from map_probe.cli import main
from map_probe.domain.key_candidate import KeyKind


def run(capsys, *argv):
    """Run the CLI and return (exit code, stdout)."""
    code = main(list(argv))
    return code, capsys.readouterr().out


class TestKeyEligibility:
    @pytest.mark.parametrize(
        "kind, expected",
        [
            ("str", "accepted"),
            ("tuple", "accepted"),
            ("frozenset", "accepted"),
            ("list", "rejected:unhashable"),
            ("dict", "rejected:unhashable"),
            ("set", "rejected:unhashable"),
            ("nan", "rejected:structurally-invalid"),
            ("function", "rejected:structurally-invalid"),
        ],
    )
    def test_verdicts(self, capsys, kind, expected):
        assert run(capsys, "key-eligibility", "--kind", kind) == (0, f"{expected}\n")

    def test_unknown_kind(self, capsys):
        assert run(capsys, "key-eligibility", "--kind", "pointer") == (1, "invalid-key-kind\n")


class TestMissingKey:
    def test_default_on_miss(self, capsys):
        assert run(capsys, "missing-key", "--policy", "default-on-miss") == (0, '""\n')

    def test_default_on_miss_int(self, capsys):
        code, out = run(
            capsys, "missing-key", "--policy", "default-on-miss", "--value-type", "int"
        )
        assert (code, out) == (0, "0\n")

    def test_explicit_signal(self, capsys):
        assert run(capsys, "missing-key", "--policy", "explicit-signal") == (0, "not-found\n")

    def test_present_key_returns_stored_value(self, capsys):
        code, out = run(capsys, "missing-key", "--policy", "explicit-signal", "--key", "Flash")
        assert (code, out) == (0, "Barry Allen\n")

    def test_go_profile_default(self, capsys):
        assert run(capsys, "--profile", "go", "missing-key") == (0, '""\n')


class TestDuplicates:
    def test_last_wins_green_lantern(self, capsys):
        assert run(capsys, "duplicates", "--policy", "last-wins") == (0, "Hal Jordan\n")

    def test_first_wins_green_lantern(self, capsys):
        assert run(capsys, "duplicates", "--policy", "first-wins") == (0, "John Stewart\n")

    def test_reject(self, capsys):
        code, out = run(capsys, "duplicates", "--policy", "reject")
        assert (code, out) == (1, "duplicate-key-at-construction\n")

    def test_custom_pairs(self, capsys):
        code, out = run(
            capsys, "duplicates", "--policy", "last-wins", "--pair", "K=A", "--pair", "K=B"
        )
        assert (code, out) == (0, "B\n")

    def test_no_duplicate(self, capsys):
        code, out = run(capsys, "duplicates", "--policy", "reject", "--pair", "K=A", "--pair", "J=B")
        assert (code, out) == (0, "no-duplicate-key\n")

    def test_profile_defaults(self, capsys):
        assert run(capsys, "--profile", "python", "duplicates") == (0, "Hal Jordan\n")
        assert run(capsys, "--profile", "go", "duplicates") == (
            1,
            "duplicate-key-at-construction\n",
        )


class TestIterationStability:
    def test_insertion_order_is_stable(self, capsys):
        assert run(capsys, "iteration-stability", "--passes", "5") == (0, "stable\n")

    def test_randomized_is_reproducible_with_seed(self, capsys):
        argv = ("--seed", "13", "iteration-stability", "--order", "randomized", "--passes", "5")
        first = run(capsys, *argv)
        second = run(capsys, *argv)
        assert first == second
        assert first[0] == 0
        assert first[1] in ("stable\n", "unstable\n")

    @pytest.mark.parametrize("passes", ["1", "0", "-2"])
    def test_invalid_pass_count(self, capsys, passes):
        assert run(capsys, "iteration-stability", "--passes", passes) == (1, "invalid-pass-count\n")


class TestReport:
    @pytest.mark.parametrize("profile", ["python", "go"])
    def test_json_report_passes(self, capsys, profile):
        code, out = run(capsys, "--profile", profile, "--seed", "1", "report", "--format", "json")
        assert code == 0
        rows = json.loads(out)
        assert len(rows) == len(KeyKind) + 3
        assert all(row["passed"] for row in rows)

    def test_table_report(self, capsys):
        code, out = run(capsys, "report")
        assert code == 0
        assert f"{len(KeyKind) + 3}/{len(KeyKind) + 3} checks passed" in out

    def test_report_invalid_passes(self, capsys):
        assert run(capsys, "report", "--passes", "1") == (1, "invalid-pass-count\n")
