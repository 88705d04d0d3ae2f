"""End-to-end tests: share document -> decoded shares -> secret."""

import io
import itertools
import json

import pytest

from sharerecover.cli.main import main
from sharerecover.crypto.lagrange import interpolate_at_zero
from sharerecover.io.document import parse_mapping
from sharerecover.recovery.reconstructor import reconstruct
from sharerecover.store.builder import build


SCENARIO_ONE = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}

SCENARIO_TWO = {
    "keys": {"n": 9, "k": 6},
    "1": {"base": "10", "value": "28735619723837"},
    "2": {"base": "16", "value": "1A228867F0CA"},
    "3": {"base": "12", "value": "32811A4AA0B7B"},
    "4": {"base": "11", "value": "917978721331A"},
    "5": {"base": "16", "value": "1A22886782E1"},
    "6": {"base": "10", "value": "28735619654702"},
    "7": {"base": "14", "value": "71AB5070CC4B"},
    "8": {"base": "9", "value": "122662581541670"},
    "9": {"base": "8", "value": "642121030037605"},
}

# Exact value for the first six shares.  Truncating division after every
# factor gives 28735619723846 instead.
SCENARIO_TWO_SECRET = 28735619723864


def _recover(data, **kwargs):
    doc = parse_mapping(data)
    share_set = build(doc.records, doc.threshold, total=doc.total)
    return reconstruct(share_set, **kwargs)


def _write(tmp_path, data):
    path = tmp_path / "shares.json"
    path.write_text(json.dumps(data))
    return str(path)


def test_scenario_one():
    assert _recover(SCENARIO_ONE) == 3


def test_scenario_two():
    assert _recover(SCENARIO_TWO) == SCENARIO_TWO_SECRET


def test_scenario_two_truncating_reference_differs():
    doc = parse_mapping(SCENARIO_TWO)
    points = [s.as_point() for s in build(doc.records, doc.threshold).shares][:6]
    secret = 0
    for i, (xi, yi) in enumerate(points):
        term = yi
        for j, (xj, _) in enumerate(points):
            if i != j:
                num, den = term * -xj, xi - xj
                q = abs(num) // abs(den)
                term = q if (num < 0) == (den < 0) else -q
        secret += term
    assert secret == 28735619723846
    assert secret != SCENARIO_TWO_SECRET


def test_scenario_two_redundancy_without_share_seven():
    # Share 7 is off the polynomial; every 6-subset of the rest agrees.
    doc = parse_mapping(SCENARIO_TWO)
    shares = [s for s in build(doc.records, doc.threshold).shares if s.x != 7]
    for subset in itertools.combinations(shares, 6):
        assert interpolate_at_zero([s.as_point() for s in subset]) == SCENARIO_TWO_SECRET


def test_cli_prints_secret(tmp_path, capsys):
    assert main([_write(tmp_path, SCENARIO_ONE)]) == 0
    out, err = capsys.readouterr()
    assert out.strip() == "3"


def test_cli_reads_stdin(monkeypatch, capsys):
    stdin = io.TextIOWrapper(io.BytesIO(json.dumps(SCENARIO_TWO).encode("utf-8")))
    monkeypatch.setattr("sys.stdin", stdin)
    assert main(["-"]) == 0
    assert capsys.readouterr().out.strip() == str(SCENARIO_TWO_SECRET)


def test_cli_insertion_selection(tmp_path, capsys):
    data = {
        "keys": {"n": 4, "k": 3},
        "6": {"base": "4", "value": "213"},
        "3": {"base": "10", "value": "12"},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
    }
    assert main([_write(tmp_path, data), "--selection", "insertion"]) == 0
    assert capsys.readouterr().out.strip() == "3"


@pytest.mark.parametrize(
    "data, kind",
    [
        (dict(SCENARIO_ONE, **{"2": {"base": "10", "value": "G"}}), "InvalidDigit"),
        (dict(SCENARIO_ONE, **{"2": {"base": "2"}}), "MissingField"),
        ({"keys": {"n": 2, "k": 3}, "1": {"base": "10", "value": "4"},
          "2": {"base": "10", "value": "7"}}, "InsufficientShares"),
        ({"keys": {"n": 2, "k": 0}, "1": {"base": "10", "value": "4"}}, "DegenerateInput"),
        ({"keys": {"n": 2, "k": 2}, "1": {"base": "10", "value": "1"},
          "3": {"base": "10", "value": "2"}}, "NonIntegerResult"),
        ({"keys": {"n": 2, "k": 2}, "01": {"base": "10", "value": "1"},
          "1": {"base": "10", "value": "2"}}, "DuplicateAbscissa"),
        ({"shares": []}, "MalformedInput"),
    ],
)
def test_cli_failures(tmp_path, capsys, data, kind):
    assert main([_write(tmp_path, data)]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert f"Error: {kind}:" in err


def test_cli_overflow_with_64_bit_limit(tmp_path, capsys):
    data = {"keys": {"n": 1, "k": 1}, "1": {"base": "16", "value": "ffffffffffffffffff"}}
    assert main([_write(tmp_path, data), "--max-bits", "63"]) == 1
    assert "Error: Overflow:" in capsys.readouterr().err


def test_cli_strict_total(tmp_path, capsys):
    data = dict(SCENARIO_ONE, keys={"n": 5, "k": 3})
    path = _write(tmp_path, data)
    assert main([path]) == 0
    assert capsys.readouterr().out.strip() == "3"
    assert main([path, "--strict-total"]) == 1
    assert "Error: MalformedInput:" in capsys.readouterr().err


def test_cli_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.json")]) == 1
    assert "Error: MalformedInput:" in capsys.readouterr().err


def test_cli_non_utf8_file(tmp_path, capsys):
    path = tmp_path / "shares.json"
    path.write_bytes(b'{"keys": {"n": 1, "k": 1}, "1": {"base": "10", "value": "\xff"}}')
    assert main([str(path)]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert "Error: MalformedInput:" in err
    assert "UTF-8" in err


def test_cli_non_utf8_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"\xff\xfe{}")))
    assert main(["-"]) == 1
    assert "Error: MalformedInput:" in capsys.readouterr().err


def test_cli_huge_integer_literal(tmp_path, capsys):
    path = tmp_path / "shares.json"
    path.write_text('{"keys": {"n": 1, "k": 1}, "1": {"base": 10, "value": ' + "9" * 5000 + "}}")
    assert main([str(path)]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert "Error: MalformedInput:" in err


def test_cli_negative_max_bits(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([_write(tmp_path, SCENARIO_ONE), "--max-bits", "-1"])
    assert exc_info.value.code == 2
    out, err = capsys.readouterr()
    assert out == ""
    assert "--max-bits" in err


def test_cli_unknown_default_selection(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr("sharerecover.cli.main.DEFAULT_SELECTION", "random")
    assert main([_write(tmp_path, SCENARIO_ONE)]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert "Error: InvalidSelection:" in err
