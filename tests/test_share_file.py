"""Tests for the JSON share-file parser."""

import json
import logging

import pytest

from sharevote.arith.bigint import BigInt
from sharevote.errors import DuplicateShareError, ShareFileError
from sharevote.io import share_file
from sharevote.io.share_file import load_share_file, parse_share_file
from sharevote.shares import Share

SAMPLE = """\
{
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"}
}
"""


def test_parse_sample():
    parsed = parse_share_file(SAMPLE)
    assert parsed.n == 4
    assert parsed.k == 3
    assert parsed.to_shares() == [
        Share(1, 10, "4"),
        Share(2, 2, "111"),
        Share(3, 10, "12"),
        Share(6, 4, "213"),
    ]
    assert [(p.x, p.y) for p in parsed.to_points()] == [
        (1, BigInt(4)), (2, BigInt(7)), (3, BigInt(12)), (6, BigInt(39)),
    ]


def test_shares_sorted_by_id():
    doc = {"keys": {"n": 2, "k": 2}, "10": {"base": 10, "value": "1"}, "2": {"base": 10, "value": "2"}}
    parsed = parse_share_file(json.dumps(doc))
    assert [s.x for s in parsed.to_shares()] == [2, 10]


def test_top_level_header():
    doc = {"n": 1, "k": 1, "1": {"base": 16, "value": "ff"}}
    parsed = parse_share_file(json.dumps(doc))
    assert parsed.k == 1
    assert parsed.to_points()[0].y == BigInt(255)


def test_ignores_other_keys():
    doc = {"keys": {"n": 1, "k": 1}, "comment": "hi", "1": {"base": 10, "value": "3"}}
    assert list(parse_share_file(json.dumps(doc)).shares) == [1]


def test_repeated_key():
    text = '{"keys": {"n": 2, "k": 2}, "1": {"base": "10", "value": "4"}, "1": {"base": "10", "value": "5"}}'
    with pytest.raises(DuplicateShareError):
        parse_share_file(text)


def test_same_id_different_spelling():
    doc = {"keys": {"n": 2, "k": 2}, "1": {"base": 10, "value": "4"}, "01": {"base": 10, "value": "5"}}
    with pytest.raises(DuplicateShareError):
        parse_share_file(json.dumps(doc))


def test_zero_id():
    doc = {"keys": {"n": 1, "k": 1}, "0": {"base": 10, "value": "4"}}
    with pytest.raises(ShareFileError, match="positive"):
        parse_share_file(json.dumps(doc))


@pytest.mark.parametrize(
    "text",
    [
        "{not json",
        "[1, 2]",
        '{"keys": {"n": 1}, "1": {"base": "10", "value": "4"}}',
        '{"keys": {"n": 1, "k": 1}, "1": {"base": "ten", "value": "4"}}',
        '{"keys": {"n": 1, "k": 1}, "1": {"base": "10"}}',
        '{"keys": 3, "1": {"base": "10", "value": "4"}}',
    ],
)
def test_invalid_documents(text):
    with pytest.raises(ShareFileError):
        parse_share_file(text)


def test_too_many_shares(monkeypatch):
    monkeypatch.setattr(share_file, "MAX_SHARES", 3)
    doc = {"keys": {"n": 4, "k": 2}}
    doc.update({str(x): {"base": 10, "value": str(x)} for x in range(1, 5)})
    with pytest.raises(ShareFileError, match="Too many shares"):
        parse_share_file(json.dumps(doc))


def test_n_mismatch_warns(caplog):
    doc = {"keys": {"n": 5, "k": 1}, "1": {"base": 10, "value": "4"}}
    with caplog.at_level(logging.WARNING, logger="sharevote.io.share_file"):
        parse_share_file(json.dumps(doc))
    assert "n=5" in caplog.text


def test_load_from_disk(tmp_path):
    path = tmp_path / "shares.json"
    path.write_text(SAMPLE)
    assert load_share_file(path).k == 3


def test_missing_file(tmp_path):
    with pytest.raises(ShareFileError, match="Cannot read"):
        load_share_file(tmp_path / "nope.json")


def test_bundled_samples():
    """The sample inputs shipped next to the package."""
    from pathlib import Path

    from sharevote.consensus.solver import reconstruct

    samples = Path(__file__).resolve().parent.parent / "samples"
    parsed = load_share_file(samples / "testcase2.json")
    assert [int(p.y) for p in parsed.to_points()] == [4, 7, 10, 99, 16]

    result = reconstruct(parsed.to_points(), parsed.k, mode="rational")
    assert result.secret == BigInt(1)
    assert result.votes == 6
    assert result.support_for(4) == 0
    assert load_share_file(samples / "testcase1.json").k == 3


def test_share_id_cap(monkeypatch):
    monkeypatch.setattr(share_file, "MAX_SHARE_ID", 100)
    doc = {"keys": {"n": 2, "k": 2}, "1": {"base": 10, "value": "4"}, "101": {"base": 10, "value": "7"}}
    with pytest.raises(ShareFileError, match="exceeds 100"):
        parse_share_file(json.dumps(doc))
