from __future__ import annotations

import json

import pytest

from pool_payout.serialization import distribution_from_json, distribution_to_json
from pool_payout.types import Bucket

BUCKETS = [Bucket(1, 1, 1000), Bucket(2, 2, 500), Bucket(3, 10, 100)]


def test_compact_encoding() -> None:
    assert distribution_to_json(BUCKETS) == (
        '[{"from":1,"to":1,"coins":1000},{"from":2,"to":2,"coins":500},'
        '{"from":3,"to":10,"coins":100}]'
    )


def test_indented_encoding() -> None:
    text = distribution_to_json(BUCKETS, indent=2)
    assert "\n" in text
    assert json.loads(text) == [b.to_dict() for b in BUCKETS]


def test_empty_distribution() -> None:
    assert distribution_to_json([]) == "[]"
    assert distribution_from_json("[]") == []


def test_decode() -> None:
    text = '[{"from": 1, "to": 1, "coins": 1000}, {"from": 2, "to": 5, "coins": 250}]'
    assert distribution_from_json(text) == [Bucket(1, 1, 1000), Bucket(2, 5, 250)]


def test_decode_ignores_extra_fields() -> None:
    assert distribution_from_json('[{"from": 1, "to": 2, "coins": 5, "note": "x"}]') == [Bucket(1, 2, 5)]


@pytest.mark.parametrize(
    "text, match",
    [
        ('{"from": 1}', "JSON array"),
        ("[1, 2]", "not an object"),
        ('[{"from": 1, "to": 1}]', "missing field 'coins'"),
        ('[{"from": 1, "to": 1, "coins": "10"}]', "integers"),
        ('[{"from": 1, "to": 1, "coins": 10.5}]', "integers"),
        ('[{"from": true, "to": 1, "coins": 10}]', "integers"),
    ],
)
def test_decode_rejects_malformed(text: str, match: str) -> None:
    with pytest.raises(ValueError, match=match):
        distribution_from_json(text)
