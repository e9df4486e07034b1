"""
JSON encoding of a distribution.

Wire format: an array of {"from": int, "to": int, "coins": int} objects,
ordered by rank.
"""

import json
from typing import List, Optional

from .types import Bucket


def distribution_to_json(buckets: List[Bucket], indent: Optional[int] = None) -> str:
    """Encode buckets; compact separators unless indent is given."""
    data = [bucket.to_dict() for bucket in buckets]
    if indent is None:
        return json.dumps(data, separators=(',', ':'))
    return json.dumps(data, indent=indent)


def distribution_from_json(text: str) -> List[Bucket]:
    """
    Decode buckets from distribution_to_json() output.

    Raises:
        ValueError: text is not a JSON array of {from, to, coins} records
    """
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array of buckets, got {type(data).__name__}")

    buckets = []
    for i, record in enumerate(data):
        if not isinstance(record, dict):
            raise ValueError(f"Bucket {i} is not an object: {record!r}")
        try:
            values = [record['from'], record['to'], record['coins']]
        except KeyError as e:
            raise ValueError(f"Bucket {i} is missing field {e.args[0]!r}") from e
        if any(isinstance(v, bool) or not isinstance(v, int) for v in values):
            raise ValueError(f"Bucket {i} fields must be integers: {record!r}")
        buckets.append(Bucket(start_rank=values[0], end_rank=values[1], coins=values[2]))

    return buckets
