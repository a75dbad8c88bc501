"""Tests for polynomial helpers and document generation."""

import json

import pytest

from sharesolver.codec import radix
from sharesolver.parser.share_file import parse
from sharesolver.polynomial import eval_poly, make_document, sample_points


def test_eval_poly():
    assert eval_poly([3, 1, 2], 0) == 3
    assert eval_poly([3, 1, 2], 2) == 3 + 2 + 8
    assert eval_poly([], 5) == 0


def test_sample_points():
    assert sample_points([1, 1], [1, 2, 3]) == [(1, 2), (2, 3), (3, 4)]


def test_make_document():
    doc = make_document([3, 1, 2], xs=[1, 2, 6], bases=[10, 2])
    assert doc["keys"] == {"n": 3, "k": 3}
    assert doc["1"] == {"base": "10", "value": "6"}
    assert doc["2"] == {"base": "2", "value": radix.encode(13, 2)}
    assert doc["6"]["base"] == "10"


def test_make_document_parses():
    doc = make_document([5, 4], xs=[3, 7], bases=[36], k=1)
    parsed = parse(json.dumps(doc))
    assert (parsed.n, parsed.k) == (2, 1)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"coeffs": [1], "xs": [], "bases": [10]},
        {"coeffs": [1], "xs": [1], "bases": []},
        {"coeffs": [1], "xs": [0], "bases": [10]},
        {"coeffs": [-10, 1], "xs": [1], "bases": [10]},
    ],
)
def test_make_document_rejects(kwargs):
    with pytest.raises(ValueError):
        make_document(**kwargs)
