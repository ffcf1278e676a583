import math

import pytest

from benford_analyzer.analysis.reference import BENFORD_EXPECTED, benford_probabilities, benford_reference


def test_reference_sums_to_100():
    assert abs(sum(benford_reference().values()) - 100) < 1e-9


def test_reference_values():
    ref = benford_reference()
    assert sorted(ref) == list(range(1, 10))
    for d in range(1, 10):
        assert ref[d] == pytest.approx(math.log10(1 + 1 / d) * 100)
    assert ref[1] == pytest.approx(30.103, abs=1e-3)
    assert ref[9] == pytest.approx(4.576, abs=1e-3)


def test_reference_is_shared_and_read_only():
    assert benford_reference() is BENFORD_EXPECTED
    with pytest.raises(TypeError):
        BENFORD_EXPECTED[1] = 50.0


def test_probabilities_sum_to_one():
    probs = benford_probabilities()
    assert len(probs) == 9
    assert abs(probs.sum() - 1.0) < 1e-12
