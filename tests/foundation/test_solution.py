import math

import numpy as np
import pytest

from rsearch.foundation.exceptions import UnsetScoreError
from rsearch.foundation.solution import Candidate


def test_new_candidate_has_unset_score():
    cand = Candidate([1, 2, 3])
    assert math.isnan(cand.score)
    assert not cand.is_evaluated
    assert cand.vector.dtype == float
    assert cand.vector.shape == (3,)


def test_require_score_raises_when_unset():
    with pytest.raises(UnsetScoreError):
        Candidate([0.0]).require_score()


def test_copy_is_independent():
    cand = Candidate(np.array([1.0, 2.0]), 5.0)
    clone = cand.copy()
    clone.vector[0] = 99.0
    assert cand.vector[0] == 1.0
    assert clone.score == 5.0


def test_repr_mentions_score():
    assert "score=2.0" in repr(Candidate([1.0, 1.0], 2.0))
