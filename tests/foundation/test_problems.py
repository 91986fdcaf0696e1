import math

import numpy as np
import pytest

from rsearch.foundation.exceptions import BoundsError, ProblemDimensionError, UnsetScoreError
from rsearch.foundation.problem import (
    AckleyProblem,
    Problem,
    RastriginProblem,
    RosenbrockProblem,
    SphereProblem,
    resolve_bounds,
)
from rsearch.foundation.solution import Candidate


def test_sphere_is_sum_of_squares():
    problem = SphereProblem(n_var=3)
    X = np.array([[0.0, 0.0, 0.0], [1.0, 2.0, 3.0], [-1.0, -1.0, 0.5]])
    out = {}
    problem.evaluate(X, out)
    assert out["F"].shape == (3, 1)
    assert np.allclose(out["F"][:, 0], [0.0, 14.0, 2.25])


def test_sphere_defaults():
    problem = SphereProblem()
    assert problem.n_var == 2
    assert (problem.xl, problem.xu) == (-5.0, 5.0)
    assert problem.optimum == 0.0


@pytest.mark.parametrize(
    "problem,x_opt",
    [
        (RastriginProblem(n_var=4), np.zeros(4)),
        (AckleyProblem(n_var=3), np.zeros(3)),
        (RosenbrockProblem(n_var=5), np.ones(5)),
    ],
)
def test_classic_functions_hit_zero_at_optimum(problem, x_opt):
    cand = Candidate(x_opt)
    score = problem.evaluate_candidate(cand)
    assert score == pytest.approx(0.0, abs=1e-12)
    assert problem.is_optimal(cand)


def test_rosenbrock_rejects_single_variable():
    with pytest.raises(ProblemDimensionError) as excinfo:
        RosenbrockProblem(n_var=1)
    assert excinfo.value.details["n_var"] == 1


def test_rastrigin_positive_away_from_optimum():
    problem = RastriginProblem(n_var=2)
    cand = Candidate([0.5, 0.5])
    assert problem.evaluate_candidate(cand) == pytest.approx(40.5)


def test_evaluate_writes_into_preallocated_buffer():
    problem = SphereProblem(n_var=2)
    buf = np.zeros((2, 1))
    out = {"F": buf}
    problem.evaluate(np.array([[1.0, 1.0], [2.0, 0.0]]), out)
    assert out["F"] is buf
    assert np.allclose(buf[:, 0], [2.0, 4.0])


def test_evaluate_candidate_sets_score():
    problem = SphereProblem(n_var=2)
    cand = Candidate([3.0, 4.0])
    assert not cand.is_evaluated
    assert problem.evaluate_candidate(cand) == 25.0
    assert cand.score == 25.0


def test_is_better_is_strict():
    problem = SphereProblem()
    a = Candidate([1.0, 0.0], 1.0)
    b = Candidate([0.0, 1.0], 1.0)
    c = Candidate([0.0, 0.5], 0.25)
    assert not problem.is_better(a, b)
    assert problem.is_better(c, a)
    assert not problem.is_better(a, c)


def test_is_better_rejects_unset_scores():
    problem = SphereProblem()
    with pytest.raises(UnsetScoreError):
        problem.is_better(Candidate([0.0, 0.0]), Candidate([1.0, 1.0], 2.0))
    with pytest.raises(UnsetScoreError):
        problem.is_better(Candidate([1.0, 1.0], 2.0), Candidate([0.0, 0.0]))


def test_is_optimal_respects_tolerance():
    problem = SphereProblem()
    assert problem.is_optimal(Candidate([0.0, 0.0], 5e-7))
    assert not problem.is_optimal(Candidate([0.0, 0.0], 2e-6))


def test_is_optimal_false_without_known_optimum():
    class Unknown(Problem):
        def __init__(self):
            self.n_var = 1
            self.xl = 0.0
            self.xu = 1.0

        def objective(self, X):
            return X[:, 0]

    assert not Unknown().is_optimal(Candidate([0.0], 0.0))


def test_base_problem_requires_objective():
    class Bare(Problem):
        n_var = 1
        xl = 0.0
        xu = 1.0

    with pytest.raises(NotImplementedError, match="objective"):
        Bare().evaluate(np.zeros((1, 1)), {})


def test_resolve_bounds_broadcasts_scalars():
    xl, xu = resolve_bounds(SphereProblem(n_var=4))
    assert xl.shape == (4,) and xu.shape == (4,)
    assert np.all(xl == -5.0) and np.all(xu == 5.0)


def test_resolve_bounds_accepts_vectors():
    problem = SphereProblem(n_var=2)
    problem.xl = np.array([-1.0, 0.0])
    problem.xu = np.array([1.0, 2.0])
    xl, xu = resolve_bounds(problem)
    assert np.array_equal(xl, [-1.0, 0.0])
    assert np.array_equal(xu, [1.0, 2.0])


def test_resolve_bounds_rejects_inverted_bounds():
    problem = SphereProblem(n_var=2, xl=1.0, xu=-1.0)
    with pytest.raises(BoundsError):
        resolve_bounds(problem)


def test_resolve_bounds_rejects_wrong_shape():
    problem = SphereProblem(n_var=3)
    problem.xl = np.zeros(2)
    with pytest.raises(BoundsError):
        resolve_bounds(problem)


def test_resolve_bounds_rejects_infinite_bounds():
    problem = SphereProblem(n_var=2, xl=-math.inf, xu=1.0)
    with pytest.raises(BoundsError):
        resolve_bounds(problem)


def test_resolve_bounds_rejects_bad_dimension():
    with pytest.raises(ProblemDimensionError):
        resolve_bounds(SphereProblem(n_var=0))
