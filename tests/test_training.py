import math

import pytest
import torch

from ova_logreg.errors import NumericDegeneracyError, ShapeMismatchError
from ova_logreg.logistic import predict
from ova_logreg.training import Trainer, TrainingStatus, train
from ova_logreg.utils import accuracy


def test_separable_problem_converges_and_classifies(separable):
    X, Y = separable
    result = Trainer(alpha=0.5, lambda_=0.0, max_iter=200).fit(X, Y)

    assert result.status is TrainingStatus.CONVERGED
    assert result.iterations < 200
    assert result.loss < 0.1
    assert accuracy(predict(X, result.weights), Y) == 100.0


def test_train_returns_weight_matrix(separable):
    X, Y = separable
    W = train(X, Y, alpha=0.5, lambda_=0.0, max_iter=200)
    assert W.shape == (3, 2)
    assert accuracy(predict(X, W), Y) == 100.0


def test_training_is_deterministic(separable):
    X, Y = separable
    W1 = train(X, Y, alpha=0.3, lambda_=1.0, max_iter=50)
    W2 = train(X, Y, alpha=0.3, lambda_=1.0, max_iter=50)
    assert torch.equal(W1, W2)


def test_exhausted_when_threshold_not_reached(separable):
    X, Y = separable
    result = Trainer(alpha=0.1, lambda_=10.0, max_iter=5).fit(X, Y)

    assert result.status is TrainingStatus.EXHAUSTED
    assert result.iterations == 5
    assert len(result.loss_history) == 5
    assert result.loss == result.loss_history[-1]


def test_loss_history_starts_at_zero_weight_loss(separable):
    X, Y = separable
    result = Trainer(alpha=0.1, lambda_=1.0, max_iter=3).fit(X, Y)
    assert result.loss_history[0] == pytest.approx(2 * math.log(2), rel=1e-6)
    assert result.loss_history[-1] < result.loss_history[0]


def test_zero_iterations_keeps_zero_weights(separable):
    X, Y = separable
    result = Trainer(max_iter=0).fit(X, Y)
    assert result.status is TrainingStatus.EXHAUSTED
    assert result.iterations == 0
    assert torch.all(result.weights == 0)


def test_weights_follow_input_dtype(separable):
    X, Y = separable
    W = train(X.double(), Y.double(), max_iter=2)
    assert W.dtype == torch.float64


def test_bias_weights_unchanged_by_regularization_on_first_step(separable):
    X, Y = separable
    W_plain = train(X, Y, alpha=0.1, lambda_=0.0, max_iter=2)
    W_reg = train(X, Y, alpha=0.1, lambda_=5.0, max_iter=2)
    # both runs take the same first step from zero weights; afterwards only
    # the non-bias rows feel the penalty
    assert torch.allclose(W_plain[0], W_reg[0])
    assert not torch.allclose(W_plain[1:], W_reg[1:])


def _saturating_problem():
    X = torch.tensor([[1.0, 1000.0]])
    Y = torch.tensor([[1.0, 0.0]])
    return X, Y


def test_non_strict_training_carries_nan_loss():
    X, Y = _saturating_problem()
    result = Trainer(alpha=1.0, lambda_=0.0, max_iter=3).fit(X, Y)
    assert result.status is TrainingStatus.EXHAUSTED
    assert math.isnan(result.loss)


def test_strict_training_fails_fast():
    X, Y = _saturating_problem()
    with pytest.raises(NumericDegeneracyError):
        Trainer(alpha=1.0, lambda_=0.0, max_iter=3, strict=True).fit(X, Y)


def test_log_interval_prints_progress(separable, capsys):
    X, Y = separable
    Trainer(alpha=0.1, lambda_=1.0, max_iter=4, log_interval=2).fit(X, Y)
    out = capsys.readouterr().out
    assert "Iteration 2: loss =" in out
    assert "Iteration 4: loss =" in out


def test_train_rejects_vector_labels():
    with pytest.raises(ShapeMismatchError):
        train(torch.ones(4, 3), torch.ones(4), max_iter=2)


def test_train_rejects_vector_features():
    with pytest.raises(ShapeMismatchError):
        train(torch.ones(4), torch.ones(4, 2), max_iter=2)
