import os

import torch

from ova_logreg.benchmark import BenchmarkContext, BenchmarkReport, benchmark_lr
from ova_logreg.logistic import predict
from ova_logreg.models import OneVsAllLogReg
from ova_logreg.plots import display_results, plot_loss_curve
from session_settings import LearningSettings


def test_model_forward_matches_predict():
    torch.manual_seed(0)
    W = torch.randn(5, 3)
    X = torch.randn(4, 5)
    model = OneVsAllLogReg.from_weights(W)
    assert model.num_features == 5
    assert model.num_classes == 3
    assert torch.equal(model(X), predict(X, W))


def test_model_weights_are_a_copy():
    W = torch.zeros(2, 2)
    model = OneVsAllLogReg.from_weights(W)
    W[0, 0] = 1.0
    assert model.weights[0, 0].item() == 0.0
    assert "weights" in model.state_dict()


def test_new_model_starts_at_zero():
    model = OneVsAllLogReg(num_features=785)
    assert model.weights.shape == (785, 10)
    assert torch.all(model(torch.ones(2, 785)) == 0.5)


def test_timed_measures_elapsed_seconds():
    ctx = BenchmarkContext("cpu")
    with ctx.timed() as t:
        sum(range(1000))
    assert t["seconds"] >= 0.0


def test_benchmark_lr_reports(separable, capsys):
    X, Y = separable
    learning = LearningSettings(alpha=0.5, lambda_=0.0, max_iter=50)
    report = benchmark_lr(BenchmarkContext("cpu"), X, Y, X, learning, iterations=3)

    assert isinstance(report, BenchmarkReport)
    assert report.train_seconds >= 0.0
    assert report.predict_seconds >= 0.0
    out = capsys.readouterr().out
    assert "Training time:" in out
    assert "Prediction time:" in out


def test_display_results_saves_figure(tmp_path):
    images = torch.rand(30, 28, 28)
    outputs = torch.rand(30, 10)
    path = os.path.join(tmp_path, "plots", "predictions.png")

    picks = display_results(images, outputs, count=20, seed=0, save_path=path)

    assert os.path.isfile(path)
    assert len(picks) == 20
    assert len(set(picks.tolist())) == 20


def test_display_results_caps_count(tmp_path):
    images = torch.rand(3, 28, 28)
    outputs = torch.rand(3, 10)
    picks = display_results(images, outputs, count=20, save_path=os.path.join(tmp_path, "p.png"))
    assert len(picks) == 3


def test_plot_loss_curve_saves_figure(tmp_path):
    path = os.path.join(tmp_path, "loss.png")
    plot_loss_curve([1.4, 0.9, 0.5, 0.2], save_path=path)
    assert os.path.isfile(path)


def test_display_results_with_zero_count(tmp_path):
    path = os.path.join(tmp_path, "none.png")
    picks = display_results(torch.rand(5, 4, 4), torch.rand(5, 3), count=0, save_path=path)
    assert len(picks) == 0
    assert not os.path.exists(path)
