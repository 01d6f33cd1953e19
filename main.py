import os
import sys
from ova_logreg.benchmark import BenchmarkContext, benchmark_lr
from ova_logreg.data_utils import DatasetFactory
from ova_logreg.errors import EXIT_CODES, BackendError, LogRegError
from ova_logreg.models import OneVsAllLogReg
from ova_logreg.plots import display_results, plot_loss_curve
from ova_logreg.training import Trainer
from ova_logreg.utils import accuracy, describe_device, get_torch_device, set_global_seed
from args import get_args
from session_settings import LearningSettings, SessionSettings

def build_settings(argv=None):
    args = get_args(argv)
    learning_settings = LearningSettings(
        alpha=args.alpha,
        lambda_=args.lambda_,
        max_iter=args.max_iter,
        threshold=args.threshold,
        strict=args.strict,
        log_interval=args.log_interval,
    )
    settings = SessionSettings(
        learning=learning_settings,
        dataset=args.dataset,
        data_root=args.data_root,
        perc=args.perc,
        console=args.console,
        seed=args.seed,
        bench_iterations=args.bench_iters,
        num_display=args.num_display,
        plots_dir=args.plots_dir,
        torch_device_name=get_torch_device(args.device),
    )
    return settings, learning_settings

def lr_demo(settings: SessionSettings, learning_settings: LearningSettings):
    device = settings.torch_device_name

    # 1. Load dataset (features already flattened, bias column prepended)
    data = DatasetFactory.create(
        dataset_name=settings.dataset,
        perc=settings.perc,
        data_root=settings.data_root,
        seed=settings.seed,
        device=device,
    )
    print(f"Training samples: {data.num_train}, testing samples: {data.num_test}")

    # 2. Train
    trainer = Trainer(
        alpha=learning_settings.alpha,
        lambda_=learning_settings.lambda_,
        max_iter=learning_settings.max_iter,
        threshold=learning_settings.threshold,
        strict=learning_settings.strict,
        log_interval=learning_settings.log_interval,
    )
    result = trainer.fit(data.train_feats, data.train_targets)
    print(f"Stopped after {result.iterations} iterations ({result.status.value}), loss = {result.loss:.4f}")

    # 3. Predict
    model = OneVsAllLogReg.from_weights(result.weights)
    train_outputs = model(data.train_feats)
    test_outputs = model(data.test_feats)

    print(f"Accuracy on training data: {accuracy(train_outputs, data.train_targets):.2f}")
    print(f"Accuracy on testing data: {accuracy(test_outputs, data.test_targets):.2f}")

    # 4. Benchmark
    benchmark_lr(
        BenchmarkContext(device),
        data.train_feats,
        data.train_targets,
        data.test_feats,
        learning_settings,
        iterations=settings.bench_iterations,
    )

    # 5. Show some predictions
    if not settings.console:
        results_path = None
        loss_path = None
        if settings.plots_dir is not None:
            results_path = os.path.join(settings.plots_dir, f"{settings.dataset}_predictions.png")
            loss_path = os.path.join(settings.plots_dir, f"{settings.dataset}_loss.png")
        display_results(
            data.test_images,
            test_outputs,
            count=settings.num_display,
            seed=settings.seed,
            save_path=results_path,
        )
        plot_loss_curve(result.loss_history, save_path=loss_path)

    return result

def run(argv=None) -> int:
    try:
        settings, learning_settings = build_settings(argv)
        set_global_seed(settings.seed)
        print(describe_device(settings.torch_device_name))
        lr_demo(settings, learning_settings)
    except LogRegError as e:
        print(f"{type(e).__name__}: {e}")
        return EXIT_CODES[e.kind]
    except RuntimeError as e:
        # Raised by torch itself, e.g. CUDA out of memory
        print(f"Backend failure: {e}")
        return EXIT_CODES[BackendError.kind]
    return 0

if __name__ == "__main__":
    sys.exit(run())
