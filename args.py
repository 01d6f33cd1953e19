import argparse

def get_args(argv=None):
    parser = argparse.ArgumentParser(description="One-vs-all logistic regression on MNIST-style data.")

    # Device / run mode
    parser.add_argument('--device', type=int, default=0, help='Index of the CUDA device to use (ignored on CPU-only machines).')
    parser.add_argument('--console', action='store_true', help='Console only: do not display sample predictions.')
    parser.add_argument('--perc', type=int, default=60, help='Percentage of the sample pool used for training (capped at 80).')
    parser.add_argument('--dataset', type=str, default="mnist", choices=['mnist', 'fashionmnist'], help='Dataset to use.')
    parser.add_argument('--data-root', type=str, default="./data", help='Where to store/download the data.')
    parser.add_argument('--seed', type=int, default=42, help='Random seed for the train/test split and display.')

    # Learning settings
    parser.add_argument('--alpha', type=float, default=1.0, help='Gradient descent learning rate.')
    parser.add_argument('--lambda', dest='lambda_', type=float, default=1.0, help='L2 regularization strength (bias row excluded).')
    parser.add_argument('--max-iter', type=int, default=500, help='Maximum number of gradient descent iterations.')
    parser.add_argument('--threshold', type=float, default=0.1, help='Stop once the loss drops below this absolute value.')
    parser.add_argument('--strict', action='store_true', help='Fail on non-finite loss or gradient instead of continuing.')
    parser.add_argument('--log-interval', type=int, default=0, help='Print the loss every N iterations (0 = silent).')

    # Benchmark / display
    parser.add_argument('--bench-iters', type=int, default=100, help='Number of prediction runs averaged in the benchmark.')
    parser.add_argument('--num-display', type=int, default=20, help='Number of test images shown with their prediction.')
    parser.add_argument('--plots-dir', type=str, default=None, help='Save figures to this directory instead of showing them.')

    args = parser.parse_args(argv)

    return args
