"""
Plotting script for Bullet Dodge training results.
Generates survival curves and algorithm comparison plots.
"""

import os
import argparse
import pandas as pd
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from typing import Dict, Optional

COLORS = {"dqn": "#2ecc71", "ppo": "#3498db"}


def load_metrics(log_dir: str, algo: str) -> Optional[pd.DataFrame]:
    """Load metrics CSV for an algorithm."""
    for csv_path in (
        os.path.join(log_dir, algo, f"{algo}_metrics.csv"),
        os.path.join(log_dir, f"{algo}_metrics.csv"),
    ):
        if os.path.exists(csv_path):
            return pd.read_csv(csv_path)
    return None


def smooth(data: np.ndarray, window: int = 10) -> np.ndarray:
    """Apply rolling average smoothing."""
    if len(data) < window:
        return data
    kernel = np.ones(window) / window
    return np.convolve(data, kernel, mode="valid")


def _plot_smoothed(ax, df: pd.DataFrame, column: str, window: int, **kwargs):
    values = smooth(df[column].values, window)
    ax.plot(df["timestep"].values[:len(values)], values, linewidth=2, **kwargs)


def plot_learning_curve(
    df: pd.DataFrame,
    algo: str,
    output_dir: str,
    window: int = 50,
):
    """Plot learning curve for a single algorithm."""
    fig, axes = plt.subplots(2, 2, figsize=(14, 10))
    fig.suptitle(f"{algo.upper()} Learning Curves", fontsize=16, fontweight="bold")

    # Episode reward
    ax = axes[0, 0]
    _plot_smoothed(ax, df, "reward", window, label=f"{algo} (smoothed)")
    ax.set_xlabel("Timesteps")
    ax.set_ylabel("Episode Reward")
    ax.set_title("Episode Reward vs Timesteps")
    ax.legend()
    ax.grid(True, alpha=0.3)

    # Survival time
    ax = axes[0, 1]
    _plot_smoothed(ax, df, "survival_time", window, color="orange")
    ax.set_xlabel("Timesteps")
    ax.set_ylabel("Seconds")
    ax.set_title("Survival Time vs Timesteps")
    ax.grid(True, alpha=0.3)

    # Survival rate (rolling average)
    ax = axes[1, 0]
    _plot_smoothed(ax, df, "survived", window, color="green")
    ax.set_xlabel("Timesteps")
    ax.set_ylabel("Survival Rate")
    ax.set_title("Episodes Survived to Time Limit")
    ax.set_ylim(0, 1.1)
    ax.grid(True, alpha=0.3)

    # Survival time distribution
    ax = axes[1, 1]
    times = df["survival_time"].values
    ax.hist(times, bins=50, alpha=0.7, edgecolor="black")
    ax.axvline(np.mean(times), color="red", linestyle="--", label=f"Mean: {np.mean(times):.2f} s")
    ax.set_xlabel("Survival Time (s)")
    ax.set_ylabel("Frequency")
    ax.set_title("Survival Time Distribution")
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    os.makedirs(output_dir, exist_ok=True)
    save_path = os.path.join(output_dir, f"{algo}_learning_curve.png")
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()

    print(f"Saved {algo} learning curve to {save_path}")
    return save_path


def plot_comparison(
    data: Dict[str, pd.DataFrame],
    output_dir: str,
    window: int = 50,
):
    """Plot comparison of all algorithms."""
    data = {algo: df for algo, df in data.items() if df is not None and len(df) > 0}

    fig, axes = plt.subplots(1, 3, figsize=(18, 5))
    fig.suptitle("Algorithm Comparison", fontsize=16, fontweight="bold")

    for ax, column, title in (
        (axes[0], "reward", "Episode Reward"),
        (axes[1], "survival_time", "Survival Time (s)"),
    ):
        for algo, df in data.items():
            _plot_smoothed(ax, df, column, window, label=algo.upper(), color=COLORS.get(algo))
        ax.set_xlabel("Timesteps")
        ax.set_ylabel(title)
        ax.set_title(f"{title} Comparison")
        ax.legend()
        ax.grid(True, alpha=0.3)

    # Final survival box plot
    ax = axes[2]
    if data:
        final = [df["survival_time"].tail(100).values for df in data.values()]
        bp = ax.boxplot(final, patch_artist=True)
        ax.set_xticks(range(1, len(data) + 1))
        ax.set_xticklabels([algo.upper() for algo in data])
        for patch, algo in zip(bp["boxes"], data.keys()):
            patch.set_facecolor(COLORS.get(algo, "#888888"))
            patch.set_alpha(0.6)
    ax.set_ylabel("Survival Time (s)")
    ax.set_title("Final Performance (Last 100 Episodes)")
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    os.makedirs(output_dir, exist_ok=True)
    save_path = os.path.join(output_dir, "algorithm_comparison.png")
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()

    print(f"Saved comparison plot to {save_path}")
    return save_path


def summary_lines(data: Dict[str, Optional[pd.DataFrame]]):
    lines = [
        "=" * 60,
        "BULLET DODGE TRAINING SUMMARY",
        "=" * 60,
    ]

    for algo, df in data.items():
        if df is None or len(df) == 0:
            continue
        final = df.tail(100)
        lines += [
            "",
            f"{algo.upper()} Results:",
            "-" * 40,
            f"  Total Episodes: {len(df)}",
            f"  Total Timesteps: {df['timestep'].max():,}",
            f"  Mean Reward: {df['reward'].mean():.2f} ± {df['reward'].std():.2f}",
            f"  Mean Survival: {df['survival_time'].mean():.2f} s",
            f"  Best Survival: {df['survival_time'].max():.2f} s",
            "",
            "  Final Performance (last 100 episodes):",
            f"    Mean Survival: {final['survival_time'].mean():.2f} s",
            f"    Mean Final Difficulty: {final['final_difficulty'].mean():.2f}",
            f"    Survival Rate: {final['survived'].mean():.2%}",
        ]

    lines.append("=" * 60)
    return lines


def generate_summary_report(data: Dict[str, Optional[pd.DataFrame]], output_dir: str):
    """Generate a text summary report."""
    report = "\n".join(summary_lines(data))
    print(report)

    os.makedirs(output_dir, exist_ok=True)
    report_path = os.path.join(output_dir, "training_summary.txt")
    with open(report_path, "w") as f:
        f.write(report)

    print(f"\nSaved summary report to {report_path}")
    return report_path


def main():
    parser = argparse.ArgumentParser(description="Plot Bullet Dodge training results")
    parser.add_argument(
        "--log-dir",
        type=str,
        default="./logs",
        help="Directory containing log files",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default="./plots",
        help="Directory to save plots",
    )
    parser.add_argument(
        "--window",
        type=int,
        default=50,
        help="Smoothing window size (default: 50)",
    )
    parser.add_argument(
        "--algos",
        nargs="+",
        default=["dqn", "ppo"],
        help="Algorithms to plot",
    )

    args = parser.parse_args()

    print(f"Loading metrics from {args.log_dir}...")

    data = {}
    for algo in args.algos:
        df = load_metrics(args.log_dir, algo)
        if df is not None:
            print(f"  Loaded {algo}: {len(df)} episodes")
        else:
            print(f"  No data found for {algo}")
        data[algo] = df

    if not any(d is not None for d in data.values()):
        print("\nNo data found! Make sure training has generated metrics files.")
        return

    for algo, df in data.items():
        if df is not None:
            plot_learning_curve(df, algo, args.output_dir, args.window)

    if sum(1 for d in data.values() if d is not None) > 1:
        plot_comparison(data, args.output_dir, args.window)

    generate_summary_report(data, args.output_dir)

    print(f"\nAll plots saved to {args.output_dir}/")


if __name__ == "__main__":
    main()
