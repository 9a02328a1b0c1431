import argparse

import matplotlib.pyplot as plt
import numpy as np

from holdem_odds import simulate
from holdem_odds.helpers.equity import MAX_OPPONENTS, MIN_OPPONENTS

# --- CONFIGURATION ---
DEFAULT_HERO = ["AS", "AH"]
DEFAULT_ITERS = 4000


def sweep_opponents(hero, board, iterations, seed):
    """Win/tie/lose percentages for every table size, one row per opponent count."""
    rows = []
    for n in range(MIN_OPPONENTS, MAX_OPPONENTS + 1):
        res = simulate(hero, board, opponents=n, iterations=iterations, seed=seed)
        rows.append((res.win, res.tie, res.lose))
    return np.array(rows)


def plot_equity_by_opponents(hero, board, iterations, seed, out_file):
    data = sweep_opponents(hero, board, iterations, seed)
    opponents = np.arange(MIN_OPPONENTS, MAX_OPPONENTS + 1)

    plt.figure(figsize=(10, 6))
    plt.stackplot(
        opponents, data[:, 0], data[:, 1], data[:, 2],
        labels=['Win', 'Tie', 'Lose'],
        colors=['#2ca02c', '#1f77b4', '#d62728'],
        alpha=0.8,
    )

    # 95% interval of the win estimate
    p = data[:, 0] / 100.0
    half = 1.96 * np.sqrt(p * (1 - p) / iterations) * 100
    plt.errorbar(opponents, data[:, 0], yerr=half, fmt='o', color='black', capsize=3, markersize=3)

    hand = ' '.join(hero) + (f"  |  {' '.join(board)}" if board else '')
    plt.title(f'Equity by Opponent Count ({hand})', fontsize=14, fontweight='bold')
    plt.xlabel('Opponents', fontsize=12)
    plt.ylabel('Percent', fontsize=12)
    plt.ylim(0, 100)
    plt.xticks(opponents)
    plt.legend(loc='upper right')
    plt.grid(True, alpha=0.3)
    plt.tight_layout()
    plt.savefig(out_file, dpi=300)
    print(f"Saved '{out_file}'")
    return data


if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--hero", nargs=2, default=DEFAULT_HERO)
    ap.add_argument("--board", nargs="*", default=[])
    ap.add_argument("--iterations", type=int, default=DEFAULT_ITERS)
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--out", type=str, default="graph_equity_by_opponents.png")
    args = ap.parse_args()

    plot_equity_by_opponents(args.hero, args.board, args.iterations, args.seed, args.out)
    plt.show()
