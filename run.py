"""
Usage examples for the prize-pool payout builder.

Usage:
    python run.py

    # A single example:
    python run.py --example leaderboard
"""

import argparse
import logging

from pool_payout.engine import compute_distribution, prize_distribution_json
from pool_payout.metrics import compute_distribution_metrics
from pool_payout.report import format_metrics, format_number


def display_results(title, buckets):
    print("\n" + "=" * 50)
    print(title)
    print("=" * 50)

    total = 0
    for bucket in buckets:
        total += bucket.total
        if bucket.width == 1:
            print(f"  Rank #{bucket.start_rank}: {format_number(bucket.coins)} coins")
        else:
            print(
                f"  Rank #{bucket.start_rank}-{bucket.end_rank}: {format_number(bucket.coins)} "
                f"coins each ({bucket.width} winners)"
            )
    print("-" * 50)
    print(f"  Total: {format_number(total)} coins | Buckets: {len(buckets)}")


def small_tournament():
    print("\n### Small Tournament ###")
    print("20 winners competing for 5,000 coins (min 50 each)")
    display_results("Small Tournament Results", compute_distribution(20, 5000, 50))


def medium_tournament():
    print("\n### Medium Tournament ###")
    print("100 winners competing for 50,000 coins (min 100 each)")
    display_results("Medium Tournament Results", compute_distribution(100, 50000, 100))


def large_lottery():
    print("\n### Large Lottery ###")
    print("1000 winners sharing 1,000,000 coins (min 200 each)")
    display_results("Large Lottery Results", compute_distribution(1000, 1000000, 200))


def leaderboard():
    print("\n### Gaming Leaderboard ###")
    print("Top 50 players get gems from weekly pool of 10,000 gems")

    print("\nLeaderboard Rewards:")
    for bucket in compute_distribution(50, 10000, 50):
        ranks = f"#{bucket.start_rank}" if bucket.width == 1 else f"#{bucket.start_rank}-{bucket.end_rank}"
        print(f"  {ranks:<10} -> {bucket.coins} gems")


def analysis():
    print("\n### Distribution Analysis ###")
    metrics = compute_distribution_metrics(compute_distribution(100, 100000, 100))
    print("\n" + format_metrics(metrics))


def api_response():
    print("\n### API Response Format ###")
    print("Raw JSON output suitable for API responses:\n")
    print(prize_distribution_json(10, 1000, 25))


EXAMPLES = {
    'small': small_tournament,
    'medium': medium_tournament,
    'lottery': large_lottery,
    'leaderboard': leaderboard,
    'analysis': analysis,
    'api': api_response,
}


def main():
    parser = argparse.ArgumentParser(
        description="Prize-pool payout usage examples"
    )
    parser.add_argument(
        "--example", default=None,
        choices=list(EXAMPLES.keys()),
        help="Run a single example (default: all)"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show pipeline logs"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    selected = [EXAMPLES[args.example]] if args.example else list(EXAMPLES.values())
    for example in selected:
        example()

    print("\n" + "=" * 50)
    print("Examples completed!")
    print("=" * 50 + "\n")


if __name__ == "__main__":
    main()
