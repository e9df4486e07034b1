"""
Text formatting of distributions for terminal output.
"""

from typing import List, Optional

from .types import Bucket, PrizePool, DistributionMetrics


def format_number(value) -> str:
    """Thousands-separated integer."""
    return f"{int(value):,}"


def ordinal(n: int) -> str:
    """1 -> '1st', 2 -> '2nd', 11 -> '11th', 23 -> '23rd'."""
    if 10 <= n % 100 <= 20:
        suffix = 'th'
    else:
        suffix = {1: 'st', 2: 'nd', 3: 'rd'}.get(n % 10, 'th')
    return f"{n}{suffix}"


def format_rank(start_rank: int, end_rank: int) -> str:
    """Ordinal for a single rank, 'start-end' for a range."""
    if start_rank == end_rank:
        return ordinal(start_rank)
    return f"{start_rank}-{end_rank}"


def format_distribution_table(buckets: List[Bucket], pool: Optional[PrizePool] = None) -> str:
    """
    Render a distribution as a fixed-width table.

    Columns: rank, prize per winner, winners in bucket, bucket total.
    """
    lines = []
    if pool is not None:
        lines.append("=" * 55)
        lines.append(
            f"Prize Distribution for {pool.winners} winners | "
            f"Pool: {format_number(pool.total_coins)} | Min: {pool.min_coins}"
        )
        lines.append("=" * 55)
        lines.append("")

    lines.append(f"{'Rank':<12}{'Prize':<12}{'Winners':<10}Total Payout")
    lines.append("-" * 12 + "-" * 12 + "-" * 10 + "-" * 12)

    total_distributed = 0
    for bucket in buckets:
        total_distributed += bucket.total
        lines.append(
            f"{format_rank(bucket.start_rank, bucket.end_rank):<12}"
            f"{format_number(bucket.coins):<12}"
            f"{bucket.width:<10}"
            f"{format_number(bucket.total)}"
        )

    lines.append("-" * 46)
    lines.append(f"Total distributed: {format_number(total_distributed)}")
    lines.append(f"Number of buckets: {len(buckets)}")

    return "\n".join(lines)


def format_metrics(metrics: DistributionMetrics) -> str:
    """Render summary metrics as an indented block."""
    return "\n".join([
        "Distribution Statistics:",
        f"  First Place Prize: {format_number(metrics.first_prize)} coins",
        f"  Last Place Prize:  {format_number(metrics.last_prize)} coins",
        f"  Prize Ratio (1st/last): {metrics.prize_ratio:.1f}x",
        f"  Number of Buckets: {metrics.n_buckets}",
        f"  Total Winners: {metrics.total_winners}",
        f"  Total Payout: {format_number(metrics.total_payout)} coins",
    ])
