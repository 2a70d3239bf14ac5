"""Multi-asset depreciation aggregation.

Combines individual asset schedules into a by-year view, and summarizes
trailing groups (named sets of similar products compared across years).
"""

from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal

from tax_inventory.domain.depreciation import (
    AssetElection,
    CombinedSchedule,
    CombinedYearTotal,
    TrailingGroupSummary,
)
from tax_inventory.logging_config import get_logger
from tax_inventory.services.depreciation import schedule_for_election

logger = get_logger(__name__)


def combined_schedule(assets: Iterable[AssetElection]) -> CombinedSchedule:
    """Aggregate several asset schedules by tax year.

    Each year's total is the sum of every asset's total deduction in that
    year; assets without a row for a year contribute nothing. The running
    cumulative and book value are computed over ascending years against the
    sum of all original costs.

    Args:
        assets: Named elections. A repeated name keeps the later schedule in
            per_asset, while both still count towards the combined totals.

    Returns:
        CombinedSchedule with per-asset schedules and by-year totals.
    """
    per_asset = {}
    yearly_totals: dict[int, Decimal] = {}
    total_original_cost = Decimal("0")
    asset_count = 0

    for asset in assets:
        asset_count += 1
        total_original_cost += asset.original_cost

        schedule = schedule_for_election(asset.election)
        per_asset[asset.name] = schedule

        for row in schedule:
            yearly_totals[row.year] = (
                yearly_totals.get(row.year, Decimal("0")) + row.total_deduction
            )

    combined: dict[int, CombinedYearTotal] = {}
    running = Decimal("0")
    for year in sorted(yearly_totals):
        running += yearly_totals[year]
        combined[year] = CombinedYearTotal(
            total_depreciation=yearly_totals[year],
            total_cumulative=running,
            total_book_value=total_original_cost - running,
        )

    logger.debug(
        "combined_schedule_computed",
        asset_count=asset_count,
        year_count=len(combined),
        total_original_cost=str(total_original_cost),
    )

    return CombinedSchedule(
        per_asset=per_asset,
        combined=combined,
        total_original_cost=total_original_cost,
    )


def trailing_group_comparison(
    groups: Mapping[str, Sequence[AssetElection]],
) -> list[TrailingGroupSummary]:
    """Summarize each trailing group for side-by-side comparison.

    Groups are returned sorted by name. An empty group yields a summary with
    zero totals and an empty schedule.
    """
    summaries: list[TrailingGroupSummary] = []

    for group_name in sorted(groups):
        assets = list(groups[group_name])
        schedule = combined_schedule(assets)
        first_year = (
            schedule.combined[schedule.years[0]].total_depreciation
            if schedule.combined
            else Decimal("0")
        )
        summaries.append(
            TrailingGroupSummary(
                group_name=group_name,
                asset_count=len(assets),
                total_cost=schedule.total_original_cost,
                first_year_deduction=first_year,
                schedule=schedule,
            )
        )

    return summaries
