#!/usr/bin/env python3
"""
Personal OS CLI
------------------------

Command-line interface for the Markdown files behind Personal OS.

Every command reads or writes the same files a text editor would, and
prints JSON so the output can be piped into other tools.

Command Groups:
    - daily: list, show, create, update daily check-ins
    - weekly: list, show, create, update weekly reviews
    - reviews: daily and weekly reviews on one timeline
    - life-map: show and update Life Map scores
    - goals: read and write goal files and their drafts, dashboard snapshot
    - chart: dashboard radar chart data

Usage:
    pos --root ~/notes daily list
    pos daily create --file review.json
    echo '{"weekNumber": 2, ...}' | pos weekly update 2025-01-06 --file -
    pos reviews --type weekly --sort asc
    pos life-map set career 8 --assessment "Strong momentum"
    pos goals draft save 1-year --file draft.md
    pos goals snapshot
    pos chart
"""
from __future__ import annotations

from typing import IO, Optional

import click

from personal_os.core.cli_decorators import personal_os_cli_group
from personal_os.core.cli_utils import echo_json, load_json_payload
from personal_os.core.exceptions import PersonalOSError
from personal_os.core.logging_manager import handle_cli_error
from personal_os.core.paths import MarkdownLayout, layout_for
from personal_os.dataclasses.enums import Domain, Timeframe
from personal_os.dataclasses.life_map import LifeMap
from personal_os.pipeline.aggregation import build_dashboard_chart
from personal_os.storage import (
    DailyReviewStore,
    GoalsStore,
    LifeMapStore,
    ReviewStore,
    WeeklyReviewStore,
    list_all_reviews,
)


def _layout(ctx: click.Context) -> MarkdownLayout:
    return layout_for(ctx.obj["root"])


def _daily_store(ctx: click.Context) -> DailyReviewStore:
    return DailyReviewStore(_layout(ctx).reviews_daily_dir, logger=ctx.obj["logger"])


def _weekly_store(ctx: click.Context) -> WeeklyReviewStore:
    return WeeklyReviewStore(_layout(ctx).reviews_weekly_dir, logger=ctx.obj["logger"])


def _life_map_store(ctx: click.Context) -> LifeMapStore:
    return LifeMapStore(_layout(ctx).life_map_path, logger=ctx.obj["logger"])


def _goals_store(ctx: click.Context) -> GoalsStore:
    layout = _layout(ctx)
    return GoalsStore(
        layout.goals_dir, layout.goals_drafts_dir, logger=ctx.obj["logger"]
    )


@personal_os_cli_group("pos")
def cli(ctx: click.Context) -> None:
    """Personal OS - reviews, Life Map and goals in plain Markdown"""
    pass


# ----- Reviews -----
def _review_group(kind: str, store_factory) -> click.Group:
    """Build the list/show/create/update group for one review kind."""

    @click.group(name=kind, help=f"Manage {kind} reviews")
    def group() -> None:
        pass

    @group.command("list")
    @click.pass_context
    def list_reviews(ctx: click.Context) -> None:
        """List reviews, newest first."""
        try:
            store: ReviewStore = store_factory(ctx)
            echo_json([item.to_dict() for item in store.list()])
        except PersonalOSError as e:
            handle_cli_error(ctx, e, f"list_{kind}_reviews")

    @group.command("show")
    @click.argument("date")
    @click.pass_context
    def show_review(ctx: click.Context, date: str) -> None:
        """Show the parsed review for DATE (YYYY-MM-DD)."""
        try:
            echo_json(store_factory(ctx).get(date).to_dict())
        except PersonalOSError as e:
            handle_cli_error(ctx, e, f"show_{kind}_review", {"date": date})

    @group.command("create")
    @click.option(
        "-f",
        "--file",
        "payload",
        type=click.File("r", encoding="utf-8"),
        default="-",
        help="JSON payload (default: stdin)",
    )
    @click.pass_context
    def create_review(ctx: click.Context, payload: IO[str]) -> None:
        """Create a review from a JSON payload."""
        try:
            form = store_factory(ctx).create(load_json_payload(payload))
            echo_json({"success": True, "date": form.date})
        except PersonalOSError as e:
            handle_cli_error(ctx, e, f"create_{kind}_review")

    @group.command("update")
    @click.argument("date")
    @click.option(
        "-f",
        "--file",
        "payload",
        type=click.File("r", encoding="utf-8"),
        default="-",
        help="JSON payload (default: stdin)",
    )
    @click.pass_context
    def update_review(ctx: click.Context, date: str, payload: IO[str]) -> None:
        """Replace the review for DATE with a JSON payload."""
        try:
            store_factory(ctx).update(date, load_json_payload(payload))
            echo_json({"success": True, "date": date})
        except PersonalOSError as e:
            handle_cli_error(ctx, e, f"update_{kind}_review", {"date": date})

    return group


cli.add_command(_review_group("daily", _daily_store))
cli.add_command(_review_group("weekly", _weekly_store))


@cli.command("reviews")
@click.option(
    "--type",
    "review_type",
    type=click.Choice(["all", "daily", "weekly"]),
    default="all",
    show_default=True,
    help="Review kind to include",
)
@click.option(
    "--sort",
    type=click.Choice(["desc", "asc"]),
    default="desc",
    show_default=True,
    help="Date order",
)
@click.pass_context
def reviews(ctx: click.Context, review_type: str, sort: str) -> None:
    """List daily and weekly reviews on one timeline."""
    try:
        items = list_all_reviews(
            _daily_store(ctx), _weekly_store(ctx), review_type=review_type, sort=sort
        )
        echo_json(items)
    except PersonalOSError as e:
        handle_cli_error(ctx, e, "list_reviews", {"type": review_type, "sort": sort})


# ----- Life Map -----
@cli.group("life-map")
def life_map() -> None:
    """Show and update Life Map scores"""
    pass


@life_map.command("show")
@click.option("--chart", is_flag=True, help="Print radar chart points instead")
@click.pass_context
def life_map_show(ctx: click.Context, chart: bool) -> None:
    """Show the six domain scores."""
    try:
        parsed = _life_map_store(ctx).load()
        echo_json(parsed.chart_data() if chart else parsed.to_dict())
    except PersonalOSError as e:
        handle_cli_error(ctx, e, "show_life_map")


@life_map.command("set")
@click.argument("domain", type=click.Choice(Domain.choices(), case_sensitive=False))
@click.argument("score", type=float)
@click.option("-a", "--assessment", default=None, help="Brief assessment text")
@click.pass_context
def life_map_set(
    ctx: click.Context, domain: str, score: float, assessment: Optional[str]
) -> None:
    """Set DOMAIN to SCORE (clamped to 1-10)."""
    update = {"score": score}
    if assessment is not None:
        update["assessment"] = assessment

    try:
        updated = _life_map_store(ctx).update({"domains": {domain.lower(): update}})
        echo_json(updated.to_dict())
    except PersonalOSError as e:
        handle_cli_error(ctx, e, "update_life_map", {"domain": domain})


@life_map.command("update")
@click.option(
    "-f",
    "--file",
    "payload",
    type=click.File("r", encoding="utf-8"),
    default="-",
    help='JSON payload {"domains": {...}} (default: stdin)',
)
@click.pass_context
def life_map_update(ctx: click.Context, payload: IO[str]) -> None:
    """Apply a partial update of several domains."""
    try:
        updated = _life_map_store(ctx).update(load_json_payload(payload))
        echo_json(updated.to_dict())
    except PersonalOSError as e:
        handle_cli_error(ctx, e, "update_life_map")


# ----- Goals -----
@cli.group("goals")
def goals() -> None:
    """Read and write goal files"""
    pass


@goals.command("show")
@click.argument("timeframe", type=click.Choice(Timeframe.choices()))
@click.pass_context
def goals_show(ctx: click.Context, timeframe: str) -> None:
    """Show a goal file with its frontmatter metadata."""
    try:
        echo_json(_goals_store(ctx).read(timeframe))
    except PersonalOSError as e:
        handle_cli_error(ctx, e, "read_goals", {"timeframe": timeframe})


@goals.command("write")
@click.argument("timeframe", type=click.Choice(Timeframe.choices()))
@click.option(
    "-f",
    "--file",
    "source",
    type=click.File("r", encoding="utf-8"),
    default="-",
    help="Markdown content (default: stdin)",
)
@click.pass_context
def goals_write(ctx: click.Context, timeframe: str, source: IO[str]) -> None:
    """Replace a goal file and clear its draft."""
    try:
        _goals_store(ctx).write(timeframe, source.read())
        echo_json({"success": True})
    except PersonalOSError as e:
        handle_cli_error(ctx, e, "write_goals", {"timeframe": timeframe})


@goals.group("draft")
def goals_draft() -> None:
    """Unsaved work on a goal file"""
    pass


@goals_draft.command("show")
@click.argument("timeframe", type=click.Choice(Timeframe.choices()))
@click.pass_context
def goals_draft_show(ctx: click.Context, timeframe: str) -> None:
    """Show the saved draft for a goal file."""
    try:
        content = _goals_store(ctx).read_draft(timeframe)
        echo_json({"content": content, "hasDraft": True})
    except PersonalOSError as e:
        handle_cli_error(ctx, e, "read_goal_draft", {"timeframe": timeframe})


@goals_draft.command("save")
@click.argument("timeframe", type=click.Choice(Timeframe.choices()))
@click.option(
    "-f",
    "--file",
    "source",
    type=click.File("r", encoding="utf-8"),
    default="-",
    help="Draft content (default: stdin)",
)
@click.pass_context
def goals_draft_save(ctx: click.Context, timeframe: str, source: IO[str]) -> None:
    """Save a draft without touching the goal file."""
    try:
        _goals_store(ctx).save_draft(timeframe, source.read())
        echo_json({"success": True})
    except PersonalOSError as e:
        handle_cli_error(ctx, e, "save_goal_draft", {"timeframe": timeframe})


@goals_draft.command("discard")
@click.argument("timeframe", type=click.Choice(Timeframe.choices()))
@click.pass_context
def goals_draft_discard(ctx: click.Context, timeframe: str) -> None:
    """Discard the draft for a goal file."""
    try:
        _goals_store(ctx).delete_draft(timeframe)
        echo_json({"success": True})
    except PersonalOSError as e:
        handle_cli_error(ctx, e, "discard_goal_draft", {"timeframe": timeframe})


@goals.command("snapshot")
@click.pass_context
def goals_snapshot_command(ctx: click.Context) -> None:
    """Show the first five 1-year goals."""
    try:
        snapshot = _goals_store(ctx).snapshot()
        echo_json({"goals": [goal.to_dict() for goal in snapshot]})
    except PersonalOSError as e:
        handle_cli_error(ctx, e, "goals_snapshot")


# ----- Dashboard -----
@cli.command("chart")
@click.pass_context
def chart(ctx: click.Context) -> None:
    """
    Dashboard radar chart data.

    Uses the Life Map when any domain is scored, otherwise falls back to
    scores aggregated from the daily reviews.
    """
    try:
        store = _life_map_store(ctx)
        scores = store.load() if store.path.exists() else LifeMap()
        echo_json(build_dashboard_chart(scores, _daily_store(ctx).load_all()))
    except PersonalOSError as e:
        handle_cli_error(ctx, e, "dashboard_chart")


if __name__ == "__main__":
    cli()
