"""Click CLI with commands: fetch, id."""

from __future__ import annotations

from pathlib import Path

import click

from threadllm.config import load_settings
from threadllm.errors import InvalidInputError
from threadllm.orchestrator import ThreadLoader
from threadllm.statuses import ERROR_MESSAGES, ErrorKind, FetchState, RenderMode
from threadllm.urls import normalize_thread_id
from threadllm.utils.logging import setup_logging


@click.group()
@click.option("--config", "config_path", default="threadllm.yaml", help="Path to config YAML file.")
@click.pass_context
def cli(ctx: click.Context, config_path: str) -> None:
    """threadllm — Reddit thread to LLM-ready text."""
    ctx.ensure_object(dict)
    ctx.obj["settings"] = load_settings(config_path)


@cli.command()
@click.argument("thread", required=False, default="")
@click.option(
    "--format",
    "mode",
    type=click.Choice([m.value for m in RenderMode]),
    help="Output format: txt (LLM text), toon (compact text), json. Defaults to THREADLLM_DEFAULT_FORMAT.",
)
@click.option("--query", help="Launch query string; loads the thread named by its 'url' or 'id' parameter.")
@click.option("--output", "output_path", type=click.Path(dir_okay=False, path_type=Path), help="Write the result to a file instead of stdout.")
@click.option("--stats", "show_stats", is_flag=True, help="Print thread title and stats to stderr.")
@click.pass_context
def fetch(ctx: click.Context, thread: str, mode: str | None, query: str | None, output_path: Path | None, show_stats: bool) -> None:
    """Fetch THREAD (URL or post id) and print it in the chosen format."""
    settings = ctx.obj["settings"]
    log = setup_logging(settings.log_dir, "threadllm", settings.log_level)

    loader = ThreadLoader(settings, log)
    if mode:
        loader.set_mode(mode)

    if query and not thread:
        state = loader.auto_load(query)
        if state.status == FetchState.IDLE:
            click.echo("Query has no 'url' or 'id' parameter.", err=True)
            raise SystemExit(1)
    else:
        state = loader.submit(thread)

    if state.status != FetchState.SUCCESS:
        click.echo(state.error, err=True)
        raise SystemExit(1)

    if show_stats:
        stats = state.stats
        click.echo(f"{state.post.title} · r/{state.post.subreddit}", err=True)
        click.echo(
            f"Post score: {stats.post_score}  |  Comments: {stats.total_comments}  |  "
            f"Sum comment scores: {stats.total_comment_score}  |  "
            f"Avg comment score: {stats.avg_comment_score:.2f}  |  "
            f"Comments / score: {stats.comments_per_score_point:.3f}",
            err=True,
        )

    text = state.display_text
    if output_path:
        output_path.write_text(text, encoding="utf-8")
        click.echo(f"Wrote {RenderMode(state.mode).label} to {output_path}", err=True)
    else:
        click.echo(text, nl=not text.endswith("\n"))


@cli.command("id")
@click.argument("thread")
def thread_id(thread: str) -> None:
    """Print the thread id extracted from a URL or bare id."""
    try:
        click.echo(normalize_thread_id(thread))
    except InvalidInputError:
        click.echo(ERROR_MESSAGES[ErrorKind.INVALID_INPUT], err=True)
        raise SystemExit(1) from None
