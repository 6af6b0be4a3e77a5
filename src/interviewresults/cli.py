"\"\"\"Typer CLI entrypoint for interview result reports.\"\"\""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import structlog
import typer

from .config import ConfigError, ConfigManager
from .container import create_container
from .errors import FetchFailure
from .logging import configure_logging
from .report import OutputWriter, build_report
from .schemas import ResultFilter, SortSpec, ViewState

app = typer.Typer(help="Interview results aggregation CLI.")

SORT_KEYS = ("candidate_name", "job_title", "overall_rating", "latest_completed_at")
SCOPES = ("all", "assigned_by_current_user")
LOG_FORMATS = ("json", "console")


@app.command()
def report(
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path.",
    ),
    snapshot: Optional[Path] = typer.Option(
        None, exists=True, readable=True, dir_okay=False, help="Exported ATS snapshot JSON."
    ),
    api_url: Optional[str] = typer.Option(None, help="ATS API base URL."),
    token: Optional[str] = typer.Option(None, help="ATS API bearer token."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    scope: Optional[str] = typer.Option(None, help="Interview scope: all or assigned_by_current_user."),
    job: Optional[str] = typer.Option(None, help="Only show results for this job id."),
    status: Optional[str] = typer.Option(None, help="Status filter (only 'completed' matches)."),
    search: Optional[str] = typer.Option(None, help="Case-insensitive free-text search."),
    sort_key: str = typer.Option("latest_completed_at", help="Sort key."),
    descending: bool = typer.Option(True, "--descending/--ascending", help="Sort direction."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    log_format: str = typer.Option("json", help="Log rendering: json or console."),
) -> None:
    """Compute interview results, apply the view and write a JSON report."""
    if sort_key not in SORT_KEYS:
        raise typer.BadParameter(f"Sort key must be one of {', '.join(SORT_KEYS)}", param_name="sort_key")
    if log_format not in LOG_FORMATS:
        raise typer.BadParameter(f"Log format must be one of {', '.join(LOG_FORMATS)}", param_name="log_format")
    if scope is not None and scope not in SCOPES:
        raise typer.BadParameter(f"Scope must be one of {', '.join(SCOPES)}", param_name="scope")

    settings: dict[str, Any] = {}
    if config:
        try:
            settings = ConfigManager.load_file(config).to_settings()
        except ConfigError as exc:
            raise typer.BadParameter(str(exc), param_name="config") from exc
    if api_url:
        api_settings = settings.setdefault("api", {})
        api_settings["base_url"] = api_url
        if token:
            api_settings["token"] = token

    if snapshot is None and not settings.get("api", {}).get("base_url"):
        raise typer.BadParameter("Provide --snapshot or --api-url (or api.base_url in config)", param_name="snapshot")

    configure_logging(log_level, json_output=log_format == "json")
    logger = structlog.get_logger(__name__)

    container = create_container(settings=settings, snapshot_path=snapshot)
    refresher = container.refresher()
    engine = container.engine()

    try:
        result_snapshot = refresher.refresh(scope=scope)
    except FetchFailure as exc:
        logger.error("refresh.failed", operation=exc.operation, error=exc.message)
        typer.echo(f"Refresh failed (retryable): {exc}", err=True)
        raise typer.Exit(code=2) from exc

    view = ViewState(
        filter=ResultFilter(job_id=job, status=status, search=search),
        sort=SortSpec(key=sort_key, descending=descending),
    )
    visible = engine.apply_view(result_snapshot.results, view)
    columns = engine.project_columns(visible, result_snapshot.focus_area_sets)

    OutputWriter().write(output, build_report(result_snapshot, view, visible, columns))

    if result_snapshot.partial:
        failed = ", ".join(sorted(result_snapshot.failed_jobs))
        typer.echo(f"Warning: focus areas unavailable for jobs {failed}; their ratings are 0.", err=True)
    typer.echo(f"Wrote {len(visible)} of {len(result_snapshot.results)} results to {output}.")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
