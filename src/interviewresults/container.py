"\"\"\"Dependency injection container for the results engine.\"\"\""

from __future__ import annotations

from pathlib import Path
from typing import Any

from dependency_injector import containers, providers

from .adapters import AtsHttpClient, AtsPayloadAdapter, SnapshotFileCollaborators
from .core import Aggregator, AggregatorConfig, ResultsEngine, Scorer
from .refresh import ResultsRefresher
from .schemas.config import AppConfig


class ResultsContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    aggregator = providers.Singleton(Aggregator)
    scorer = providers.Singleton(Scorer)

    engine = providers.Singleton(
        ResultsEngine,
        aggregator=aggregator,
        scorer=scorer,
    )

    payload_adapter = providers.Singleton(AtsPayloadAdapter)

    snapshot_collaborators = providers.Singleton(
        SnapshotFileCollaborators,
        path=config.snapshot_path,
        adapter=payload_adapter,
    )

    api_client = providers.Singleton(
        AtsHttpClient,
        base_url=config.api.base_url,
        token=config.api.token,
        timeout=config.api.timeout,
        adapter=payload_adapter,
    )

    collaborators = providers.Selector(
        config.source,
        snapshot=snapshot_collaborators,
        api=api_client,
    )

    refresher = providers.Factory(
        ResultsRefresher,
        engine=engine,
        source=collaborators,
        directory=collaborators,
        registry=collaborators,
        max_workers=config.refresh.max_workers,
        scope=config.refresh.scope,
    )


def create_container(
    *,
    settings: dict[str, Any] | None = None,
    snapshot_path: str | Path | None = None,
) -> ResultsContainer:
    """Instantiate container with validated settings.

    ``snapshot_path`` selects the file-backed collaborators; otherwise the
    ATS API is used when ``api.base_url`` is configured.
    """

    app_config = AppConfig.model_validate(settings or {})
    values: dict[str, Any] = app_config.model_dump()
    values["snapshot_path"] = str(snapshot_path) if snapshot_path else None
    if snapshot_path:
        values["source"] = "snapshot"
    elif app_config.api.base_url:
        values["source"] = "api"
    else:
        values["source"] = None

    container = ResultsContainer()
    container.config.from_dict(values)

    engine_settings = app_config.engine
    if engine_settings.normalize_email or engine_settings.zero_means_unrated:
        aggregator_config = AggregatorConfig(**engine_settings.model_dump())
        container.aggregator.override(
            providers.Singleton(Aggregator, config=aggregator_config)
        )

    return container
