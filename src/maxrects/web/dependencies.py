"""FastAPI dependency injection for packing endpoints."""

from typing import Annotated, Any

from fastapi import Body, Depends, Query

from maxrects.application import PackCommand, ScorerFactory
from maxrects.application.config import PackingJobConfig, load_config_from_dict
from maxrects.web.exceptions import UnknownHeuristicError


def get_job_config(
    job: Annotated[
        dict[str, Any],
        Body(description="Packing job, same format as a job file"),
    ],
) -> PackingJobConfig:
    """Dependency for the validated packing job in the request body."""
    return load_config_from_dict(job)


def get_pack_command(
    config: Annotated[PackingJobConfig, Depends(get_job_config)],
    heuristic: Annotated[
        str | None,
        Query(description="Override the job's heuristic"),
    ] = None,
) -> PackCommand:
    """Dependency for a PackCommand using the requested or the job's heuristic."""
    name = heuristic or config.heuristic
    try:
        return PackCommand(name)
    except ValueError as e:
        raise UnknownHeuristicError(name, ScorerFactory.available_heuristics()) from e


# Type aliases for cleaner endpoint signatures
JobConfigDep = Annotated[PackingJobConfig, Depends(get_job_config)]
PackCommandDep = Annotated[PackCommand, Depends(get_pack_command)]
