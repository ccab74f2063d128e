"""Pydantic schemas shared by compute tasks."""

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

# ─────────────────────────────────────────────────────────────
# Base job params
# ─────────────────────────────────────────────────────────────


class BaseJobParams(BaseModel):
    """Base parameters for all compute tasks.

    All task-specific parameter classes should extend this.
    """

    input_path: str = Field(description="path or URI of the input file")
    output_path: str = Field(description="path to the output file")


# ─────────────────────────────────────────────────────────────
# Task output (metadata only)
# ─────────────────────────────────────────────────────────────


class TaskOutput(BaseModel):
    pass


# ─────────────────────────────────────────────────────────────
# Task execution result
# ─────────────────────────────────────────────────────────────
class TaskResult(BaseModel):
    """Result returned by ComputeModule.execute()."""

    status: str
    task_output: Mapping[str, object] | None = None
    error: str | None = None

    model_config = ConfigDict(extra="forbid")
