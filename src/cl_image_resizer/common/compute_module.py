"""ComputeModule - Abstract base class for compute tasks."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Callable, Generic, TypeVar

from .schemas import BaseJobParams, TaskOutput, TaskResult

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=BaseJobParams)
Q = TypeVar("Q", bound=TaskOutput)


class ComputeModule(ABC, Generic[P, Q]):
    """
    Stateless, template-method based compute module.

    - Params are validated once and passed through
    - run() does the work and raises on failure
    - execute() turns the outcome into a TaskResult
    """

    schema: type[P]

    @property
    @abstractmethod
    def task_type(self) -> str: ...

    def setup(self) -> None:
        """Optional per-execution setup."""
        pass

    @abstractmethod
    async def run(
        self,
        params: P,
        progress_callback: Callable[[int], None] | None = None,
    ) -> Q:
        """
        Execute task.

        - May write output files
        - Must return metadata only
        """
        ...

    async def execute(
        self,
        raw_params: Mapping[str, object],
        progress_callback: Callable[[int], None] | None = None,
    ) -> TaskResult:
        try:
            params = self.schema.model_validate(raw_params)

            self.setup()

            output = await self.run(params, progress_callback)

            return TaskResult(status="completed", task_output=output.model_dump(mode="json"))

        except Exception as exc:
            logger.error(f"{self.task_type} failed: {exc}")
            return TaskResult(status="error", error=str(exc))
