import os
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Generic, TypeVar

from toolshed.logging.logger import Log

JobT = TypeVar("JobT")
ResultT = TypeVar("ResultT")


def default_worker_count() -> int:
    return os.cpu_count() or 1


class Dispatcher(Generic[JobT, ResultT]):
    """Run independent jobs one at a time or through a bounded worker pool.

    ``run_job`` is expected to turn its own failures into a result; any
    exception it raises propagates out of ``run``.
    """

    def __init__(
        self,
        run_job: Callable[[JobT], ResultT],
        max_workers: int | None = None,
    ) -> None:
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be positive, got {max_workers}")
        self._run_job = run_job
        self._max_workers = max_workers

    @property
    def max_workers(self) -> int:
        return self._max_workers or default_worker_count()

    def run(self, jobs: Sequence[JobT], sequential: bool = False) -> list[ResultT]:
        if sequential:
            return self.run_sequential(jobs)
        return self.run_parallel(jobs)

    def run_sequential(self, jobs: Sequence[JobT]) -> list[ResultT]:
        """Run jobs in order, one after another."""
        return [self._run_job(job) for job in jobs]

    def run_parallel(self, jobs: Sequence[JobT]) -> list[ResultT]:
        """Run jobs on at most ``max_workers`` threads; results keep submission order."""
        if not jobs:
            return []
        workers = min(self.max_workers, len(jobs))
        Log.debug(f"Dispatching {len(jobs)} jobs to {workers} workers")
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="toolshed-job") as pool:
            futures = [pool.submit(self._run_job, job) for job in jobs]
            try:
                return [future.result() for future in futures]
            except KeyboardInterrupt:
                Log.warning("Interrupted, cancelling queued jobs")
                for future in futures:
                    future.cancel()
                raise
