"""Checks that an accessor hands out one instance, even under a thread race."""
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from oopatterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class IdentityReport:
    """Outcome of an identity check."""
    threads: int
    distinct_instances: int
    instance_ids: List[int] = field(default_factory=list)

    @property
    def all_identical(self) -> bool:
        return self.distinct_instances == 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "threads": self.threads,
            "distinct_instances": self.distinct_instances,
            "all_identical": self.all_identical,
        }


def check_singleton_identity(accessor: Callable[[], Any], threads: int = 8) -> IdentityReport:
    """
    Call ``accessor`` from ``threads`` threads released together.

    All threads wait on a barrier before calling the accessor, so the first
    access is raced as closely as the interpreter allows.
    """
    if threads < 1:
        raise ValueError("threads must be at least 1")

    barrier = threading.Barrier(threads)
    results: List[Any] = [None] * threads
    errors: List[BaseException] = []

    def worker(index: int) -> None:
        barrier.wait()
        try:
            results[index] = accessor()
        except Exception as e:
            errors.append(e)

    workers = [threading.Thread(target=worker, args=(i,), name=f"singleton-check-{i}") for i in range(threads)]
    for thread in workers:
        thread.start()
    for thread in workers:
        thread.join()

    if errors:
        raise errors[0]

    ids = [id(result) for result in results]
    report = IdentityReport(threads=threads, distinct_instances=len(set(ids)), instance_ids=ids)
    logger.info(
        "Singleton identity check finished",
        threads=threads,
        distinct_instances=report.distinct_instances,
    )
    return report
