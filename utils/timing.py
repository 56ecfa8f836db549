import contextlib
import logging
import time
from typing import Dict, Iterator


def _format_outcome(outcome: Dict[str, object]) -> str:
    return " ".join(f"{key}={value}" for key, value in outcome.items()) or "-"


@contextlib.contextmanager
def timed_block(
    label: str,
    logger: logging.Logger | None = None,
) -> Iterator[Dict[str, object]]:
    """Log START/END lines around a pass.

    The block receives a dict to fill with counters (files, copied, failed);
    they are written on the END line, also when the block raises.
    """
    logger = logger or logging.getLogger(__name__)
    outcome: Dict[str, object] = {}
    start = time.perf_counter()
    logger.info("START %s", label)
    try:
        yield outcome
    finally:
        logger.info(
            "END   %s | %.3fs | %s",
            label,
            time.perf_counter() - start,
            _format_outcome(outcome),
        )
