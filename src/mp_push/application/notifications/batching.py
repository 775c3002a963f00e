"""Application notifications – splitting recipients into gateway-sized batches."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from mp_push.application.notifications.installation import Installation

__all__ = ["Batch", "partition"]


@dataclass(frozen=True)
class Batch:
    """Index-aligned installations and tokens sent in one gateway call."""

    installations: tuple[Installation, ...]
    tokens: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.tokens)


def partition(
    installations: Sequence[Installation],
    tokens: Sequence[str],
    max_tokens_per_request: int,
) -> list[Batch]:
    """Cut *installations* / *tokens* into contiguous batches of at most ``max_tokens_per_request``.

    No installations means no batches.
    """
    if max_tokens_per_request < 1:
        raise ValueError(f"max_tokens_per_request must be >= 1, got {max_tokens_per_request}")
    if len(installations) != len(tokens):
        raise ValueError(
            f"installations and tokens differ in length ({len(installations)} != {len(tokens)})"
        )
    return [
        Batch(
            installations=tuple(installations[start:start + max_tokens_per_request]),
            tokens=tuple(tokens[start:start + max_tokens_per_request]),
        )
        for start in range(0, len(tokens), max_tokens_per_request)
    ]
