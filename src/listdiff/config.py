"""Configuration for listdiff.

:class:`DiffConfig` is a plain dataclass holding the few knobs the diff
entry point exposes.  Invalid values raise :class:`ValueError` at
construction time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

STRATEGIES: tuple[str, ...] = ("index_set", "wagner_fischer")
"""Names accepted by :attr:`DiffConfig.strategy`."""


@dataclass
class DiffConfig:
    """Complete configuration for :func:`listdiff.diff`.

    Parameters
    ----------
    strategy:
        Which algorithm computes the edits.

        * ``"index_set"`` -- single pass over the value union; unique
          elements only; reports moves, never substitutions.
        * ``"wagner_fischer"`` -- dynamic-programming edit distance;
          tolerates repeats; reports substitutions.
    reduce_moves:
        Fold a deletion and an insertion of the same value into one move.
    max_matrix_cells:
        Upper bound on ``len(old) * len(new)`` for ``"wagner_fischer"``.
        ``None`` means unbounded.
    metrics:
        A :class:`~listdiff.observability.MetricsHook`.  A
        :class:`~listdiff.observability.NoopMetricsHook` is used when unset.
    debug_dump_diff:
        Write every computed edit list to *stderr* as JSON.
    """

    strategy: Literal["index_set", "wagner_fischer"] = "index_set"

    reduce_moves: bool = True

    max_matrix_cells: int | None = None

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_diff: bool = False

    def __post_init__(self) -> None:
        if self.strategy not in STRATEGIES:
            raise ValueError(
                f"strategy must be one of {', '.join(STRATEGIES)}, got {self.strategy!r}"
            )
        if self.max_matrix_cells is not None and self.max_matrix_cells <= 0:
            raise ValueError(f"max_matrix_cells must be > 0, got {self.max_matrix_cells}")
