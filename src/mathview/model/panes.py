"""
Viewport Tiling (Panes)
=======================
Chunks each axis of the visible area into power-of-two aligned panes so an
infinite-domain renderer can reuse geometry computed per pane across small
pans.

When only `PANE_PAD` of the current pane remains visible, the next pane is
loaded. For panes 2 units wide and pad 1/8, new panes appear at
x = 1.75, 3.75, 5.75, ...
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import ClassVar

from mathview import config
from mathview.model.geometry_primitives import Interval

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaneSet:
    """
    Pane intervals per axis and the overall range each axis covers.

    Recomputed from scratch whenever the viewport bounds change.
    """
    x_panes: tuple[Interval, ...]
    y_panes: tuple[Interval, ...]
    x_pane_range: Interval
    y_pane_range: Interval

    EMPTY: ClassVar[PaneSet]

    def __str__(self) -> str:
        return (
            f"PaneSet(x_panes: {len(self.x_panes)}, y_panes: {len(self.y_panes)}, "
            f"x_range: {tuple(self.x_pane_range)}, y_range: {tuple(self.y_pane_range)})"
        )


PaneSet.EMPTY = PaneSet(
    x_panes=(),
    y_panes=(),
    x_pane_range=Interval(0.0, 0.0),
    y_pane_range=Interval(0.0, 0.0),
)


def pane_size(span: float) -> float:
    """
    The power of two nearest to about half of `span`: 2 ** round(log2(span) - 1).

    Exact .5 ties follow Python's round-half-to-even.
    """
    return 2.0 ** round(math.log2(span) - 1)


def axis_panes(lo: float, hi: float, pad: float = config.PANE_PAD) -> tuple[tuple[Interval, ...], Interval]:
    """
    Contiguous panes covering [lo, hi] with a hysteresis pad on both ends.

    Args:
        lo: Lower visible bound of the axis.
        hi: Upper visible bound of the axis.
        pad: Fraction of a pane added to each end before rounding outward.

    Returns:
        The ordered panes and the (lower, upper) range they cover. A
        degenerate axis has no panes and reports (lo, hi) as its range: a
        non-finite bound, hi <= lo, or a span so small its pane size
        underflows to zero.

    Limits:
        Near the float range the outermost pane bounds may round to +-inf.
        Once lo / size is large enough (about 2**50) the pad is lost to
        rounding and the covered range may end exactly on lo or hi.
    """
    if not (math.isfinite(lo) and math.isfinite(hi)) or hi <= lo:
        return _degenerate_axis(lo, hi)

    span = hi - lo
    if math.isinf(span):
        # hi - lo overflowed; halving both bounds first is exact
        size = 2.0 * pane_size(hi / 2 - lo / 2)
    else:
        size = pane_size(span)
    if size == 0.0:
        return _degenerate_axis(lo, hi)

    first = math.floor(lo / size - pad)
    last = math.ceil(hi / size + pad)

    panes = tuple(Interval(k * size, (k + 1) * size) for k in range(first, last))
    return panes, Interval(first * size, last * size)


def _degenerate_axis(lo: float, hi: float) -> tuple[tuple[Interval, ...], Interval]:
    logger.debug(f"Degenerate axis [{lo}, {hi}]; no panes.")
    return (), Interval(lo, hi)


def compute_panes(x_min: float, x_max: float, y_min: float, y_max: float) -> PaneSet:
    """
    Pane coverage of the viewport (x_min..x_max, y_min..y_max).

    Each axis is handled independently; see `axis_panes`.
    """
    x_panes, x_range = axis_panes(x_min, x_max)
    y_panes, y_range = axis_panes(y_min, y_max)

    logger.debug(f"Computed {len(x_panes)}x{len(y_panes)} panes for x={x_range}, y={y_range}.")
    return PaneSet(
        x_panes=x_panes,
        y_panes=y_panes,
        x_pane_range=x_range,
        y_pane_range=y_range,
    )
