"""
Weave engine: resolves which thread shows at each warp/weft intersection.

For warp thread ``w`` and weft pass ``f`` the loom lifts shaft
``threading[w]`` if treadle ``treadling[f]`` is tied to it; a lifted warp
passes over the weft and its color is the one seen. Both sequences repeat,
so any non-negative index is reduced modulo the repeat length.
"""

from __future__ import annotations

from tartankit.sett.expansion import get_thread_at
from tartankit.sett.types import ExpandedSett

from .types import WeaveAnalysis, WeavePattern, WeaveType, WovenPixel

_DIAGONAL_TYPES = frozenset({WeaveType.TWILL_2_2, WeaveType.TWILL_3_1, WeaveType.HERRINGBONE})
_TWILL_ANGLE: float = 45.0


def is_warp_on_top(weave: WeavePattern, warp_index: int, weft_index: int) -> bool:
    shaft = weave.threading[warp_index % len(weave.threading)] - 1
    treadle = weave.treadling[weft_index % len(weave.treadling)] - 1
    return weave.tie_up[treadle][shaft]


def get_intersection_color(
    warp_expanded: ExpandedSett,
    weft_expanded: ExpandedSett,
    weave: WeavePattern,
    warp_index: int,
    weft_index: int,
) -> WovenPixel:
    """
    Resolve the visible color at one intersection.

    Warp and weft may use different setts; each index wraps around its own
    expanded repeat.
    """
    warp_color = get_thread_at(warp_expanded, warp_index)
    weft_color = get_thread_at(weft_expanded, weft_index)
    warp_on_top = is_warp_on_top(weave, warp_index, weft_index)
    return WovenPixel(
        color=warp_color if warp_on_top else weft_color,
        warp_on_top=warp_on_top,
        warp_color=warp_color,
        weft_color=weft_color,
    )


def _longest_run(flags: list[bool]) -> int:
    longest = current = 0
    for flag in flags:
        current = current + 1 if flag else 0
        longest = max(longest, current)
    return longest


def analyze_weave(weave: WeavePattern) -> WeaveAnalysis:
    """
    Summarize a weave over one threading × treadling repeat.

    Float lengths are scanned across two consecutive repeats so that a float
    wrapping from the end of one repeat into the next is counted whole.
    Floats are reported as at least 1.
    """
    warp_repeat = len(weave.threading)
    weft_repeat = len(weave.treadling)

    warp_on_top_count = sum(
        is_warp_on_top(weave, w, f) for w in range(warp_repeat) for f in range(weft_repeat)
    )
    warp_dominance = warp_on_top_count / (warp_repeat * weft_repeat)

    diagonal_angle = _TWILL_ANGLE if weave.type in _DIAGONAL_TYPES else 0.0

    max_warp_float = max(
        1,
        max(
            _longest_run([is_warp_on_top(weave, w, f) for f in range(weft_repeat * 2)])
            for w in range(warp_repeat)
        ),
    )
    max_weft_float = max(
        1,
        max(
            _longest_run([not is_warp_on_top(weave, w, f) for w in range(warp_repeat * 2)])
            for f in range(weft_repeat)
        ),
    )

    return WeaveAnalysis(
        warp_dominance=warp_dominance,
        diagonal_angle=diagonal_angle,
        repeat_size=(warp_repeat, weft_repeat),
        max_float=(max_warp_float, max_weft_float),
    )


# ── Draft helpers ──────────────────────────────────────────────────────────────


def generate_threading(weave: WeavePattern, width: int) -> list[int]:
    """Shaft number for each of ``width`` warp threads."""
    return [weave.threading[i % len(weave.threading)] for i in range(width)]


def generate_treadling(weave: WeavePattern, height: int) -> list[int]:
    """Treadle number for each of ``height`` weft passes."""
    return [weave.treadling[i % len(weave.treadling)] for i in range(height)]


def format_tie_up(weave: WeavePattern) -> str:
    """Render the tie-up as a text grid, one line per treadle."""
    return "\n".join(
        f"T{t + 1}: " + "".join("█" if lifted else "░" for lifted in row)
        for t, row in enumerate(weave.tie_up)
    )
