"""
Voicing selection - filtering and sorting analysed voicings.

Used by anything that lists the voicings of a chord. Sorting is stable,
so voicings with equal keys keep their catalog order.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from chuk_mcp_chords.constants import (
    DIFFICULTY_RANK,
    UNRANKED_DIFFICULTY,
    SelectionStatus,
    VoicingFilter,
    VoicingSort,
)
from chuk_mcp_chords.voicing.model import VoicingAnalysis, VoicingAttributes


@dataclass(frozen=True)
class VoicingSelection:
    """
    Result of listing a chord's voicings.

    ``status`` separates "the catalog has nothing for this chord" from
    "the filter removed every voicing".
    """

    root: str
    quality: str
    status: SelectionStatus
    voicings: tuple[VoicingAnalysis, ...] = field(default_factory=tuple)
    total: int = 0


_FILTERS: dict[VoicingFilter, Callable[[VoicingAttributes], bool]] = {
    VoicingFilter.ALL: lambda a: True,
    VoicingFilter.OPEN: lambda a: a.has_open_strings,
    VoicingFilter.BARRE: lambda a: a.is_barre,
    VoicingFilter.ROOT_POSITION: lambda a: "Root Position" in a.inversion,
    VoicingFilter.INVERSIONS: lambda a: "Inversion" in a.inversion or "Voicing" in a.inversion,
    VoicingFilter.LOW: lambda a: 0 < a.fret_position <= 3,
    VoicingFilter.MID: lambda a: 4 <= a.fret_position <= 7,
    VoicingFilter.HIGH: lambda a: a.fret_position >= 8,
}

_SORT_KEYS: dict[VoicingSort, Callable[[VoicingAttributes], int]] = {
    VoicingSort.POSITION: lambda a: a.fret_position,
    VoicingSort.DIFFICULTY: lambda a: DIFFICULTY_RANK.get(a.difficulty, UNRANKED_DIFFICULTY),
    VoicingSort.STRING_COUNT: lambda a: -a.used_string_count,
}


def filter_voicings(
    analyses: Sequence[VoicingAnalysis],
    voicing_filter: VoicingFilter | str = VoicingFilter.ALL,
) -> list[VoicingAnalysis]:
    """
    Keep the voicings matching a filter.

    Args:
        analyses: Analysed voicings
        voicing_filter: Filter (enum or its string value)

    Returns:
        Matching voicings in input order
    """
    predicate = _FILTERS[VoicingFilter(voicing_filter)]
    return [analysis for analysis in analyses if predicate(analysis.attributes)]


def sort_voicings(
    analyses: Sequence[VoicingAnalysis],
    sort: VoicingSort | str = VoicingSort.POSITION,
) -> list[VoicingAnalysis]:
    """
    Sort voicings by position, difficulty or string count.

    Position and difficulty sort ascending; string count sorts descending.
    """
    key = _SORT_KEYS[VoicingSort(sort)]
    return sorted(analyses, key=lambda analysis: key(analysis.attributes))
