"""Service layer helpers."""

from .modes import Mode, mode_from_name, resolve_mode
from .params import Selector, parse_page, parse_rank, parse_selector, split_identifiers
from .peak_ranks import PeakRankStore
from .rankings import MAX_USERS_PER_QUERY, PAGE_SIZE, RankResolver
from .records import PeakRank, Ranking, ScoreEntry, ranking_to_dict
from .score_index import ScoreIndex
from .users import UserDirectory

__all__ = [
    "MAX_USERS_PER_QUERY",
    "PAGE_SIZE",
    "Mode",
    "PeakRank",
    "PeakRankStore",
    "RankResolver",
    "Ranking",
    "ScoreEntry",
    "ScoreIndex",
    "Selector",
    "UserDirectory",
    "mode_from_name",
    "parse_page",
    "parse_rank",
    "parse_selector",
    "ranking_to_dict",
    "resolve_mode",
    "split_identifiers",
]
