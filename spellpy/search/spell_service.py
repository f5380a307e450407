"""Service exposant le calcul de distance et les suggestions."""
from typing import Mapping, Optional

from spellpy.config import settings
from spellpy.models import DistanceResponse, Match, SuggestResponse
from spellpy.scoring.editdistance import EditDistanceCalculator
from spellpy.search.suggest import SpellingSuggester, Suggestion


def _to_match(suggestion: Suggestion) -> Match:
    return Match(
        word=suggestion.word,
        distance=suggestion.distance,
        frequency=suggestion.frequency,
    )


class SpellService:
    """Façade entre l'API et le cœur de calcul."""

    def __init__(self, default_max_distance: Optional[int] = None):
        self.default_max_distance = (
            settings.DEFAULT_MAX_DISTANCE
            if default_max_distance is None
            else default_max_distance
        )

    def distance(self, target: str, candidate: str, max_distance: Optional[int] = None) -> DistanceResponse:
        """Distance bornée entre `target` et `candidate`."""
        bound = self.default_max_distance if max_distance is None else max_distance
        with EditDistanceCalculator(target) as calc:
            dist = calc(candidate, bound)
        within = dist <= bound
        return DistanceResponse(
            distance=dist if within else None,
            within_bound=within,
            max_distance=bound,
        )

    def suggest(self, word: str, dictionary: Mapping[str, int],
                max_distance: Optional[int] = None,
                limit: Optional[int] = None) -> SuggestResponse:
        """
        Meilleure suggestion et liste des mots proches.

        `matches` est trié comme `SpellingSuggester.suggest` : son premier
        élément est la meilleure suggestion, un seul parcours suffit.
        """
        bound = self.default_max_distance if max_distance is None else max_distance
        suggester = SpellingSuggester(dictionary)
        matches = suggester.matches(word, bound, limit)
        return SuggestResponse(
            suggestion=_to_match(matches[0]) if matches else None,
            matches=[_to_match(m) for m in matches],
        )
