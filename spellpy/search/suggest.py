"""Suggestion orthographique par parcours d'un dictionnaire."""
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

from spellpy.config import settings
from spellpy.logger import logger
from spellpy.scoring.editdistance import EditDistanceCalculator


@dataclass(frozen=True)
class Suggestion:
    """Mot du dictionnaire proche du mot recherché."""
    word: str
    distance: int
    frequency: int

    def sort_key(self) -> Tuple[int, int, str]:
        # Distance croissante, puis fréquence décroissante.
        return (self.distance, -self.frequency, self.word)


class SpellingSuggester:
    """Cherche les mots d'un dictionnaire (mot -> fréquence) proches d'un mot donné."""

    def __init__(self, dictionary: Mapping[str, int]):
        self.dictionary: Dict[str, int] = dict(dictionary)
        # Les termes sont gardés encodés pour profiter du préfiltre sur les octets.
        self._encoded: List[Tuple[bytes, str, int]] = [
            (word.encode("utf-8"), word, freq)
            for word, freq in self.dictionary.items()
        ]

    def _resolve(self, max_distance: Optional[int]) -> int:
        if max_distance is None:
            return settings.DEFAULT_MAX_DISTANCE
        return max_distance

    def suggest(self, word: str, max_distance: Optional[int] = None) -> Optional[Suggestion]:
        """
        Meilleure correction pour `word`, ou None si rien n'est assez proche.

        Le seuil est resserré à chaque meilleur candidat trouvé, ce qui permet
        au calculateur d'abandonner tôt les candidats suivants.
        """
        limit = self._resolve(max_distance)
        best: Optional[Suggestion] = None
        scanned = 0

        with EditDistanceCalculator(word) as calc:
            for encoded, candidate, freq in self._encoded:
                if candidate == word:
                    continue
                scanned += 1
                dist = calc(encoded, limit)
                if dist > limit:
                    continue
                found = Suggestion(word=candidate, distance=dist, frequency=freq)
                if best is None or found.sort_key() < best.sort_key():
                    best = found
                    limit = dist

        logger.debug(
            "Suggestion pour {word!r}: {best} ({scanned} candidats)",
            word=word, best=best, scanned=scanned,
        )
        return best

    def matches(
            self,
            word: str,
            max_distance: Optional[int] = None,
            limit: Optional[int] = None) -> List[Suggestion]:
        """Tous les mots à distance <= max_distance, les plus proches d'abord."""
        bound = self._resolve(max_distance)
        found: List[Suggestion] = []

        with EditDistanceCalculator(word) as calc:
            for encoded, candidate, freq in self._encoded:
                if candidate == word:
                    continue
                dist = calc(encoded, bound)
                if dist <= bound:
                    found.append(Suggestion(word=candidate, distance=dist, frequency=freq))

        found.sort(key=Suggestion.sort_key)
        return found[:limit or settings.MAX_SUGGESTIONS]
