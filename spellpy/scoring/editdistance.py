"""
Distance d'édition bornée vers une cible fixe.

Les opérations comptées (coût 1 chacune) sont l'insertion, la suppression,
la substitution et la transposition de deux caractères voisins. Le calcul
porte sur les points de code Unicode, jamais sur les octets.
"""
from typing import List, Optional

from spellpy.logger import logger
from spellpy.scoring.unicode import Text, code_points, decode_into

# Les points de code sont comptés modulo HISTOGRAM_SIZE : regrouper plusieurs
# points de code dans une même case ne peut qu'affaiblir la borne inférieure.
HISTOGRAM_SIZE = 64

# Valeur renvoyée quand le préfiltre prouve que le candidat est trop loin.
DISTANCE_UNBOUNDED = 2 ** 31 - 1


class EditDistanceCalculator:
    """
    Calcule des distances d'édition vers une cible, pour de nombreux candidats.

    L'instance garde un tampon de travail réutilisé d'un appel à l'autre :
    elle n'est ni copiable ni sérialisable, et un même calculateur ne doit
    pas être appelé depuis plusieurs threads sans synchronisation externe.
    Des instances distinctes sont totalement indépendantes.

    Usage :
        with EditDistanceCalculator("kitten") as calc:
            calc("sitting", 5)  # -> 3
    """

    def __init__(self, target: Text):
        self._target: List[int] = []
        self._target_freqs: List[int] = [0] * HISTOGRAM_SIZE
        for ch in code_points(target):
            self._target.append(ch)
            self._target_freqs[ch % HISTOGRAM_SIZE] += 1

        # Candidat courant, réécrit à chaque appel.
        self._utf32: List[int] = []
        # Tampon de travail, alloué au premier besoin.
        self._array: Optional[List[int]] = None

        logger.debug(
            "Calculateur créé pour une cible de {length} points de code",
            length=len(self._target),
        )

    @property
    def target(self) -> tuple:
        """Points de code de la cible."""
        return tuple(self._target)

    @property
    def target_histogram(self) -> tuple:
        return tuple(self._target_freqs)

    def __len__(self) -> int:
        return len(self._target)

    def __repr__(self) -> str:
        target = "".join(chr(ch) for ch in self._target)
        return f"{type(self).__name__}({target!r})"

    # -----------------------------------------------------------------
    # Cycle de vie
    # -----------------------------------------------------------------
    def __copy__(self):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __reduce__(self):
        raise TypeError(f"{type(self).__name__} cannot be pickled")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self) -> None:
        """Libère le tampon de travail (réalloué si l'instance resert)."""
        self._array = None
        self._utf32 = []

    def _scratch(self, size: int) -> List[int]:
        """Renvoie le tampon de travail, agrandi à `size` cases si besoin."""
        array = self._array
        if array is None:
            array = self._array = []
        if len(array) < size:
            try:
                array.extend([0] * (size - len(array)))
            except MemoryError:
                logger.critical(
                    "Allocation impossible du tampon de travail ({size} cases)",
                    size=size,
                )
                raise
            logger.debug("Tampon de travail agrandi à {size} cases", size=size)
        return array

    # -----------------------------------------------------------------
    # Calcul
    # -----------------------------------------------------------------
    def __call__(self, candidate: Text, max_distance: int) -> int:
        """
        Distance d'édition entre `candidate` et la cible.

        Args:
            candidate: Chaîne candidate (`str`, ou `bytes` encodés en UTF-8)
            max_distance: Plus grande distance intéressante. Au-delà, toute
                valeur > max_distance peut être renvoyée. Les appels
                successifs sur une même instance doivent passer une valeur
                égale ou inférieure.

        Returns:
            La distance exacte si elle est <= max_distance, sinon une valeur
            quelconque strictement supérieure à max_distance.
        """
        if max_distance < 0:
            raise ValueError(f"max_distance must be >= 0, got {max_distance}")

        target_len = len(self._target)

        if isinstance(candidate, bytes):
            # Un point de code occupe 1 à 4 octets : le candidat compte entre
            # ceil(octets / 4) et octets points de code.
            size = len(candidate)
            if target_len > size + max_distance:
                # Candidat trop court.
                return DISTANCE_UNBOUNDED
            if target_len + max_distance < (size + 3) // 4:
                # Candidat trop long.
                return DISTANCE_UNBOUNDED

        utf32 = decode_into(self._utf32, candidate)

        lb = abs(len(utf32) - target_len)
        if lb > max_distance:
            return lb

        # Une édition modifie au plus deux cases de l'histogramme d'une unité.
        freqs = self._target_freqs[:]
        for ch in utf32:
            freqs[ch % HISTOGRAM_SIZE] -= 1
        lb = sum(abs(f) for f in freqs) // 2
        if lb > max_distance:
            return lb

        return self._calc(utf32, max_distance)

    distance = __call__

    def _calc(self, candidate: List[int], max_distance: int) -> int:
        """Programmation dynamique en bande de largeur 2 * max_distance + 1."""
        target = self._target
        n = len(target)
        m = len(candidate)
        if n == 0 or m == 0:
            return n + m
        if max_distance == 0:
            return 0 if target == candidate else 1

        k = max_distance
        # Les valeurs sont plafonnées à big : au-delà, seul compte "> k".
        big = k + 1
        width = m + 1
        array = self._scratch(3 * width)

        # Décalages des lignes i - 2, i - 1 et i dans le tampon.
        row2, row1, row0 = 0, width, 2 * width
        for j in range(width):
            array[row1 + j] = j if j < big else big

        for i in range(1, n + 1):
            t_ch = target[i - 1]
            t_prev = target[i - 2] if i > 1 else None
            lo = max(1, i - k)
            hi = min(m, i + k)
            rest = n - i

            if lo == 1:
                array[row0] = i
                best = i + abs(rest - m)
            else:
                array[row0 + lo - 1] = big
                best = big

            for j in range(lo, hi + 1):
                c_ch = candidate[j - 1]
                d = array[row1 + j - 1]
                if t_ch != c_ch:
                    d += 1
                    x = array[row1 + j] + 1
                    if x < d:
                        d = x
                    x = array[row0 + j - 1] + 1
                    if x < d:
                        d = x
                    if j > 1 and t_prev == c_ch and t_ch == candidate[j - 2]:
                        x = array[row2 + j - 2] + 1
                        if x < d:
                            d = x
                    if d > big:
                        d = big
                array[row0 + j] = d

                # Borne inférieure de la distance finale passant par (i, j).
                x = d + abs(rest - (m - j))
                if x < best:
                    best = x

            if hi < m:
                array[row0 + hi + 1] = big

            if best > k:
                return big

            row2, row1, row0 = row1, row0, row2

        return array[row1 + m]


def edit_distance(target: Text, candidate: Text, max_distance: int) -> int:
    """Calcul ponctuel, sans réutiliser de calculateur."""
    with EditDistanceCalculator(target) as calc:
        return calc(candidate, max_distance)
