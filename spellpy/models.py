"""Modèles Pydantic pour les requêtes et réponses."""
from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class DistanceRequest(BaseModel): # pylint: disable=too-few-public-methods
    """Distance entre une cible et un candidat."""
    target: str
    candidate: str
    max_distance: Optional[int] = Field(default=None, ge=0)


class DistanceResponse(BaseModel): # pylint: disable=too-few-public-methods
    """Réponse de distance."""
    # None quand la distance dépasse max_distance : la valeur n'a alors pas de sens.
    distance: Optional[int] = None
    within_bound: bool
    max_distance: int


class SuggestRequest(BaseModel): # pylint: disable=too-few-public-methods
    """Requête de suggestion."""
    word: str
    dictionary: Dict[str, int] = Field(default_factory=dict)
    max_distance: Optional[int] = Field(default=None, ge=0)
    limit: Optional[int] = Field(default=None, ge=1)


class Match(BaseModel): # pylint: disable=too-few-public-methods
    """Mot du dictionnaire dans la borne."""
    word: str
    distance: int
    frequency: int


class SuggestResponse(BaseModel): # pylint: disable=too-few-public-methods
    """Réponse de suggestion."""
    suggestion: Optional[Match] = None
    matches: List[Match] = Field(default_factory=list)
