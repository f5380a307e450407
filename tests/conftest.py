# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from spellpy.scoring.editdistance import EditDistanceCalculator


@pytest.fixture
def calculator_factory():
    """Crée des calculateurs et les ferme en fin de test."""
    created = []

    def factory(target):
        calc = EditDistanceCalculator(target)
        created.append(calc)
        return calc

    yield factory
    for calc in created:
        calc.close()


@pytest.fixture
def dictionary():
    """Petit dictionnaire mot -> fréquence."""
    return {
        "spelling": 40,
        "spewing": 3,
        "selling": 25,
        "spilling": 12,
        "smelling": 8,
        "kitten": 5,
        "sitting": 7,
        "café": 9,
        "cafe": 2,
        "xylophone": 1,
    }


@pytest.fixture
def client():
    """Client HTTP sur l'application FastAPI (lifespan compris)."""
    from spellpy import main

    with TestClient(main.app) as test_client:
        yield test_client
