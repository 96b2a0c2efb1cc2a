import pytest

from debugme.catalog import get_catalog
from debugme.config import settings
from debugme.engine.progression import ProgressionEngine
from debugme.models import CareerDefinition, Profile


@pytest.fixture
def catalog():
    return get_catalog()


@pytest.fixture
def engine():
    return ProgressionEngine()


@pytest.fixture
def memory_dir(tmp_path, monkeypatch):
    """Point learner memory at a throwaway directory."""
    monkeypatch.setattr(settings, "MEMORY_DIR", str(tmp_path))
    return tmp_path


def make_career(name, **weights):
    return CareerDefinition(name=name, required_competencies=weights, learning_path=[f"{name} course"])


def make_profile(name="Alex", **ratings):
    return Profile(name=name, competencies=ratings)
