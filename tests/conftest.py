import pytest

from modelindex.config import Settings
from tests.tools import FakeElastic

MODELS_NAMESPACE = "tests.sample_models"


@pytest.fixture()
def elastic() -> FakeElastic:
    return FakeElastic()


@pytest.fixture()
def settings() -> Settings:
    return Settings(models_namespace=MODELS_NAMESPACE)
