from pathlib import Path

import pytest
from pydantic import ValidationError

from citypath.config import EngineConfig, GraphConfig, get_config, reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_defaults_point_at_bundled_data():
    config = get_config()

    assert config.graph.vertices_path.name == "cityxy.txt"
    assert config.graph.edges_path.name == "citypairs.txt"
    assert config.graph.vertices_path.parent == config.project_root / "data"
    assert config.engine.queue_capacity is None


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("CITYPATH_GRAPH_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("CITYPATH_GRAPH_EUCLIDEAN_WEIGHTS", "true")
    monkeypatch.setenv("CITYPATH_ENGINE_QUEUE_CAPACITY", "64")
    monkeypatch.setenv("CITYPATH_LOG_LEVEL", "DEBUG")

    config = get_config()

    assert config.graph.data_dir == Path(tmp_path)
    assert config.graph.euclidean_weights is True
    assert config.engine.queue_capacity == 64
    assert config.observability.level == "DEBUG"


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_delimiter_must_be_single_character():
    with pytest.raises(ValidationError):
        GraphConfig(delimiter="::")


def test_queue_capacity_must_be_positive():
    with pytest.raises(ValidationError):
        EngineConfig(queue_capacity=0)
