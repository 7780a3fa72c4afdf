import pytest
from berry_test_utils import SpyBus, WorkspaceFactory


@pytest.fixture
def workspace_factory(tmp_path, monkeypatch):
    # A clean workspace and chdir for each test
    monkeypatch.chdir(tmp_path)
    return WorkspaceFactory(tmp_path)


@pytest.fixture
def spy_bus(monkeypatch):
    spy = SpyBus()
    with spy.patch(monkeypatch):
        yield spy
