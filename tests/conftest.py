import pytest


@pytest.fixture
def objects_root(tmp_path):
    root = tmp_path / 'force-app' / 'main' / 'default' / 'objects'
    root.mkdir(parents=True)
    return root
