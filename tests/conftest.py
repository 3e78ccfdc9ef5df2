import pytest


@pytest.fixture()
def write_keys(tmp_path):
    """Write a keys file under tmp_path and return its path as a string."""
    def _write(content: str, name: str = "api-keys.txt") -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write
