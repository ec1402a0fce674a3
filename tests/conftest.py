from pathlib import Path

import pytest


@pytest.fixture
def install_dir(tmp_path: Path):
    """Write an AppxManifest.xml into a fresh install directory and return the directory."""
    def write(content: str) -> Path:
        (tmp_path / 'AppxManifest.xml').write_text(content, encoding='utf-8')
        return tmp_path
    return write
