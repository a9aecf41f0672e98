from __future__ import annotations

from pathlib import Path

import pytest

from mdpage import config


@pytest.fixture
def document(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Points the loader at a scratch file; tests write its contents."""
    path = tmp_path / "post.md"
    monkeypatch.setattr(config, "DOCUMENT_PATH", path)
    return path
