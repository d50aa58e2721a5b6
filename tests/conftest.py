"""Pytest fixtures for path-search tests."""

import json
from pathlib import Path

import pytest


def _make_tree(root: Path, files: list[str]) -> Path:
    for rel in files:
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("")
    return root


@pytest.fixture
def make_files(tmp_path):
    """Return a function creating empty files under a fresh temporary root."""

    def factory(*files: str) -> Path:
        return _make_tree(tmp_path, list(files))

    return factory


@pytest.fixture
def foo_tree(tmp_path):
    """Tree with a matching file, a nested match and a file inside .git."""
    return _make_tree(tmp_path, ["foo.txt", "bar/foo2.txt", ".git/secret.txt"])


@pytest.fixture
def mixed_tree(tmp_path):
    """Tree exercising skip directories, hidden files and skipped extensions."""
    return _make_tree(
        tmp_path,
        [
            "README.md",
            "setup.cfg",
            ".env",
            "logo.PNG",
            "src/app/main.py",
            "src/app/models.py",
            "src/app/__pycache__/main.cpython-312.pyc",
            "node_modules/left-pad/index.js",
            "docs/build/index.html",
            "docs/guide.md",
            "custom_skip/ignored.py",
        ],
    )


@pytest.fixture
def parse_documents():
    """Return a function splitting a stream of concatenated JSON documents."""

    def parse(text: str) -> list[dict]:
        decoder = json.JSONDecoder()
        documents = []
        text = text.strip()
        idx = 0
        while idx < len(text):
            document, idx = decoder.raw_decode(text, idx)
            documents.append(document)
            while idx < len(text) and text[idx].isspace():
                idx += 1
        return documents

    return parse
