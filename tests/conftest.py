# conftest.py — shared roadmap fixtures
import textwrap

import pytest

BARE_ROADMAP = textwrap.dedent("""\
    intro:
      title: Introduction
      description: Where to start
      resources:
        - type: article
          title: Getting started
          url: https://example.com/start
    basics:
      title: Basics
      description: Core ideas
""")

WRAPPED_ROADMAP = "roadmap_emprender:\n" + textwrap.indent(BARE_ROADMAP, "  ")


@pytest.fixture
def write_file(tmp_path):
    def _write(name, content):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def roadmaps_dir(tmp_path):
    d = tmp_path / "roadmaps"
    d.mkdir()
    return d
