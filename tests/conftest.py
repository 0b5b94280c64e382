# tests/conftest.py
"""Gemeinsame Fixtures: synthetischer dist/-Ordner der Website."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pytest

SAMPLE_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1, viewport-fit=cover">
  <meta name="theme-color" content="#003a63">
  <meta name="description" content="Rahual Rai, Computer Science at Howard University">
  <meta property="og:title" content="Rahual Rai">
  <meta name="twitter:card" content="summary">
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link href="https://fonts.googleapis.com/css2?family=Inter&display=swap" rel="stylesheet">
  <script type="application/ld+json">{"@context": "https://schema.org", "@type": "Person"}</script>
  <title>Rahual Rai</title>
</head>
<body>
  <h1>Rahual Rai</h1>
  <p>Computer Science student at Howard University, 4.0 GPA.</p>
  <p>Research: Princeton Alliance.</p>
  <a href="mailto:rahual.rai@bison.howard.edu">Contact</a>
</body>
</html>
"""

SITE_FILES = {
    "404.html": "<!DOCTYPE html><title>Not found</title>",
    "cv.pdf": "%PDF-1.4\n%%EOF\n",
    "sitemap-index.xml": '<?xml version="1.0"?><sitemapindex></sitemapindex>',
    "robots.txt": "User-agent: *\nAllow: /\n",
}


def make_dist(root: Path, html: str | None = SAMPLE_HTML, skip: Iterable[str] = ()) -> Path:
    """Legt einen dist/-Ordner an; `html=None` lässt index.html weg."""
    dist = root / "dist"
    dist.mkdir(parents=True, exist_ok=True)
    skip = set(skip)
    if html is not None and "index.html" not in skip:
        (dist / "index.html").write_text(html, encoding="utf-8")
    for name, body in SITE_FILES.items():
        if name not in skip:
            (dist / name).write_text(body, encoding="utf-8")
    return dist


@pytest.fixture
def dist(tmp_path: Path) -> Path:
    return make_dist(tmp_path)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for var in ("SITE_VERIFY_DIST", "SITE_VERIFY_RULES", "TELEMETRY_DIR", "GITHUB_STEP_SUMMARY"):
        monkeypatch.delenv(var, raising=False)
