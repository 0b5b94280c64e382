"""
site_verify/audit.py — file presence and page content checks.

All checks are read-only and exhaustive: a failing check is reported and
counted, the remaining checks still run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from rich.console import Console

from site_verify.checks import BuildRules, CheckGroup, ExpectedFile

logger = logging.getLogger(__name__)

console = Console(highlight=False, soft_wrap=True)


class BuildDirectoryMissing(Exception):
    """The build output directory does not exist; nothing can be checked."""


def log(message: str, style: str = "default") -> None:
    console.print(message, style=style, markup=False, emoji=False)


@dataclass
class StageResult:
    name: str
    attempted: int = 0
    passed: int = 0
    errors: int = 0  # contribution to the error counter

    @property
    def ok(self) -> bool:
        return self.errors == 0


@dataclass
class VerificationResult:
    stages: List[StageResult] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def errors(self) -> int:
        return sum(s.errors for s in self.stages)

    @property
    def ok(self) -> bool:
        return self.errors == 0

    def stage(self, name: str) -> Optional[StageResult]:
        for s in self.stages:
            if s.name == name:
                return s
        return None


def size_kb(n_bytes: int) -> float:
    # two decimals, like the printed value
    return round(n_bytes / 1024, 2)


def check_file(dist: Path, expected: ExpectedFile) -> bool:
    full = dist / expected.path
    if full.is_file():
        log(f"✅ {expected.description}: {size_kb(full.stat().st_size):.2f}KB", "green")
        return True
    log(f"❌ Missing: {expected.description} ({expected.path})", "red")
    return False


def check_files(dist: Path, expected_files: Sequence[ExpectedFile]) -> StageResult:
    stage = StageResult(name="files")
    for expected in expected_files:
        stage.attempted += 1
        if check_file(dist, expected):
            stage.passed += 1
        else:
            stage.errors += 1
    return stage


def read_page(path: Path) -> Optional[str]:
    if not path.is_file():
        return None
    return path.read_text(encoding="utf-8", errors="replace")


def audit_group(text: Optional[str], group: CheckGroup) -> StageResult:
    """
    Test every substring of `group` against the page text.

    The group fails (one error) if any substring is missing. A missing page
    fails the whole group without attempting the substring tests.
    """
    stage = StageResult(name=group.name)
    if text is None:
        log(f"❌ Cannot check content: {group.page} not found", "red")
        stage.errors = 1
        return stage

    for check in group.checks:
        stage.attempted += 1
        if check.text in text:
            log(f"  ✅ {check.description}", "green")
            stage.passed += 1
        else:
            log(f"  ❌ Missing: {check.description}", "red")

    if stage.passed < stage.attempted:
        stage.errors = 1
    return stage


def check_html_size(text: str, budget_kb: float) -> bool:
    """Advisory size check; the caller records a warning, never an error."""
    kb = size_kb(len(text.encode("utf-8")))
    if kb < budget_kb:
        log(f"✅ HTML size optimized: {kb:.2f}KB", "green")
        return True
    log(f"⚠️  HTML size large: {kb:.2f}KB", "yellow")
    return False


def verify(dist: Path, rules: BuildRules) -> VerificationResult:
    if not dist.is_dir():
        raise BuildDirectoryMissing(f"Build directory not found: {dist}")

    result = VerificationResult()

    log("\n🔍 Checking Critical Files:", "blue")
    result.stages.append(check_files(dist, rules.expected_files))

    # each page is read once, groups share the text
    pages: Dict[str, Optional[str]] = {}
    for page in rules.pages():
        pages[page] = read_page(dist / page)
        logger.debug("page %s: %s", page, "missing" if pages[page] is None else f"{len(pages[page])} chars")

    for group in rules.groups:
        log(f"\n{group.title}", "blue")
        text = pages[group.page]
        if text is not None and group.size_budget_kb is not None:
            if not check_html_size(text, group.size_budget_kb):
                result.warnings.append(f"{group.page} exceeds {group.size_budget_kb:g}KB")
        result.stages.append(audit_group(text, group))

    return result
