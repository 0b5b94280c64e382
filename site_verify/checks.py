"""
site_verify/checks.py — check catalogue for the build verification.

The catalogue (expected files + substring groups) lives in a YAML rules file.
The packaged build_checks.yaml carries the defaults for the academic website;
a project can point --rules / SITE_VERIFY_RULES at its own copy.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_RULES_PATH = Path(__file__).with_name("build_checks.yaml")


class RulesError(ValueError):
    """Rules file missing, unparseable or not matching the schema."""


class ExpectedFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str = Field(min_length=1)
    description: str


class ContentCheck(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = Field(min_length=1)
    description: str


class CheckGroup(BaseModel):
    """Named set of substring checks evaluated against one page."""

    model_config = ConfigDict(frozen=True)

    name: str
    title: str
    page: str = "index.html"
    size_budget_kb: Optional[float] = Field(default=None, gt=0)
    checks: List[ContentCheck] = Field(min_length=1)


class BuildRules(BaseModel):
    model_config = ConfigDict(frozen=True)

    expected_files: List[ExpectedFile] = Field(min_length=1)
    groups: List[CheckGroup] = Field(min_length=1)

    @field_validator("groups")
    @classmethod
    def _unique_group_names(cls, groups: List[CheckGroup]) -> List[CheckGroup]:
        seen: set[str] = set()
        for g in groups:
            if g.name in seen:
                raise ValueError(f"duplicate group name: {g.name!r}")
            seen.add(g.name)
        return groups

    def pages(self) -> List[str]:
        """Distinct pages referenced by the groups, in first-use order."""
        out: List[str] = []
        for g in self.groups:
            if g.page not in out:
                out.append(g.page)
        return out


def load_rules(path: Path | str | None = None) -> BuildRules:
    p = Path(path) if path is not None else DEFAULT_RULES_PATH
    if not p.exists():
        raise RulesError(f"Rules file not found: {p}")

    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise RulesError(f"Rules file {p} is not valid YAML: {e}") from e

    if not isinstance(data, dict):
        raise RulesError(f"Rules file {p} must parse to a mapping.")

    try:
        return BuildRules.model_validate(data)
    except ValidationError as e:
        raise RulesError(f"Rules file {p} does not match the schema:\n{e}") from e
