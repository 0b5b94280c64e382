#!/usr/bin/env python3
"""
site_verify/verify_build.py — build verification for the academic website.

Checks the generated dist/ before deployment:
- critical files present (homepage, 404, CV, sitemap, robots)
- homepage content markers
- performance markers (+ advisory HTML size budget)
- SEO markers

Usage:
  verify-build                      # checks ./dist with the packaged rules
  verify-build --dist site/dist --rules my_checks.yaml --mode ci

Exit codes:
- 0 all checks passed
- 1 at least one failing check, missing build directory, invalid rules
    or an unexpected error
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from site_verify.audit import BuildDirectoryMissing, VerificationResult, log, verify
from site_verify.checks import RulesError, load_rules
from site_verify.telemetry import record_verification

logger = logging.getLogger("site_verify")

DEFAULT_DIST = Path("dist")

NEXT_STEPS = [
    "Test on multiple devices and browsers",
    "Run Lighthouse audit for performance",
    "Deploy to production environment",
]


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, console=Console(stderr=True))],
        force=True,
    )


def summarize(result: VerificationResult) -> int:
    log("\n📊 Build Verification Summary:", "blue")
    log("=" * 50, "blue")

    if result.ok:
        log("🎉 All checks passed! Website ready for deployment.", "green")
        log("\n🚀 Next steps:", "blue")
        for step in NEXT_STEPS:
            log(f"  • {step}", "yellow")
        return 0

    log(f"❌ {result.errors} issue(s) found. Please fix before deployment.", "red")
    return 1


def write_github_summary(result: VerificationResult) -> None:
    summary_path = os.environ.get("GITHUB_STEP_SUMMARY")
    if not summary_path:
        return

    status = "PASS" if result.ok else "FAIL"
    lines: List[str] = [f"## Build Verification — {status}", ""]
    lines.append("| Stage | Passed | Attempted | Errors |")
    lines.append("|---|---|---|---|")
    for s in result.stages:
        lines.append(f"| {s.name} | {s.passed} | {s.attempted} | {s.errors} |")
    lines.append("")
    for w in result.warnings:
        lines.append(f"- ⚠️ {w}")

    with open(summary_path, "a", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Verify the generated website build output.")
    ap.add_argument(
        "--dist",
        default=os.getenv("SITE_VERIFY_DIST", str(DEFAULT_DIST)),
        help="build output directory (default: ./dist)",
    )
    ap.add_argument(
        "--rules",
        default=os.getenv("SITE_VERIFY_RULES"),
        help="YAML rules file (default: packaged build_checks.yaml)",
    )
    ap.add_argument("--mode", default="local", choices=["local", "ci"], help="write GitHub summary in ci mode")
    ap.add_argument("--verbose", "-v", action="store_true", help="debug logging on stderr")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)

    dist = Path(args.dist)
    logger.debug("dist=%s rules=%s", dist.resolve(), args.rules or "packaged default")

    log("\n📋 Verifying Academic Website Build", "blue")
    log("=" * 50, "blue")

    try:
        rules = load_rules(args.rules)
        result = verify(dist, rules)
        code = summarize(result)

        if args.mode == "ci":
            write_github_summary(result)
        record_verification(result, dist)

        return code

    except BuildDirectoryMissing:
        log("❌ Build directory not found. Run npm run build first.", "red")
        return 1
    except RulesError as e:
        log(f"❌ Invalid rules: {e}", "red")
        return 1
    except Exception:
        # tool error -> fail closed
        logger.exception("Build verification crashed")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
