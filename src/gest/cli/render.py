"""Rich rendering of a finalized run and its coverage tree.

Everything here is presentation: the renderer only reads ``RunSummary`` and
``TreeNode`` values. Names are wrapped in ``Text`` so brackets in package or
test names are never taken as markup.
"""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from gest.config.models import CoverageThresholds, ReportConfig
from gest.core.formatting import compress_ranges, format_lines, format_seconds
from gest.testing.coverage.models import TreeNode
from gest.testing.models import PackageResult, RunSummary

_BADGES = {
    "pass": (" PASS ", "bold white on green", "green"),
    "skip": (" SKIP ", "bold white on yellow", "yellow"),
    "fail": (" FAIL ", "bold white on red", "red"),
}

_PASS_MARK = "✓"
_FAIL_MARK = "✗"


def coverage_style(coverage: float, thresholds: CoverageThresholds | None = None) -> str:
    """Colour band for a coverage percentage."""
    t = thresholds or CoverageThresholds()
    if coverage < t.red:
        return "red"
    if coverage < t.bright_yellow:
        return "bright_yellow"
    if coverage < t.yellow:
        return "yellow"
    if coverage < t.green:
        return "green"
    return "bright_green"


def _badge(pkg: PackageResult) -> Text:
    label, style, _ = _BADGES[pkg.status]
    return Text(label, style=style)


def render_grouped(summary: RunSummary, console: Console, *, show_subtests: bool = True) -> None:
    """Per-package badge line followed by its parent tests and subtests."""
    for pkg in summary.packages.values():
        _, _, colour = _BADGES[pkg.status]
        line = Text.assemble(_badge(pkg), "  ", (pkg.name, colour))
        if not pkg.skipped:
            line.append(f" ({format_seconds(pkg.duration)})", style=colour)
        console.print(line)

        for pt in pkg.parents.values():
            mark, colour = (_PASS_MARK, "green") if pt.passed else (_FAIL_MARK, "red")
            console.print(Text(f"  {mark} {pt.name}", style=colour))
            if not show_subtests:
                continue
            for st in pt.subtests:
                mark, colour = (_PASS_MARK, "green") if st.passed else (_FAIL_MARK, "red")
                console.print(Text(f"     {mark} {st.name}", style=colour))
        console.print()


def render_banners(summary: RunSummary, console: Console) -> None:
    """One badge line per package, used above the coverage table."""
    for pkg in summary.packages.values():
        console.print(Text.assemble(_badge(pkg), "   ", (pkg.name, "bold white")))


def build_coverage_table(
    root: TreeNode,
    *,
    thresholds: CoverageThresholds | None = None,
    compress_uncovered: bool = False,
) -> Table:
    """Tree-shaped coverage table; the root itself is not a row."""
    table = Table(box=box.ROUNDED, show_lines=False)
    table.add_column(Text("File", style="bold"))
    table.add_column(Text("% Coverage", style="bold"), justify="right")
    table.add_column(Text("% Lines", style="bold"), justify="right")
    table.add_column(Text("Uncovered Lines #s", style="bold"))

    for node, depth in root.walk():
        if node is root:
            continue
        style = coverage_style(node.coverage, thresholds)
        name = "  " * depth + node.name + ("/" if node.is_dir else "")
        uncovered = ""
        if not node.is_dir and node.uncovered:
            if compress_uncovered:
                uncovered = compress_ranges(node.uncovered)
            else:
                uncovered = format_lines(node.uncovered)
        table.add_row(
            Text(name, style=style),
            Text(f"{node.coverage:6.2f}%", style=style),
            Text(f"{node.covered}/{node.total}", style=style),
            Text(uncovered, style="red"),
        )
    return table


def _counts(parts: list[tuple[int, str, str]], total: int) -> Text:
    text = Text()
    for count, label, style in parts:
        if count > 0:
            text.append(f"{count} {label}, ", style=style)
    text.append(f"{total} total", style="bold")
    return text


def render_summary(summary: RunSummary, console: Console, *, elapsed: float) -> None:
    """Jest-style totals block."""
    suites = _counts(
        [
            (summary.suites_failed, "failed", "bold red"),
            (summary.suites_passed, "passed", "bold bright_green"),
            (summary.suites_skipped, "skipped", "bold cyan"),
        ],
        summary.suites_total,
    )
    tests = _counts(
        [
            (summary.tests_failed, "failed", "bold red"),
            (summary.tests_passed, "passed", "bold bright_green"),
        ],
        summary.tests_total,
    )
    console.print(Text.assemble(("Test Suites: ", "bold"), suites))
    console.print(Text.assemble(("Tests:       ", "bold"), tests))
    console.print(Text(f"Time:        {format_seconds(elapsed)}", style="bold"))


def render_report(
    summary: RunSummary,
    console: Console,
    *,
    root: TreeNode | None = None,
    elapsed: float = 0.0,
    config: ReportConfig | None = None,
) -> None:
    """Full report: grouped results, or banners plus coverage table, then totals."""
    cfg = config or ReportConfig()
    if root is None:
        render_grouped(summary, console, show_subtests=cfg.show_subtests)
    else:
        render_banners(summary, console)
        console.print()
        console.print()
        console.print(
            build_coverage_table(
                root,
                thresholds=cfg.coverage_thresholds,
                compress_uncovered=cfg.compress_uncovered,
            )
        )

    console.print()
    console.print()
    render_summary(summary, console, elapsed=elapsed)
