"""Human-readable rendering of validation results."""

from bids_checker.models import IssueGroup, ValidationResult

# Occurrences listed per issue code before the rest is summarized
MAX_FILES_PER_ISSUE = 10


def _format_size(size: int) -> str:
    value = float(size)
    if value < 1024:
        return f"{size} B"
    for unit in ("KB", "MB", "GB"):
        value /= 1024
        if value < 1024:
            return f"{value:.2f} {unit}"
    return f"{value / 1024:.2f} TB"


def _format_group(index: int, group: IssueGroup, verbose: bool) -> list[str]:
    lines = [f"  {index}: [code {group.code}] {group.key}", f"     {group.reason}"]
    shown = group.files if verbose else group.files[:MAX_FILES_PER_ISSUE]
    for issue in shown:
        line = f"       {issue.relative_path or '(dataset)'}"
        if issue.evidence:
            line += f"\n         Evidence: {issue.evidence}"
        lines.append(line)
    remaining = len(group.files) - len(shown)
    if remaining > 0:
        lines.append(f"       ... and {remaining} more files")
    return lines


def format_text(result: ValidationResult, verbose: bool = False) -> str:
    """Render a validation result as a plain-text report.

    Args:
        result: Validation result
        verbose: List every affected file instead of the first few per code

    Returns:
        Report text
    """
    lines = []
    for title, groups in (("Errors", result.errors), ("Warnings", result.warnings)):
        if not groups:
            continue
        lines.append(f"{title}:")
        for index, group in enumerate(groups, start=1):
            lines.extend(_format_group(index, group, verbose))
        lines.append("")

    if not result.errors and not result.warnings:
        lines.append("This dataset appears to be BIDS compatible.")
        lines.append("")

    summary = result.summary
    lines.append("Summary:")
    lines.append(f"  {summary.total_files} files, {_format_size(summary.size)}")
    lines.append(f"  Subjects: {', '.join(summary.subjects) or 'n/a'}")
    lines.append(f"  Sessions: {', '.join(summary.sessions) or 'n/a'}")
    lines.append(f"  Tasks: {', '.join(summary.tasks) or 'n/a'}")
    lines.append(f"  Modalities: {', '.join(summary.modalities) or 'n/a'}")
    return "\n".join(lines)
