"""Typer CLI interface for taxready."""

import logging
from decimal import Decimal
from pathlib import Path

import typer
from pydantic import ValidationError

from taxready.engines.rates import DEFAULT_TAX_YEAR
from taxready.exceptions import TaxComputationError
from taxready.models.enums import ChecklistStatus
from taxready.models.overrides import OverrideStore

app = typer.Typer(
    name="taxready",
    help="taxready - Australian tax return completeness and estimate checker.",
)
overrides_app = typer.Typer(help="Edit a saved set of manual overrides.")
app.add_typer(overrides_app, name="overrides")

DEFAULT_OVERRIDES_FILE = Path("taxready-overrides.json")

EXPORT_FORMATS = ("checklist", "summary")

STATUS_STYLES = {
    ChecklistStatus.COMPLETE: "green",
    ChecklistStatus.PARTIAL: "yellow",
    ChecklistStatus.MISSING: "red",
    ChecklistStatus.NOT_APPLICABLE: "dim",
}


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """taxready - Australian tax return completeness and estimate checker."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _percent(rate: Decimal) -> str:
    return f"{(rate * 100).normalize():f}%"


def _load_overrides(path: Path | None, must_exist: bool = True) -> OverrideStore | None:
    if path is None:
        return None
    if not path.exists():
        if must_exist:
            typer.echo(f"Error: Overrides file not found: {path}", err=True)
            raise typer.Exit(1)
        return OverrideStore()
    try:
        return OverrideStore.model_validate_json(path.read_text())
    except ValidationError as e:
        typer.echo(f"Error: Invalid overrides file {path.name}: {e}", err=True)
        raise typer.Exit(1)


def _save_overrides(store: OverrideStore, path: Path) -> None:
    path.write_text(store.model_dump_json(indent=2))


@app.command()
def check(
    input_file: Path = typer.Argument(..., help="JSON file with profile, income, deductions and opportunities"),
    overrides_file: Path | None = typer.Option(
        None,
        "--overrides",
        help="JSON file with manual status and suggestion overrides",
    ),
    policy_file: Path | None = typer.Option(
        None,
        "--policy",
        help="JSON file overriding scoring weights and risk thresholds",
    ),
    export: str | None = typer.Option(
        None,
        "--export",
        help="Print a plain-text export instead of the dashboard: checklist or summary",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output the full report as JSON"),
) -> None:
    """Check a tax return for completeness and estimate the refund."""
    from rich.console import Console
    from rich.panel import Panel
    from rich.table import Table

    from taxready.engines import planner
    from taxready.engines.completeness import CompletenessChecker
    from taxready.models.inputs import CompletenessRequest
    from taxready.models.policy import EnginePolicy

    if export is not None and export not in EXPORT_FORMATS:
        typer.echo(
            f"Error: Invalid export '{export}'. Valid: {', '.join(EXPORT_FORMATS)}", err=True
        )
        raise typer.Exit(1)

    if not input_file.exists():
        typer.echo(f"Error: Input file not found: {input_file}", err=True)
        raise typer.Exit(1)

    try:
        request = CompletenessRequest.model_validate_json(input_file.read_text())
    except ValidationError as e:
        typer.echo(f"Error: Invalid input file {input_file.name}: {e}", err=True)
        raise typer.Exit(1)

    policy = None
    if policy_file is not None:
        if not policy_file.exists():
            typer.echo(f"Error: Policy file not found: {policy_file}", err=True)
            raise typer.Exit(1)
        try:
            policy = EnginePolicy.model_validate_json(policy_file.read_text())
        except ValidationError as e:
            typer.echo(f"Error: Invalid policy file {policy_file.name}: {e}", err=True)
            raise typer.Exit(1)

    overrides = _load_overrides(overrides_file)

    checker = CompletenessChecker(policy=policy)
    try:
        report = checker.generate_report_from_request(request, overrides)
    except TaxComputationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    for issue in report.override_issues:
        typer.echo(f"Warning: stale {issue.kind.value} override {issue.target_id!r}: {issue.reason}", err=True)

    if export == "checklist":
        typer.echo(report.export_data.checklist_data)
        return
    if export == "summary":
        typer.echo(report.export_data.summary_data)
        return
    if json_output:
        typer.echo(report.model_dump_json(indent=2))
        return

    readiness = checker.policy.scoring.readiness
    score = report.score
    est = report.tax_estimate

    typer.echo(f"=== Tax Return Completeness: FY{report.tax_year} ===")
    typer.echo(f"Completeness score: {score.overall}/100 ({score.color_status.value})")
    typer.echo(
        f"  Income {score.income_score}  Deductions {score.deductions_score}  "
        f"Documents {score.documents_score}  Optimization {score.optimization_score}"
    )
    typer.echo(f"Missing required items: {score.missing_items_count}")
    typer.echo(
        f"Ready for lodgment: {'yes' if planner.is_ready_for_lodgment(report, readiness) else 'no'}"
    )
    typer.echo(f"Estimated time to complete: {report.estimated_completion_time} minutes")

    console = Console()
    checklist = Table(title="Checklist", show_header=True)
    checklist.add_column("Item", style="cyan")
    checklist.add_column("Status")
    checklist.add_column("Amount", justify="right")
    checklist.add_column("Action needed")
    for item in report.all_items:
        if item.status == ChecklistStatus.NOT_APPLICABLE:
            continue
        style = STATUS_STYLES[item.status]
        checklist.add_row(
            item.title,
            f"[{style}]{item.status.value}[/{style}]",
            f"${item.claimed_amount:,.2f}",
            item.action_needed or "",
        )
    console.print(checklist)

    if report.missing_documents:
        docs = Table(title="Missing Documents", show_header=True)
        docs.add_column("Priority")
        docs.add_column("Document", style="cyan")
        docs.add_column("Why")
        for doc in report.missing_documents:
            docs.add_row(doc.priority.value, doc.document_type, doc.detection_reason)
        console.print(docs)

    if report.optimization_suggestions:
        opts = Table(title="Optimization Suggestions", show_header=True)
        opts.add_column("Priority")
        opts.add_column("Suggestion", style="cyan")
        opts.add_column("Saving", justify="right")
        opts.add_column("Done")
        for s in report.optimization_suggestions:
            opts.add_row(
                s.priority.value,
                s.title,
                f"${s.estimated_tax_savings:,.2f}",
                "yes" if s.implemented else "",
            )
        console.print(opts)

    typer.echo("")
    typer.echo("TAX ESTIMATE")
    typer.echo(f"  Gross Income:          ${est.gross_income:>12,.2f}")
    typer.echo(f"  Deductions:            ${est.total_deductions:>12,.2f}")
    typer.echo(f"  Taxable Income:        ${est.taxable_income:>12,.2f}")
    typer.echo(f"  Tax Payable:           ${est.tax_payable:>12,.2f}")
    typer.echo(f"  Medicare Levy:         ${est.medicare_levy:>12,.2f}")
    if est.medicare_levy_surcharge > 0:
        typer.echo(f"  Medicare Levy Surch.:  ${est.medicare_levy_surcharge:>12,.2f}")
    typer.echo(f"  Tax Withheld:          ${est.tax_withheld:>12,.2f}")
    if est.total_offsets > 0:
        typer.echo(f"  Offsets:               ${est.total_offsets:>12,.2f}")
    typer.echo("  ──────────────────────────────────────")
    if est.estimated_tax_owing > 0:
        typer.echo(f"  Estimated Tax Owing:   ${est.estimated_tax_owing:>12,.2f}")
    else:
        typer.echo(f"  Estimated Refund:      ${est.estimated_refund:>12,.2f}")

    risk = report.risk_assessment
    typer.echo("")
    typer.echo(f"RISK: {risk.level.value.upper()} ({risk.score}/100) - {risk.review_likelihood}")
    for factor in risk.factors:
        typer.echo(f"  [{factor.impact.value}] {factor.factor}: {factor.description}")

    action = planner.next_action(report, readiness)
    if action is not None:
        body = action.description + (f"\n{action.link}" if action.link else "")
        console.print(Panel(body, title=f"Next: {action.title}", border_style="bold cyan"))


@app.command()
def bracket(
    income: float = typer.Argument(..., help="Taxable income in dollars"),
    year: int = typer.Option(DEFAULT_TAX_YEAR, "--year", "-y", help="Tax year (year the financial year ends)"),
) -> None:
    """Show the marginal bracket and tax on a taxable income."""
    from taxready.engines.calculator import bracket_for, medicare_levy, progressive_tax

    amount = Decimal(str(income))
    try:
        found = bracket_for(amount, year)
        tax = progressive_tax(amount, year)
        levy = medicare_levy(amount, year)
    except TaxComputationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Tax year: {year}")
    typer.echo(f"Marginal bracket: {found.description} ({_percent(found.rate)})")
    typer.echo(f"Tax payable:   ${tax:>12,.2f}")
    typer.echo(f"Medicare levy: ${levy:>12,.2f}")


@app.command()
def franking(
    amount: float = typer.Argument(..., help="Cash dividend received"),
    percent: float = typer.Option(100.0, "--percent", "-p", help="Franking percentage (0-100)"),
    income: float | None = typer.Option(
        None,
        "--income",
        help="Total taxable income including the grossed-up dividend",
    ),
    year: int = typer.Option(DEFAULT_TAX_YEAR, "--year", "-y", help="Tax year for marginal rates"),
) -> None:
    """Compute a dividend's franking credit and its tax impact."""
    from taxready.engines.calculator import (
        franking_from_dividend,
        tax_impact,
        tax_impact_at_all_rates,
    )

    try:
        calc = franking_from_dividend(Decimal(str(amount)), Decimal(str(percent)))
        if income is not None:
            impacts = [
                tax_impact(
                    calc.grossed_up_dividend, calc.franking_credit, Decimal(str(income)), year
                )
            ]
        else:
            impacts = tax_impact_at_all_rates(calc.grossed_up_dividend, calc.franking_credit, year)
    except TaxComputationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Dividend:           ${calc.dividend_amount:>10,.2f}")
    typer.echo(f"Franked amount:     ${calc.franked_amount:>10,.2f}")
    typer.echo(f"Unfranked amount:   ${calc.unfranked_amount:>10,.2f}")
    typer.echo(f"Franking credit:    ${calc.franking_credit:>10,.2f}")
    typer.echo(f"Grossed-up dividend:${calc.grossed_up_dividend:>10,.2f}")
    typer.echo("")
    for impact in impacts:
        position = "refund" if impact.is_refund else "payable"
        typer.echo(
            f"At {_percent(impact.marginal_rate):>6}: tax ${impact.tax_on_grossed_up:,.2f}, "
            f"net {position} ${abs(impact.net_tax_position):,.2f}"
        )


# ---------------------------------------------------------------------------
# Override store editing
# ---------------------------------------------------------------------------


@overrides_app.command("mark")
def overrides_mark(
    item_id: str = typer.Argument(..., help="Checklist item id, e.g. income-SALARY or deduction-D5"),
    status: str = typer.Option("complete", "--status", "-s", help="complete, partial, missing or not_applicable"),
    file: Path = typer.Option(DEFAULT_OVERRIDES_FILE, "--file", "-f", help="Overrides JSON file"),
) -> None:
    """Force a checklist item's status."""
    try:
        new_status = ChecklistStatus(status)
    except ValueError:
        valid = ", ".join(s.value for s in ChecklistStatus)
        typer.echo(f"Error: Invalid status '{status}'. Valid: {valid}", err=True)
        raise typer.Exit(1)
    store = _load_overrides(file, must_exist=False)
    store.set_status(item_id, new_status)
    _save_overrides(store, file)
    typer.echo(f"Marked {item_id} as {new_status.value}")


@overrides_app.command("unmark")
def overrides_unmark(
    item_id: str = typer.Argument(..., help="Checklist item id"),
    file: Path = typer.Option(DEFAULT_OVERRIDES_FILE, "--file", "-f", help="Overrides JSON file"),
) -> None:
    """Return a checklist item to its computed status."""
    store = _load_overrides(file, must_exist=False)
    store.clear_status(item_id)
    _save_overrides(store, file)
    typer.echo(f"Cleared status override for {item_id}")


@overrides_app.command("implement")
def overrides_implement(
    opportunity_id: str = typer.Argument(..., help="Optimization opportunity id"),
    file: Path = typer.Option(DEFAULT_OVERRIDES_FILE, "--file", "-f", help="Overrides JSON file"),
) -> None:
    """Record an optimization as implemented."""
    store = _load_overrides(file, must_exist=False)
    store.implement(opportunity_id)
    _save_overrides(store, file)
    typer.echo(f"Implemented {opportunity_id}")


@overrides_app.command("dismiss")
def overrides_dismiss(
    opportunity_id: str = typer.Argument(..., help="Optimization opportunity id"),
    restore: bool = typer.Option(False, "--restore", help="Undo an earlier dismissal"),
    file: Path = typer.Option(DEFAULT_OVERRIDES_FILE, "--file", "-f", help="Overrides JSON file"),
) -> None:
    """Hide an optimization suggestion (or bring it back with --restore)."""
    store = _load_overrides(file, must_exist=False)
    if restore:
        store.restore(opportunity_id)
        typer.echo(f"Restored {opportunity_id}")
    else:
        store.dismiss(opportunity_id)
        typer.echo(f"Dismissed {opportunity_id}")
    _save_overrides(store, file)


@overrides_app.command("clear")
def overrides_clear(
    file: Path = typer.Option(DEFAULT_OVERRIDES_FILE, "--file", "-f", help="Overrides JSON file"),
) -> None:
    """Drop every override."""
    store = _load_overrides(file, must_exist=False)
    store.clear()
    _save_overrides(store, file)
    typer.echo(f"Cleared all overrides in {file}")


if __name__ == "__main__":
    app()
