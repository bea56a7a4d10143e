# expcat.py
# Command-line front end for the expense categorizer.
# - Classify free-text descriptions (classify)
# - Import a statement CSV and print / export the category summary (summarize)
# - Inspect a statement's columns (columns) or the active rule table (rules)
#
# Examples:
#   python expcat.py classify "STARBUCKS #1234" "UBER *TRIP"
#   python expcat.py columns data/statement.csv
#   python expcat.py summarize data/statement.csv --date-col Date \
#       --description-col Description --amount-col Amount --out expense-summary.csv
#   python expcat.py rules --rules config/my_rules.yaml
#
# Exit codes: 0 ok, 2 nothing importable / unreadable CSV, 3 mapped column missing.

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import List, Optional, Tuple

import click

from adapters.column_mapping import ColumnMappingAdapter
from categorizer.service import CategorizerService
from config.loader import load_config, resolve_rules_path
from exc_core.models import ColumnMapping
from exc_utils.logging_setup import setup_logging
from parser.csv_reader import StatementReadError, read_statement
from reports.export import encode_summary_csv, write_summary_csv
from reports.summary import summarize
from storage.transactions import TransactionStore

LOGGER = logging.getLogger("expcat")


def _default_rules_path() -> Optional[str]:
    try:
        return resolve_rules_path(load_config())
    except FileNotFoundError:
        return None


def _make_service(rules_path: Optional[str]) -> CategorizerService:
    return CategorizerService(rules_path=rules_path or _default_rules_path())


# ----------------------------- CLI -----------------------------
@click.group()
@click.option("--quiet", is_flag=True, help="Only warnings and errors.")
@click.option("--verbose", is_flag=True, help="Verbose logging.")
def cli(quiet: bool, verbose: bool) -> None:
    """Expense categorizer CLI."""
    level = "INFO"
    if quiet:
        level = "WARNING"
    if verbose:
        level = "DEBUG"
    setup_logging(level, fmt="%(levelname)s: %(message)s")


@cli.command("classify")
@click.argument("descriptions", nargs=-1, required=True)
@click.option(
    "--rules",
    "rules_path",
    default=None,
    help="Path to rules YAML file. Uses config.toml / built-in defaults if not specified.",
)
@click.option("--json", "output_json", is_flag=True, help="Output results as JSON.")
def classify_cmd(
    descriptions: Tuple[str, ...], rules_path: Optional[str], output_json: bool
) -> None:
    """Print the category each DESCRIPTION falls into."""
    svc = _make_service(rules_path)
    results = []
    for desc in descriptions:
        category, rule_name = svc.classify_with_rule(desc)
        results.append(
            {"description": desc, "category": category, "rule_name": rule_name}
        )

    if output_json:
        click.echo(json.dumps({"status": "ok", "results": results}, indent=2))
        return
    for r in results:
        rule_info = f" [{r['rule_name']}]" if r["rule_name"] else ""
        click.echo(f"  [{r['category']}] {r['description']}{rule_info}")


@cli.command("columns")
@click.argument("csv_path", type=click.Path(exists=True, dir_okay=False, readable=True))
def columns_cmd(csv_path: str) -> None:
    """List the columns of a statement CSV."""
    try:
        parsed = read_statement(csv_path)
    except StatementReadError as e:
        click.echo(f"[error] {e}", err=True)
        raise SystemExit(2)
    for h in parsed.headers:
        click.echo(h)
    click.echo(f"[columns] {len(parsed.headers)} column(s), {len(parsed)} row(s)")


@cli.command("summarize")
@click.argument("csv_path", type=click.Path(exists=True, dir_okay=False, readable=True))
@click.option("--date-col", required=True, help="Column holding the date.")
@click.option("--description-col", required=True, help="Column holding the description.")
@click.option("--amount-col", required=True, help="Column holding the amount.")
@click.option(
    "--rules",
    "rules_path",
    default=None,
    help="Path to rules YAML file. Uses config.toml / built-in defaults if not specified.",
)
@click.option(
    "--out",
    "out_path",
    default=None,
    type=click.Path(dir_okay=False, writable=True),
    help="Write the summary CSV here.",
)
@click.option(
    "--show-transactions",
    is_flag=True,
    help="Also list each imported transaction.",
)
@click.option("--json", "output_json", is_flag=True, help="Output results as JSON.")
def summarize_cmd(
    csv_path: str,
    date_col: str,
    description_col: str,
    amount_col: str,
    rules_path: Optional[str],
    out_path: Optional[str],
    show_transactions: bool,
    output_json: bool,
) -> None:
    """
    Import a statement CSV, categorize it and print the per-category summary.

    Examples:

        expcat summarize statement.csv --date-col Date --description-col Payee --amount-col Amount

        expcat summarize statement.csv ... --out expense-summary.csv
    """
    try:
        parsed = read_statement(csv_path)
    except StatementReadError as e:
        click.echo(f"[error] {e}", err=True)
        raise SystemExit(2)

    mapping = ColumnMapping(
        date=date_col, description=description_col, amount=amount_col
    )
    if not mapping.is_complete():
        click.echo(f"[error] empty column name for: {', '.join(mapping.missing())}", err=True)
        raise SystemExit(3)
    unknown: List[str] = [
        c for c in (date_col, description_col, amount_col) if c not in parsed.headers
    ]
    if parsed.headers and unknown:
        click.echo(
            f"[error] column(s) not in CSV: {', '.join(unknown)} "
            f"(available: {', '.join(parsed.headers)})",
            err=True,
        )
        raise SystemExit(3)

    svc = _make_service(rules_path)
    adapter = ColumnMappingAdapter(classifier=svc.classify)
    store = TransactionStore()
    store.append(adapter.build(rows=parsed.rows, mapping=mapping))

    if not len(store):
        click.echo("[summarize] No transactions to import.", err=True)
        raise SystemExit(2)

    summary = summarize(store)
    if out_path:
        write_summary_csv(summary, out_path)
        LOGGER.info("Wrote summary CSV -> %s", out_path)

    if output_json:
        payload = {
            "status": "ok",
            "total": round(summary.total, 2),
            "uncategorized_count": summary.uncategorized_count,
            "categories": [
                {
                    "category": r.category,
                    "count": r.count,
                    "total": round(r.total, 2),
                    "percentage": round(summary.percentage(r.total), 1),
                }
                for r in summary.rows
            ],
        }
        if show_transactions:
            payload["transactions"] = [asdict(t) for t in store]
        click.echo(json.dumps(payload, indent=2))
        return

    if show_transactions:
        for t in store:
            click.echo(f"  {t.date:<12} {t.amount:>10.2f}  [{t.category}] {t.description}")
        click.echo("")

    click.echo(encode_summary_csv(summary))
    click.echo("")
    click.echo(
        f"[summarize] {len(store)} transaction(s), total {summary.total:.2f}, "
        f"{summary.uncategorized_count} need review"
    )


@cli.command("rules")
@click.option("--rules", "rules_path", default=None, help="Path to rules YAML file.")
def rules_cmd(rules_path: Optional[str]) -> None:
    """Show the active rule table in evaluation order."""
    svc = _make_service(rules_path)
    click.echo(f"[rules] {svc.get_rule_count()} rule(s) from {svc.source}")
    for rule in svc.table:
        click.echo(f"  {rule.category} ({rule.name}, priority {rule.priority})")
        click.echo(f"    {', '.join(rule.triggers)}")
    click.echo(f"  fallback: {svc.table.default_category}")


if __name__ == "__main__":
    cli()
