"""
Developer task runner using Invoke.
Run `inv --list` to see tasks.

Key tasks:
  inv app
  inv summarize --input statement.csv --date-col Date --description-col Payee --amount-col Amount
  inv test
"""

from invoke import task
from pathlib import Path
import sys


REPO = Path(__file__).parent


def _python():
    """Return the python executable inside the current venv."""
    return sys.executable or "python"


@task(help={"port": "Port for the Streamlit server (default: 8501)"})
def app(c, port=8501):
    """Launch the Streamlit UI."""
    c.run(
        f'"{_python()}" -m streamlit run "{REPO / "ui" / "app.py"}" --server.port {port}',
        pty=False,
    )


@task(
    help={
        "input": "Statement CSV",
        "date_col": "Column holding the date",
        "description_col": "Column holding the description",
        "amount_col": "Column holding the amount",
        "out": "Write the summary CSV here (default: expense-summary.csv)",
        "rules": "Rules YAML (default: from config.toml)",
    }
)
def summarize(
    c,
    input,
    date_col,
    description_col,
    amount_col,
    out="expense-summary.csv",
    rules=None,
):
    """Import one statement and export its category summary."""
    args = [
        f'"{REPO / "expcat.py"}"',
        "summarize",
        f'"{input}"',
        "--date-col",
        f'"{date_col}"',
        "--description-col",
        f'"{description_col}"',
        "--amount-col",
        f'"{amount_col}"',
        "--out",
        f'"{out}"',
    ]
    if rules:
        args += ["--rules", f'"{rules}"']
    c.run(f'"{_python()}" ' + " ".join(args), pty=False)


@task
def test(c):
    """Run unit tests with pytest."""
    c.run(f'"{_python()}" -m pytest -q', pty=False)
