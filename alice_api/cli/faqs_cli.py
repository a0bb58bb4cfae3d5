# alice_api/cli/faqs_cli.py
import typer
import json
from pathlib import Path
from typing_extensions import Annotated

from .utils_cli import make_api_request

app = typer.Typer(
    name="faqs",
    help="Inspect and replace a business's FAQ list.",
    no_args_is_help=True
)


@app.command("list")
def list_faqs(business_id: Annotated[str, typer.Argument(help="The business whose FAQs to show.")]):
    """Show the FAQ list of a business."""
    make_api_request("GET", "/faqs", business_id=business_id)


@app.command("set")
def set_faqs(
    business_id: Annotated[str, typer.Argument(help="The business whose FAQs to replace.")],
    file: Annotated[
        Path,
        typer.Option(
            "--file",
            exists=True,
            dir_okay=False,
            help="JSON file holding a list of {\"q\": ..., \"a\": ...} objects. REPLACES the current list."
        )
    ],
):
    """Replace the FAQ list of a business with the contents of a JSON file."""
    try:
        items = json.loads(file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        typer.secho(f"Error: {file} is not valid JSON: {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    if not isinstance(items, list):
        typer.secho("Error: the FAQ file must contain a JSON list.", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    make_api_request("POST", "/faqs", json_payload={"items": items}, business_id=business_id)


if __name__ == "__main__":
    app()
