# alice_api/cli/business_cli.py
import typer
from typing import Optional
from typing_extensions import Annotated

from .utils_cli import make_api_request

app = typer.Typer(
    name="business",
    help="Bootstrap businesses (tenants).",
    no_args_is_help=True
)


@app.command("create")
def create_business(
    name: Annotated[str, typer.Option(prompt="Business name", help="Display name of the business.")],
    industry: Annotated[str, typer.Option(prompt="Industry (e.g. Salon)", help="Industry tag used by insights.")],
    timezone: Annotated[
        Optional[str],
        typer.Option(help="IANA timezone. The server default applies when omitted.")
    ] = None,
):
    """Create a new business and print its id."""
    payload = {"name": name, "industry": industry}
    if timezone:
        payload["timezone"] = timezone

    data = make_api_request("POST", "/business/create", json_payload=payload)
    typer.secho(f"Business created. Use X-Business-Id: {data['businessId']}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
