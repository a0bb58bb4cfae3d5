# alice_api/cli/main_cli.py
import typer
from typing import Optional
from typing_extensions import Annotated

from . import business_cli, faqs_cli, staff_cli

app = typer.Typer(
    name="alice",
    help="Alice Starter API Command Line Interface.",
    no_args_is_help=True
)

app.add_typer(business_cli.app, name="business")
app.add_typer(staff_cli.app, name="staff")
app.add_typer(faqs_cli.app, name="faqs")


@app.callback()
def main_callback():
    """
    Alice Starter API CLI.
    Use 'alice serve' to run the API, the other commands talk to a running server.
    """
    pass


@app.command("serve")
def serve(
    host: Annotated[Optional[str], typer.Option(help="Listen host. Defaults to HOST from settings.")] = None,
    port: Annotated[Optional[int], typer.Option(help="Listen port. Defaults to PORT from settings.")] = None,
    reload: Annotated[bool, typer.Option("--reload", help="Restart on code changes.")] = False,
):
    """Run the API with uvicorn."""
    import uvicorn
    from ..settings import get_settings

    settings = get_settings()
    uvicorn.run(
        "alice_api.main:app",
        host=host or settings.host,
        port=port or settings.port,
        log_level="debug" if settings.debug_mode else "info",
        reload=reload,
    )


def cli_entry_point():
    """Entry point function for console script registration in pyproject.toml"""
    app()


if __name__ == "__main__":
    cli_entry_point()
