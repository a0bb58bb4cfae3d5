# alice_api/cli/staff_cli.py
import typer
from typing import Optional
from typing_extensions import Annotated

from .utils_cli import make_api_request

app = typer.Typer(
    name="staff",
    help="Register staff members and test their logins.",
    no_args_is_help=True
)


@app.command("create")
def create_staff(
    business_id: Annotated[str, typer.Argument(help="The business the staff member belongs to.")],
    name: Annotated[str, typer.Option(prompt="Staff name")],
    national_id: Annotated[str, typer.Option(prompt="National ID")],
    pin: Annotated[str, typer.Option(prompt="PIN", hide_input=True)],
    role: Annotated[Optional[str], typer.Option(help="Role, defaults to 'staff' on the server.")] = None,
):
    """Register a staff member for a business."""
    payload = {"name": name, "nationalId": national_id, "pin": pin}
    if role:
        payload["role"] = role
    make_api_request("POST", "/staff/create", json_payload=payload, business_id=business_id)


@app.command("login")
def login_staff(
    business_id: Annotated[str, typer.Argument(help="The business to log in to.")],
    name: Annotated[str, typer.Option(prompt="Staff name")],
    national_id: Annotated[str, typer.Option(prompt="National ID")],
    pin: Annotated[str, typer.Option(prompt="PIN", hide_input=True)],
):
    """Log in as a staff member and print the session token."""
    payload = {"name": name, "nationalId": national_id, "pin": pin}
    make_api_request("POST", "/staff/login", json_payload=payload, business_id=business_id)


if __name__ == "__main__":
    app()
