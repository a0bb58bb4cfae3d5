# alice_api/cli/utils_cli.py
import requests
import typer
import json
from typing import Optional, Dict, Any

from .config import ALICE_CLI_API_BASE_URL, ALICE_CLI_TIMEOUT_SECONDS

SENSITIVE_FIELDS = {"pin", "nationalId", "token"}


def _masked(payload: Dict[str, Any]) -> Dict[str, Any]:
    return {k: ("*******" if k in SENSITIVE_FIELDS else v) for k, v in payload.items()}


def make_api_request(
    method: str,
    endpoint: str,
    json_payload: Optional[Any] = None,
    business_id: Optional[str] = None,
    expected_status: int = 200,
) -> Any:
    """
    Call the API, echo what happened and return the decoded JSON body.

    Exits with code 1 on connection problems, unexpected status codes or
    undecodable responses.
    """
    full_url = f"{ALICE_CLI_API_BASE_URL}{endpoint}"
    headers: Dict[str, str] = {}
    if business_id:
        headers["X-Business-Id"] = business_id

    typer.echo(f"CLI: {method.upper()} {full_url}")
    if isinstance(json_payload, dict):
        typer.echo(f"CLI: JSON Payload: {json.dumps(_masked(json_payload), indent=2)}")

    try:
        response = requests.request(
            method,
            full_url,
            json=json_payload,
            headers=headers,
            timeout=ALICE_CLI_TIMEOUT_SECONDS,
        )
    except requests.exceptions.ConnectionError as e:
        typer.secho(
            f"CLI: Connection Error - Could not connect to API at {full_url}. Is the server running? Error: {e}",
            fg=typer.colors.RED
        )
        raise typer.Exit(code=1)
    except requests.exceptions.RequestException as e:
        typer.secho(f"CLI: Request Error - {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    typer.echo(f"CLI: Response Status: {response.status_code}")

    try:
        data = response.json()
    except json.JSONDecodeError:
        typer.secho(f"CLI: Error - Could not decode JSON response. Raw text: {response.text}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    if response.status_code != expected_status:
        detail = data.get("error", data) if isinstance(data, dict) else data
        typer.secho(
            f"CLI: API Error - Expected status {expected_status}, got {response.status_code}. Detail: {detail}",
            fg=typer.colors.RED
        )
        raise typer.Exit(code=1)

    typer.echo(typer.style("CLI: Response JSON:", fg=typer.colors.CYAN))
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
    return data
