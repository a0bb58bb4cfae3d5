# alice_api/cli/config.py
import os
from dotenv import load_dotenv
from pathlib import Path

# This file is at <project>/alice_api/cli/config.py
project_root = Path(__file__).parent.parent.parent.resolve()

load_dotenv(dotenv_path=project_root / '.env', override=True)

# Base URL of the running API the CLI talks to
ALICE_CLI_API_BASE_URL = os.getenv("ALICE_CLI_API_BASE_URL", "http://127.0.0.1:8080")

ALICE_CLI_TIMEOUT_SECONDS = float(os.getenv("ALICE_CLI_TIMEOUT_SECONDS", "30"))
