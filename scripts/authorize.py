"""
One-time Google authentication for Billable Hours.
Runs the browser consent flow and writes token.json.
Place your OAuth Desktop client JSON as credentials.json in the project root first.
"""

import sys
from pathlib import Path

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from billable_hours.auth.google_auth import create_initial_token
from billable_hours.core.config_manager import Config


def main() -> int:
    print("Billable Hours: Google Calendar authorization")

    config = Config.report_config()
    if config.token_path.exists():
        print(f"Existing token found at {config.token_path}; delete it to re-authorize.")
        return 0

    try:
        creds = create_initial_token(config)
    except FileNotFoundError as e:
        print(f"{e}")
        return 1

    if not creds:
        print("Google authentication failed.")
        return 1

    print(f"Authorization complete. Token saved to {config.token_path}")
    print("Run 'python scripts/report.py' to print this week's report.")
    return 0


if __name__ == '__main__':
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nAuthorization cancelled.")
        sys.exit(1)
