"""Start the User Records API server from a source checkout.

Equivalent to the installed ``user-records-api`` script.

Usage:
    python run.py --port 8080 --db ./users.db
"""
from user_records_api.app.server import main


if __name__ == "__main__":
    main()
