"""Start the blog service.

Serves the API on ``PORT`` (8080 when unset) until interrupted and
exits with status 1 if the server cannot start.

Usage:
    python run.py
"""

from blog_api.app.bootstrap import main


if __name__ == "__main__":
    main()
