"""Launch the skill service under Uvicorn."""

from __future__ import annotations

import os

import uvicorn


def main() -> None:
    from showtimes.main import app

    port = int(os.environ.get("PORT", "8000"))
    uvicorn.run(app, host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
