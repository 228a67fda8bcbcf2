from __future__ import annotations

import uvicorn

from universe.engine import build_app
from universe.settings import configure_logging, log_level, server_host, server_port


def main() -> None:
    configure_logging()
    uvicorn.run(build_app(), host=server_host(), port=server_port(), log_level=log_level())


if __name__ == "__main__":
    main()
