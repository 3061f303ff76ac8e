from __future__ import annotations

import logging
import sys

import uvicorn
from pydantic import ValidationError

from message_board.core.config import get_settings
from message_board.main import create_app


def main() -> None:
    try:
        settings = get_settings()
    except ValidationError:
        logging.basicConfig(level=logging.INFO)
        logging.getLogger(__name__).error("Missing SUPABASE_URL or SUPABASE_SERVICE_ROLE in environment")
        sys.exit(1)

    app = create_app(settings)
    logging.getLogger(__name__).info("Message server listening on http://localhost:%s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()
