"""Run the uuid47 gateway: python -m uuid47"""

import logging

import uvicorn

from uuid47.config import load_config

config = load_config()
logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
uvicorn.run(
    "uuid47.app:create_app",
    host=config.host,
    port=config.port,
    factory=True,
    log_level=config.log_level.lower(),
)
