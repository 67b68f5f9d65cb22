# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from movie_catalog.container import Container
from movie_catalog.shared.config import AppConfig, load_config
from movie_catalog.shared.logging import logger, setup_logging
from movie_catalog.shared.middleware import (
    configure_error_handling,
    configure_request_logging,
    configure_security_headers,
)


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(config.log_level, config.log_file)

    container = Container(config)
    container.database.init_schema()

    app = Flask(__name__)
    app.extensions["container"] = container
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_security_headers(app, enable_hsts=config.security.enable_hsts)

    CORS(app, origins=config.security.allowed_origins)
    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.movies_controller.as_blueprint())

    logger.info(f"Flask app initialized (env={config.app_env})")
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    logger.info(f"Server is running on port {config.port}")
    app.run(host=config.host, port=config.port)


if __name__ == "__main__":
    main()
