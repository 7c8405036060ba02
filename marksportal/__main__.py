# =====================================================
# LOCAL RUN ONLY (PRODUCTION USES GUNICORN: marksportal:create_app())
# =====================================================
import logging

from marksportal import create_app

logger = logging.getLogger("marksportal")


def main():
    app = create_app()
    port = app.config["PORT"]
    logger.info("Server running on port %s", port)
    logger.info("Access your application at: http://localhost:%s", port)
    app.run(host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
