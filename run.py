import logging
from tasks_api import create_app

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("tasks_api")

app = create_app()


if __name__ == "__main__":
    host, port = app.config["HOST"], app.config["PORT"]
    logger.info(f"Server running on http://{host}:{port}")
    app.run(host=host, port=port, debug=False, use_reloader=False)
