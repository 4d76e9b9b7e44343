import logging
import uvicorn
from dietplan.api.api_run import app
from dietplan.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL


def main():
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    print(f"Uvicorn running on http://localhost:{APP_PORT} (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)


if __name__ == "__main__":
    main()
