import logging

import uvicorn

from app.core.config import settings


def main():
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("app.server:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)

if __name__ == '__main__':
    main()
