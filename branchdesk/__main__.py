import uvicorn

from branchdesk.core.config import settings


def main() -> None:
    uvicorn.run(
        "branchdesk.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
