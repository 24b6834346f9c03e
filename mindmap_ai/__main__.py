import uvicorn

from mindmap_ai.core.config import settings


def main() -> None:
    uvicorn.run("mindmap_ai.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
