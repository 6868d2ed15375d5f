from loguru import logger

from bundleburst.cli import app


def main() -> None:
    logger.debug("bundleburst started from main.py")
    app()


if __name__ == "__main__":
    main()
