import logging
import sys

from dotenv import load_dotenv

from sinesong.cli import main as run_cli
from sinesong.config import load_settings


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s:%(name)s: %(message)s",
    )


def main() -> None:
    load_dotenv()
    configure_logging(load_settings().log_level)

    try:
        status = run_cli()
    except KeyboardInterrupt:
        logging.getLogger("sinesong").info("Playback interrupted.")
        status = 130
    sys.exit(status)


if __name__ == "__main__":
    main()
