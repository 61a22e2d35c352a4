import argparse
import logging

from .config import load_config, log_level
from .errors import ConfigError, DatelineError
from .site import Site

logger = logging.getLogger("dateline")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="dateline",
        description="Generate a static site from a directory of posts and assets.",
    )
    parser.add_argument("src", help="source directory (posts/, templates/, assets)")
    parser.add_argument("dest", help="output directory")
    parser.add_argument("--config", help="YAML build config")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every copied file")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        cfg = load_config(args.config)
    except ConfigError as exc:
        logging.basicConfig(format="%(message)s")
        logger.error(str(exc))
        return 1

    level = logging.DEBUG if args.verbose else log_level(cfg)
    logging.basicConfig(level=level, format="%(message)s")

    site = Site(args.src, args.dest, markdown_extensions=cfg["markdown_extensions"])
    try:
        site.generate()
    except DatelineError as exc:
        logger.error(f"error generating site: {exc}")
        return 1
    return 0
