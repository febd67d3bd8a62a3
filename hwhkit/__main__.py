import argparse
import sys
from argparse import Namespace
from pathlib import Path

from hwhkit.exceptions import HwhKitError
from hwhkit.web_server_builder import WebServerBuilder

DEFAULT_CONFIG_PATH: Path = Path("./config.toml")


def parse_launch_arguments(argv: list[str] | None = None) -> Namespace:
    """
    Получает параметры запуска сервера из командной строки.

    :param argv: Аргументы командной строки, по умолчанию sys.argv.
    :return: Пространство имен с полученными переменными.
    """
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        prog="hwhkit",
        description="Runs a web server configured by a TOML file"
    )
    parser.add_argument(
        "--config", "-c", default=DEFAULT_CONFIG_PATH, type=Path,
        dest="config_path",
        help="Path to the server configuration file"
    )
    parser.add_argument(
        "--address", "-a", default=None,
        dest="address",
        help="Address to listen on in host:port form, overrides the configuration"
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args: Namespace = parse_launch_arguments(argv)

    try:
        server = WebServerBuilder().config_from_file(args.config_path).build()
        server.start(args.address)

    except HwhKitError as err:
        print(err.message, file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
