# easyrest/main.py
"""
easyrest: call one JSON-RPC method over HTTP and print its result.

Usage:
    easyrest [-basic user:pass] [-cookie value] [-header Name:Value ...] url method params
"""
import argparse
import sys
from typing import List, Optional

import anyio

from easyrest.client.client import RPCInvoker, format_result
from easyrest.config.settings import ClientSettings, configure_logging
from easyrest.errors import EasyRestError, InputError
from easyrest.utils.serialization import loads


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise InputError(message)


def parse_params(text: str):
    try:
        return loads(text)
    except ValueError as e:
        raise InputError(f"params is not valid JSON: {e}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="easyrest", description="Send a JSON-RPC request over HTTP")
    parser.add_argument("-basic", default="", help="http basic authentation user:pass")
    parser.add_argument("-cookie", default="", help="cookie to send in http request")
    parser.add_argument(
        "-header",
        dest="headers",
        action="append",
        default=[],
        type=str.strip,
        help="http headers to use in request, Name:Value (repeatable)",
    )
    parser.add_argument("-verbose", action="store_true", help="log request details to stderr")
    parser.add_argument("url")
    parser.add_argument("method")
    parser.add_argument("params", help="JSON encoded params, e.g. '[1, 2]'")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = build_parser().parse_args(argv)
        params = parse_params(args.params)
        settings = ClientSettings.from_flags(
            headers=args.headers,
            basic=args.basic,
            cookie=args.cookie,
            **({"log_level": "DEBUG"} if args.verbose else {}),
        )
        configure_logging(settings.log_level)

        invoker = RPCInvoker(settings)
        result = anyio.run(invoker.call, args.url, args.method, params)
        output = format_result(result)
    except EasyRestError as e:
        print(f"error: {e}")
        return 1

    print(output)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
