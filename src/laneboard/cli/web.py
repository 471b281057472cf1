"""Handlers for 'laneboard web' command."""

import shlex
import shutil
import sys

from textual_serve.server import Server

from laneboard.cli._common import load_config


def web(args) -> int:
    laneboard = shutil.which("laneboard")
    if laneboard is None:
        print("error: laneboard not found on PATH", file=sys.stderr)
        return 1

    data_dir = str(load_config(args).data_path)
    command = f"{shlex.quote(laneboard)} {shlex.quote(data_dir)}"
    server = Server(
        command,
        host=args.host,
        port=args.port,
        title="laneboard",
    )

    print(f"serving {data_dir} at http://{args.host}:{args.port}")
    server.serve()
    return 0
