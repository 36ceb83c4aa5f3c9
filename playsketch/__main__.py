"""Entry point for playsketch package."""

import argparse
import json
import logging
import sys


def _classify(args: argparse.Namespace) -> int:
    from playsketch.classifiers import classify_path
    from playsketch.config import get_config
    from playsketch.core import as_path
    from playsketch.suggestions import get_assignment_options

    try:
        path = as_path(json.loads(args.path))
    except (json.JSONDecodeError, TypeError, ValueError) as e:
        print(f"Could not read path: {e}", file=sys.stderr)
        return 1

    config = get_config()
    overrides = {}
    if args.center_x is not None:
        overrides["center_x"] = args.center_x
    if args.line_of_scrimmage is not None:
        overrides["line_of_scrimmage"] = args.line_of_scrimmage
    if overrides:
        config = config.with_overrides(**overrides)

    result = classify_path(
        args.tool,
        path,
        player_side=args.side,
        player_start_x=args.start_x,
        player_start_y=args.start_y,
        config=config,
    )
    output = result.to_dict()
    output["options"] = get_assignment_options(result, config)
    print(json.dumps(output, indent=2))
    return 0


def _options(args: argparse.Namespace) -> int:
    from playsketch.suggestions import get_tool_options

    for option in get_tool_options(args.tool):
        print(option)
    return 0


def _serve(args: argparse.Namespace) -> int:
    from playsketch.api.main import run_api

    run_api(host=args.host, port=args.port, reload=args.reload)
    return 0


def build_parser() -> argparse.ArgumentParser:
    from playsketch.core.enums import DrawTool, PlayerSide

    tools = [t.value for t in DrawTool]

    parser = argparse.ArgumentParser(
        description="playsketch - classify drawn play-diagram paths",
        prog="playsketch",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log matched rules (DEBUG)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    classify = commands.add_parser("classify", help="Classify a drawn path")
    classify.add_argument("--tool", choices=tools, default="route", help="Draw tool (default: route)")
    classify.add_argument(
        "--path",
        required=True,
        help='JSON list of points, e.g. \'[[0,0],[0,-200]]\' or \'[{"x":0,"y":0}, ...]\'',
    )
    classify.add_argument("--side", choices=[s.value for s in PlayerSide], default="offense")
    classify.add_argument("--start-x", type=float, default=None, help="Pre-snap alignment x")
    classify.add_argument("--start-y", type=float, default=None, help="Pre-snap alignment y")
    classify.add_argument("--center-x", type=float, default=None, help="Field center x for this diagram")
    classify.add_argument("--line-of-scrimmage", type=float, default=None, help="Line of scrimmage y")
    classify.set_defaults(handler=_classify)

    options = commands.add_parser("options", help="List the full option menu for a tool")
    options.add_argument("--tool", choices=tools, default="route")
    options.set_defaults(handler=_options)

    serve = commands.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true")
    serve.set_defaults(handler=_serve)

    return parser


def main(argv=None) -> int:
    """Main entry point for the playsketch CLI."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
