"""Command-line interface for hiccup."""

import argparse
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import ValidationError

from .config import RenderOptions
from .io_utils import warn, write_text
from .models import DocumentSpec, load_document
from .nodes import DescriptionError
from .render import RenderDepthError, render_to_string
from .templating import jinja_env, render_page
from .verify import check_balance


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def _load_document(path: Path) -> DocumentSpec:
    if not path.is_file():
        raise SystemExit(f"Description file not found: {path}")
    try:
        return load_document(path)
    except ValidationError as exc:
        raise SystemExit(f"Invalid description in {path}: {exc}") from exc
    except (ValueError, yaml.YAMLError) as exc:
        raise SystemExit(f"Could not read {path}: {exc}") from exc


def _options_from_args(base: RenderOptions, args: argparse.Namespace) -> RenderOptions:
    update = {}
    if args.escape:
        update["escape"] = True
    if args.max_depth is not None:
        update["max_depth"] = args.max_depth
    return base.model_copy(update=update)


def _report(errors: list[str], label: str) -> None:
    for error in errors:
        warn(f"{label}: {error}")


def _handle_render(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    document = _load_document(input_path)
    options = _options_from_args(document.options, args)

    try:
        nodes = document.to_nodes()
        fragment = render_to_string(nodes, options)
    except (DescriptionError, RenderDepthError) as exc:
        raise SystemExit(f"{input_path}: {exc}") from exc

    if args.check:
        errors = check_balance(fragment)
        if errors:
            _report(errors, str(input_path))
            raise SystemExit(1)

    output = fragment
    if args.template:
        env = jinja_env(Path(args.templates))
        output = render_page(env, args.template, nodes, options, source=input_path.name)

    if args.output:
        write_text(Path(args.output), output)
    else:
        print(output)


def _handle_check(args: argparse.Namespace) -> None:
    path = Path(args.input)
    if not path.is_file():
        raise SystemExit(f"Markup file not found: {path}")
    errors = check_balance(path.read_text(encoding="utf-8"))
    if errors:
        _report(errors, str(path))
        raise SystemExit(1)
    print(f"{path}: balanced")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hiccup",
        description="Render nested element descriptions to balanced markup.",
    )
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a YAML or JSON description file.",
        description="Render the nodes of a description file to markup.",
    )
    render_parser.add_argument("input", help="Path to a .yaml, .yml or .json description.")
    render_parser.add_argument(
        "--out",
        dest="output",
        help="File to write the markup to (default: stdout).",
    )
    render_parser.add_argument(
        "--escape",
        action="store_true",
        help="HTML-escape literals and quote attribute values.",
    )
    render_parser.add_argument(
        "--max-depth",
        dest="max_depth",
        type=_positive_int,
        help="Reject trees nested deeper than this many elements.",
    )
    render_parser.add_argument(
        "--template",
        help="Jinja template that receives the rendered markup as `content`.",
    )
    render_parser.add_argument(
        "--templates",
        default="templates",
        help="Directory holding Jinja templates (default: templates).",
    )
    render_parser.add_argument(
        "--check",
        action="store_true",
        help="Verify tag balance of the rendered markup and exit 1 on problems.",
    )
    render_parser.set_defaults(func=_handle_render)

    check_parser = subparsers.add_parser(
        "check",
        help="Check tag balance of a markup file.",
        description="Scan a rendered markup file for unbalanced tags.",
    )
    check_parser.add_argument("input", help="Path to a markup file.")
    check_parser.set_defaults(func=_handle_check)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
