"""CLI entrypoints for starterdoc commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, StarterdocConfig, load_config
from .logging import configure_logging
from .orchestrator import BuildOptions, Orchestrator, PipelineFailure

DEFAULT_DRAFT = "draft"


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_synthesis_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-n", "--starter-name", help="Starter name (default: derived from the contract name).")
    parser.add_argument("--category", help="Override the starter category.")
    parser.add_argument("--chapter", help="Override the starter chapter.")
    parser.add_argument("--author", help="Author used when the contract documents none.")
    parser.add_argument(
        "--has-ui",
        action="store_true",
        default=None,
        help="Mark the starter as shipping a frontend.",
    )


def _add_template_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--template",
        dest="template_path",
        help="Jinja2 template used to render the documentation.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="starterdoc",
        description="Build, document and publish smart-contract starters.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--config",
        help="Path to .starterdoc.yml or the directory containing it (defaults to current directory).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser(
        "build",
        help="Generate metadata and documentation for a draft and package it into dist/.",
    )
    _add_verbose_option(build_parser, suppress_default=True)
    build_parser.add_argument(
        "draft",
        nargs="?",
        help="Draft directory (defaults to <working_dir>/draft).",
    )
    build_parser.add_argument("-o", "--output", dest="output_path", help="Package directory (defaults to <draft>/dist).")
    build_parser.add_argument("--contract", help="Contract file to use when the draft holds several.")
    _add_template_option(build_parser)
    _add_synthesis_options(build_parser)

    publish_parser = subparsers.add_parser(
        "publish",
        help="Copy a built draft into the starter catalog.",
    )
    _add_verbose_option(publish_parser, suppress_default=True)
    publish_parser.add_argument(
        "draft",
        nargs="?",
        help="Draft directory (defaults to <working_dir>/draft).",
    )
    publish_parser.add_argument("--dist", dest="output_path", help="Package directory (defaults to <draft>/dist).")
    publish_parser.add_argument("-n", "--starter-name", help="Catalog entry name (defaults to the metadata name).")
    publish_parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Replace an existing catalog entry with the same name.",
    )

    metadata_parser = subparsers.add_parser(
        "metadata",
        help="Generate metadata.json for a single contract file.",
    )
    _add_verbose_option(metadata_parser, suppress_default=True)
    metadata_parser.add_argument("contract", help="Path to the contract source file.")
    metadata_parser.add_argument("-o", "--output", dest="output_path", help="Output path for metadata.json.")
    _add_synthesis_options(metadata_parser)

    docs_parser = subparsers.add_parser(
        "docs",
        help="Render documentation for a contract from an existing metadata file.",
    )
    _add_verbose_option(docs_parser, suppress_default=True)
    docs_parser.add_argument("contract", help="Path to the contract source file.")
    docs_parser.add_argument("--metadata", required=True, help="Path to the metadata.json to render from.")
    docs_parser.add_argument("-o", "--output", dest="output_path", help="Output path for the rendered document.")
    _add_template_option(docs_parser)

    rebuild_parser = subparsers.add_parser(
        "rebuild",
        help="Regenerate metadata and documentation for every published starter.",
    )
    _add_verbose_option(rebuild_parser, suppress_default=True)
    rebuild_parser.add_argument("--root", help="Catalog directory (defaults to the configured catalog_dir).")
    _add_template_option(rebuild_parser)
    rebuild_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report what would be rebuilt without writing files.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for starterdoc commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))

    try:
        config = load_config(Path(args.config) if args.config else Path.cwd())
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    orchestrator = Orchestrator(config)
    options = BuildOptions.from_mapping(vars(args))

    if args.command == "build":
        result = orchestrator.run_build(_draft_dir(args, config), options)
        if result.failure:
            _fail(parser, "build", result.failure)
        print(f"Starter '{result.metadata.name}' built at {_relativize(result.dist_dir)}")
    elif args.command == "publish":
        published = orchestrator.run_publish(_draft_dir(args, config), options)
        if published.failure:
            _fail(parser, "publish", published.failure)
        print(f"Starter '{published.name}' published to {_relativize(published.entry_dir)}")
        if published.docs_path:
            print(f"Documentation mirrored to {_relativize(published.docs_path)}")
    elif args.command == "metadata":
        result = orchestrator.build_metadata(args.contract, options)
        if result.failure:
            _fail(parser, "metadata", result.failure)
        print(f"Metadata written to {_relativize(result.metadata_path)}")
    elif args.command == "docs":
        result = orchestrator.generate_docs(args.contract, args.metadata, options)
        if result.failure:
            _fail(parser, "docs", result.failure)
        print(f"Documentation written to {_relativize(result.document_path)}")
    elif args.command == "rebuild":
        summary = orchestrator.run_rebuild(
            args.root,
            template_path=options.template_path,
            dry_run=bool(args.dry_run),
        )
        if summary.failure:
            _fail(parser, "rebuild", summary.failure)
        suffix = " (dry-run)" if summary.dry_run else ""
        print(f"Rebuilt {len(summary.rebuilt)} starter(s), skipped {len(summary.skipped)}{suffix}")
        for name, reasons in summary.skipped.items():
            print(f"  skipped {name}: {reasons[0]}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _draft_dir(args: argparse.Namespace, config: StarterdocConfig) -> Path:
    if args.draft:
        return Path(args.draft)
    return config.working_dir / DEFAULT_DRAFT


def _fail(parser: argparse.ArgumentParser, command: str, failure: PipelineFailure) -> None:
    parser.exit(1, f"starterdoc {command} failed at {failure.describe()}\nRun with --verbose for more details.\n")


def _relativize(path: Path | None) -> str:
    if path is None:
        return "-"
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
