"""CLI entrypoints for examplehub commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, HubConfig, load_config
from .constants import CATEGORIES, CATEGORY_TITLES
from .docs import BenchmarkWriter, DocsGenerator
from .hub import list_example_dirs
from .logging import configure_logging
from .maintenance import (
    CROSS_ENV,
    PACKAGE_DEPS,
    SOURCE_REWRITES,
    MaintenanceReport,
    ManifestUpdater,
    SourceRewriter,
    dependency_pass,
)
from .models import ExampleDefinition
from .rendering import TemplateRenderer
from .scaffold import CatalogError, ExampleCreator, load_catalog
from .stats import collect_stats
from .validators import ExampleValidator, format_result, format_toolchain

_MANIFEST_FIXES = {CROSS_ENV.name: CROSS_ENV, PACKAGE_DEPS.name: PACKAGE_DEPS}


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


def _add_dry_run_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report the files that would change without writing them.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="examplehub",
        description="Scaffold, validate, document and maintain FHEVM example projects.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--root",
        default=".",
        help="Path to the hub root holding base-template/ and examples/ (defaults to current directory).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write debug-level logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    create_parser = subparsers.add_parser("create", help="Create a new example from the base template.")
    _add_verbose_option(create_parser, suppress_default=True)
    create_parser.add_argument("-n", "--name", required=True, help="Example name (e.g., simple-counter).")
    create_parser.add_argument(
        "-c", "--category", required=True, help=f"Category: {', '.join(CATEGORIES)}."
    )
    create_parser.add_argument("-d", "--description", default="", help="Example description.")
    create_parser.add_argument("--contract", type=Path, help="Solidity source to use as the example contract.")
    create_parser.add_argument("--test", type=Path, help="TypeScript test to use as the example test.")
    create_parser.add_argument(
        "--contract-name",
        help="Contract and test file stem (defaults to the PascalCase example name).",
    )

    create_all_parser = subparsers.add_parser(
        "create-all",
        help="Create every example listed in a catalog, skipping existing ones.",
    )
    _add_verbose_option(create_all_parser, suppress_default=True)
    create_all_parser.add_argument(
        "--catalog",
        type=Path,
        help="YAML catalog of examples (defaults to the built-in catalog).",
    )

    list_parser = subparsers.add_parser("list", help="List all available examples.")
    _add_verbose_option(list_parser, suppress_default=True)

    validate_parser = subparsers.add_parser(
        "validate", help="Check every example for its expected files."
    )
    _add_verbose_option(validate_parser, suppress_default=True)
    validate_parser.add_argument(
        "--skip-compile", action="store_true", help="Do not run npm run compile."
    )
    validate_parser.add_argument("--skip-tests", action="store_true", help="Do not run npm run test.")

    docs_parser = subparsers.add_parser(
        "generate-docs", help="Generate GitBook documentation from the examples."
    )
    _add_verbose_option(docs_parser, suppress_default=True)

    deps_parser = subparsers.add_parser(
        "update-dependencies", help="Pin FHEVM dependencies in every example's package.json."
    )
    _add_verbose_option(deps_parser, suppress_default=True)
    _add_dry_run_option(deps_parser)
    deps_parser.add_argument(
        "--version",
        dest="target_version",
        help="Version to pin (defaults to dependencies.version from .examplehub.yml).",
    )

    fix_parser = subparsers.add_parser(
        "fix", help="Run a find/replace maintenance pass over contracts or manifests."
    )
    _add_verbose_option(fix_parser, suppress_default=True)
    _add_dry_run_option(fix_parser)
    fix_parser.add_argument("fix_name", choices=sorted([*SOURCE_REWRITES, *_MANIFEST_FIXES]))

    benchmarks_parser = subparsers.add_parser(
        "gas-benchmarks", help="Print gas benchmarks and write docs/GAS_BENCHMARKS.md."
    )
    _add_verbose_option(benchmarks_parser, suppress_default=True)

    stats_parser = subparsers.add_parser("stats", help="Show project statistics.")
    _add_verbose_option(stats_parser, suppress_default=True)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for examplehub commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        config = load_config(Path(args.root))
    except (ConfigError, FileNotFoundError) as exc:
        parser.exit(1, f"{exc}\n")

    if args.command == "create":
        _run_create(parser, config, args)
    elif args.command == "create-all":
        _run_create_all(parser, config, args)
    elif args.command == "list":
        _run_list(config)
    elif args.command == "validate":
        _run_validate(config, args)
    elif args.command == "generate-docs":
        _run_generate_docs(config)
    elif args.command == "update-dependencies":
        _run_update_dependencies(config, args)
    elif args.command == "fix":
        _run_fix(config, args)
    elif args.command == "gas-benchmarks":
        writer = BenchmarkWriter(TemplateRenderer(config.docs.templates_dir))
        print(writer.format_console())
        path = writer.write(config.docs_dir)
        print(f"\nGenerated {_relativize(path)}")
    elif args.command == "stats":
        _run_stats(config)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_create(parser: argparse.ArgumentParser, config: HubConfig, args: argparse.Namespace) -> None:
    try:
        definition = ExampleDefinition(
            name=args.name,
            category=args.category,
            description=args.description,
            contract_name=args.contract_name,
            contract=_read_source(args.contract),
            test=_read_source(args.test),
        )
        example_dir = ExampleCreator(config).create(definition)
    except (ValueError, FileExistsError, FileNotFoundError) as exc:
        parser.exit(1, f"{exc}\n")

    print(f'Example "{args.name}" created successfully!')
    print(f"Location: {_relativize(example_dir)}")
    print("Next steps:")
    print(f"  1. cd {_relativize(example_dir)}")
    print("  2. npm install")
    print("  3. npm run compile")
    print("  4. npm run test")


def _run_create_all(parser: argparse.ArgumentParser, config: HubConfig, args: argparse.Namespace) -> None:
    try:
        definitions = load_catalog(args.catalog)
        outcome = ExampleCreator(config).create_all(definitions)
    except (CatalogError, ValueError, FileNotFoundError) as exc:
        parser.exit(1, f"{exc}\n")

    for name in outcome.created:
        print(f"  [OK] {name}")
    for name in outcome.skipped:
        print(f"  [SKIP] {name} (already exists)")
    print(f"Created {len(outcome.created)} examples, skipped {len(outcome.skipped)}.")


def _run_list(config: HubConfig) -> None:
    examples = list_example_dirs(config.examples_dir)
    if not examples:
        print("No examples found.")
        return
    print("Available examples:\n")
    for index, example in enumerate(examples, start=1):
        print(f"  {index}. {example}")


def _run_validate(config: HubConfig, args: argparse.Namespace) -> None:
    report = ExampleValidator().validate_all(
        config.examples_dir,
        skip_compile=bool(args.skip_compile),
        skip_tests=bool(args.skip_tests),
    )
    if not report.results:
        print("No examples found.")
        return

    print(f"Found {len(report.results)} examples to validate.\n")
    for result in report.results:
        status = "[OK]" if result.passed else "[FAIL]"
        print(f"{status} {result.example}: {format_result(result)}")
        if args.verbose:
            print(f"    toolchain: {format_toolchain(result)}")
            for error in result.errors:
                print(f"    - {error}")
    print(f"\nSummary: {report.passed} passed, {report.failed} failed, {len(report.results)} total")


def _run_generate_docs(config: HubConfig) -> None:
    outcome = DocsGenerator(config).generate()
    if not outcome.written and not outcome.unchanged:
        print("No examples found.")
        return
    print(
        f"Documentation generated in {_relativize(config.docs_dir)}: "
        f"{len(outcome.written)} written, {len(outcome.unchanged)} unchanged"
    )
    if outcome.warnings:
        print(f"{len(outcome.warnings)} warnings:")
        for warning in outcome.warnings:
            print(f"  - {warning}")


def _run_update_dependencies(config: HubConfig, args: argparse.Namespace) -> None:
    updater = ManifestUpdater(config)
    base = updater.describe_base_template()
    if base is not None:
        print(f"Base template FHEVM dependency: {base}")
    report = updater.run(dependency_pass(config, args.target_version), dry_run=bool(args.dry_run))
    _print_report(report)
    if report.changed and not report.dry_run:
        print("Next steps:")
        print('  1. Run "npm install" in each updated example')
        print('  2. Run "npm run compile" to verify contracts compile')
        print('  3. Run "npm run test" to verify tests pass')


def _run_fix(config: HubConfig, args: argparse.Namespace) -> None:
    dry_run = bool(args.dry_run)
    if args.fix_name in SOURCE_REWRITES:
        report = SourceRewriter(config).run(SOURCE_REWRITES[args.fix_name], dry_run=dry_run)
    else:
        report = ManifestUpdater(config).run(_MANIFEST_FIXES[args.fix_name], dry_run=dry_run)
    _print_report(report)


def _run_stats(config: HubConfig) -> None:
    stats = collect_stats(config.examples_dir)
    print("Project Statistics:")
    print(f"  Total Examples: {stats.examples}")
    print(f"  Total Contracts: {stats.contracts}")
    print(f"  Total Test Files: {stats.tests}")
    print(f"  Total Lines of Code: {stats.lines}")
    for category, examples in stats.by_category.items():
        if examples:
            print(f"\n  {CATEGORY_TITLES[category]} ({len(examples)})")
            for example in examples:
                print(f"    - {example}")


def _print_report(report: MaintenanceReport) -> None:
    for label in report.changed:
        print(f"  [OK] {label}")
    for label in report.skipped:
        print(f"  [SKIP] {label}")
    for error in report.errors:
        print(f"  [ERROR] {error}")
    print(report.summary())


def _read_source(path: Path | None) -> str:
    if path is None:
        return ""
    return path.expanduser().read_text(encoding="utf-8")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
