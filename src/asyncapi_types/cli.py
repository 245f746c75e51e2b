"""asyncapi-types CLI: validate, round-trip and inspect AsyncAPI documents."""

import argparse
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path
from typing import Optional


def main():
    """Main CLI entry point for asyncapi-types commands."""
    try:
        package_version = get_version("asyncapi-types")
    except PackageNotFoundError:
        package_version = "dev"

    parser = argparse.ArgumentParser(
        prog="asyncapi-types",
        description="asyncapi-types: typed AsyncAPI documents that round-trip losslessly"
    )
    parser.add_argument("--version", action="version", version=f"asyncapi-types {package_version}")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output (reference following, file I/O) to stderr."
    )
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Check structure, references, unknown variants and extension names",
        parents=[parent_parser]
    )
    validate_parser.add_argument(
        "path",
        type=Path,
        help="Path to an AsyncAPI document (.json, .yaml or .yml)"
    )
    validate_parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Write validation.json to this directory"
    )

    # roundtrip command
    roundtrip_parser = subparsers.add_parser(
        "roundtrip",
        help="Decode a document, re-encode it and report any difference",
        parents=[parent_parser]
    )
    roundtrip_parser.add_argument(
        "path",
        type=Path,
        help="Path to an AsyncAPI document"
    )
    roundtrip_parser.add_argument(
        "--format",
        choices=["json", "yaml"],
        default=None,
        help="Output format for --out (defaults to the --out suffix, then json)"
    )
    roundtrip_parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write the re-encoded document here"
    )

    # refs command
    refs_parser = subparsers.add_parser(
        "refs",
        help="List every $ref in a document and whether it resolves",
        parents=[parent_parser]
    )
    refs_parser.add_argument(
        "path",
        type=Path,
        help="Path to an AsyncAPI document"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        sys.exit(1)

    def _write_validation_result(result, output_dir: Optional[Path], filename: str) -> None:
        from ._internal.canonical_json import canonical_dumps

        result_dict = result.model_dump()
        if output_dir is not None:
            output_dir.mkdir(parents=True, exist_ok=True)
            report_out = output_dir / filename
            report_out.write_text(canonical_dumps(result_dict) + "\n", encoding="utf-8")
            if not args.quiet:
                print("[OK] Validation complete")
                print(f"  Report: {report_out}")
        else:
            if not args.quiet:
                status = "OK" if result.ok else "FAILED"
                print(f"[{status}] Validation complete")
        if not args.quiet:
            print(f"  Status: {'OK' if result.ok else 'FAILED'}")
            print(f"  Errors: {len(result.errors)}")
            print(f"  Warnings: {len(result.warnings)}")
            for issue in result.errors + result.warnings:
                where = f" at {issue.location}" if issue.location else ""
                print(f"  - {issue.code}{where}: {issue.message}")
        if not result.ok:
            sys.exit(1)

    if args.command == "validate":
        try:
            from .api import validate

            result = validate(Path(args.path))
            output_dir = Path(args.output_dir).resolve() if args.output_dir else None
            _write_validation_result(result, output_dir, "validation.json")
            sys.exit(0)
        except Exception as e:
            print(f"Unexpected error: {e}", file=sys.stderr)
            import traceback
            traceback.print_exc()
            sys.exit(1)
    elif args.command == "roundtrip":
        try:
            from .api import check_round_trip, load_document, write_document

            path = Path(args.path)
            document = load_document(path)
            result = check_round_trip(path)

            if args.out:
                out_path = write_document(document, Path(args.out), format=args.format)
                if not args.quiet:
                    print(f"  Written: {out_path}")

            if not args.quiet:
                status = "OK" if result.ok else "CHANGED"
                print(f"[{status}] Round trip complete")
                print(f"  Input:  {result.input_hash}")
                print(f"  Output: {result.output_hash}")
                for pointer in result.differences:
                    print(f"  ~ {pointer}")
            sys.exit(0 if result.ok else 1)
        except (FileNotFoundError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except Exception as e:
            print(f"Unexpected error: {e}", file=sys.stderr)
            import traceback
            traceback.print_exc()
            sys.exit(1)
    elif args.command == "refs":
        try:
            from .api import load_document
            from .codes import ValidationCode
            from .kernel.resolver import ReferenceResolver

            resolver = ReferenceResolver(load_document(Path(args.path)))
            issues = {issue.location: issue for issue in resolver.check()}
            failed = [i for i in issues.values() if i.code != ValidationCode.EXTERNAL_REFERENCE]
            references = resolver.collect_references()

            if not args.quiet:
                for location, pointer in references:
                    issue = issues.get(location)
                    status = issue.code.value if issue else "OK"
                    print(f"{location} -> {pointer} [{status}]")
                print(f"[{'OK' if not failed else 'FAILED'}] {len(references)} reference(s), {len(failed)} unresolved")
            sys.exit(1 if failed else 0)
        except (FileNotFoundError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except Exception as e:
            print(f"Unexpected error: {e}", file=sys.stderr)
            import traceback
            traceback.print_exc()
            sys.exit(1)


if __name__ == "__main__":
    main()
