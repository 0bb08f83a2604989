"""Library Loader sidecar — CLI and JSON-RPC server."""

import argparse
import json
import logging
import os
import sys

import config
from models import ECAD, Files, Format, ProcessingResult
from pipeline import convert
from format_detector import detect_formats_in_file


logger = logging.getLogger("library_loader")


def setup_logging(level: str = config.LOG_LEVEL) -> None:
    """Send log records to stderr; stdout is reserved for results."""
    root = logging.getLogger()
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(message)s", "%H:%M:%S")
        )
        root.addHandler(handler)
    root.setLevel(level)


def write_files(files: Files, output_path: str) -> list[str]:
    """Persist an output mapping below `output_path`.

    Keys ending in "/" become directories. Returns the written paths.
    """
    root = os.path.abspath(output_path)
    written = []
    for rel_path, data in files.items():
        target = os.path.abspath(os.path.join(root, rel_path))
        if os.path.commonpath([root, target]) != root:
            raise ValueError(f"Refusing to write outside {root}: {rel_path}")
        if rel_path.endswith('/'):
            os.makedirs(target, exist_ok=True)
        else:
            os.makedirs(os.path.dirname(target), exist_ok=True)
            with open(target, 'wb') as f:
                f.write(data)
        written.append(target)
    return written


def process_archive(zip_path: str, name: str | None = None,
                    ecad: str | None = None,
                    output_path: str | None = None) -> ProcessingResult:
    """Convert a downloaded ZIP for one ECAD format and write the result.

    Steps: build format -> read archive -> extract -> process -> write
    """
    ecad = ecad or config.DEFAULT_FORMAT
    output_path = output_path or str(config.OUTPUT_DIR)
    name = name or os.path.splitext(os.path.basename(zip_path))[0]
    warnings = []

    try:
        fmt = Format.build(name, ecad, output_path)

        with open(zip_path, 'rb') as f:
            data = f.read()

        files = convert(fmt, data)
        if not files:
            warnings.append(f"No {fmt.ecad} files found in {os.path.basename(zip_path)}")

        write_files(files, str(fmt.output_path))
        logger.info("Wrote %d %s item(s) to %s", len(files), fmt.ecad, fmt.output_path)

        return ProcessingResult(
            status="success",
            ecad=str(fmt.ecad),
            name=name,
            output_path=str(fmt.output_path),
            files=sorted(files),
            warnings=warnings,
        )

    except Exception as e:
        logger.error("Failed to convert %s: %s", zip_path, e)
        return ProcessingResult(
            status="error",
            ecad=ecad,
            name=name,
            error=str(e),
            warnings=warnings,
        )


def _result_dict(result: ProcessingResult) -> dict:
    return {
        "status": result.status,
        "ecad": result.ecad,
        "name": result.name,
        "output_path": result.output_path,
        "files": result.files,
        "error": result.error,
        "warnings": result.warnings,
    }


# ── JSON-RPC Server ──────────────────────────────────────────────────────────

def _jsonrpc_response(id, result=None, error=None):
    resp = {"jsonrpc": "2.0", "id": id}
    if error is not None:
        resp["error"] = {"code": -32000, "message": str(error)}
    else:
        resp["result"] = result
    return resp


def handle_jsonrpc(request: dict) -> dict:
    """Handle a single JSON-RPC request."""
    req_id = request.get("id")
    method = request.get("method", "")
    params = request.get("params", {})

    try:
        if method == "ping":
            return _jsonrpc_response(req_id, "pong")

        elif method == "convert":
            result = process_archive(
                zip_path=params["filepath"],
                name=params.get("name"),
                ecad=params.get("format"),
                output_path=params.get("output_path"),
            )
            return _jsonrpc_response(req_id, _result_dict(result))

        elif method == "detect_formats":
            formats = detect_formats_in_file(params["filepath"])
            return _jsonrpc_response(req_id, [str(f) for f in formats])

        elif method == "list_formats":
            return _jsonrpc_response(req_id, [str(f) for f in ECAD])

        else:
            return _jsonrpc_response(req_id, error=f"Unknown method: {method}")

    except Exception as e:
        return _jsonrpc_response(req_id, error=str(e))


def serve():
    """Run JSON-RPC server on stdin/stdout."""
    logger.info("Library Loader sidecar ready")
    for line in sys.stdin:
        line = line.strip()
        if not line:
            continue
        try:
            request = json.loads(line)
            response = handle_jsonrpc(request)
        except json.JSONDecodeError as e:
            response = _jsonrpc_response(None, error=f"Invalid JSON: {e}")
        sys.stdout.write(json.dumps(response) + "\n")
        sys.stdout.flush()


# ── CLI ──────────────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Library Loader — normalize ECAD vendor library archives"
    )
    parser.add_argument("--log-level", default=config.LOG_LEVEL, type=str.upper,
                        choices=config.LOG_LEVELS,
                        help="Logging level (default: %(default)s)")
    subparsers = parser.add_subparsers(dest="command")

    # convert command
    conv = subparsers.add_parser("convert", help="Convert a downloaded ZIP file")
    conv.add_argument("zipfile", help="Path to the ZIP file")
    conv.add_argument("--name", help="Library name (default: ZIP file name)")
    conv.add_argument("--format", default=config.DEFAULT_FORMAT,
                      help=f"ECAD format: {', '.join(str(f) for f in ECAD)} (default: %(default)s)")
    conv.add_argument("--output", help=f"Output directory (default: {config.OUTPUT_DIR})")

    detect = subparsers.add_parser("detect", help="List the ECAD formats in a ZIP file")
    detect.add_argument("zipfile", help="Path to the ZIP file")

    subparsers.add_parser("formats", help="List supported ECAD formats")

    # serve command
    subparsers.add_parser("serve", help="Run JSON-RPC server on stdin/stdout")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if args.command == "convert":
        result = process_archive(
            zip_path=args.zipfile,
            name=args.name,
            ecad=args.format,
            output_path=args.output,
        )
        print(f"Status: {result.status}")
        if result.output_path:
            print(f"Output: {result.output_path}")
        for path in result.files:
            print(f"  {path}")
        for w in result.warnings:
            print(f"Warning: {w}")
        if result.error:
            print(f"Error: {result.error}")
            sys.exit(1)

    elif args.command == "detect":
        formats = detect_formats_in_file(args.zipfile)
        if not formats:
            print("No ECAD formats found")
            sys.exit(1)
        for fmt in formats:
            print(fmt)

    elif args.command == "formats":
        for fmt in ECAD:
            print(fmt)

    elif args.command == "serve":
        serve()

    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
