"""Edgelog CLI — manage BigQuery logging endpoints from the command line.

Usage examples::

    edgelog list svc123 3
    edgelog create svc123 3 my-bq --project-id p --dataset d --table t \\
        --user u@p.iam.gserviceaccount.com --secret-key "$KEY"
    edgelog update svc123 3 old-endpoint new-endpoint
    edgelog --config '{"api_key": "..."}' delete svc123 3 my-bq
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

import httpx

_HIDDEN = {"secret_key"}


def _build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the ``edgelog`` CLI.

    Returns:
        Configured :class:`~argparse.ArgumentParser`.
    """
    parser = argparse.ArgumentParser(
        prog="edgelog",
        description="Manage BigQuery logging endpoints",
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        default="{}",
        help='JSON config string (e.g. \'{"api_key":"..."}\')',
    )
    sub = parser.add_subparsers(dest="operation", required=True)

    def scoped(name: str, help_text: str, *, named: bool = True) -> argparse.ArgumentParser:
        p = sub.add_parser(name, help=help_text)
        p.add_argument("service", help="Service ID")
        p.add_argument("version", type=int, help="Service version number")
        if named:
            p.add_argument("name", help="Endpoint name")
        return p

    scoped("list", "List endpoints on a service version", named=False)
    scoped("get", "Show one endpoint")

    create = scoped("create", "Create an endpoint")
    create.add_argument("--project-id", default="", help="GCP project ID")
    create.add_argument("--dataset", default="", help="BigQuery dataset")
    create.add_argument("--table", default="", help="BigQuery table")
    create.add_argument("--user", default="", help="User with write access to the dataset")
    create.add_argument("--secret-key", default="", help="The user's secret key")
    create.add_argument("--format", default=None, help="Log line format string")
    create.add_argument("--response-condition", default=None, help="Response condition name")

    update = scoped("update", "Rename an endpoint")
    update.add_argument("new_name", help="New endpoint name")

    scoped("delete", "Delete an endpoint")
    return parser


def _run(svc: Any, ns: argparse.Namespace) -> Any:
    if ns.operation == "list":
        return svc.list(ns.service, ns.version)
    if ns.operation == "get":
        return svc.get(ns.service, ns.version, ns.name)
    if ns.operation == "create":
        return svc.create(
            ns.service,
            ns.version,
            ns.name,
            ns.project_id,
            ns.dataset,
            ns.table,
            ns.user,
            ns.secret_key,
            format=ns.format,
            response_condition=ns.response_condition,
        )
    if ns.operation == "update":
        return svc.update(ns.service, ns.version, ns.name, ns.new_name)
    return svc.delete(ns.service, ns.version, ns.name)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point.

    Parses arguments, creates a BigQuery endpoint client via the factory,
    and invokes the requested operation.  Records are printed as JSON;
    a successful delete prints ``OK``.

    Args:
        argv: Optional argument list (defaults to ``sys.argv``).
    """
    parser = _build_parser()
    ns = parser.parse_args(argv)

    try:
        config: dict[str, Any] = json.loads(ns.config)
    except json.JSONDecodeError as e:
        print(f"Invalid --config JSON: {e}", file=sys.stderr)
        sys.exit(1)

    # Lazy-import so argument errors are reported without loading the client stack
    from edgelog.base.exceptions import EdgelogError
    from edgelog.factory import endpoint_factory

    try:
        svc = endpoint_factory("bigquery", config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        result = _run(svc, ns)
    except (EdgelogError, httpx.HTTPError, ValueError) as e:
        print(f"Operation failed: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        svc.close()

    if result is None:
        print("OK")
    elif isinstance(result, list):
        print(json.dumps([r.model_dump(exclude=_HIDDEN) for r in result], indent=2))
    else:
        print(json.dumps(result.model_dump(exclude=_HIDDEN), indent=2))


if __name__ == "__main__":
    main()
