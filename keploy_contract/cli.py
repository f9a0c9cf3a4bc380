"""Command-line entry point for generating and validating contracts."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Sequence

import click
import yaml

from keploy_contract.contract import (
    HTTPDoc,
    OpenAPI,
    http_doc_to_openapi,
    load_sample_mocks,
    load_sample_tests,
)
from keploy_contract.validation import validate_consumer, validate_provider

PROVIDER_DIR = "ecom-service/v1/tests/contracts/provider"
CONSUMER_DIR = "ecom-service/v1/tests/contracts/consumer"


def convert_docs_to_openapi(docs: Mapping[str, HTTPDoc]) -> dict[str, OpenAPI]:
    """Convert each named HTTP document into its schema."""
    return {name: http_doc_to_openapi(doc) for name, doc in docs.items()}


def save_schema(schema: OpenAPI, directory: str | Path, filename: str) -> Path:
    """Write ``schema`` as YAML into ``directory``, creating it if needed."""
    data = yaml.safe_dump(schema.to_dict(), sort_keys=False)
    target_dir = Path(directory)
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / filename
    path.write_text(data, encoding="utf-8")
    return path


def _save_all(docs: Mapping[str, HTTPDoc], directory: str, kind: str) -> None:
    for name, doc in docs.items():
        try:
            save_schema(http_doc_to_openapi(doc), directory, f"{name}.yaml")
        except OSError as exc:
            click.echo(f"Error writing schema {name}: {exc}", err=True)
            continue
        click.echo(f"Saved schema for {kind} {name}")


cli = click.Group(name="keploy", help="Keploy Contract Testing Tool")


@cli.command(help="Generate and save OpenAPI schemas from HTTPDoc")
def generate() -> None:
    _save_all(load_sample_tests(), PROVIDER_DIR, "test")
    _save_all(load_sample_mocks(), CONSUMER_DIR, "mock")


@cli.command(help="Validate contracts (consumer or provider mode)")
@click.option("--mode", "-m", default="consumer", show_default=True,
              help="Validation mode: consumer or provider")
def validate(mode: str) -> None:
    tests = convert_docs_to_openapi(load_sample_tests())
    mocks = convert_docs_to_openapi(load_sample_mocks())
    if mode == "consumer":
        click.echo("Running Consumer-Driven Validation:")
        validate_consumer(tests, mocks)
    elif mode == "provider":
        click.echo("Running Provider-Driven Validation:")
        validate_provider(tests, mocks)
    else:
        click.echo("Invalid mode. Use 'consumer' or 'provider'.")


@cli.command(help="Download contract artifacts")
def download() -> None:
    click.echo("Downloading artifacts... (Not implemented)")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return its exit status."""
    try:
        cli.main(args=list(argv) if argv is not None else None,
                 prog_name="keploy", standalone_mode=False)
    except click.ClickException as exc:
        click.echo(f"Error: {exc.format_message()}", err=True)
        return 1
    except click.Abort:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())