"""Comparison of OpenAPI schemas and tabular reporting of the results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Sequence

import click
from tabulate import tabulate

from keploy_contract.contract import OpenAPI

WEIGHTS = {
    "method": 0.2,
    "status": 0.3,
    "headers": 0.3,
    "body": 0.2,
}

PASSED = "Passed"
FAILED = "Failed"
CONSUMER_HEADER = ["Consumer Mock", "Provider Test", "Status", "Score", "Mismatches"]
PROVIDER_HEADER = ["Provider Test", "Consumer Mock", "Status", "Score", "Mismatches"]
_STATUS_COLUMN = 2


@dataclass
class ValidationResult:
    """The weighted score, verdict and mismatch notes of one comparison."""

    score: float = 0.0
    passed: bool = True
    mismatches: list[str] = field(default_factory=list)


def match(a: OpenAPI, b: OpenAPI) -> ValidationResult:
    """Check every path, method and response of ``a`` against ``b``.

    A structural difference (path count, missing path or method) stops the
    comparison at once without clearing the verdict.
    """
    result = ValidationResult()

    if len(a.paths) != len(b.paths):
        result.mismatches.append("Different number of paths")
        return result

    for path, item_a in a.paths.items():
        item_b = b.paths.get(path)
        if item_b is None:
            result.mismatches.append(f"Path {path} not found")
            return result

        for method, op_a in item_a.operations.items():
            op_b = item_b.operations.get(method)
            if op_b is None:
                result.mismatches.append(
                    f"Method {method} for path {path} not found"
                )
                return result
            result.score += WEIGHTS["method"]

            for code, resp_a in op_a.responses.items():
                resp_b = op_b.responses.get(code)
                if resp_b is None:
                    result.mismatches.append(
                        f"Status code {code} not found for {method} {path}"
                    )
                    result.passed = False
                    continue
                result.score += WEIGHTS["status"]

                if resp_a.headers != resp_b.headers:
                    result.mismatches.append(
                        f"Headers mismatch for {method} {path} {code}"
                    )
                    result.passed = False
                else:
                    result.score += WEIGHTS["headers"]

                if resp_a.body != resp_b.body:
                    result.mismatches.append(
                        f"Body mismatch for {method} {path} {code}"
                    )
                    result.passed = False
                else:
                    result.score += WEIGHTS["body"]

    return result


def _row(first: str, second: str, result: ValidationResult) -> list[str]:
    return [
        first,
        second,
        PASSED if result.passed else FAILED,
        f"{result.score:.2f}",
        "\n".join(result.mismatches) or "-",
    ]


def consumer_rows(
    tests: Mapping[str, OpenAPI], mocks: Mapping[str, OpenAPI]
) -> list[list[str]]:
    """Compare every test against every mock, test as the reference."""
    return [
        _row(mock_name, test_name, match(test, mock))
        for test_name, test in tests.items()
        for mock_name, mock in mocks.items()
    ]


def provider_rows(
    tests: Mapping[str, OpenAPI], mocks: Mapping[str, OpenAPI]
) -> list[list[str]]:
    """Compare every mock against every test, mock as the reference."""
    return [
        _row(test_name, mock_name, match(mock, test))
        for test_name, test in tests.items()
        for mock_name, mock in mocks.items()
    ]


def _style_status(value: str) -> str:
    if value == PASSED:
        return click.style(value, fg="green")
    if value == FAILED:
        return click.style(value, fg="red")
    return value


def render_results(header: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Render rows as a centred grid, blanking cells repeated from the row above."""
    merged: list[list[str]] = []
    previous: Sequence[str] | None = None
    for row in rows:
        cells = []
        for index, value in enumerate(row):
            shown = "" if previous is not None and previous[index] == value else value
            if index == _STATUS_COLUMN:
                shown = _style_status(shown)
            cells.append(shown)
        merged.append(cells)
        previous = row
    return tabulate(
        merged,
        headers=list(header),
        tablefmt="grid",
        stralign="center",
        disable_numparse=True,
    )


def validate_consumer(
    tests: Mapping[str, OpenAPI], mocks: Mapping[str, OpenAPI]
) -> None:
    """Print the consumer-driven validation table."""
    click.echo("Validation Results:")
    click.echo(render_results(CONSUMER_HEADER, consumer_rows(tests, mocks)))


def validate_provider(
    tests: Mapping[str, OpenAPI], mocks: Mapping[str, OpenAPI]
) -> None:
    """Print the provider-driven validation table."""
    click.echo("Validation Results:")
    click.echo(render_results(PROVIDER_HEADER, provider_rows(tests, mocks)))