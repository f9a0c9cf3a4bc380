# keploy-contract

A small command-line tool for contract testing between HTTP services. It works with
recorded HTTP exchanges: provider tests and consumer mocks. It turns each exchange into a
minimal OpenAPI-style schema, writes those schemas out as YAML, and compares them to
report where they disagree.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Command-line usage

Installing the package adds a `keploy` command. You can also run the same interface with
`python -m keploy_contract.cli`.

### Generate schemas

```
keploy generate
```

This writes one YAML schema for each built-in sample exchange. Paths are relative to the
current directory:

- Provider tests go to `ecom-service/v1/tests/contracts/provider/<name>.yaml`.
- Consumer mocks go to `ecom-service/v1/tests/contracts/consumer/<name>.yaml`.

The command prints `Saved schema for test <name>` or `Saved schema for mock <name>` for
each file it writes. If a file cannot be written, it reports the error on stderr and
carries on with the next file.

### Validate contracts

```
keploy validate --mode consumer
keploy validate -m provider
```

The command compares every sample provider test with every sample consumer mock and
prints a grid table. Each row has these columns:

- the two names being compared
- the status, `Passed` in green or `Failed` in red
- the score, to two decimal places
- the mismatches found, one per line, or `-` if there are none

To keep the table readable, a cell is left blank when its value is the same as the cell
directly above it.

- **consumer** mode (the default) uses each provider test as the reference and checks the
  mock against it. The columns are "Consumer Mock" and then "Provider Test".
- **provider** mode uses each mock as the reference. The columns are "Provider Test" and
  then "Consumer Mock".

Any other mode prints `Invalid mode. Use 'consumer' or 'provider'.` and does nothing
else.

### Download artifacts

```
keploy download
```

This command is a placeholder. It only prints a message.

## How schemas are compared

`keploy_contract.validation.match(a, b)` checks every path, method and response of `a`
against `b`. Each check that passes adds its weight to the score:

| Check          | Weight |
|----------------|--------|
| HTTP method    | 0.2    |
| Status code    | 0.3    |
| Headers        | 0.3    |
| Body           | 0.2    |

For a schema with one response, the highest possible score is 1.00.

The following cases fail the comparison and are recorded as mismatches:

- a missing status code
- differing headers
- differing bodies

Structural differences are handled differently. If the two schemas have a different
number of paths, or a path or method is missing, comparison stops at once. A mismatch is
recorded, but the result is not marked as failed.

## Library usage

```python
from keploy_contract.contract import http_doc_to_openapi, load_sample_tests, load_sample_mocks
from keploy_contract.validation import match, consumer_rows, render_results, CONSUMER_HEADER
from keploy_contract.cli import convert_docs_to_openapi, save_schema

tests = convert_docs_to_openapi(load_sample_tests())
mocks = convert_docs_to_openapi(load_sample_mocks())

result = match(tests["test-get-products"], mocks["mock-get-products"])
print(result.passed, result.score, result.mismatches)

print(render_results(CONSUMER_HEADER, consumer_rows(tests, mocks)))

path = save_schema(tests["test-get-cart"], "out", "test-get-cart.yaml")
```

The main parts of the library are:

- **`keploy_contract.contract`** holds the data classes `HTTPDoc`, `Spec`, `Request`,
  `Response`, `OpenAPI`, `PathItem`, `Operation` and `ResponseDetail`.
  - `http_doc_to_openapi` builds a schema from one exchange. If no method is given, it
    uses `get`.
  - `OpenAPI.to_dict()` gives the nested plain-dict form that is written as YAML.
- **`keploy_contract.validation`**
  - `validate_consumer` and `validate_provider` print the full tables.
  - `consumer_rows` and `provider_rows` return the rows without printing them.

## Limitations

- Exchanges are not read from disk. `generate` and `validate` always work on the three
  built-in sample tests and three built-in sample mocks.
- Schemas are only ever written. Nothing reads saved YAML files back.
- Nothing is downloaded or published anywhere.
- Bodies and headers are compared exactly. There is no partial or structural matching of
  JSON.