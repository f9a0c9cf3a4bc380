"""HTTP exchange documents and their conversion to minimal OpenAPI schemas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

DEFAULT_METHOD = "get"
RESPONSE_DESCRIPTION = "Auto-generated response"
_JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass
class Request:
    """An HTTP request as recorded in a test or mock."""

    method: str = ""
    url: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""


@dataclass
class Response:
    """An HTTP response as recorded in a test or mock."""

    status_code: int = 0
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""


@dataclass
class Spec:
    """A request together with the response it received."""

    request: Request = field(default_factory=Request)
    response: Response = field(default_factory=Response)


@dataclass
class HTTPDoc:
    """A named, recorded HTTP exchange."""

    name: str = ""
    spec: Spec = field(default_factory=Spec)


@dataclass
class ResponseDetail:
    """The description, headers and body of one response in a schema."""

    description: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "headers": dict(self.headers),
            "body": self.body,
        }


@dataclass
class Operation:
    """The responses of one HTTP method, keyed by status code."""

    responses: dict[str, ResponseDetail] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "responses": {
                code: detail.to_dict() for code, detail in self.responses.items()
            }
        }


@dataclass
class PathItem:
    """The operations available on one path, keyed by method."""

    operations: dict[str, Operation] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "operations": {
                method: operation.to_dict()
                for method, operation in self.operations.items()
            }
        }


@dataclass
class OpenAPI:
    """A minimal OpenAPI-like schema: paths, methods and responses."""

    paths: dict[str, PathItem] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the schema as plain nested dicts, ready for serialisation."""
        return {"paths": {path: item.to_dict() for path, item in self.paths.items()}}


def http_doc_to_openapi(doc: HTTPDoc) -> OpenAPI:
    """Build a single-path, single-operation schema from an HTTP document."""
    request = doc.spec.request
    response = doc.spec.response
    method = request.method or DEFAULT_METHOD
    detail = ResponseDetail(
        description=RESPONSE_DESCRIPTION,
        headers=dict(response.headers),
        body=response.body,
    )
    operation = Operation(responses={str(response.status_code): detail})
    return OpenAPI(paths={request.url: PathItem(operations={method: operation})})


def _doc(name: str, method: str, url: str, request_body: str,
         status_code: int, response_body: str) -> HTTPDoc:
    return HTTPDoc(
        name=name,
        spec=Spec(
            request=Request(
                method=method,
                url=url,
                headers=dict(_JSON_HEADERS),
                body=request_body,
            ),
            response=Response(
                status_code=status_code,
                headers=dict(_JSON_HEADERS),
                body=response_body,
            ),
        ),
    )


def load_sample_tests() -> dict[str, HTTPDoc]:
    """Return the built-in provider test recordings."""
    return {
        "test-get-products": _doc(
            "Get Products", "get", "/api/products", "", 200,
            '{"products": [{"id": 1, "name": "Laptop", "price": 999.99}]}',
        ),
        "test-post-order": _doc(
            "Create Order", "post", "/api/orders",
            '{"product_id": 1, "quantity": 2}', 201,
            '{"order_id": 100, "product_id": 1, "quantity": 2, "total": 1999.98}',
        ),
        "test-get-cart": _doc(
            "Get Cart", "get", "/api/cart", "", 200,
            '{"cart": [{"product_id": 1, "quantity": 1}]}',
        ),
    }


def load_sample_mocks() -> dict[str, HTTPDoc]:
    """Return the built-in consumer mock recordings, some deliberately off."""
    return {
        "mock-get-products": _doc(
            "Mock Get Products", "get", "/api/products", "", 200,
            '{"products": [{"id": 1, "name": "Laptop", "price": 999.99}]}',
        ),
        # Status should be 201 and the body lacks fields.
        "mock-post-order-mismatch": _doc(
            "Mock Create Order (Mismatch)", "post", "/api/orders",
            '{"product_id": 1, "quantity": 2}', 200,
            '{"order_id": 100, "total": 1999.98}',
        ),
        # Carries an extra "price" field.
        "mock-get-cart-extra": _doc(
            "Mock Get Cart (Extra Data)", "get", "/api/cart", "", 200,
            '{"cart": [{"product_id": 1, "quantity": 1, "price": 999.99}]}',
        ),
    }