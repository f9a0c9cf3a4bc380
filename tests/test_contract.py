import json

import pytest

from keploy_contract.contract import (
    HTTPDoc,
    OpenAPI,
    Operation,
    PathItem,
    Request,
    Response,
    ResponseDetail,
    Spec,
    http_doc_to_openapi,
    load_sample_mocks,
    load_sample_tests,
)


def _make_doc(method="post", url="/api/orders", status=201, body='{"ok": true}'):
    return HTTPDoc(
        name="Sample",
        spec=Spec(
            request=Request(method=method, url=url, headers={}, body=""),
            response=Response(
                status_code=status,
                headers={"Content-Type": "application/json"},
                body=body,
            ),
        ),
    )


def test_conversion_uses_url_method_and_status_string():
    schema = http_doc_to_openapi(_make_doc())
    assert list(schema.paths) == ["/api/orders"]
    operations = schema.paths["/api/orders"].operations
    assert list(operations) == ["post"]
    assert list(operations["post"].responses) == [str(201)]


def test_conversion_copies_response_details():
    schema = http_doc_to_openapi(_make_doc(body='{"a": 1}'))
    detail = schema.paths["/api/orders"].operations["post"].responses["201"]
    assert detail.description == "Auto-generated response"
    assert detail.headers == {"Content-Type": "application/json"}
    assert detail.body == '{"a": 1}'


def test_empty_method_defaults_to_get():
    schema = http_doc_to_openapi(_make_doc(method=""))
    assert list(schema.paths["/api/orders"].operations) == ["get"]


def test_conversion_of_default_doc():
    schema = http_doc_to_openapi(HTTPDoc())
    assert list(schema.paths) == [""]
    assert list(schema.paths[""].operations["get"].responses) == ["0"]


def test_conversion_does_not_share_headers():
    doc = _make_doc()
    schema = http_doc_to_openapi(doc)
    doc.spec.response.headers["X-Extra"] = "1"
    detail = schema.paths["/api/orders"].operations["post"].responses["201"]
    assert "X-Extra" not in detail.headers


def test_sample_tests_keys_and_statuses():
    tests = load_sample_tests()
    assert set(tests) == {"test-get-products", "test-post-order", "test-get-cart"}
    assert tests["test-post-order"].spec.response.status_code == 201
    assert tests["test-post-order"].name == "Create Order"


def test_sample_mocks_keys_and_mismatch():
    mocks = load_sample_mocks()
    assert set(mocks) == {
        "mock-get-products",
        "mock-post-order-mismatch",
        "mock-get-cart-extra",
    }
    mismatch = mocks["mock-post-order-mismatch"]
    assert mismatch.spec.response.status_code == 200
    assert mismatch.spec.response.body == '{"order_id": 100, "total": 1999.98}'


def test_samples_match_on_products_only():
    tests = load_sample_tests()
    mocks = load_sample_mocks()
    assert http_doc_to_openapi(tests["test-get-products"]) == http_doc_to_openapi(
        mocks["mock-get-products"]
    )
    assert http_doc_to_openapi(tests["test-get-cart"]) != http_doc_to_openapi(
        mocks["mock-get-cart-extra"]
    )
    assert http_doc_to_openapi(tests["test-get-cart"]).paths.keys() == (
        http_doc_to_openapi(mocks["mock-get-cart-extra"]).paths.keys()
    )


@pytest.mark.parametrize("loader", [load_sample_tests, load_sample_mocks])
def test_samples_are_fresh_copies(loader):
    first = loader()
    for doc in first.values():
        doc.spec.request.headers.clear()
    second = loader()
    assert all(
        doc.spec.request.headers == {"Content-Type": "application/json"}
        for doc in second.values()
    )


def test_to_dict_nested_structure():
    tests = load_sample_tests()
    data = http_doc_to_openapi(tests["test-get-products"]).to_dict()
    detail = data["paths"]["/api/products"]["operations"]["get"]["responses"]["200"]
    assert detail["body"] == tests["test-get-products"].spec.response.body
    assert detail["description"] == "Auto-generated response"
    assert detail["headers"] == {"Content-Type": "application/json"}


def test_to_dict_is_plain_json_round_trip():
    schema = OpenAPI(
        paths={
            "/x": PathItem(
                operations={
                    "put": Operation(
                        responses={"204": ResponseDetail("d", {"A": "b"}, "")}
                    )
                }
            )
        }
    )
    data = schema.to_dict()
    assert json.loads(json.dumps(data)) == data
    assert data["paths"]["/x"]["operations"]["put"]["responses"]["204"]["headers"] == {
        "A": "b"
    }


def test_empty_openapi_to_dict():
    assert OpenAPI().to_dict() == {"paths": {}}