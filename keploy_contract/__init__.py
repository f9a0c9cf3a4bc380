"""Contract testing: derive OpenAPI-style schemas from HTTP exchanges and compare them."""

__version__ = "0.1.0"
__all__ = ["__version__"]