"""Query-string construction and validation."""

from newsapi_client.query.dates import validate_and_format_date, validate_date
from newsapi_client.query.params import to_query_params

__all__ = [
    "to_query_params",
    "validate_and_format_date",
    "validate_date",
]
