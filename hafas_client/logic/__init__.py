"""Pure helpers with no network access."""

from hafas_client.logic.query_string import encode_query, merge_query

__all__ = ["encode_query", "merge_query"]
