from .query_client import ApiRequestError, QueryClient, QueryState, build_query_key

__all__ = ["ApiRequestError", "QueryClient", "QueryState", "build_query_key"]
