"""Topic registry, document cache/fetcher and the query operations over them."""
