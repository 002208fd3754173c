from .tautomer import DEFAULT_HASH_FUNCTION, HASH_FUNCTIONS, TautomerHasher, hash_all, resolve_hash_function

__all__ = [
    "DEFAULT_HASH_FUNCTION",
    "HASH_FUNCTIONS",
    "TautomerHasher",
    "hash_all",
    "resolve_hash_function",
]
