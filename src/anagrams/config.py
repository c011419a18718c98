import os

# utf-8-sig: a leading BOM is dropped instead of sticking to the first word
ENCODING: str = "utf-8-sig"

# Files picked up when a dictionary root is a directory
DICTIONARY_EXTS: tuple[str, ...] = (".txt",)

# Dictionary lines starting with this are ignored
COMMENT_PREFIX: str = "#"

# Parallel sentence search: 0 or 1 runs sequentially
SEARCH_WORKERS: int = 0

# Upper bound for workers requested through the web API
MAX_SEARCH_WORKERS: int = os.cpu_count() or 4

# "threads" or "procs"
PARALLEL_MODE: str = "threads"
