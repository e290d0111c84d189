# Order used by `OrderedMap.traverse` when the caller doesn't pass one. One of
# "pre", "in" or "post". In-order is the only one that yields the pairs sorted
# by key, which is what nearly every caller wants.
DEFAULT_TRAVERSE_ORDER = "in"

# How many random insertions `simple_bench.py` attempts. Duplicate random keys
# are skipped so the tree usually ends up slightly smaller than this.
BENCH_SIZE = 1000

# Seed for the random number generator used by `simple_bench.py`. Keeping it
# fixed makes the shape of the benchmarked tree, and so its depth, repeatable
# between runs.
BENCH_SEED = 777
