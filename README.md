# algolab

A collection of small, self-contained building blocks:

- **Sorting** (`algolab.sorting`): `quick_sort` and `heap_sort` sort a list in place.
  `merge_sort` returns a new sorted list and leaves its input unchanged.
- **Bloom filter** (`algolab.bloom`): `BloomFilter` with `add` and `contains`. It also
  supports the `in` operator. The filter has 16 bits and uses six seeded hashes.
- **Exercises** (`algolab.exercises`):
  - `max_non_adjacent_sum` needs at least three numbers and raises `ValueError` on fewer.
  - `SlidingWindow` is a five-slot window; `window_results` feeds values through it.
  - `arrow_pattern` returns 25 lines of dashes and a star.
- **Consistent hashing** (`algolab.consistent`, `algolab.fast_search`): weighted hash rings.
  - `Consistent` takes `Node` objects and is thread-safe.
  - `ConsistentStr` collects members with `add` and places them on `finalize`.
  - `FastConsistentStr` also reports the index of the point that was hit. Its
    `get_with_idx` searches near a known index first.
  - A lookup on an empty ring raises `EmptyCircleError`.
  - `build_ring`, `build_str_ring`, `build_fences`, `lookup` and `lookup_with_idx` build
    sample rings and query them.
- **Random numbers** (`algolab.rng`):
  - `XorShiftRNG` has `uint32`, `uint32n`, `uint64` and `uint64n`. A zero state is
    seeded from the clock.
  - `histogram_spread` reports how evenly draws spread over buckets.
- **Queue** (`algolab.ring_queue`): `RingQueue` with `add`, `pop_front` and `pop_back`.
  Its string form joins the items with ` -> `.
- **Strings** (`algolab.strutil`): `join_fields` joins with `::`. `split_sample`,
  `split_sample_n` and `sample_contains_b` work on a fixed sample string.
- **Affinity ordering** (`algolab.hunters`): `SdkAvailableHunter`, `affinity_rank`,
  `sort_by_affinity`, `default_hunters` and `list_check`.
- **Counters and pools** (`algolab.counters`):
  - `FenceCounters` holds thread-safe per-key counters.
  - `lookup_list` and `lookup_set` look values up in a sample table.
  - `RedirectDataPool` pools `SNodeRedirectData` records.
- **Charts** (`algolab.charts`): writes four catalyst study figures as PNG files with
  matplotlib:
  - catalyst comparison
  - energy barrier
  - deactivation and regeneration
  - Pareto chart

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from algolab.sorting import quick_sort, merge_sort
from algolab.bloom import BloomFilter
from algolab.consistent import Consistent, Node

data = [64, 34, 25, 12, 22, 11, 90, 5]
quick_sort(data)               # data is now sorted in place
print(merge_sort([3, 1, 2]))   # [1, 2, 3]

bloom = BloomFilter()
bloom.add("asd")
print("asd" in bloom)          # True

ring = Consistent()
ring.set_number_of_replicas(20)
ring.add([Node("cache-a", 1), Node("cache-b", 1)])
print(ring.get("user-42"))
```

## Commands

| Command | What it does |
| --- | --- |
| `algolab-sort` | Sorts two sample arrays with quick sort and prints them before and after |
| `algolab-bloom` | Adds two values to a Bloom filter and prints three membership checks |
| `algolab-charts [--output-dir DIR]` | Writes the four chart PNG files into `DIR` (default: the current directory) |

## What is not included

The `algolab.pingo` sub-package is empty. This package cannot:

- run plugins as subprocesses;
- serve objects over RPC;
- call a plugin.

There is no plugin host and no plugin command.