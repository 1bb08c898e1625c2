"""
Benchmark suite for tagson JSON encoding performance.

Compares tagson.marshal against established JSON encoders:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures encoding speed and memory usage across different value shapes.
"""
