#!/usr/bin/env python3
"""Quick start example: recovering a Shamir secret from base-encoded shares.

Demonstrates the core workflow:
  1. Decode raw share records (one of them broken)
  2. Reconstruct the constant term from k points
  3. Cross-check the surplus shares
  4. Load the bundled JSON documents
"""

from pathlib import Path

from ssr.decoder import ShareDecoder
from ssr.interpolation import Interpolator
from ssr.loader import load_document
from ssr.polynomial import sample_points

# --- 1. Decode shares of f(x) = 2**80 + 5x - 7x^2 (k = 3) ---
coeffs = [2**80, 5, -7]
expected = sample_points(coeffs, range(1, 6))
records = {
    "1": {"base": "16", "value": format(expected[1], "x")},
    "2": {"base": "2", "value": format(expected[2], "b")},
    "3": {"base": "8", "value": format(expected[3], "o")},
    "4": {"base": "10"},  # value lost in transit
    "5": {"base": "10", "value": str(expected[5])},
}

decoded = ShareDecoder().decode(records, n=5)
print(f"Decoded {len(decoded)} shares, skipped {decoded.skipped}")
for diag in decoded.diagnostics:
    print(f"  share {diag.index}: {diag.reason}")

# --- 2. Reconstruct ---
interpolator = Interpolator()
secret = interpolator.reconstruct(decoded.points, k=3)
print(f"\nRecovered secret: {secret}")
print(f"Matches 2**80:    {secret == 2**80}")

# --- 3. Cross-check surplus shares ---
bad = interpolator.find_inconsistent(decoded.points, k=3)
print(f"\nInconsistent surplus shares: {bad or 'none'}")

# --- 4. Bundled JSON documents ---
here = Path(__file__).parent
for name in ("testcase1.json", "testcase2.json"):
    document = load_document(here / name)
    print(f"\nConstant term for {document.name}: {document.solve()}")
    print(f"  n={document.n}, k={document.k}, skipped={document.decoded.skipped}")
