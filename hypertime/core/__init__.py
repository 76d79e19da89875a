"""
Core World Model (FINAL / FROZEN)

Defines WHAT the hypertime universe is, independent of how it is stepped.

Invariants:
- Three time axes: CalTime (per-trip offset), Hypertime, RealTime.
- The partition (chunks) covers [0, inf) with no gaps and no redundant joins.
- Boxes are immutable historical facts: [r0, rf) with rf <= now.
- A GodView is never mutated; every change produces a new snapshot.

Core explicitly does NOT:
- Parse rule text
- Perform IO or logging on the hot path
- Decide how or when time advances (that is hypertime.engine)
"""
