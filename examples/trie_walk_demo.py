"""
Trie walker demonstration.

Walks the sample trie three ways:
- step by step, printing every decision
- auto-run with pause and resume
- the same walk toward a target path that reaches a pre-hashed subtree
"""

import asyncio
import logging

from triewalk import NodeStatus, TrieWalker, annotate, sample_trie


def print_stats(walker: TrieWalker) -> None:
    stats = walker.state.stats
    print(
        f"   📊 visited={stats.nodes_visited} skipped={stats.nodes_skipped} "
        f"db_reads={stats.db_reads} db_writes={stats.db_writes} "
        f"cache_hits={stats.cache_hits} "
        f"efficiency={stats.efficiency}%"
    )


async def demonstrate_trie_walk():
    """Demonstrate manual stepping and auto-run over the sample trie."""
    model = sample_trie()

    # 1. Manual stepping
    print("1️⃣ Stepping toward a7f3:")
    walker = TrieWalker(model, target_path="a7f3", step_interval_ms=0)
    while not walker.state.completed:
        state = walker.step()
        print(f"   [{len(state.stack)} queued] {state.decision}")
    print_stats(walker)

    statuses = annotate(model, walker.state)
    pruned = [node_id for node_id, status in statuses.items() if status is NodeStatus.PENDING]
    print(f"   ✂️  Never reached: {pruned}")

    # 2. Auto-run with pause and resume
    print("\n2️⃣ Auto-run with pause:")
    walker.reset()
    walker.step_interval_ms = 10
    walker.start()
    await asyncio.sleep(0.035)
    walker.pause()
    print(f"   ⏸️  Paused as {walker.status.value} after {walker.trail.get_length()} pops")
    walker.step_interval_ms = 0
    await walker.walk()
    print(f"   ▶️  Resumed and finished: {walker.status.value}")
    print_stats(walker)

    # 3. A target that reaches a hash node
    print("\n3️⃣ Walking toward b5:")
    walker = TrieWalker(model, target_path="b5", step_interval_ms=0)
    await walker.walk()
    print(f"   ⏭️  Skipped: {sorted(walker.state.skipped)}")
    print(f"   🧭 Trail summary: {walker.trail.summary()}")
    print_stats(walker)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(demonstrate_trie_walk())
