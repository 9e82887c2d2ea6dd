# apps/cli/run.py
"""
CLI entry point for benchmarking players against the adversary.

This script:
  1) Validates the word lists (prints counts + SHA, targets per word length).
  2) Loads the lexicon and instantiates the requested player.
  3) Plays a batch of games with a live progress indicator and writes:
       - CSV:  per-game results + guess/pattern/pool-size columns
       - JSON: manifest with config, word-list hashes, git commit, summary
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Dict, List

import numpy as np
from tqdm import tqdm

from adversle.datasets import validate_wordlists, pretty_summary
from adversle.datasets.wordlists import default_paths, load_lexicon
from adversle.harness import run_case
from adversle.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from adversle.players import create_player, get_player_ids


def summarize(results: List[Dict]) -> Dict:
    """Win rate, mean guesses on wins, and mean final pool size."""
    if not results:
        return {"games": 0, "win_rate": 0.0, "mean_guesses_won": None, "mean_final_pool": None}
    success = np.array([r["success"] for r in results], dtype=bool)
    guesses = np.array([r["guesses"] for r in results], dtype=float)
    final_pool = np.array([r["pool_sizes"][-1] for r in results], dtype=float)
    return {
        "games": len(results),
        "win_rate": float(success.mean()),
        "mean_guesses_won": float(guesses[success].mean()) if success.any() else None,
        "mean_final_pool": float(final_pool.mean()),
    }


def main():
    """
    Parse CLI args, validate word lists, run the batch with progress, and write outputs.
    """
    player_choices = ", ".join(get_player_ids())
    dict_default, common_default, names_default = default_paths()

    ap = argparse.ArgumentParser(description="adversle: benchmark players against the adversary")
    ap.add_argument("--player", default="random_consistent",
                    help=f"player id (one of: {player_choices})")
    ap.add_argument("--N", type=int, default=5, help="word length (4..11)")
    ap.add_argument("--max-guesses", type=int, default=6, help="guess budget per game")
    ap.add_argument("--dictionary", default=str(dict_default), help="accepted guesses")
    ap.add_argument("--common", default=str(common_default), help="frequency-ranked word list")
    ap.add_argument("--names", default=str(names_default), help="proper-name denylist")
    ap.add_argument("--games", type=int, default=100, help="number of games to play")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--verbose", action="store_true", help="print pool sizes for every game")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args()

    # 1) Validate word lists and print a one-liner summary
    rep = validate_wordlists(args.dictionary, args.common, args.names)
    print(pretty_summary(rep))
    if args.N in rep["empty_lengths"]:
        print(f"No {args.N}-letter targets; fix the word lists before running.", file=sys.stderr)
        sys.exit(1)

    # 2) Load lexicon and player
    lexicon = load_lexicon(args.dictionary, args.common, args.names)
    player = create_player(args.player)

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    cases = range(1, args.games + 1)
    iterator = tqdm(cases, ncols=80, desc="Playing", unit="game") if mode == "bar" else cases

    results = []
    start = time.time()
    last_print = 0.0

    # 4) Play with live progress
    for idx in iterator:
        per_seed = args.seed + idx * 1013904223  # LCG-ish stride to avoid collisions
        r = run_case(player, lexicon=lexicon, N=args.N, max_guesses=args.max_guesses,
                     seed=per_seed)
        r["player_id"] = player.id
        results.append(r)

        if args.verbose:
            print(f"game {idx}: {r['answer']} pools={r['pool_sizes']}", file=sys.stderr)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == args.games):
                elapsed = now - start
                pct = 100.0 * idx / max(1, args.games)
                sys.stderr.write(f"\r[{idx}/{args.games}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    summary = summarize(results)
    write_csv(results, str(csv_path), max_guesses=args.max_guesses, N=args.N)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "num_cases": len(results),
        "player_id": player.id,
        "summary": summary,
    }, str(manifest_path))

    print(f"{player.id}: won {summary['win_rate']:.1%} of {summary['games']} games")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
