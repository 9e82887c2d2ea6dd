"""
Word-list validator for adversle.

What this module does:
- Validate the three lists a game is built from: dictionary.txt (guess universe),
  common.txt (frequency-ranked target source) and names.txt (proper-name denylist).
- Enforce formatting rules (lowercase, a–z only, one word per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Count the targets that survive filtering for every playable word length, and
  flag lengths with none (a game of that length could not start).
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from adversle.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("data/dictionary.txt", "data/common.txt", "data/names.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import hashlib

from .wordlists import MAX_WORD_LENGTH, MIN_WORD_LENGTH, TARGET_FREQUENCY_CAP, build_targets


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for the (dictionary, common, names) triple."""
    dictionary: FileReport
    common: FileReport
    names: FileReport
    common_missing_from_dictionary: int
    targets_per_length: Dict[int, int]
    empty_lengths: List[int]
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w.isascii() and w.isalpha() and w.islower():
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _file_report(path: Optional[str], label: str, issues: List[str]) -> Tuple[FileReport, List[str]]:
    """Load one list; missing files become an issue and an empty report."""
    if path is None:
        return FileReport("", False, 0, "", 0, 0), []

    p = Path(path)
    if not p.exists():
        issues.append(f"{label} file not found: {path}")
        return FileReport(path, False, 0, "", 0, 0), []

    words, invalid = _load_and_check(p)
    rep = FileReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )
    if invalid:
        issues.append(f"{label} has {invalid} invalid line(s)")
    if rep.count != rep.unique_count:
        issues.append(f"{label} contains duplicate lines")
    return rep, words


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(dictionary_path: str, common_path: str,
                       names_path: Optional[str] = None,
                       cap: int = TARGET_FREQUENCY_CAP) -> Dict:
    """
    Validate the word lists a lexicon is built from.

    Parameters
    ----------
    dictionary_path : str
        Every word accepted as a guess (one word per line).
    common_path : str
        Frequency-ranked words, most common first.
    names_path : str, optional
        Proper names excluded from targets.
    cap : int
        How many frequency-ranked words are considered as targets.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema). `passed`
        is strict: no missing files, no invalid lines, and at least one target
        for every playable word length.
    """
    issues: List[str] = []

    dict_rep, dictionary = _file_report(dictionary_path, "dictionary", issues)
    common_rep, common = _file_report(common_path, "common", issues)
    names_rep, names = _file_report(names_path, "names", issues)

    dictionary_set = set(dictionary)
    head = common[:cap]
    missing = sum(1 for w in head if w not in dictionary_set)

    targets = build_targets(common, dictionary_set, names, cap)
    per_length = {n: 0 for n in range(MIN_WORD_LENGTH, MAX_WORD_LENGTH + 1)}
    for w in targets:
        if len(w) in per_length:
            per_length[len(w)] += 1
    empty = [n for n, c in per_length.items() if c == 0]
    if empty:
        issues.append(f"no targets for word length(s) {empty}")

    passed = (
            dict_rep.exists
            and common_rep.exists
            and (names_path is None or names_rep.exists)
            and dict_rep.invalid_lines == 0
            and common_rep.invalid_lines == 0
            and names_rep.invalid_lines == 0
            and not empty
    )

    rep = ValidationReport(
        dictionary=dict_rep,
        common=common_rep,
        names=names_rep,
        common_missing_from_dictionary=missing,
        targets_per_length=per_length,
        empty_lengths=empty,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        dictionary=9012 (sha=abc123...) | common=5000 (sha=def456..., 312 not in dictionary) | targets 4..11=[...] | OK
    """
    d = report["dictionary"]
    c = report["common"]
    status = "OK" if report["passed"] else "FAIL"
    per_length = report["targets_per_length"]
    counts = ",".join(str(per_length[n]) for n in sorted(per_length))
    return (
        f"dictionary={d['count']} (sha={(d.get('sha256') or '')[:12]}) "
        f"| common={c['count']} (sha={(c.get('sha256') or '')[:12]}, "
        f"{report['common_missing_from_dictionary']} not in dictionary) "
        f"| targets {MIN_WORD_LENGTH}..{MAX_WORD_LENGTH}=[{counts}] | {status}"
    )
