"""
Build common.txt (the frequency-ranked target source) from Wiktionary's
Project Gutenberg frequency lists.

What it does:
- Downloads one or more frequency-list pages (HTML tables: rank, word, count).
- Takes the linked word in each table row, in rank order.
- Keeps lowercase a–z tokens only, de-duplicates while preserving rank, and
  writes one word per line.

Usage:
    python -m script.fetch_wordlists --out adversle/datasets/data/common.txt
    python -m script.fetch_wordlists --url <page> --url <page> --out common.txt
"""

import argparse
from pathlib import Path

import requests
from bs4 import BeautifulSoup  # pip install beautifulsoup4 requests

BASE = "https://en.wiktionary.org/wiki/Wiktionary:Frequency_lists/PG/2006/04/"
URLS = [BASE + "1-10000", BASE + "10001-20000"]


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def extract_words(html: str) -> list[str]:
    """Ranked words from every frequency table on the page."""
    soup = BeautifulSoup(html, "html.parser")
    words = []
    for row in soup.select("table tr"):
        link = row.find("a")
        if link is None:
            continue
        w = link.get_text(strip=True).lower()
        if w.isascii() and w.isalpha():
            words.append(w)
    return words


def fetch_common(urls=URLS) -> list[str]:
    words = []
    for url in urls:
        r = requests.get(url, timeout=30, headers={"User-Agent": "adversle-wordlists/0.1"})
        r.raise_for_status()
        words.extend(extract_words(r.text))
    return unique_preserve_order(words)


def main():
    ap = argparse.ArgumentParser(description="Fetch a frequency-ranked word list")
    ap.add_argument("--url", action="append", help="frequency list page (repeatable)")
    ap.add_argument("--out", default="adversle/datasets/data/common.txt")
    args = ap.parse_args()

    words = fetch_common(args.url or URLS)
    Path(args.out).write_text("\n".join(words) + "\n", encoding="utf-8")
    print(f"Wrote {len(words)} ranked words -> {args.out}")


if __name__ == "__main__":
    main()
