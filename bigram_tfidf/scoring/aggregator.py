# File: bigram_tfidf/scoring/aggregator.py
"""
Frequency aggregation of filtered n-grams.

Per-group counting (`count_group`) only ever looks at one group's n-grams, so it
can run independently per group. Document frequency is a cross-group reduction
and is computed once in `merge_group_counts`, after every group has been counted.
"""

from collections import Counter, defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from bigram_tfidf.schemas.record import Ngram


@dataclass
class FrequencyTable:
    counts: Dict[str, Dict[str, int]] = field(default_factory=dict)
    group_totals: Dict[str, int] = field(default_factory=dict)
    doc_frequency: Dict[str, int] = field(default_factory=dict)
    groups: List[str] = field(default_factory=list)

    @property
    def degenerate_groups(self) -> List[str]:
        return [g for g in self.groups if self.group_totals.get(g, 0) == 0]

    @property
    def group_count(self) -> int:
        """Number of groups with at least one n-gram (the default G for idf)."""
        return sum(1 for g in self.groups if self.group_totals.get(g, 0) > 0)

    def distinct_ngrams(self, group: str) -> int:
        return len(self.counts.get(group, {}))


def count_group(ngrams: Iterable[Ngram]) -> Counter:
    """Exact tally of joined n-gram strings for a single group."""
    return Counter(ngram.text for ngram in ngrams)


def merge_group_counts(
    group_counts: Dict[str, Counter],
    groups: Optional[Iterable[str]] = None,
) -> FrequencyTable:
    """Combine per-group counters and compute cross-group document frequency."""
    all_groups = list(dict.fromkeys(list(groups or []) + list(group_counts.keys())))

    table = FrequencyTable(groups=all_groups)
    doc_frequency: Counter = Counter()

    for group in all_groups:
        counts = {text: c for text, c in group_counts.get(group, Counter()).items() if c > 0}
        table.counts[group] = counts
        table.group_totals[group] = sum(counts.values())
        doc_frequency.update(counts.keys())

    table.doc_frequency = dict(doc_frequency)
    return table


def aggregate_frequencies(
    ngrams: Iterable[Ngram],
    groups: Optional[Iterable[str]] = None,
) -> FrequencyTable:
    """
    Count filtered n-grams per group.

    `groups` lists groups known to the corpus; any of them without n-grams
    shows up in the table with a total of 0 (a degenerate group).
    """
    by_group: Dict[str, List[Ngram]] = defaultdict(list)
    for ngram in ngrams:
        by_group[ngram.group].append(ngram)

    group_counts = {group: count_group(items) for group, items in by_group.items()}
    return merge_group_counts(group_counts, groups)
