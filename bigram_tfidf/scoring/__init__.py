# File: bigram_tfidf/scoring/__init__.py
from .aggregator import FrequencyTable, aggregate_frequencies, count_group, merge_group_counts
from .tfidf import inverse_document_frequency, score_tfidf
