"""
kannot — Korean linguistic annotation graph.

Analyzer output (morphemes, phrase trees, dependencies, semantic roles,
named entities, coreference) rebuilt as one immutable, fully
cross-referenced object graph per sentence.

The analyzers are black boxes. kannot owns the graph, not the analysis.
"""

__version__ = "0.1.0"
