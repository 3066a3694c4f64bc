"""
webster - headword extraction and lookup over the Gutenberg Webster text.

Modules:
- reader: line source over the corpus file (rewindable)
- headword: headword line classifier
- entry: extracted dictionary entry and its rendering views
- parser: entry extractor (lookup and sequential walk)
- check: bulk validation of the whole dictionary
- render / export: console, HTML, headword list and JSONL output
"""

__version__ = "0.3.0"
