"""Name-day records, parsing, loading and queries.

Data flows one way: raw text lines -> parsed `NameDay` records -> query results.
"""
