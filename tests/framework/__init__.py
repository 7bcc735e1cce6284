"""
Framework Tests
===============

- test_graph_view.py : GraphView indexing, producer lookup, index preconditions, graph I/O
- test_config.py     : MatchConfig and JSON config loading
- test_logging.py    : logger configuration and DEBUG match logging
"""
