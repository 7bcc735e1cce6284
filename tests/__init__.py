"""
Graph Patterns Test Suite
=========================

Layout:

tests/
├── framework/           # Graph view, configuration and logging
│   ├── test_graph_view.py        # operand indexing, producer lookup, preconditions
│   ├── test_config.py            # MatchConfig defaults, overrides, JSON files
│   └── test_logging.py           # logger setup, levels, match logging
│
└── matchers/            # Pattern-matching primitives
    ├── test_producer_classifier.py
    ├── test_pair_classifier.py
    ├── test_operand_matcher.py
    ├── test_binary_matchers.py
    ├── test_constants.py
    └── test_location.py

Running:
    python -m pytest tests/ -v
    python -m pytest tests/matchers/ -v
"""
