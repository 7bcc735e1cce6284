"""
Matcher Tests
=============

Tests for the pattern-matching primitives used by rewrite rules:

- test_producer_classifier.py : is_produced_by, kind families, wildcard
- test_pair_classifier.py     : match_pair in both operand orders
- test_operand_matcher.py     : match_operand_at and its binary form
- test_binary_matchers.py     : match_const_and_op, match_value_and_op
- test_constants.py           : dense-constant recognition
- test_location.py            : location model and operator tagging
"""
