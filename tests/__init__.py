# =============================================================================
# MM PERFORMANCE SCORING - TEST SUITE
# =============================================================================
#
# Structure:
#   tests/
#     unit/           - one module per engine / boundary component
#     integration/    - full pipeline and CLI runs
#     mock_data.py    - report builders shared by both
#
# Usage:
#   python run_tests.py                 # all tests
#   python run_tests.py --unit          # unit tests only
#   pytest tests/integration/           # plain pytest works too
#
# =============================================================================
