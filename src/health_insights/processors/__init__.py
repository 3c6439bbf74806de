# ============================================================================
# src/health_insights/processors/__init__.py
# ============================================================================
"""
Transcript Processors

- report: metric, relation and recommendation stages for health reports
"""
