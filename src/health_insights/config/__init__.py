# ============================================================================
# src/health_insights/config/__init__.py
# ============================================================================
"""
Convenient imports for all settings
"""

from .analysis_config import AnalysisSettings, analysis_settings
from .logging_config import LoggingSettings, logging_settings
