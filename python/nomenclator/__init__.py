"""
Nomenclator - identifier naming and suggestion engine.

Conventions, context detection, quality scoring, fuzzy duplicate detection and
preference-personalized suggestions, exposed as a library and as MCP tools.
"""

__version__ = "0.1.0"

from nomenclator.assistant import NamingAssistant
from nomenclator.engine import NameSearchEngine
from nomenclator.preferences import USER_PROFILES, UserPreferences

__all__ = ["NameSearchEngine", "NamingAssistant", "UserPreferences", "USER_PROFILES"]
