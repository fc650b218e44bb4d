"""
Server-wide state shared by the MCP server and its tool wrappers.

The server owns exactly one assistant (and therefore one engine); it is
created on first use from the loaded configuration.
"""

from typing import Optional

from nomenclator.assistant import NamingAssistant
from nomenclator.config import NomenclatorConfig, load_config
from nomenclator.engine import NameSearchEngine

config: Optional[NomenclatorConfig] = None
assistant: Optional[NamingAssistant] = None


def get_assistant() -> NamingAssistant:
    global config, assistant
    if assistant is None:
        if config is None:
            config = load_config()
        assistant = NamingAssistant(NameSearchEngine(config=config), profile=config.profile)
    return assistant


def reset() -> None:
    """Drop the shared assistant so the next call rebuilds it (used by tests)."""
    global config, assistant
    config = None
    assistant = None
