import pytest

from elementary.config import ExpansionConfig
from elementary.macros import MacroExpansionContext
from elementary.model import LineIndex


@pytest.fixture()
def context() -> MacroExpansionContext:
    return MacroExpansionContext(ExpansionConfig(), LineIndex(""))
