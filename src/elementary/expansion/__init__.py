from elementary.expansion.expander import ExpansionResult, expand_source
from elementary.expansion.fixes import apply_fix_its
from elementary.expansion.registry import MacroRegistry, create_default_registry, macro_roles

__all__ = [
    "ExpansionResult",
    "MacroRegistry",
    "apply_fix_its",
    "create_default_registry",
    "expand_source",
    "macro_roles",
]
