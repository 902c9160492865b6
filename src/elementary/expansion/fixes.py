"""Applying diagnostic fix-its to source."""

from __future__ import annotations

import logging

from elementary.model.diagnostic import Diagnostic
from elementary.model.source import TextEdit, apply_edits, overlaps

logger = logging.getLogger("elementary")


def collect_fix_it_edits(diagnostics: list[Diagnostic]) -> list[TextEdit]:
    """Gather the edits of every fix-it, dropping those that would conflict.

    A fix-it is applied whole or not at all; the first of two conflicting
    fix-its wins.
    """
    accepted: list[TextEdit] = []
    for diagnostic in diagnostics:
        for fix in diagnostic.fix_its:
            if any(overlaps(edit, other) for edit in fix.edits for other in accepted):
                logger.debug("Skipping fix-it %s: overlaps an earlier fix-it", fix.id)
                continue
            accepted.extend(fix.edits)
    return accepted


def apply_fix_its(source: str, diagnostics: list[Diagnostic]) -> str:
    """Return *source* with every non-conflicting fix-it applied."""
    return apply_edits(source, collect_fix_it_edits(diagnostics))
