from elementary.parser.errors import ParseError
from elementary.parser.scanner import AttachedSite, FreestandingSite, ScanResult, scan_source
from elementary.parser.transformer import parse_declaration, parse_freestanding

__all__ = [
    "ParseError",
    "parse_declaration",
    "parse_freestanding",
    "scan_source",
    "AttachedSite",
    "FreestandingSite",
    "ScanResult",
]
