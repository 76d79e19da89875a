from .parser import format_ruleset, parse_ruleset

__all__ = ["parse_ruleset", "format_ruleset"]
