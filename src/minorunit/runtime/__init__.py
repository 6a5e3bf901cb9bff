"""Runtime support for locale-aware formatting.

The locale_context module imports Babel at module level; import it only
after checking minorunit.core.babel_compat.is_babel_available().

Python 3.13+.
"""
