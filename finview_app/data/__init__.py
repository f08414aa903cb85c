"""
Index data module.

Canonical models, snapshot parsing, currency conversion and the historical
store built on the bundled CSV files.
"""
