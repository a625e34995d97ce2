"""Core interpreter: IR, grammar engine, grammars and entry points."""
