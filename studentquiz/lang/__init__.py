"""Language string tables, one module per language code.

Each module exposes a flat `string` dict mapping identifiers to text;
placeholders use `{$a}` and `{$a->name}`.
"""
