"""todo.txt Parsing Unit — task model, line parser, and text renderers.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
    - Nothing here imports from playground/ — the unit is loaded by entrypoint string

Design Decisions:
    - Separate top-level package: the playground service resolves it at runtime
      through PARSER_ENTRYPOINT and never imports it directly
"""
